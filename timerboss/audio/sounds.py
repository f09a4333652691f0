"""Expiry notification sound: numpy synthesis + QSoundEffect playback.

The default sound is generated programmatically as a WAV file using
sine-wave synthesis with ADSR envelopes and cached to disk, so later
launches just load it.  A user-supplied WAV file can replace it through
``Settings.sound_path``.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect


logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "TimerBoss"
SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"
NOTIFICATION_FILE = "notification.wav"

SAMPLE_RATE = 44100


class PlaybackError(RuntimeError):
    """The notification sound could not be played."""


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _make_envelope(
    length: int,
    attack: int = 200,
    decay: int = 400,
    sustain_level: float = 0.7,
    release: int = 800,
) -> np.ndarray:
    """ADSR envelope (all durations in samples)."""
    env = np.ones(length, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    d_end = min(a + decay, length)
    if decay > 0 and d_end > a:
        env[a:d_end] = np.linspace(1.0, sustain_level, d_end - a)
    s_end = max(length - release, d_end)
    if s_end > d_end:
        env[d_end:s_end] = sustain_level
    if release > 0 and s_end < length:
        env[s_end:] = np.linspace(sustain_level, 0.0, length - s_end)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


def generate_notification() -> bytes:
    """Two-tone alarm chime (E5 → A5), played twice."""
    parts: list[np.ndarray] = []
    for _ in range(2):
        for freq in (659.25, 880.0):
            tone = _sine(freq, 0.18) * 0.55
            # Octave overtone gives it a bell-ish edge
            tone += _sine(freq * 2, 0.18) * 0.08
            env = _make_envelope(
                len(tone), attack=120, decay=1500, sustain_level=0.45, release=2500,
            )
            parts.append(tone * env)
            parts.append(np.zeros(int(SAMPLE_RATE * 0.04)))
        parts.append(np.zeros(int(SAMPLE_RATE * 0.15)))
    return _to_wav_bytes(np.concatenate(parts))


# ═══════════════════════════════════════════════════════════════════════════
#  PLAYER
# ═══════════════════════════════════════════════════════════════════════════


class NotificationPlayer(QObject):
    """Plays the expiry sound; satisfies ``ExpiryNotifier``.

    Usage::

        player = NotificationPlayer(parent=self)
        engine = TimerEngine(self, notifier=player)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
        sound_path: Path | None = None,
        enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        self._enabled = enabled
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        if sound_path is not None:
            self._path = Path(sound_path)
        else:
            self._path = self._ensure_wav_file()

        self._effect = QSoundEffect(self)
        self._effect.setSource(QUrl.fromLocalFile(str(self._path)))

    # ── public API ────────────────────────────────────────────────────

    def play_notification(self, volume: float) -> None:
        """Play once at *volume* (clamped to 0.0–1.0).  No-op if disabled."""
        if not self._enabled:
            return
        if not self._path.exists():
            raise PlaybackError(f"notification sound not found: {self._path}")
        if self._effect.status() == QSoundEffect.Status.Error:
            raise PlaybackError(f"cannot decode notification sound: {self._path}")
        self._effect.setVolume(max(0.0, min(float(volume), 1.0)))
        self._effect.play()

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def path(self) -> Path:
        return self._path

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_file(self) -> Path:
        """Generate the default WAV into the cache directory if missing."""
        self._sounds_dir.mkdir(parents=True, exist_ok=True)
        path = self._sounds_dir / NOTIFICATION_FILE
        if not path.exists():
            logger.debug("Synthesising notification sound at %s", path)
            path.write_bytes(generate_notification())
        return path
