"""Start-up preferences read from a JSON file.

Settings are read from:
    ~/Library/Application Support/TimerBoss/settings.json

Every key is optional; anything missing or invalid falls back to the
default.  The file is never written by the app.

Example::

    {
        "duration_minutes": 50,
        "volume": 0.8,
        "presets": [5, 15, 45]
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path

from .timer.engine import (
    DEFAULT_MINUTES,
    DEFAULT_VOLUME,
    PRESET_MINUTES,
    VOLUME_STEP,
    is_valid_minutes,
)


logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "TimerBoss"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    duration_minutes: int = DEFAULT_MINUTES
    auto_restart: bool = True
    presets: list[int] = field(default_factory=lambda: list(PRESET_MINUTES))

    # ── audio ─────────────────────────────────────────────────────────
    volume: float = DEFAULT_VOLUME         # 0.0-1.0
    sound_enabled: bool = True
    sound_path: str | None = None          # custom WAV instead of the chime

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "INFO"

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 420
    window_height: int = 640


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Could not read settings from %s: %s", path, exc)
        return Settings()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings in %s: expected a JSON object", path)
        return Settings()

    # Only use keys that exist in the dataclass
    valid_keys = {f.name for f in fields(Settings)}
    filtered = {k: v for k, v in data.items() if k in valid_keys}
    return _sanitise(Settings(**filtered))


def _sanitise(settings: Settings) -> Settings:
    """Replace out-of-range values with defaults."""
    defaults = Settings()

    if not is_valid_minutes(settings.duration_minutes):
        logger.warning(
            "duration_minutes=%r out of range, using %d",
            settings.duration_minutes, defaults.duration_minutes,
        )
        settings.duration_minutes = defaults.duration_minutes

    if isinstance(settings.volume, bool) or not isinstance(settings.volume, (int, float)):
        settings.volume = defaults.volume
    volume = max(0.0, min(float(settings.volume), 1.0))
    # Snap to the slider grid so the UI and the engine agree
    settings.volume = round(round(volume / VOLUME_STEP) * VOLUME_STEP, 2)

    if isinstance(settings.presets, list):
        settings.presets = [m for m in settings.presets if is_valid_minutes(m)]
    else:
        settings.presets = defaults.presets

    settings.auto_restart = bool(settings.auto_restart)
    settings.sound_enabled = bool(settings.sound_enabled)
    if settings.sound_path is not None and not isinstance(settings.sound_path, str):
        settings.sound_path = None

    for name in ("window_width", "window_height"):
        value = getattr(settings, name)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            setattr(settings, name, getattr(defaults, name))

    level = str(settings.log_level).upper()
    settings.log_level = level if level in LOG_LEVELS else defaults.log_level
    return settings
