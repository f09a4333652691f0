"""Countdown state machine for Timer Boss.

States
------
IDLE      Not running, waiting for the user to start.
ACTIVE    Counting down once per tick interval.
PAUSED    Running but frozen; ticks are ignored until resumed.

Transitions
-----------
IDLE → ACTIVE                 (start)
ACTIVE ⇄ PAUSED               (toggle_pause)
ACTIVE | PAUSED → IDLE        (reset)
ACTIVE → ACTIVE               (tick at 00:00: notify, restart from full)
Any → IDLE                    (set_duration)

The countdown never stops on its own: when it reaches zero the expiry
notification is requested and the next countdown begins on the same tick.
``auto_restart=False`` returns to IDLE instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    PAUSED = "paused"


# ── constants ─────────────────────────────────────────────────────────────

MIN_MINUTES = 1
MAX_MINUTES = 999
DEFAULT_MINUTES = 25
DEFAULT_VOLUME = 0.5
VOLUME_STEP = 0.1
TICK_INTERVAL_MS = 1000
PRESET_MINUTES = (5, 10, 20, 30)


def is_valid_minutes(minutes: object) -> bool:
    """True for an integer in ``MIN_MINUTES..MAX_MINUTES`` (bools excluded)."""
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        return False
    return MIN_MINUTES <= minutes <= MAX_MINUTES


def format_time(minutes: int, seconds: int) -> str:
    return f"{minutes:02d}:{seconds:02d}"


# ── collaborators ─────────────────────────────────────────────────────────


class ExpiryNotifier(Protocol):
    """Anything that can make a noise when the countdown hits zero."""

    def play_notification(self, volume: float) -> None: ...


@dataclass(frozen=True)
class TimerSnapshot:
    """Read-only view of the engine handed to the UI on every render."""

    minutes: int
    seconds: int
    is_running: bool
    is_paused: bool
    progress_fraction: float

    @property
    def display(self) -> str:
        return format_time(self.minutes, self.seconds)

    @property
    def state(self) -> TimerState:
        if not self.is_running:
            return TimerState.IDLE
        return TimerState.PAUSED if self.is_paused else TimerState.ACTIVE


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based countdown timer with auto-restart on expiry.

    All mutation happens on the Qt event loop that owns the internal
    ``QTimer``, so commands and ticks never interleave.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every countdown step and after a restart.
    state_changed(new_state: TimerState)
        Emitted whenever a command changes the flags or the duration.
    expired(volume: float)
        Emitted once each time the countdown runs out, before the
        notifier is asked to play.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    expired = pyqtSignal(float)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        notifier: ExpiryNotifier | None = None,
        minutes: int = DEFAULT_MINUTES,
        volume: float = DEFAULT_VOLUME,
        auto_restart: bool = True,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        if not is_valid_minutes(minutes):
            raise ValueError(
                f"minutes must be an integer between {MIN_MINUTES} and "
                f"{MAX_MINUTES}, got {minutes!r}"
            )

        # ── configuration ─────────────────────────────────────────────
        self._notifier: ExpiryNotifier | None = notifier
        self._auto_restart: bool = auto_restart
        self._volume: float = volume

        # ── countdown state ───────────────────────────────────────────
        self._target_duration: int = minutes * 60
        self._remaining: int = self._target_duration
        self._running: bool = False
        self._paused: bool = False

        # ── Qt timer ──────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        if not self._running:
            return TimerState.IDLE
        return TimerState.PAUSED if self._paused else TimerState.ACTIVE

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def target_duration(self) -> int:
        """Seconds the countdown starts from."""
        return self._target_duration

    @property
    def is_running(self) -> bool:
        """True between start() and reset(), paused or not."""
        return self._running

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def is_ticking(self) -> bool:
        """True while the tick source is scheduled."""
        return self._qt_timer.isActive()

    @property
    def progress_fraction(self) -> float:
        """0.0 → 1.0 progress through the current countdown."""
        if self._target_duration <= 0:
            return 0.0
        elapsed = self._target_duration - self._remaining
        return max(0.0, min(1.0, elapsed / self._target_duration))

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def auto_restart(self) -> bool:
        return self._auto_restart

    @auto_restart.setter
    def auto_restart(self, value: bool) -> None:
        self._auto_restart = value

    @property
    def notifier(self) -> ExpiryNotifier | None:
        return self._notifier

    @notifier.setter
    def notifier(self, value: ExpiryNotifier | None) -> None:
        self._notifier = value

    def snapshot(self) -> TimerSnapshot:
        minutes, seconds = divmod(self._remaining, 60)
        return TimerSnapshot(
            minutes=minutes,
            seconds=seconds,
            is_running=self._running,
            is_paused=self._paused,
            progress_fraction=self.progress_fraction,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def set_duration(self, minutes: int) -> bool:
        """Load a new countdown of *minutes* (1-999) and go IDLE.

        Out-of-range values are ignored and leave every field untouched.
        Returns whether the value was accepted.
        """
        if not is_valid_minutes(minutes):
            logger.debug("Ignoring out-of-range duration %r", minutes)
            return False
        self._qt_timer.stop()
        self._target_duration = minutes * 60
        self._remaining = self._target_duration
        self._running = False
        self._paused = False
        self._emit_state()
        self.tick.emit(self._remaining)
        return True

    def start(self) -> None:
        """Begin counting down.  No-op when already active."""
        if self._running and not self._paused:
            return
        self._running = True
        self._paused = False
        if not self._qt_timer.isActive():
            self._qt_timer.start()
        self._emit_state()

    def toggle_pause(self) -> None:
        """Pause or resume.  Ignored unless the timer is running."""
        if not self._running:
            return
        self._paused = not self._paused
        if self._paused:
            self._qt_timer.stop()
        else:
            self._qt_timer.start()
        self._emit_state()

    def reset(self) -> None:
        """Stop and rewind to the full duration."""
        self._qt_timer.stop()
        self._remaining = self._target_duration
        self._running = False
        self._paused = False
        self._emit_state()
        self.tick.emit(self._remaining)

    def set_volume(self, volume: float) -> None:
        """Store the expiry volume as given; the player does the clamping."""
        self._volume = volume

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if not self._running or self._paused:
            return

        if self._remaining > 0:
            self._remaining -= 1
            self.tick.emit(self._remaining)
            return

        self._notify_expiry()

        if self._auto_restart:
            self._remaining = self._target_duration
            self._running = True
            self._paused = False
            self.tick.emit(self._remaining)
        else:
            self.reset()

    def _notify_expiry(self) -> None:
        logger.info("Countdown of %ds expired", self._target_duration)
        self.expired.emit(self._volume)
        if self._notifier is None:
            return
        try:
            self._notifier.play_notification(self._volume)
        except Exception:
            # fire-and-forget: the caller still restarts the countdown
            logger.exception(
                "Expiry notification failed (volume=%r)", self._volume,
            )

    def _emit_state(self) -> None:
        state = self.state
        logger.debug("Timer state → %s (remaining=%ds)", state.value, self._remaining)
        self.state_changed.emit(state)
