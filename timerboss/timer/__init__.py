"""Timer package."""

from .engine import (
    TimerEngine,
    TimerState,
    TimerSnapshot,
    ExpiryNotifier,
    DEFAULT_MINUTES,
    DEFAULT_VOLUME,
    MIN_MINUTES,
    MAX_MINUTES,
    PRESET_MINUTES,
    is_valid_minutes,
    format_time,
)

__all__ = [
    "TimerEngine",
    "TimerState",
    "TimerSnapshot",
    "ExpiryNotifier",
    "DEFAULT_MINUTES",
    "DEFAULT_VOLUME",
    "MIN_MINUTES",
    "MAX_MINUTES",
    "PRESET_MINUTES",
    "is_valid_minutes",
    "format_time",
]
