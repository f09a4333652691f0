"""UI package."""

from .progress_ring import ProgressRing
from .timer_widget import TimerWidget
from .styles import STATE_COLORS, build_stylesheet

__all__ = ["ProgressRing", "TimerWidget", "STATE_COLORS", "build_stylesheet"]
