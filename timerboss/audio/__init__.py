"""Audio package."""

from .sounds import NotificationPlayer, PlaybackError

__all__ = ["NotificationPlayer", "PlaybackError"]
