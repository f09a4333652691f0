"""Timer Boss: a single-screen countdown timer that never stops."""

__version__ = "0.1.0"
