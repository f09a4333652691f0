"""Main application window for Timer Boss."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel

from .timer.engine import TimerEngine, ExpiryNotifier
from .ui.timer_widget import TimerWidget
from .ui.styles import build_stylesheet
from .settings import Settings
from .audio.sounds import NotificationPlayer


logger = logging.getLogger(__name__)


class TimerBossApp(QMainWindow):
    """Main application window.

    *notifier* replaces the default ``NotificationPlayer`` (tests pass a
    recorder so no audio device is touched).
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        notifier: ExpiryNotifier | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or Settings()
        self.setWindowTitle("Timer Boss")
        self.resize(self._settings.window_width, self._settings.window_height)
        self.setStyleSheet(build_stylesheet())

        # ── audio ─────────────────────────────────────────────────────
        if notifier is None:
            sound_path = (
                Path(self._settings.sound_path).expanduser()
                if self._settings.sound_path else None
            )
            notifier = NotificationPlayer(
                parent=self,
                sound_path=sound_path,
                enabled=self._settings.sound_enabled,
            )

        # ── engine ────────────────────────────────────────────────────
        self._timer_engine = TimerEngine(
            self,
            notifier=notifier,
            minutes=self._settings.duration_minutes,
            volume=self._settings.volume,
            auto_restart=self._settings.auto_restart,
        )

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        title = QLabel("Timer Boss", central)
        title.setObjectName("titleLabel")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self._timer_widget = TimerWidget(
            self._timer_engine, central, presets=self._settings.presets,
        )
        layout.addWidget(self._timer_widget)

        self._setup_shortcuts()

        logger.debug(
            "Window ready: %d min, volume %.1f, auto_restart=%s",
            self._settings.duration_minutes,
            self._settings.volume,
            self._settings.auto_restart,
        )

    @property
    def engine(self) -> TimerEngine:
        return self._timer_engine

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start, pause, or resume the timer."""
        if self._timer_engine.is_running:
            self._timer_engine.toggle_pause()
        else:
            self._timer_engine.start()

    def _on_escape(self) -> None:
        """Reset the timer (no-op when idle)."""
        if self._timer_engine.is_running:
            self._timer_engine.reset()

    def _setup_shortcuts(self) -> None:
        """Register Space (start/pause) and Escape (reset) on the window.

        Shortcuts are matched before the focused widget sees the key, so a
        focused push button cannot swallow Space.  Text inputs still get
        it because they claim printable keys through ShortcutOverride.
        """
        start_pause = QAction("Start / Pause", self)
        start_pause.setShortcut(QKeySequence("Space"))
        start_pause.triggered.connect(self._on_space)
        self.addAction(start_pause)

        reset = QAction("Reset", self)
        reset.setShortcut(QKeySequence("Esc"))
        reset.triggered.connect(self._on_escape)
        self.addAction(reset)
