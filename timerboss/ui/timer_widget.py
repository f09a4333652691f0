"""Main timer card.

Layout (top → bottom):
    - ProgressRing (centred)
    - Start | Pause/Resume + Reset
    - Custom minutes input + Set
    - Volume slider
    - Preset buttons
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFrame, QSizePolicy, QSpinBox, QSlider,
)

from ..timer.engine import (
    TimerEngine, TimerSnapshot, MIN_MINUTES, MAX_MINUTES, PRESET_MINUTES,
    VOLUME_STEP,
)
from .progress_ring import ProgressRing


_VOLUME_TICKS = round(1 / VOLUME_STEP)  # slider positions 0..10


class TimerWidget(QWidget):
    """The single timer card.  Reads ``engine.snapshot()`` on every render."""

    def __init__(
        self,
        engine: TimerEngine,
        parent: QWidget | None = None,
        *,
        presets: tuple[int, ...] | list[int] = PRESET_MINUTES,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._presets = tuple(presets)
        self._build_ui()
        self._connect_signals()
        self._render()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # ── progress ring ────────────────────────────────────────────
        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring = ProgressRing(card)
        self._ring.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self._ring.setFixedSize(220, 220)
        ring_row.addWidget(self._ring)
        layout.addLayout(ring_row)

        # ── main controls ────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_pause_btn = QPushButton("Start", card)
        self._start_pause_btn.setObjectName("startButton")

        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("resetButton")

        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

        # ── custom time ──────────────────────────────────────────────
        layout.addWidget(QLabel("Set Custom Time (minutes):", card))
        time_row = QHBoxLayout()
        self._minutes_spin = QSpinBox(card)
        self._minutes_spin.setRange(MIN_MINUTES, MAX_MINUTES)
        self._minutes_spin.setValue(self._engine.target_duration // 60)
        self._set_btn = QPushButton("Set", card)
        self._set_btn.setObjectName("setButton")
        time_row.addWidget(self._minutes_spin, 1)
        time_row.addWidget(self._set_btn)
        layout.addLayout(time_row)

        # ── volume ───────────────────────────────────────────────────
        self._volume_label = QLabel(card)
        layout.addWidget(self._volume_label)
        self._volume_slider = QSlider(Qt.Orientation.Horizontal, card)
        self._volume_slider.setRange(0, _VOLUME_TICKS)
        self._volume_slider.setSingleStep(1)
        self._volume_slider.setValue(round(self._engine.volume * _VOLUME_TICKS))
        layout.addWidget(self._volume_slider)
        # The engine takes whatever value the slider landed on
        self._on_volume_changed(self._volume_slider.value())

        # ── quick presets ────────────────────────────────────────────
        preset_row = QHBoxLayout()
        preset_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._preset_btns: list[QPushButton] = []
        for minutes in self._presets:
            btn = QPushButton(f"{minutes}min", card)
            btn.setObjectName("presetButton")
            btn.clicked.connect(lambda _=False, m=minutes: self._apply_preset(m))
            self._preset_btns.append(btn)
            preset_row.addWidget(btn)
        layout.addLayout(preset_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self._on_start_pause)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._set_btn.clicked.connect(self._on_set_clicked)
        self._volume_slider.valueChanged.connect(self._on_volume_changed)

        self._engine.tick.connect(self._render)
        self._engine.state_changed.connect(self._render)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_start_pause(self) -> None:
        if self._engine.is_running:
            self._engine.toggle_pause()
        else:
            self._engine.start()

    def _on_set_clicked(self) -> None:
        self._engine.set_duration(self._minutes_spin.value())

    def _apply_preset(self, minutes: int) -> None:
        self._minutes_spin.setValue(minutes)
        self._engine.set_duration(minutes)

    def _on_volume_changed(self, position: int) -> None:
        volume = position / _VOLUME_TICKS
        self._engine.set_volume(volume)
        self._update_volume_label(volume)

    def _update_volume_label(self, volume: float) -> None:
        self._volume_label.setText(f"Volume: {round(volume * 100)}%")

    # ── render ────────────────────────────────────────────────────────────

    def _render(self, *_args: object) -> None:
        snap: TimerSnapshot = self._engine.snapshot()
        self._ring.set_time_text(snap.display)
        self._ring.set_percent(snap.progress_fraction)
        self._ring.apply_state(snap.state)

        # ── start / pause button ─────────────────────────────────────
        if not snap.is_running:
            self._start_pause_btn.setText("Start")
            self._start_pause_btn.setObjectName("startButton")
        else:
            self._start_pause_btn.setText("Resume" if snap.is_paused else "Pause")
            self._start_pause_btn.setObjectName("pauseButton")
        # Re-polish so the objectName-based QSS rule applies
        style = self._start_pause_btn.style()
        if style is not None:
            style.unpolish(self._start_pause_btn)
            style.polish(self._start_pause_btn)

        self._set_btn.setEnabled(not snap.is_running)
