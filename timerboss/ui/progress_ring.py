"""Circular progress ring widget rendered with QPainter.

- Fills clockwise from 12 o'clock as the countdown progresses.
- Colour-coded by timer state (active=blue, paused=amber, idle=dim).
- Shows MM:SS in bold text at the centre plus a state label.
- The arc glides to each new value over one tick, so the ring moves
  continuously instead of jumping once per second.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor, QConicalGradient, QFont
from PyQt6.QtWidgets import QWidget

from ..timer.engine import TimerState
from .styles import STATE_COLORS, STATE_LABELS, PALETTE


class ProgressRing(QWidget):
    """Custom-painted circular timer ring."""

    RING_DIAMETER = 200
    RING_THICKNESS = 8
    ARC_ANIMATION_MS = 1000

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER + 20, self.RING_DIAMETER + 20)

        # ── state ──────────────────────────────────────────────────────
        self._percent: float = 0.0           # 0..1 arc fill
        self._display_percent: float = 0.0   # animated arc fill
        self._time_text: str = "25:00"
        self._state_label: str = STATE_LABELS[TimerState.IDLE]
        self._timer_state: TimerState = TimerState.IDLE

        primary, secondary = STATE_COLORS[TimerState.IDLE]
        self._primary_color = QColor(primary)
        self._secondary_color = QColor(secondary)
        self._track_color = QColor(PALETTE["track"])
        self._text_color = QColor(PALETTE["text"])

        # ── arc transition animation ───────────────────────────────────
        self._arc_anim = QVariantAnimation(self)
        self._arc_anim.setDuration(self.ARC_ANIMATION_MS)
        self._arc_anim.setEasingCurve(QEasingCurve.Type.Linear)
        self._arc_anim.valueChanged.connect(self._on_arc_anim)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def percent(self) -> float:
        return self._percent

    @property
    def time_text(self) -> str:
        return self._time_text

    @property
    def state_label(self) -> str:
        return self._state_label

    def set_percent(self, pct: float) -> None:
        """Update the arc fill (0..1).

        Forward steps animate; a drop (reset or restart) snaps at once
        so the arc never sweeps backwards.
        """
        pct = max(0.0, min(1.0, pct))
        self._percent = pct
        self._arc_anim.stop()
        if pct < self._display_percent:
            self._display_percent = pct
            self.update()
            return
        self._arc_anim.setStartValue(self._display_percent)
        self._arc_anim.setEndValue(pct)
        self._arc_anim.start()

    def set_time_text(self, text: str) -> None:
        self._time_text = text
        self.update()

    def apply_state(self, state: TimerState) -> None:
        """Update colours and the centre label for a new timer state."""
        self._timer_state = state
        primary, secondary = STATE_COLORS[state]
        self._primary_color = QColor(primary)
        self._secondary_color = QColor(secondary)
        self._state_label = STATE_LABELS[state]
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  ANIMATION SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_arc_anim(self, value: object) -> None:
        self._display_percent = float(value)  # type: ignore[arg-type]
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        diameter = max(100, min(w, h) - 20)
        radius = diameter / 2
        thickness = self.RING_THICKNESS

        ring_rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        # ── background track ─────────────────────────────────────────
        track_pen = QPen(self._track_color, thickness, Qt.PenStyle.SolidLine)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        # ── progress arc ─────────────────────────────────────────────
        pct = self._display_percent
        if pct > 0.001:
            gradient = QConicalGradient(cx, cy, 90)
            gradient.setColorAt(0.0, self._primary_color)
            gradient.setColorAt(0.5, self._secondary_color)
            gradient.setColorAt(1.0, self._primary_color)

            arc_pen = QPen(gradient, thickness, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)

            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            start_angle = 90 * 16
            span_angle = -int(pct * 360 * 16)
            painter.drawArc(ring_rect, start_angle, span_angle)

        # ── centre text: time ────────────────────────────────────────
        time_font = QFont()
        time_font.setPixelSize(44)
        time_font.setWeight(QFont.Weight.Bold)
        painter.setFont(time_font)
        painter.setPen(self._text_color)

        time_rect = QRectF(ring_rect)
        time_rect.moveTop(time_rect.top() - 10)
        painter.drawText(time_rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        # ── centre text: state label ─────────────────────────────────
        label_font = QFont()
        label_font.setPixelSize(12)
        label_font.setWeight(QFont.Weight.DemiBold)
        label_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 3)
        painter.setFont(label_font)

        label_color = QColor(self._primary_color)
        label_color.setAlpha(200)
        painter.setPen(label_color)

        label_rect = QRectF(ring_rect)
        label_rect.moveTop(label_rect.top() + 32)
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, self._state_label)

        painter.end()
