"""QSS stylesheet and state colors for Timer Boss."""

from __future__ import annotations

from ..timer.engine import TimerState

# ── state colors (ring gradient pairs) ──────────────────────────────────
#    Each state maps to (primary, secondary) for the conical gradient.

STATE_COLORS: dict[TimerState, tuple[str, str]] = {
    TimerState.ACTIVE: ("#007BFF", "#4DA3FF"),   # bootstrap blue
    TimerState.PAUSED: ("#FFC107", "#E0A800"),   # amber
    TimerState.IDLE:   ("#4A4A5E", "#3A3A4E"),   # neutral dim
}

STATE_LABELS: dict[TimerState, str] = {
    TimerState.IDLE:   "READY",
    TimerState.ACTIVE: "RUNNING",
    TimerState.PAUSED: "PAUSED",
}

PALETTE: dict[str, str] = {
    "bg":           "#121212",
    "bg_secondary": "#212529",
    "surface":      "#2C3034",
    "accent":       "#007BFF",
    "accent2":      "#4DA3FF",
    "text":         "#F8F9FA",
    "text_muted":   "#8A8F98",
    "track":        "#333333",
    "success":      "#28A745",
    "warning":      "#FFC107",
    "danger":       "#DC3545",
    "border":       "#DEE2E6",
}


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QLabel#titleLabel {{
        font-size: 36px;
        font-weight: 700;
    }}

    /* ── buttons ─────────────────────────────────── */
    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 8px;
        padding: 8px 18px;
        font-weight: 600;
    }}

    QPushButton:disabled {{
        color: {p['text_muted']};
        border-color: {p['surface']};
    }}

    QPushButton#startButton {{
        background-color: {p['success']};
        border: none;
        font-size: 17px;
        padding: 12px 32px;
    }}

    QPushButton#pauseButton {{
        background-color: {p['warning']};
        color: {p['bg']};
        border: none;
        font-size: 17px;
        padding: 12px 32px;
    }}

    QPushButton#resetButton {{
        background-color: {p['danger']};
        border: none;
        font-size: 17px;
        padding: 12px 32px;
    }}

    QPushButton#setButton {{
        background-color: transparent;
        color: {p['accent']};
        border: 1px solid {p['accent']};
    }}

    QPushButton#presetButton {{
        background-color: transparent;
        color: {p['text_muted']};
        border: 1px solid {p['text_muted']};
        font-size: 12px;
        padding: 4px 12px;
    }}

    QPushButton#presetButton:hover {{
        color: {p['text']};
        border-color: {p['text']};
    }}

    /* ── inputs ──────────────────────────────────── */
    QSpinBox {{
        background-color: {p['text']};
        color: {p['bg']};
        border-radius: 6px;
        padding: 6px 10px;
    }}

    QSlider::groove:horizontal {{
        background-color: {p['surface']};
        height: 6px;
        border-radius: 3px;
    }}

    QSlider::handle:horizontal {{
        background-color: {p['accent']};
        width: 16px;
        margin: -5px 0;
        border-radius: 8px;
    }}

    /* ── frame / card ────────────────────────────── */
    QFrame#card {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 12px;
    }}
    """
