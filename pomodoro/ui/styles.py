from __future__ import annotations

from PyQt6.QtWidgets import QApplication

from pomodoro.core.timer import Theme, UrgencyLevel


# Gradient stops, top-left to bottom-right.
THEME_GRADIENTS: dict[Theme, tuple[str, str, str]] = {
    Theme.BLACK: ("#374151", "#111827", "#000000"),
    Theme.PINK: ("#f472b6", "#ec4899", "#db2777"),
    Theme.BLUE: ("#60a5fa", "#3b82f6", "#2563eb"),
    Theme.GREEN: ("#4ade80", "#22c55e", "#16a34a"),
}

URGENCY_COLORS: dict[UrgencyLevel, str] = {
    UrgencyLevel.CRITICAL: "#ef4444",
    UrgencyLevel.WARNING: "#eab308",
    UrgencyLevel.NORMAL: "#ffffff",
}

BASE_QSS = """
QWidget {
    color: #ffffff;
    font-size: 13px;
}

QLabel {
    background: transparent;
}

QLabel#Heading {
    font-size: 28px;
    font-weight: 700;
}

QLabel#TimerLabel {
    font-size: 72px;
    font-weight: 700;
    background: rgba(255, 255, 255, 51);
    border-radius: 90px;
    padding: 32px;
}

QLabel#PhaseLabel {
    font-size: 22px;
    font-weight: 600;
    background: rgba(255, 255, 255, 51);
    border-radius: 16px;
    padding: 8px 16px;
}

QPushButton {
    border: none;
    background: rgba(255, 255, 255, 51);
    border-radius: 8px;
    padding: 8px 14px;
    font-weight: 600;
}

QPushButton:hover {
    background: rgba(255, 255, 255, 77);
}

QSpinBox {
    background: rgba(255, 255, 255, 51);
    border: 1px solid rgba(255, 255, 255, 128);
    border-radius: 6px;
    padding: 6px 8px;
}

QFrame#Card {
    background: #ffffff;
    border-radius: 12px;
}

QLabel#CardTitle {
    font-size: 18px;
    font-weight: 600;
    border-top-left-radius: 12px;
    border-top-right-radius: 12px;
    padding: 10px;
    background: qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 #a855f7, stop:1 #ec4899);
}

QLabel#CardBody {
    color: #1f2937;
    padding: 12px;
}
"""


def gradient(theme: Theme) -> str:
    first, middle, last = THEME_GRADIENTS[theme]
    return (
        "qlineargradient(x1:0, y1:0, x2:1, y2:1, "
        f"stop:0 {first}, stop:0.5 {middle}, stop:1 {last})"
    )


def background_qss(theme: Theme) -> str:
    """Style sheet for the window background of `theme`."""
    return f"QMainWindow {{ background: {gradient(theme)}; }}"


def swatch_qss(theme: Theme, active: bool) -> str:
    border = "2px solid #ffffff" if active else "none"
    return (
        f"QPushButton {{ background: {gradient(theme)}; border: {border}; "
        "border-radius: 16px; min-width: 32px; max-width: 32px; min-height: 32px; max-height: 32px; padding: 0; }"
    )


def timer_color_qss(urgency: UrgencyLevel) -> str:
    return f"color: {URGENCY_COLORS[urgency]};"


def apply_theme(app: QApplication, theme: Theme) -> None:
    app.setStyleSheet(BASE_QSS + background_qss(theme))
