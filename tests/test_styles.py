from pomodoro.core.timer import Theme, UrgencyLevel
from pomodoro.ui.styles import THEME_GRADIENTS, background_qss, swatch_qss, timer_color_qss


def test_every_theme_has_gradient() -> None:
    assert set(THEME_GRADIENTS) == set(Theme)


def test_background_uses_theme_stops() -> None:
    qss = background_qss(Theme.BLACK)

    assert qss.startswith("QMainWindow")
    for stop in ("#374151", "#111827", "#000000"):
        assert stop in qss


def test_active_swatch_is_outlined() -> None:
    assert "2px solid #ffffff" in swatch_qss(Theme.BLUE, active=True)
    assert "border: none" in swatch_qss(Theme.BLUE, active=False)


def test_timer_colors_follow_urgency() -> None:
    assert timer_color_qss(UrgencyLevel.CRITICAL) == "color: #ef4444;"
    assert timer_color_qss(UrgencyLevel.WARNING) == "color: #eab308;"
    assert timer_color_qss(UrgencyLevel.NORMAL) == "color: #ffffff;"
