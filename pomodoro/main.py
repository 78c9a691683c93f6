from __future__ import annotations

"""Entry point of the Pomodoro timer.

Parses start-up settings, configures logging, wires the timer engine to its
Qt driver and opens the main window.
"""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from pomodoro.core.controller import TimerController
from pomodoro.core.settings import Settings, parse_args
from pomodoro.core.timer import Theme, TimerEngine
from pomodoro.ui.main_window import MainWindow
from pomodoro.ui.sound import NotificationSound


logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.numeric_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_engine(settings: Settings) -> TimerEngine:
    return TimerEngine(
        settings.timer_configuration(),
        muted=settings.muted,
        theme=Theme(settings.theme),
    )


def main(argv: list[str] | None = None) -> int:
    """Creates the application objects and runs the Qt event loop."""
    settings = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(settings)

    app = QApplication(sys.argv[:1])

    engine = build_engine(settings)
    controller = TimerController(engine, interval_ms=settings.tick_interval_ms)
    sound = NotificationSound(settings.resolved_sound_path())
    logger.info(
        "Starting with work=%d min, break=%d min, muted=%s",
        settings.work_minutes,
        settings.break_minutes,
        settings.muted,
    )

    window = MainWindow(controller=controller, sound=sound)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
