from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from pomodoro.core.timer import Theme, TimerEngine, TimerSnapshot


logger = logging.getLogger(__name__)


class TimerController(QObject):
    """Drives a :class:`TimerEngine` from a single-shot ``QTimer``.

    A tick is pending only while the engine runs. Intents that can make the
    pending tick stale cancel it and schedule a fresh one if still running.
    Side effects are published as signals for the window to execute.
    """

    state_changed = pyqtSignal(object)
    phase_changed = pyqtSignal(object)
    sound_started = pyqtSignal()
    sound_stopped = pyqtSignal()
    theme_changed = pyqtSignal(str)

    def __init__(self, engine: TimerEngine, interval_ms: int = 1000, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.engine = engine
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.tick)

    @property
    def tick_pending(self) -> bool:
        return self._timer.isActive()

    def snapshot(self) -> TimerSnapshot:
        return self.engine.snapshot()

    def toggle_run(self) -> None:
        was_alerting = self.engine.is_alerting
        running = self.engine.toggle_run()
        logger.info("Timer %s", "started" if running else "paused")
        if was_alerting:
            self.sound_stopped.emit()
        self._reschedule()
        self.state_changed.emit(self.engine.snapshot())

    def reset(self) -> None:
        previous_theme = self.engine.theme
        self.engine.reset()
        logger.info("Timer reset")
        self._reschedule()
        # Stop and rewind even when no alert is ringing.
        self.sound_stopped.emit()
        if self.engine.theme is not previous_theme:
            self.theme_changed.emit(self.engine.theme.value)
        self.state_changed.emit(self.engine.snapshot())

    def toggle_mute(self) -> None:
        muted = self.engine.toggle_mute()
        logger.info("Sound %s", "muted" if muted else "unmuted")
        self.state_changed.emit(self.engine.snapshot())

    def set_theme(self, theme: Theme | str) -> None:
        previous_theme = self.engine.theme
        self.engine.set_theme(theme)
        if self.engine.theme is not previous_theme:
            self.theme_changed.emit(self.engine.theme.value)
        self.state_changed.emit(self.engine.snapshot())

    def configure(self, work_minutes: int, break_minutes: int) -> None:
        """Applies new durations; raises ``ConfigurationError`` and changes nothing if invalid."""
        self.engine.configure(work_minutes, break_minutes)
        self._reschedule()
        self.state_changed.emit(self.engine.snapshot())

    def tick(self) -> None:
        if not self.engine.is_running:
            self._timer.stop()
            return
        transition = self.engine.tick()
        if transition is not None:
            if transition.alert_raised:
                self.sound_started.emit()
            self.theme_changed.emit(transition.theme.value)
            self.phase_changed.emit(transition)
        self._schedule_next()
        self.state_changed.emit(self.engine.snapshot())

    def _reschedule(self) -> None:
        self._timer.stop()
        self._schedule_next()

    def _schedule_next(self) -> None:
        if self.engine.is_running:
            self._timer.start()
            logger.debug("Next tick in %d ms", self._timer.interval())
