from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from pomodoro.core.controller import TimerController
from pomodoro.core.timer import ConfigurationError, PhaseTransition, Theme, TimerSnapshot
from pomodoro.ui.sound import NotificationSound
from pomodoro.ui.styles import apply_theme, swatch_qss, timer_color_qss


logger = logging.getLogger(__name__)

HOW_TO_STEPS = [
    ("Set Timer", "Choose your work and break intervals using the input fields."),
    ("Start/Pause", "Use the Start button to begin the timer, and Pause to temporarily stop it."),
    ("Stay Focused", "Work during the work phase, and take a break during the break phase."),
]

MAX_MINUTES = 999


class MainWindow(QMainWindow):
    def __init__(self, controller: TimerController, sound: NotificationSound) -> None:
        super().__init__()
        self.setWindowTitle("Pomodoro Timer")
        self.resize(820, 760)

        self.controller = controller
        self.sound = sound
        self.swatches: dict[Theme, QPushButton] = {}

        self._build_ui()
        self._connect_signals()
        self._apply_theme(self.controller.engine.theme.value)
        self._render(self.controller.snapshot())

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setSpacing(24)

        heading = QLabel("Pomodoro Timer")
        heading.setObjectName("Heading")
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root_layout.addWidget(heading)

        self.time_label = QLabel("00:00")
        self.time_label.setObjectName("TimerLabel")
        self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root_layout.addWidget(self.time_label, 0, Qt.AlignmentFlag.AlignHCenter)

        self.phase_label = QLabel()
        self.phase_label.setObjectName("PhaseLabel")
        self.phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root_layout.addWidget(self.phase_label, 0, Qt.AlignmentFlag.AlignHCenter)

        controls = QHBoxLayout()
        self.run_btn = QPushButton("Start")
        self.reset_btn = QPushButton("Reset")
        self.mute_btn = QPushButton("Mute")
        controls.addStretch()
        controls.addWidget(self.run_btn)
        controls.addWidget(self.reset_btn)
        controls.addWidget(self.mute_btn)
        controls.addStretch()
        root_layout.addLayout(controls)

        configuration = self.controller.engine.configuration
        durations = QGridLayout()
        self.work_spin = self._minutes_spin(configuration.work_minutes)
        self.break_spin = self._minutes_spin(configuration.break_minutes)
        durations.addWidget(QLabel("Work (minutes)"), 0, 0)
        durations.addWidget(QLabel("Break (minutes)"), 0, 1)
        durations.addWidget(self.work_spin, 1, 0)
        durations.addWidget(self.break_spin, 1, 1)
        root_layout.addLayout(durations)

        swatch_row = QHBoxLayout()
        swatch_row.addStretch()
        for theme in Theme:
            swatch = QPushButton()
            swatch.setToolTip(f"Set {theme.value} theme")
            swatch.setAccessibleName(f"Set {theme.value} theme")
            swatch.clicked.connect(lambda _checked=False, t=theme: self.controller.set_theme(t))
            self.swatches[theme] = swatch
            swatch_row.addWidget(swatch)
        swatch_row.addStretch()
        root_layout.addLayout(swatch_row)

        cards = QHBoxLayout()
        for title, body in HOW_TO_STEPS:
            cards.addWidget(self._info_card(title, body))
        root_layout.addLayout(cards)
        root_layout.addStretch()

        space_action = QAction(self)
        space_action.setShortcut(QKeySequence(Qt.Key.Key_Space))
        space_action.triggered.connect(self.controller.toggle_run)
        self.addAction(space_action)

    def _minutes_spin(self, value: int) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(1, MAX_MINUTES)
        spin.setValue(value)
        return spin

    def _info_card(self, title: str, body: str) -> QFrame:
        card = QFrame()
        card.setObjectName("Card")
        layout = QVBoxLayout(card)
        layout.setContentsMargins(0, 0, 0, 0)
        title_label = QLabel(title)
        title_label.setObjectName("CardTitle")
        body_label = QLabel(body)
        body_label.setObjectName("CardBody")
        body_label.setWordWrap(True)
        layout.addWidget(title_label)
        layout.addWidget(body_label)
        return card

    def _connect_signals(self) -> None:
        self.run_btn.clicked.connect(self.controller.toggle_run)
        self.reset_btn.clicked.connect(self.controller.reset)
        self.mute_btn.clicked.connect(self.controller.toggle_mute)
        self.work_spin.valueChanged.connect(self._apply_durations)
        self.break_spin.valueChanged.connect(self._apply_durations)

        self.controller.state_changed.connect(self._render)
        self.controller.phase_changed.connect(self._on_phase_changed)
        self.controller.sound_started.connect(self.sound.play)
        self.controller.sound_stopped.connect(self.sound.stop)
        self.controller.theme_changed.connect(self._apply_theme)

    def _apply_durations(self, *_args) -> None:
        try:
            self.controller.configure(self.work_spin.value(), self.break_spin.value())
        except ConfigurationError as exc:
            logger.warning("Rejected durations: %s", exc)
            QMessageBox.warning(self, "Invalid duration", str(exc))
            configuration = self.controller.engine.configuration
            for spin, value in ((self.work_spin, configuration.work_minutes), (self.break_spin, configuration.break_minutes)):
                spin.blockSignals(True)
                spin.setValue(value)
                spin.blockSignals(False)

    def _apply_theme(self, theme: str) -> None:
        app = QApplication.instance()
        if isinstance(app, QApplication):
            apply_theme(app, Theme(theme))

    def _on_phase_changed(self, transition: PhaseTransition) -> None:
        logger.info("Now in %s", transition.phase.label)

    def _render(self, snapshot: TimerSnapshot) -> None:
        self.time_label.setText(snapshot.display_time)
        self.time_label.setStyleSheet(timer_color_qss(snapshot.urgency))
        self.phase_label.setText(snapshot.phase.label)
        self.run_btn.setText("Pause" if snapshot.is_running else "Start")
        self.mute_btn.setText("Unmute" if snapshot.is_muted else "Mute")
        for theme, swatch in self.swatches.items():
            swatch.setStyleSheet(swatch_qss(theme, active=theme is snapshot.theme))

    def closeEvent(self, event) -> None:  # noqa: N802
        self.sound.stop()
        event.accept()
