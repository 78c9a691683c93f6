import random

import pytest

from pomodoro.core.controller import TimerController
from pomodoro.core.timer import ConfigurationError, Phase, Theme, TimerConfiguration, TimerEngine


@pytest.fixture
def controller(qt_app) -> TimerController:
    engine = TimerEngine(TimerConfiguration(1, 1), rng=random.Random(3))
    # Long interval so the real timer never fires during a test.
    return TimerController(engine, interval_ms=60_000)


def record(signal) -> list:
    received = []
    signal.connect(lambda *args: received.append(args))
    return received


def run_to_transition(controller: TimerController) -> None:
    for _ in range(controller.engine.remaining_seconds):
        controller.tick()


def test_tick_scheduled_only_while_running(controller: TimerController) -> None:
    assert controller.tick_pending is False

    controller.toggle_run()
    assert controller.tick_pending is True

    controller.toggle_run()
    assert controller.tick_pending is False


def test_reset_cancels_pending_tick(controller: TimerController) -> None:
    controller.toggle_run()
    controller.tick()

    controller.reset()

    assert controller.tick_pending is False
    snapshot = controller.snapshot()
    assert snapshot.is_running is False
    assert snapshot.remaining_seconds == 60


def test_configure_while_running_reschedules(controller: TimerController) -> None:
    controller.toggle_run()
    controller.tick()

    controller.configure(5, 2)

    assert controller.tick_pending is True
    assert controller.engine.remaining_seconds == 59
    assert controller.engine.configuration == TimerConfiguration(5, 2)


def test_invalid_configure_propagates_and_keeps_state(controller: TimerController) -> None:
    states = record(controller.state_changed)
    controller.toggle_run()

    with pytest.raises(ConfigurationError):
        controller.configure(0, 5)

    assert controller.tick_pending is True
    assert controller.engine.configuration == TimerConfiguration(1, 1)
    assert len(states) == 1


def test_stale_tick_after_pause_is_ignored(controller: TimerController) -> None:
    states = record(controller.state_changed)
    controller.toggle_run()
    controller.toggle_run()

    controller.tick()

    assert controller.engine.remaining_seconds == 60
    assert controller.tick_pending is False
    assert len(states) == 2


def test_transition_emits_sound_theme_and_phase(controller: TimerController) -> None:
    started = record(controller.sound_started)
    themes = record(controller.theme_changed)
    phases = record(controller.phase_changed)
    controller.toggle_run()

    run_to_transition(controller)

    assert len(started) == 1
    assert len(phases) == 1
    transition = phases[0][0]
    assert transition.phase == Phase.BREAK
    assert themes == [(transition.theme.value,)]
    assert transition.theme != Theme.PINK
    assert controller.tick_pending is True


def test_muted_transition_emits_no_sound(controller: TimerController) -> None:
    started = record(controller.sound_started)
    themes = record(controller.theme_changed)
    controller.toggle_mute()
    controller.toggle_run()

    run_to_transition(controller)

    assert started == []
    assert len(themes) == 1
    assert controller.engine.phase == Phase.BREAK


def test_toggle_run_stops_sound_only_when_alerting(controller: TimerController) -> None:
    stopped = record(controller.sound_stopped)
    controller.toggle_run()
    controller.toggle_run()
    assert stopped == []

    controller.toggle_run()
    run_to_transition(controller)
    controller.toggle_run()

    assert len(stopped) == 1
    assert controller.engine.is_alerting is False
    assert controller.tick_pending is False


def test_toggle_mute_leaves_alert_ringing(controller: TimerController) -> None:
    stopped = record(controller.sound_stopped)
    controller.toggle_run()
    run_to_transition(controller)

    controller.toggle_mute()

    assert stopped == []
    assert controller.engine.is_alerting is True


def test_reset_stops_sound_and_restores_default_theme(controller: TimerController) -> None:
    stopped = record(controller.sound_stopped)
    controller.toggle_run()
    run_to_transition(controller)
    themes = record(controller.theme_changed)

    controller.reset()

    assert len(stopped) == 1
    assert themes == [(Theme.PINK.value,)]
    snapshot = controller.snapshot()
    assert snapshot.phase == Phase.WORK
    assert snapshot.is_alerting is False


def test_set_theme_emits_only_on_change(controller: TimerController) -> None:
    themes = record(controller.theme_changed)
    states = record(controller.state_changed)

    controller.set_theme(Theme.PINK)
    controller.set_theme("green")

    assert themes == [("green",)]
    assert len(states) == 2
