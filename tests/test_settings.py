from pathlib import Path

import pytest

from pomodoro.core.assets import ASSETS_DIR, asset_exists
from pomodoro.core.settings import DEFAULT_SOUND, Settings, parse_args
from pomodoro.core.timer import TimerConfiguration


def test_defaults() -> None:
    settings = parse_args([])

    assert settings == Settings()
    assert settings.timer_configuration() == TimerConfiguration(25, 5)
    assert settings.resolved_sound_path() == ASSETS_DIR / DEFAULT_SOUND


def test_bundled_sound_exists() -> None:
    assert asset_exists(DEFAULT_SOUND)


def test_parse_all_options(tmp_path) -> None:
    sound = tmp_path / "bell.wav"

    settings = parse_args(
        ["--work", "50", "--break", "10", "--muted", "--theme", "green", "--sound", str(sound), "--tick-ms", "250", "--log-level", "debug"]
    )

    assert settings.timer_configuration() == TimerConfiguration(50, 10)
    assert settings.muted is True
    assert settings.theme == "green"
    assert settings.resolved_sound_path() == Path(sound)
    assert settings.tick_interval_ms == 250
    assert settings.log_level == "DEBUG"
    assert settings.numeric_log_level == 10


@pytest.mark.parametrize("argv", [["--work", "0"], ["--break", "-3"], ["--theme", "purple"], ["--tick-ms", "0"]])
def test_invalid_arguments_exit(argv) -> None:
    with pytest.raises(SystemExit):
        parse_args(argv)
