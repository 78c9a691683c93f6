from __future__ import annotations

"""Start-up settings of the timer, built from command-line arguments.

Settings live only for the running session; nothing is written to disk.
"""

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path

from pomodoro.core.assets import get_asset_path
from pomodoro.core.timer import ConfigurationError, DEFAULT_THEME, Theme, TimerConfiguration


DEFAULT_SOUND = "notification.wav"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class Settings:
    work_minutes: int = 25
    break_minutes: int = 5
    muted: bool = False
    theme: str = DEFAULT_THEME.value
    tick_interval_ms: int = 1000
    sound_path: Path | None = None
    log_level: str = "INFO"

    def timer_configuration(self) -> TimerConfiguration:
        return TimerConfiguration(work_minutes=self.work_minutes, break_minutes=self.break_minutes)

    def resolved_sound_path(self) -> Path:
        """Returns the configured sound file or the bundled notification sound."""
        if self.sound_path is not None:
            return Path(self.sound_path)
        return get_asset_path(DEFAULT_SOUND)

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pomodoro", description="Work/break countdown timer")
    parser.add_argument("--work", type=int, default=25, help="work phase length in minutes")
    parser.add_argument("--break", dest="break_", type=int, default=5, help="break phase length in minutes")
    parser.add_argument("--muted", action="store_true", help="start with the notification sound muted")
    parser.add_argument("--theme", choices=[theme.value for theme in Theme], default=DEFAULT_THEME.value)
    parser.add_argument("--sound", type=Path, default=None, help="notification sound file")
    parser.add_argument("--tick-ms", type=int, default=1000, help="tick interval in milliseconds")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", type=str.upper)
    return parser


def parse_args(argv: list[str] | None = None) -> Settings:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings(
        work_minutes=args.work,
        break_minutes=args.break_,
        muted=args.muted,
        theme=args.theme,
        tick_interval_ms=args.tick_ms,
        sound_path=args.sound,
        log_level=args.log_level,
    )
    try:
        settings.timer_configuration()
    except ConfigurationError as exc:
        parser.error(str(exc))
    if settings.tick_interval_ms < 1:
        parser.error("--tick-ms must be positive")
    return settings
