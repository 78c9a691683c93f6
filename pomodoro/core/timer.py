from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from numbers import Real


logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when phase durations are not positive whole minutes."""


class Phase(str, Enum):
    WORK = "work"
    BREAK = "break"

    def other(self) -> Phase:
        return Phase.BREAK if self is Phase.WORK else Phase.WORK

    @property
    def label(self) -> str:
        return "Work Phase" if self is Phase.WORK else "Break Phase"


class Theme(str, Enum):
    BLACK = "black"
    PINK = "pink"
    BLUE = "blue"
    GREEN = "green"


DEFAULT_THEME = Theme.PINK


class UrgencyLevel(str, Enum):
    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"


CRITICAL_SECONDS = 10
WARNING_SECONDS = 30


def _whole_minutes(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigurationError(f"{name} must be a whole number of minutes, got {value!r}")
    if (isinstance(value, float) and not value.is_integer()) or int(value) != value:
        raise ConfigurationError(f"{name} must be a whole number of minutes, got {value!r}")
    if value < 1:
        raise ConfigurationError(f"{name} must be at least 1 minute, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class TimerConfiguration:
    work_minutes: int = 25
    break_minutes: int = 5

    def __post_init__(self) -> None:
        object.__setattr__(self, "work_minutes", _whole_minutes("work_minutes", self.work_minutes))
        object.__setattr__(self, "break_minutes", _whole_minutes("break_minutes", self.break_minutes))

    def seconds_for(self, phase: Phase) -> int:
        minutes = self.work_minutes if phase is Phase.WORK else self.break_minutes
        return minutes * 60


@dataclass(frozen=True)
class TimerSnapshot:
    phase: Phase
    remaining_seconds: int
    is_running: bool
    is_muted: bool
    theme: Theme
    is_alerting: bool
    display_time: str
    urgency: UrgencyLevel
    configuration: TimerConfiguration


@dataclass(frozen=True)
class PhaseTransition:
    previous_phase: Phase
    phase: Phase
    remaining_seconds: int
    previous_theme: Theme
    theme: Theme
    alert_raised: bool


def format_time(seconds: int) -> str:
    """Formats a countdown as ``MM:SS``; minutes grow past two digits instead of wrapping."""
    if seconds < 0:
        raise ValueError("Remaining time cannot be negative")
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def urgency_for(seconds: int) -> UrgencyLevel:
    if seconds <= CRITICAL_SECONDS:
        return UrgencyLevel.CRITICAL
    if seconds <= WARNING_SECONDS:
        return UrgencyLevel.WARNING
    return UrgencyLevel.NORMAL


class TimerEngine:
    """Work/break countdown state machine detached from any UI framework.

    The engine never schedules itself: a host calls :meth:`tick` once per
    second while :attr:`is_running` is true and reacts to the returned
    :class:`PhaseTransition` (sound, background styling).
    """

    def __init__(
        self,
        configuration: TimerConfiguration | None = None,
        *,
        muted: bool = False,
        theme: Theme = DEFAULT_THEME,
        rng: random.Random | None = None,
    ) -> None:
        self._configuration = configuration or TimerConfiguration()
        self._rng = rng or random.Random()
        self._phase = Phase.WORK
        self._remaining_seconds = self._configuration.seconds_for(Phase.WORK)
        self._is_running = False
        self._is_muted = bool(muted)
        self._theme = Theme(theme)
        self._is_alerting = False

    @property
    def configuration(self) -> TimerConfiguration:
        return self._configuration

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def is_muted(self) -> bool:
        return self._is_muted

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def is_alerting(self) -> bool:
        return self._is_alerting

    def configure(self, work_minutes: int, break_minutes: int) -> None:
        # The in-progress countdown keeps its remaining time; the new durations
        # apply from the next reset or phase entry.
        configuration = TimerConfiguration(work_minutes=work_minutes, break_minutes=break_minutes)
        self._configuration = configuration
        logger.debug("Configured work=%d min, break=%d min", configuration.work_minutes, configuration.break_minutes)

    def tick(self) -> PhaseTransition | None:
        if not self._is_running:
            return None
        if self._remaining_seconds > 0:
            self._remaining_seconds -= 1
        # Zero is never held for a whole interval: reaching it switches phase.
        if self._remaining_seconds > 0:
            return None
        return self._transition()

    def toggle_run(self) -> bool:
        self._is_running = not self._is_running
        self._is_alerting = False
        return self._is_running

    def reset(self) -> None:
        self._is_running = False
        self._phase = Phase.WORK
        self._remaining_seconds = self._configuration.seconds_for(Phase.WORK)
        self._theme = DEFAULT_THEME
        self._is_alerting = False

    def toggle_mute(self) -> bool:
        # An alert already ringing keeps ringing; only toggle_run/reset silence it.
        self._is_muted = not self._is_muted
        return self._is_muted

    def set_theme(self, theme: Theme | str) -> None:
        try:
            self._theme = Theme(theme)
        except ValueError:
            raise ValueError(f"Unknown theme: {theme!r}") from None

    def display_time(self) -> str:
        return format_time(self._remaining_seconds)

    def urgency_level(self) -> UrgencyLevel:
        return urgency_for(self._remaining_seconds)

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self._phase,
            remaining_seconds=self._remaining_seconds,
            is_running=self._is_running,
            is_muted=self._is_muted,
            theme=self._theme,
            is_alerting=self._is_alerting,
            display_time=self.display_time(),
            urgency=self.urgency_level(),
            configuration=self._configuration,
        )

    def _transition(self) -> PhaseTransition:
        previous_phase = self._phase
        previous_theme = self._theme
        alert_raised = not self._is_muted
        if alert_raised:
            self._is_alerting = True
        self._phase = previous_phase.other()
        self._remaining_seconds = self._configuration.seconds_for(self._phase)
        self._theme = self._pick_theme(previous_theme)
        logger.debug(
            "Phase %s -> %s, theme %s -> %s, alert=%s",
            previous_phase.value,
            self._phase.value,
            previous_theme.value,
            self._theme.value,
            alert_raised,
        )
        return PhaseTransition(
            previous_phase=previous_phase,
            phase=self._phase,
            remaining_seconds=self._remaining_seconds,
            previous_theme=previous_theme,
            theme=self._theme,
            alert_raised=alert_raised,
        )

    def _pick_theme(self, current: Theme) -> Theme:
        candidates = [theme for theme in Theme if theme is not current]
        if not candidates:
            return current
        return self._rng.choice(candidates)
