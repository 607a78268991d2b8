"""Pure logic for the work/break timer state machine."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from .config import Config


class Phase(Enum):
    """Timer phase types."""
    WORK = auto()
    BREAK = auto()


@dataclass
class TimerState:
    """The clock: elapsed time in the current phase plus cycle counters."""
    seconds: int = 0
    minutes: int = 0
    completed_work_cycles: int = 0
    completed_break_cycles: int = 0

    @property
    def elapsed_in_phase(self) -> int:
        """Seconds on the clock for the current phase."""
        return self.minutes * 60 + self.seconds

    def reset_clock(self) -> None:
        self.seconds = 0
        self.minutes = 0


def advance(state: TimerState) -> None:
    """Move the clock forward by one second."""
    if state.seconds == 59:
        state.minutes += 1
        state.seconds = 0
    else:
        state.seconds += 1


def is_phase_complete(state: TimerState, threshold_minutes: int) -> bool:
    """True exactly when the clock has reached ``threshold_minutes``."""
    return state.minutes == threshold_minutes


def current_phase(state: TimerState) -> Phase:
    """Derive the phase from the counters.

    A break follows every completed work cycle, so the timer is on a break
    exactly while it has completed more work cycles than breaks.
    """
    if state.completed_work_cycles > state.completed_break_cycles:
        return Phase.BREAK
    return Phase.WORK


class PomodoroTimer:
    """Work/break state machine.

    Starts in work and alternates forever. A phase completes in the tick
    that brings the clock to its threshold: the clock resets and the
    counter for that phase goes up before anything else is rendered, so a
    phase of N minutes lasts exactly N * 60 ticks.
    """

    def __init__(
        self,
        config: Config,
        state: Optional[TimerState] = None,
        on_phase_complete: Optional[Callable[[Phase, Phase], None]] = None,
    ):
        """Initialize the timer.

        Args:
            config: Work and break durations.
            state: Clock to drive, a fresh one if omitted.
            on_phase_complete: Callback(old_phase, new_phase) when phase ends.
        """
        self.config = config
        self.state = state if state is not None else TimerState()
        self.on_phase_complete = on_phase_complete

    @property
    def phase(self) -> Phase:
        """Current phase."""
        return current_phase(self.state)

    @property
    def threshold(self) -> int:
        """Length of the current phase in minutes."""
        if self.phase == Phase.WORK:
            return self.config.work_minutes
        return self.config.break_minutes

    @property
    def phase_label(self) -> str:
        """Human-readable phase label."""
        labels = {
            Phase.WORK: "Time to Work",
            Phase.BREAK: "Take a break",
        }
        return labels[self.phase]

    def _complete_phase(self) -> None:
        old_phase = self.phase
        self.state.reset_clock()
        if old_phase == Phase.WORK:
            self.state.completed_work_cycles += 1
        else:
            self.state.completed_break_cycles += 1

        if self.on_phase_complete:
            self.on_phase_complete(old_phase, self.phase)

    def tick(self) -> bool:
        """Advance the clock by one second.

        Returns:
            True if phase completed, False otherwise.
        """
        threshold = self.threshold
        advance(self.state)

        if is_phase_complete(self.state, threshold):
            self._complete_phase()
            return True

        return False
