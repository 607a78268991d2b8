"""Textual-based full-screen view of the timer."""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.timer import Timer
from textual.widgets import Digits, Footer, Static

from .display import plural
from .runner import TICK_SECONDS, ShutdownFlag
from .timer import PomodoroTimer, Phase


def clock_digits(timer: PomodoroTimer) -> str:
    """Count-up clock for the big display, e.g. ``07:05``."""
    state = timer.state
    return f"{state.minutes:02d}:{state.seconds:02d}"


def cycles_text(timer: PomodoroTimer) -> str:
    done = timer.state.completed_work_cycles
    return f"done {done} time{plural(done)}"


class PhaseLabel(Static):
    """Phase label with the phase length."""

    def __init__(self, timer: PomodoroTimer, **kwargs) -> None:
        super().__init__(**kwargs)
        self.pom_timer = timer

    def on_mount(self) -> None:
        self.update_display()

    def update_display(self) -> None:
        self.update(f"─── {self.pom_timer.phase_label} ({self.pom_timer.threshold} min) ───")


class CycleCounter(Static):
    """Completed work cycles."""

    def __init__(self, timer: PomodoroTimer, **kwargs) -> None:
        super().__init__(**kwargs)
        self.pom_timer = timer

    def on_mount(self) -> None:
        self.update_display()

    def update_display(self) -> None:
        self.update(cycles_text(self.pom_timer))


class PomTimerApp(App):
    """Full-screen timer; ends the session on q or ctrl+c."""

    CSS = """
    #timer-container {
        align: center middle;
        height: 100%;
    }
    #timer-container > * {
        width: auto;
        margin: 1 0;
    }
    #timer-container.work #clock {
        color: $success;
    }
    #timer-container.break #clock {
        color: $warning;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit", priority=True),
    ]

    def __init__(self, timer: PomodoroTimer, shutdown: ShutdownFlag) -> None:
        super().__init__()
        self.pom_timer = timer
        self.shutdown = shutdown
        self._tick_timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        with Container(id="main"):
            with Vertical(id="timer-container"):
                yield PhaseLabel(self.pom_timer, id="phase-label")
                yield Digits(clock_digits(self.pom_timer), id="clock")
                yield CycleCounter(self.pom_timer, id="cycles")
        yield Footer()

    def on_mount(self) -> None:
        self._update_phase_class()
        self._tick_timer = self.set_interval(TICK_SECONDS, self._tick)

    def _tick(self) -> None:
        """Called every second."""
        if self.shutdown.requested:
            self.exit()
            return

        self.pom_timer.tick()
        self._refresh_display()

    def _refresh_display(self) -> None:
        """Update all display elements."""
        self.query_one("#clock", Digits).update(clock_digits(self.pom_timer))
        self.query_one("#phase-label", PhaseLabel).update_display()
        self.query_one("#cycles", CycleCounter).update_display()
        self._update_phase_class()

    def _update_phase_class(self) -> None:
        """Update CSS class based on current phase."""
        container = self.query_one("#timer-container")
        container.remove_class("work", "break")
        if self.pom_timer.phase == Phase.WORK:
            container.add_class("work")
        else:
            container.add_class("break")

    async def action_quit(self) -> None:
        self.shutdown.request()
        self.exit()


def run_ui(timer: PomodoroTimer, shutdown: ShutdownFlag) -> None:
    """Run the full-screen timer until the user quits.

    Args:
        timer: The timer instance, phase callbacks included.
        shutdown: Flag that ends the app from a signal handler.
    """
    app = PomTimerApp(timer, shutdown)
    app.run()
