"""Line-mode terminal output, written to stderr with rich."""

from typing import Optional

from rich.console import Console
from rich.control import Control, ControlType
from rich.text import Text

from .config import Config
from .timer import PomodoroTimer, Phase, TimerState


def plural(count: int) -> str:
    return "" if count == 1 else "s"


def clock_text(state: TimerState) -> Text:
    """Elapsed time as ``MMm:SSs`` with both fields space-padded."""
    return Text(f"{state.minutes:2d}m:{state.seconds:2d}s", style="green")


class Display:
    """Everything the timer shows on the terminal.

    The status line is redrawn in place once per tick; all other output is
    plain lines.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True, highlight=False)

    def warn(self, message: str) -> None:
        self.console.print(Text.assemble(("warning", "yellow"), f": {message}"))

    def error(self, message: str) -> None:
        self.console.print(Text.assemble(("error", "red"), f": {message}"))

    def info(self, config: Config) -> None:
        """Print the start-up summary."""
        self.console.print(
            Text.assemble(
                "Work time: ",
                (f"{config.work_minutes}min{plural(config.work_minutes)}", "green"),
                ", Break time: ",
                (f"{config.break_minutes}min{plural(config.break_minutes)}", "red"),
                ".",
            )
        )
        if config.log_path is not None:
            self.console.print(
                Text.assemble("Saving logs to `", (str(config.log_path), "blue"), "'.")
            )
        else:
            self.console.print(Text.assemble(("Not", "blue"), " saving logs."))
        self.console.print(Text.assemble("Exit with ", ("ctrl+c", "red"), ".\n"))

    def status(self, timer: PomodoroTimer) -> None:
        """Redraw the status line for the current tick."""
        state = timer.state
        if timer.phase == Phase.WORK:
            done = state.completed_work_cycles
            line = Text.assemble(
                f"{timer.phase_label} [",
                clock_text(state),
                ", done ",
                (str(done), "yellow"),
                f" time{plural(done)}]",
            )
        else:
            line = Text.assemble(f"{timer.phase_label} [", clock_text(state), "]")
        self.console.print(line, end="", soft_wrap=True)
        self.console.control(Control.move_to_column(0))

    def clear_line(self) -> None:
        self.console.control(
            Control((ControlType.ERASE_IN_LINE, 2)),
            Control.move_to_column(0),
        )

    def farewell(self) -> None:
        self.console.print()
        self.console.print()
        self.console.print(Text.assemble(("Done", "green"), "."))
