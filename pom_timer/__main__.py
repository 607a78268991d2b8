"""Entry point for python -m pom_timer."""

import sys
from typing import Optional, Sequence

from .config import ConfigError, parse_args
from .display import Display
from .notifications import notify_phase_change
from .runner import ShutdownFlag, run, shutdown_session
from .terminal import suppress_echoctl
from .timer import PomodoroTimer
from .ui import run_ui


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    display = Display()
    try:
        config = parse_args(argv, display)
    except ConfigError as exc:
        display.error(str(exc))
        return 1

    timer = PomodoroTimer(
        config,
        on_phase_complete=notify_phase_change if config.notify else None,
    )
    shutdown = ShutdownFlag()

    with shutdown.installed(), suppress_echoctl():
        if config.tui:
            run_ui(timer, shutdown)
        else:
            display.info(config)
            run(timer, display, shutdown)

        # still installed: another ctrl+c only re-sets the flag
        return shutdown_session(config, timer, display)


if __name__ == "__main__":
    sys.exit(main())
