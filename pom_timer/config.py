"""Start-up configuration and command line parsing."""

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from .display import Display


WORK_MINUTES_DEFAULT = 25
BREAK_MINUTES_DEFAULT = 5

VERSION = "0.1.0"

HELP_FLAGS = ("-h", "--help")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ConfigError(ValueError):
    """Raised for option values the timer cannot run with."""


@dataclass(frozen=True)
class Config:
    """Process-wide settings, fixed once the timer starts."""
    work_minutes: int = WORK_MINUTES_DEFAULT
    break_minutes: int = BREAK_MINUTES_DEFAULT
    log_path: Optional[Path] = None
    notify: bool = False
    tui: bool = False

    def __post_init__(self) -> None:
        _check_minutes(self.work_minutes, "--work")
        _check_minutes(self.break_minutes, "--break")

    @property
    def logging_enabled(self) -> bool:
        return self.log_path is not None


def _check_minutes(value: int, option: str) -> None:
    if value < 1:
        raise ConfigError(f"Provided bad value {value} to {option} (must be int > 0).")


def parse_minutes(raw: str) -> int:
    """Parse the leading integer of ``raw``, 0 if there is none.

    "15" -> 15, "15min" -> 15, "abc" -> 0.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return 0
    return int(match.group(1))


class _ReportingParser(argparse.ArgumentParser):
    """Raises usage problems instead of exiting with status 2."""

    def error(self, message: str):
        raise argparse.ArgumentError(None, message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ReportingParser(
        prog="pom-timer",
        description=(
            "pom-timer is a minimalistic Pomodoro timer that you can run in a terminal.\n"
            "The default timer counts to 25 minutes in 1 second intervals, asking you\n"
            "to do work. Then, a break of 5 minutes is recommended. You can save\n"
            "statistics about how much you got done in a log file, too."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        exit_on_error=False,
        epilog=f"""
Examples:
  pom-timer                       # 25 minutes work, 5 minutes break
  pom-timer -w 50 -b 10           # longer sessions
  pom-timer -f ~/pomodoro.log     # append total time to a log on ctrl+c

Release: v{VERSION}
License: GPLv3 (https://www.gnu.org/licenses/gpl-3.0.en.html)
  This program comes with ABSOLUTELY NO WARRANTY. This is free software,
  and you are welcome to redistribute it under certain conditions.
""",
    )

    # nargs="?" lets a missing value fall through to a warning instead of an error
    parser.add_argument(
        "-w", "--work",
        nargs="?",
        const=None,
        default=str(WORK_MINUTES_DEFAULT),
        metavar="TIME",
        help=f"Work time in minutes (default: {WORK_MINUTES_DEFAULT})",
    )
    parser.add_argument(
        "-b", "--break",
        dest="break_",
        nargs="?",
        const=None,
        default=str(BREAK_MINUTES_DEFAULT),
        metavar="TIME",
        help=f"Break time in minutes (default: {BREAK_MINUTES_DEFAULT})",
    )
    parser.add_argument(
        "-f", "--log-file",
        dest="log_file",
        nargs="?",
        const=None,
        default=None,
        metavar="FILE",
        help="Path to a log file (without, no logs are saved)",
    )
    parser.add_argument(
        "--notify",
        action="store_true",
        help="Ring the bell and send a desktop notification when a phase ends",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Show a full-screen timer instead of a single status line",
    )
    return parser


def _provided_without_value(argv: Sequence[str], flags: Sequence[str]) -> bool:
    return any(arg in flags for arg in argv)


def parse_args(argv: Sequence[str], display: "Display") -> Config:
    """Build the timer configuration from command line arguments.

    Help short-circuits everything else. Unknown arguments and options
    missing their value are reported through ``display`` and skipped.

    Raises:
        ConfigError: A duration is not a positive integer.
    """
    parser = build_parser()
    argv = list(argv)

    if any(arg in HELP_FLAGS for arg in argv):
        parser.print_help(sys.stderr)
        parser.exit(0)

    args, unknown = _parse_known(parser, argv, display)

    for arg in unknown:
        display.warn(f"Provided bad option {arg}.")

    work = _minutes_option(args.work, "--work", WORK_MINUTES_DEFAULT, display)
    break_ = _minutes_option(args.break_, "--break", BREAK_MINUTES_DEFAULT, display)

    log_path = None
    if args.log_file is None:
        if _provided_without_value(argv, ("-f", "--log-file")):
            display.warn("Need value after --log-file.")
    else:
        log_path = Path(args.log_file)

    return Config(
        work_minutes=work,
        break_minutes=break_,
        log_path=log_path,
        notify=args.notify,
        tui=args.tui,
    )


def _minutes_option(raw: Optional[str], option: str, default: int, display: "Display") -> int:
    if raw is None:
        display.warn(f"Need value after {option}.")
        return default
    minutes = parse_minutes(raw)
    _check_minutes(minutes, option)
    return minutes


def _parse_known(parser: argparse.ArgumentParser, argv: Sequence[str], display: "Display"):
    """``parse_known_args`` that drops unusable arguments with a warning.

    ``--tui=1`` gives a flag a value it cannot take; it is skipped like an
    unknown option and parsing starts over without it.

    Raises:
        ConfigError: The arguments cannot be parsed even after skipping.
    """
    argv = list(argv)
    while True:
        try:
            return parser.parse_known_args(argv)
        except argparse.ArgumentError as exc:
            index = _offending_index(argv, exc.argument_name)
            if index is None:
                raise ConfigError(str(exc)) from exc
            display.warn(f"Provided bad option {argv.pop(index)}.")


def _offending_index(argv: Sequence[str], argument_name: Optional[str]) -> Optional[int]:
    if not argument_name:
        return None
    names = argument_name.split("/")
    for index, arg in enumerate(argv):
        if "=" in arg and arg.split("=", 1)[0] in names:
            return index
    return None
