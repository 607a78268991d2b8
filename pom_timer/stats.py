"""Cumulative time log appended on shutdown."""

from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import Config
from .timer import TimerState


def elapsed_seconds(config: Config, state: TimerState) -> int:
    """Total seconds of completed cycles plus what is on the clock."""
    completed_work = state.completed_work_cycles * config.work_minutes * 60
    completed_break = state.completed_break_cycles * config.break_minutes * 60
    return completed_work + completed_break + state.elapsed_in_phase


def format_record(total_seconds: int, now: datetime) -> str:
    """Format one log line.

    Hours, minutes and seconds are each the full total in that unit, so
    3510 seconds is logged as 0hrs, 58mins and 3510secs.
    """
    stamp = f"{now.year}/{now.month:02d}/{now.day:02d} {now.hour:2d}h:{now.minute:2d}m"
    return (
        f"[{stamp}]\t{total_seconds // 3600}hrs"
        f"\t{total_seconds // 60}mins ({total_seconds}secs)\n"
    )


def save_stats(
    path: Path,
    config: Config,
    state: TimerState,
    now: Optional[datetime] = None,
) -> bool:
    """Append the elapsed time to the log at ``path``.

    Returns:
        True if the record was written, False if the file could not be
        opened or written.
    """
    if now is None:
        now = datetime.now()
    record = format_record(elapsed_seconds(config, state), now)
    try:
        with Path(path).open("a", encoding="utf-8") as log:
            log.write(record)
        return True
    except OSError:
        return False
