"""Tick loop and interrupt-driven shutdown."""

import os
import select
import signal
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from .config import Config
from .display import Display
from .stats import save_stats
from .timer import PomodoroTimer

TICK_SECONDS = 1.0


class ShutdownFlag:
    """Records an interrupt so the loop can stop at the next tick.

    The signal handler only assigns an attribute and takes no locks, since
    it runs on the main thread in between whatever that thread was doing.
    While installed, the interpreter also writes each signal to a wakeup
    pipe, which cuts the tick sleep short. Saving stats and printing happen
    on the normal path once the loop sees the flag.
    """

    def __init__(self) -> None:
        self._requested = False
        self._wakeup: Optional[int] = None

    @property
    def requested(self) -> bool:
        return self._requested

    def request(self, signum=None, frame=None) -> None:
        self._requested = True

    def wait(self, seconds: float) -> None:
        """Sleep for one tick, returning early if shutdown is requested."""
        if self._requested:
            return
        if self._wakeup is None:
            time.sleep(seconds)
            return
        # other signals also write to the pipe; keep sleeping through them
        deadline = time.monotonic() + seconds
        while not self._requested:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            readable, _, _ = select.select([self._wakeup], [], [], remaining)
            if readable:
                self._drain()

    def _drain(self) -> None:
        try:
            while os.read(self._wakeup, 512):
                pass
        except BlockingIOError:
            pass

    @contextmanager
    def installed(self, signum: int = signal.SIGINT) -> Iterator["ShutdownFlag"]:
        """Route ``signum`` to this flag while the block runs."""
        read_fd, write_fd = os.pipe()
        os.set_blocking(read_fd, False)
        os.set_blocking(write_fd, False)

        previous = signal.getsignal(signum)
        previous_wakeup = signal.set_wakeup_fd(write_fd, warn_on_full_buffer=False)
        signal.signal(signum, self.request)
        self._wakeup = read_fd
        try:
            yield self
        finally:
            signal.signal(signum, previous)
            signal.set_wakeup_fd(previous_wakeup)
            self._wakeup = None
            os.close(read_fd)
            os.close(write_fd)


def run_phase(
    timer: PomodoroTimer,
    display: Display,
    shutdown: ShutdownFlag,
    sleep: Callable[[float], None],
) -> bool:
    """Drive the current phase until it completes.

    Each tick renders the status line, sleeps and advances the clock.
    Shutdown is checked after the sleep, so an interrupt never lets
    another tick through.

    Returns:
        True if the phase completed, False if shutdown was requested.
    """
    while not shutdown.requested:
        display.status(timer)
        sleep(TICK_SECONDS)
        if shutdown.requested:
            break
        if timer.tick():
            display.clear_line()
            return True
    return False


def run(
    timer: PomodoroTimer,
    display: Display,
    shutdown: ShutdownFlag,
    sleep: Optional[Callable[[float], None]] = None,
) -> None:
    """Alternate work and break phases until shutdown is requested."""
    if sleep is None:
        sleep = shutdown.wait
    while run_phase(timer, display, shutdown, sleep):
        pass


def shutdown_session(config: Config, timer: PomodoroTimer, display: Display) -> int:
    """Persist the session, say goodbye and return the exit status."""
    if config.log_path is not None:
        if not save_stats(config.log_path, config, timer.state):
            display.clear_line()
            display.warn(f"Could not write stats to {config.log_path}.")
    display.farewell()
    return 0
