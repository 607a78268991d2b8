"""Terminal setup: keep ctrl+c from echoing ^C over the status line."""

import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

try:
    import termios
except ImportError:  # Windows
    termios = None


@contextmanager
def suppress_echoctl(stream: Optional[TextIO] = None) -> Iterator[bool]:
    """Clear ECHOCTL on ``stream`` for the duration of the block.

    Yields True if the terminal was changed. Does nothing when the stream
    is not a TTY or the platform has no ECHOCTL.
    """
    if stream is None:
        stream = sys.stdin
    if termios is None or not hasattr(termios, "ECHOCTL") or not stream.isatty():
        yield False
        return

    fd = stream.fileno()
    try:
        old_settings = termios.tcgetattr(fd)
    except termios.error:
        yield False
        return

    new_settings = list(old_settings)
    new_settings[3] = new_settings[3] & ~termios.ECHOCTL  # lflag
    termios.tcsetattr(fd, termios.TCSANOW, new_settings)
    try:
        yield True
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
