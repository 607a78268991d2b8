"""Phase-change notifications: terminal bell plus a native popup."""

import platform
import subprocess
import sys
from typing import List

from .timer import Phase


MESSAGES = {
    Phase.WORK: ("Pomodoro Complete!", "Time for a break."),
    Phase.BREAK: ("Break Over", "Back to work."),
}


def _send_bell() -> None:
    """Send terminal bell."""
    sys.stderr.write("\a")
    sys.stderr.flush()


def _start_quietly(command: List[str]) -> bool:
    """Start a notifier command without waiting for it.

    The timer keeps ticking while the notifier runs; its output is discarded.

    Returns:
        True if the command started, False if it is missing or failed to start.
    """
    try:
        subprocess.Popen(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        return True
    except (subprocess.SubprocessError, OSError):
        return False


def _native_command(title: str, message: str) -> List[str]:
    system = platform.system()
    if system == "Darwin":
        script = f'display notification "{message}" with title "{title}"'
        return ["osascript", "-e", script]
    if system == "Linux":
        return ["notify-send", title, message]
    return []


def notify_phase_change(old_phase: Phase, new_phase: Phase) -> bool:
    """Announce that ``old_phase`` ended.

    Always rings the bell; native notifications are best effort and
    platforms without one get the bell only.

    Returns:
        True if a native notification was sent.
    """
    title, message = MESSAGES[old_phase]
    _send_bell()

    command = _native_command(title, message)
    if not command:
        return False
    return _start_quietly(command)
