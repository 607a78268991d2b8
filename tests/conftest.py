import io

import pytest
from rich.console import Console

from pom_timer.display import Display


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def display(output):
    """Display writing plain text into ``output``."""
    console = Console(file=output, color_system=None, force_terminal=False, highlight=False, width=200)
    return Display(console)
