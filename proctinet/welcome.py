"""Welcome banner and the loading spinner shown while connecting."""

from __future__ import annotations

from rich import box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.status import Status

CLEAR_SCREEN = "\033[H\033[2J"

WELCOME_TEXT = (
    "🎉 Welcome to ProctiNet! 🚀\nYour cutting-edge Anti-Botnet Solution.\n\n"
    "Please login to secure your experience 🔒"
)

FEATURES_TEXT = (
    "Main Features:\n"
    "1. Real-time Monitoring: Instantly track network threats as they occur.\n"
    "2. Live Dashboard Preview: View a dynamic and interactive display of all logged threats.\n"
    "3. Automated Botnet Protection: Proactively detect and defend against botnet activities."
)


class Loader:
    """A spinner that runs in the background until stopped."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self._status: Status | None = None

    @property
    def running(self) -> bool:
        return self._status is not None

    def start(self) -> None:
        """Start the spinner unless it is already running."""
        if self._status is not None:
            return
        self._status = self.console.status(
            "Loading ...", spinner="dots", spinner_style="color(205)"
        )
        self._status.start()

    def stop(self) -> None:
        """Stop the spinner, if running, and clear the terminal."""
        if self._status is not None:
            self._status.stop()
            self._status = None
        self.console.file.write(CLEAR_SCREEN)
        self.console.file.flush()


def render_welcome(console: Console | None = None) -> Loader:
    """Print the feature list and welcome box, then start and return a loader."""
    console = console or Console()
    info_box = Panel(
        FEATURES_TEXT,
        width=72,
        box=box.ROUNDED,
        style="color(82)",
        border_style="color(82)",
    )
    welcome_box = Panel(
        Align.center(WELCOME_TEXT),
        width=52,
        height=7,
        box=box.SQUARE,
        border_style="color(205)",
    )
    console.print(info_box)
    console.print(welcome_box)
    loader = Loader(console)
    loader.start()
    return loader