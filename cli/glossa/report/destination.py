import pathlib
from typing import Optional, Protocol

from rich.console import Console


class Destination(Protocol):
    def write(self, text: str) -> None: ...


class ConsoleDestination:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def write(self, text: str) -> None:
        # descriptions are printed verbatim, brackets included
        end = "" if not text or text.endswith("\n") else "\n"
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True, end=end)


class FileDestination:
    """Writes to a file, replacing its content on the first write."""

    def __init__(self, path):
        self.path = pathlib.Path(path)
        self._started = False

    def write(self, text: str) -> None:
        mode = "a" if self._started else "w"
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, mode, encoding="utf-8") as f:
            f.write(text if not text or text.endswith("\n") else text + "\n")
        self._started = True
