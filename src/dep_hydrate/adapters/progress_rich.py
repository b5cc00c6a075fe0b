from __future__ import annotations

from rich.console import Console
from rich.status import Status
from rich.text import Text

from dep_hydrate.adapters.console import to_ansi


class RichProgressReporter:
    """Spinner and status lines on a rich console.

    Implements the ``ProgressReporter`` protocol. Every method returns the
    ANSI-formatted line even when ``quiet`` suppresses printing.
    """

    def __init__(self, name: str = "Hydrate", quiet: bool = False, console: Console | None = None) -> None:
        self._name = name
        self._quiet = quiet
        self._console = console or Console(stderr=True)
        self._status: Status | None = None

    def _line(self, label: str, marker: str | None = None, style: str = "green") -> Text:
        text = Text()
        if marker:
            text.append(f"{marker} ", style=style)
        text.append(self._name, style="bold")
        text.append(f" {label}")
        return text

    def _emit(self, text: Text) -> str:
        if not self._quiet:
            self._console.print(text)
        return to_ansi(text)

    def start(self, label: str) -> str:
        self.cancel()
        text = self._line(label)
        if not self._quiet:
            self._status = self._console.status(text)
            self._status.start()
        return to_ansi(text)

    def done(self, label: str) -> str:
        self.cancel()
        return self._emit(self._line(label, marker="✓"))

    def cancel(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def status(self, label: str) -> str:
        return self._emit(self._line(label, marker="•", style="cyan"))
