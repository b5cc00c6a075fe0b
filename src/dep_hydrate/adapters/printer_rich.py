from __future__ import annotations

from rich.console import Console
from rich.text import Text

from dep_hydrate.adapters.console import indent, to_ansi
from dep_hydrate.core.ports.printer import CommandOutcome
from dep_hydrate.core.ports.progress import ProgressReporter
from dep_hydrate.models import Record


class RichPrinter:
    """Format command outcomes as records, echoing details to the console.

    Implements the ``Printer`` protocol.
    """

    def __init__(
        self,
        reporter: ProgressReporter,
        verbose: bool = False,
        quiet: bool = False,
        console: Console | None = None,
    ) -> None:
        self._reporter = reporter
        self._verbose = verbose
        self._quiet = quiet
        self._console = console or Console(stderr=True)

    def _details(self, outcome: CommandOutcome) -> list[Text]:
        details: list[Text] = []
        if outcome.command:
            details.append(Text(f"  $ {outcome.command}", style="bold dim"))
        for stream in (outcome.stdout, outcome.stderr):
            if stream.strip():
                details.append(indent(stream))
        return details

    def format(self, outcome: CommandOutcome) -> Record:
        if outcome.error is None:
            lines = [self._reporter.done(outcome.done)]
            if self._verbose:
                details = self._details(outcome)
                self._print(details)
                lines.extend(to_ansi(d) for d in details)
            return Record.from_term("\n".join(lines))

        failure = [Text(f"✗ {outcome.error}", style="bold red"), *self._details(outcome)]
        self._print(failure)
        return Record.from_term("\n".join(to_ansi(t) for t in failure))

    def _print(self, lines: list[Text]) -> None:
        if self._quiet:
            return
        for line in lines:
            self._console.print(line)
