from __future__ import annotations

import os
from collections.abc import Sequence

from dep_hydrate.config import HydrateOptions
from dep_hydrate.core.errors import HydrationError
from dep_hydrate.core.ports.progress import ProgressReporter
from dep_hydrate.models import ExecutionResult, Record


def pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"


def flatten(results: Sequence[ExecutionResult]) -> list[Record]:
    records: list[Record] = []
    for result in results:
        if isinstance(result.output, Record):
            records.append(result.output)
        else:
            records.extend(result.output)
    return records


class ResultAggregator:
    """Turn executor output into the ordered record list handed back to callers."""

    def __init__(self, reporter: ProgressReporter, options: HydrateOptions) -> None:
        self._reporter = reporter
        self._options = options

    def opening(self, count: int) -> Record | None:
        if count > 0:
            return Record.from_term(self._reporter.status(f"Hydrating dependencies in {pluralize(count, 'path')}"))
        if self._options.verbose:
            pattern = f"{self._options.basepath}{os.sep}**"
            return Record.from_term(self._reporter.status(f"No dependencies found in: {pattern}"))
        return None

    def closing(self, count: int) -> Record | None:
        if count > 0:
            return Record.from_term(
                self._reporter.done(f"Successfully hydrated dependencies in {pluralize(count, 'path')}")
            )
        if not self._options.quiet:
            return Record.from_term(self._reporter.done("Finished checks, nothing to hydrate"))
        return None

    def collect(
        self,
        opening: Record | None,
        results: Sequence[ExecutionResult],
        count: int,
        error: HydrationError | None = None,
    ) -> list[Record]:
        records = flatten(results)
        if opening is not None:
            records.insert(0, opening)
        if error is not None:
            return records
        closing = self.closing(count)
        if closing is not None:
            records.append(closing)
        return records
