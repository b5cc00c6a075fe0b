from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from dep_hydrate.core.errors import HydrationError
from dep_hydrate.models import Record


@dataclass(frozen=True)
class CommandOutcome:
    error: HydrationError | None
    stdout: str
    stderr: str
    command: str
    done: str


class Printer(Protocol):
    def format(self, outcome: CommandOutcome) -> Record: ...
