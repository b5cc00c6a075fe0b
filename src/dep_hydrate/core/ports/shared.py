from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from dep_hydrate.models import Record

if TYPE_CHECKING:
    from dep_hydrate.config import HydrateOptions
    from dep_hydrate.core.ports.progress import ProgressReporter


class SharedHydrationDelegate(Protocol):
    def hydrate_shared(self, options: HydrateOptions, reporter: ProgressReporter) -> Record | Sequence[Record]: ...
