from __future__ import annotations

import logging
import shutil
from pathlib import Path

from dep_hydrate.config import HydrateOptions
from dep_hydrate.core.errors import DelegateError
from dep_hydrate.core.paths import SHARED_DIR, VIEWS_DIR
from dep_hydrate.core.ports.inventory import InventoryProvider
from dep_hydrate.core.ports.progress import ProgressReporter
from dep_hydrate.models import Record

logger = logging.getLogger(__name__)


def copy_destination(component: Path, kind: str) -> Path:
    """Where a component receives its copy of ``src/<kind>``."""
    if (component / "package.json").exists():
        return component / "node_modules" / "@architect" / kind
    return component / "vendor" / kind


class CopySharedDelegate:
    """Copy ``src/shared`` and ``src/views`` into every registered component.

    Implements the ``SharedHydrationDelegate`` protocol.
    """

    def __init__(self, inventory: InventoryProvider) -> None:
        self._inventory = inventory

    def hydrate_shared(self, options: HydrateOptions, reporter: ProgressReporter) -> list[Record]:
        root = options.root
        components = sorted(self._inventory.component_paths())
        records: list[Record] = []
        for source_dir in (SHARED_DIR, VIEWS_DIR):
            source = root / source_dir
            if not source.is_dir():
                continue
            kind = source_dir.name
            reporter.start(f"Copying src/{kind} into {len(components)} component(s)")
            for component in components:
                target = copy_destination(root / component, kind)
                try:
                    if target.exists():
                        shutil.rmtree(target)
                    shutil.copytree(source, target)
                except OSError as exc:
                    reporter.cancel()
                    raise DelegateError(f"Could not copy {source} to {target}: {exc}", label=kind) from exc
                logger.debug("Copied %s to %s", source, target)
            records.append(Record.from_term(reporter.done(f"Hydrated app with src/{kind}")))
        return records


class NullSharedDelegate:
    def hydrate_shared(self, options: HydrateOptions, reporter: ProgressReporter) -> list[Record]:
        return []
