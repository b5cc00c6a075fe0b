from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from dep_hydrate.core.paths import normalize_path

logger = logging.getLogger(__name__)

DEFAULT_GROUPS: tuple[str, ...] = ("http", "events", "queues", "scheduled", "tables", "ws", "macros")


class StaticInventory:
    """A fixed set of component roots, relative to the project root."""

    def __init__(self, paths: Iterable[str | Path], root: Path | None = None) -> None:
        base = (root or Path.cwd()).resolve()
        self._paths = {normalize_path(p, base) for p in paths}

    def component_paths(self) -> set[Path]:
        return set(self._paths)


class DirectoryInventory:
    """Treat each directory directly under ``src/<group>`` as a registered component."""

    def __init__(self, project_root: Path, groups: Iterable[str] = DEFAULT_GROUPS) -> None:
        self._root = project_root.resolve()
        self._groups = tuple(groups)

    def component_paths(self) -> set[Path]:
        paths: set[Path] = set()
        for group in self._groups:
            group_dir = self._root / "src" / group
            if not group_dir.is_dir():
                continue
            for child in group_dir.iterdir():
                if child.is_dir():
                    paths.add(normalize_path(child, self._root))
        logger.debug("Inventory lists %d component(s)", len(paths))
        return paths
