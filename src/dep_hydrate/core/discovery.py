from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from dep_hydrate.config import HydrateOptions
from dep_hydrate.core.paths import SHARED_DIR, VIEWS_DIR, is_shared_path, normalize_path
from dep_hydrate.models import MANIFEST_NAMES, MANIFEST_RUNTIMES, ManifestFile

logger = logging.getLogger(__name__)

# Directory names that hold installed dependencies, never manifests of our own
_CACHE_DIRS: frozenset[str] = frozenset({"node_modules", "vendor"})


def _walk_manifests(base: Path) -> Iterator[Path]:
    if not base.is_dir():
        return
    for dirpath, dirnames, filenames in os.walk(base):
        dirnames[:] = sorted(d for d in dirnames if d not in _CACHE_DIRS)
        for name in sorted(filenames):
            if name in MANIFEST_NAMES:
                yield Path(dirpath) / name


def _to_manifest(path: Path, root: Path) -> ManifestFile:
    return ManifestFile(path=normalize_path(path, root), runtime=MANIFEST_RUNTIMES[path.name])


def discover_manifests(options: HydrateOptions) -> list[ManifestFile]:
    """Find dependency manifests below the scan root, then (optionally) in shared and views.

    Results are relative to the project root. The shared pass is skipped when
    ``hydrate_shared`` is off, e.g. when a single component is hydrated in isolation.
    """
    root = options.root
    files = [
        manifest
        for manifest in (_to_manifest(path, root) for path in _walk_manifests(options.scan_root))
        if not is_shared_path(manifest.path)
    ]
    logger.debug("Found %d manifest(s) below %s", len(files), options.scan_root)

    if options.hydrate_shared:
        shared_files = [
            _to_manifest(path, root) for subtree in (SHARED_DIR, VIEWS_DIR) for path in _walk_manifests(root / subtree)
        ]
        logger.debug("Found %d shared/views manifest(s)", len(shared_files))
        files.extend(shared_files)

    return files
