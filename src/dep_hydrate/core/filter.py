from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from dep_hydrate.core.paths import is_shared_path, normalize_path
from dep_hydrate.models import ManifestFile

logger = logging.getLogger(__name__)


def filter_manifests(
    files: Sequence[ManifestFile],
    component_paths: Iterable[Path],
    root: Path,
    hydrates_project_root: bool = False,
) -> list[ManifestFile]:
    """Keep manifests of active components, shared/views code, and (optionally) the project root.

    Anything else belongs to a disabled or unregistered component and is dropped.
    """
    components = {normalize_path(p, root) for p in component_paths}
    kept: list[ManifestFile] = []
    for manifest in files:
        if hydrates_project_root and manifest.cwd == Path("."):
            kept.append(manifest)
        elif is_shared_path(manifest.path) or manifest.cwd in components:
            kept.append(manifest)
        else:
            logger.debug("Skipping %s: not an active component", manifest.path)
    return kept
