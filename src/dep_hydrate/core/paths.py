import os
from pathlib import Path

SHARED_DIR = Path("src", "shared")
VIEWS_DIR = Path("src", "views")


def normalize_path(path: str | Path, root: Path) -> Path:
    """Return *path* with platform separators, relative to *root* when it lies below it."""
    candidate = Path(os.path.normpath(path))
    if not candidate.is_absolute():
        return candidate
    try:
        return candidate.relative_to(root)
    except ValueError:
        return candidate


def is_within(path: Path, prefix: Path) -> bool:
    return path.parts[: len(prefix.parts)] == prefix.parts


def is_shared_path(path: Path) -> bool:
    return is_within(path, SHARED_DIR) or is_within(path, VIEWS_DIR)
