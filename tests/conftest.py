"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from dep_hydrate.config import HydrateOptions

_TESTS_ROOT = Path(__file__).parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        rel = Path(str(item.fspath)).relative_to(_TESTS_ROOT)
        if rel.parts and rel.parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Test doubles for the collaborator ports
# ---------------------------------------------------------------------------


class RecordingReporter:
    """ProgressReporter that records every call and returns plain labels."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []

    def start(self, label: str) -> str:
        self.calls.append(("start", label))
        return label

    def done(self, label: str) -> str:
        self.calls.append(("done", label))
        return label

    def cancel(self) -> None:
        self.calls.append(("cancel", None))

    def status(self, label: str) -> str:
        self.calls.append(("status", label))
        return label


class FakeInventory:
    def __init__(self, *paths: str) -> None:
        self.paths = {Path(p) for p in paths}

    def component_paths(self) -> set[Path]:
        return set(self.paths)


# ---------------------------------------------------------------------------
# Project tree fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[[list[str]], Path]:
    """Create empty files (relative to tmp_path) and return the project root."""

    def _make(files: list[str]) -> Path:
        for name in files:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def options(tmp_path: Path) -> HydrateOptions:
    return HydrateOptions(project_root=tmp_path, quiet=True)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
