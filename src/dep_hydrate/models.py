from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel
from rich.text import Text

if TYPE_CHECKING:
    from dep_hydrate.core.errors import HydrationError
    from dep_hydrate.core.ports.shared import SharedHydrationDelegate


def strip_ansi(text: str) -> str:
    return Text.from_ansi(text).plain


class Output(BaseModel):
    stdout: str


class Record(BaseModel):
    """One displayable line (or block) of hydration output."""

    raw: Output
    term: Output

    @classmethod
    def from_term(cls, text: str) -> Record:
        return cls(raw=Output(stdout=strip_ansi(text)), term=Output(stdout=text))


class Runtime(str, Enum):
    JS = "js"
    PYTHON = "python"
    RUBY = "ruby"

    @property
    def manifest_name(self) -> str:
        return _MANIFEST_NAMES[self]

    @property
    def cache_parts(self) -> tuple[str, ...]:
        return _CACHE_PARTS[self]

    @classmethod
    def from_filename(cls, name: str) -> Runtime | None:
        return MANIFEST_RUNTIMES.get(name)


_MANIFEST_NAMES = {
    Runtime.JS: "package.json",
    Runtime.PYTHON: "requirements.txt",
    Runtime.RUBY: "Gemfile",
}

_CACHE_PARTS = {
    Runtime.JS: ("node_modules",),
    Runtime.PYTHON: ("vendor",),
    Runtime.RUBY: ("vendor", "bundle"),
}

MANIFEST_RUNTIMES: dict[str, Runtime] = {name: runtime for runtime, name in _MANIFEST_NAMES.items()}
MANIFEST_NAMES: frozenset[str] = frozenset(MANIFEST_RUNTIMES)


@dataclass(frozen=True)
class ManifestFile:
    path: Path
    runtime: Runtime

    @property
    def cwd(self) -> Path:
        return self.path.parent


@dataclass(frozen=True)
class ExecOptions:
    env: dict[str, str] | None = None
    shell: str | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class InstallJob:
    """Clean then install the dependencies declared by one manifest."""

    manifest: ManifestFile
    cwd: Path
    cleanup_dir: Path
    command: str
    options: ExecOptions = field(default_factory=ExecOptions)

    @property
    def runtime(self) -> Runtime:
        return self.manifest.runtime

    @property
    def label(self) -> str:
        relative = self.manifest.cwd
        return "project root" if str(relative) == "." else str(relative)


@dataclass(frozen=True)
class SharedJob:
    """Hand off to the shared/views hydration delegate."""

    delegate: SharedHydrationDelegate
    label: str = "shared"


Job = InstallJob | SharedJob


@dataclass(frozen=True)
class ExecutionResult:
    job: Job
    success: bool
    output: Record | list[Record]
    command: str | None = None
    stdout: str = ""
    stderr: str = ""
    elapsed: float = 0.0

    @property
    def label(self) -> str:
        return self.job.label


@dataclass
class RunSummary:
    records: list[Record]
    results: list[ExecutionResult] = field(default_factory=list)
    error: HydrationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dicts(self) -> list[dict[str, dict[str, str]]]:
        return [record.model_dump() for record in self.records]
