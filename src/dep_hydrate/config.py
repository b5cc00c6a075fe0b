"""Hydration options and their environment-variable defaults."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dep_hydrate.models import ExecOptions

DEFAULT_BASEPATH = "src"


class HydrateOptions(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    basepath: str = DEFAULT_BASEPATH
    project_root: Path = Field(default_factory=Path.cwd)
    env: dict[str, str] | None = None
    shell: str | None = None
    timeout: float | None = Field(default=None, gt=0)
    quiet: bool = False
    verbose: bool = False
    copy_shared: bool = True
    hydrate_shared: bool = True

    @property
    def root(self) -> Path:
        return self.project_root.resolve()

    @property
    def scan_root(self) -> Path:
        base = Path(self.basepath)
        return base.resolve() if base.is_absolute() else (self.root / base).resolve()

    @property
    def hydrates_project_root(self) -> bool:
        return self.scan_root == self.root

    @property
    def exec_options(self) -> ExecOptions:
        return ExecOptions(env=self.env, shell=self.shell, timeout=self.timeout)


def options_from_env(**overrides: object) -> HydrateOptions:
    """Build options from HYDRATE_* variables, with explicit keyword overrides on top."""
    values: dict[str, object] = {}
    basepath = os.getenv("HYDRATE_BASEPATH")
    if basepath:
        values["basepath"] = basepath
    timeout = os.getenv("HYDRATE_TIMEOUT")
    if timeout:
        values["timeout"] = timeout
    shell = os.getenv("HYDRATE_SHELL")
    if shell:
        values["shell"] = shell
    values.update({key: value for key, value in overrides.items() if value is not None})
    return HydrateOptions.model_validate(values)
