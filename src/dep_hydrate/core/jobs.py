from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from dep_hydrate.config import HydrateOptions
from dep_hydrate.core.ports.shared import SharedHydrationDelegate
from dep_hydrate.models import InstallJob, Job, ManifestFile, Runtime, SharedJob

NPM_CI = "npm ci"
YARN = "yarn"
NPM_INSTALL = "npm i"
PIP_INSTALL = "pip3 install -r requirements.txt -t ./vendor"
BUNDLE_INSTALL = "bundle install --path vendor/bundle"


def resolve_command(runtime: Runtime, cwd: Path) -> str:
    if runtime is Runtime.JS:
        if (cwd / "package-lock.json").exists():
            return NPM_CI
        if (cwd / "yarn.lock").exists():
            return YARN
        return NPM_INSTALL
    if runtime is Runtime.PYTHON:
        return PIP_INSTALL
    return BUNDLE_INSTALL


def build_jobs(
    manifests: Sequence[ManifestFile],
    options: HydrateOptions,
    shared: SharedHydrationDelegate | None = None,
) -> list[Job]:
    root = options.root
    exec_options = options.exec_options
    jobs: list[Job] = []
    for manifest in manifests:
        cwd = root / manifest.cwd
        jobs.append(
            InstallJob(
                manifest=manifest,
                cwd=cwd,
                cleanup_dir=cwd.joinpath(*manifest.runtime.cache_parts),
                command=resolve_command(manifest.runtime, cwd),
                options=exec_options,
            )
        )
    if options.copy_shared and shared is not None:
        jobs.append(SharedJob(delegate=shared))
    return jobs
