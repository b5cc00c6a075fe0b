"""Hydration commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from dep_hydrate.adapters import (
    CopySharedDelegate,
    DirectoryInventory,
    RichPrinter,
    RichProgressReporter,
    StaticInventory,
)
from dep_hydrate.config import HydrateOptions, options_from_env
from dep_hydrate.core.hydrate import Hydrator
from dep_hydrate.core.ports.inventory import InventoryProvider
from dep_hydrate.models import InstallJob, RunSummary

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_options(**values: object) -> HydrateOptions:
    try:
        return options_from_env(**values)
    except ValidationError as exc:
        console.print(f"[red]Invalid options:[/red] {escape(str(exc))}")
        raise typer.Exit(2) from exc


def _inventory(options: HydrateOptions, components: list[str] | None) -> InventoryProvider:
    if components:
        return StaticInventory(components, root=options.root)
    return DirectoryInventory(options.root)


def _write_log(log_file: Path, summary: RunSummary) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    with log_file.open("a", encoding="utf-8") as handle:
        for record in summary.records:
            handle.write(record.raw.stdout.rstrip() + "\n")


BasepathOption = Annotated[str | None, typer.Option(help="Directory to scan for manifests (default: src).")]
ProjectRootOption = Annotated[Path | None, typer.Option(help="Project root (default: current directory).")]
ComponentOption = Annotated[
    list[str] | None,
    typer.Option("--component", "-c", help="Component root to hydrate; repeat to add more."),
]
HydrateSharedOption = Annotated[
    bool, typer.Option("--hydrate-shared/--no-hydrate-shared", help="Include src/shared and src/views manifests.")
]


def run(
    basepath: BasepathOption = None,
    project_root: ProjectRootOption = None,
    component: ComponentOption = None,
    timeout: Annotated[float | None, typer.Option(help="Per-command timeout in seconds.")] = None,
    shell: Annotated[str | None, typer.Option(help="Shell used to run install commands.")] = None,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Suppress progress output.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show command output.")] = False,
    copy_shared: Annotated[
        bool, typer.Option("--copy-shared/--no-copy-shared", help="Copy src/shared and src/views into components.")
    ] = True,
    hydrate_shared: HydrateSharedOption = True,
    log_file: Annotated[Path | None, typer.Option(help="Append plain-text output to this file.")] = None,
) -> None:
    """Clean and reinstall dependencies for every active component."""
    _configure_logging(verbose)
    options = _build_options(
        basepath=basepath,
        project_root=project_root,
        timeout=timeout,
        shell=shell,
        quiet=quiet,
        verbose=verbose,
        copy_shared=copy_shared,
        hydrate_shared=hydrate_shared,
    )
    inventory = _inventory(options, component)
    reporter = RichProgressReporter(quiet=quiet)
    printer = RichPrinter(reporter, verbose=verbose, quiet=quiet)
    summary = Hydrator(inventory, reporter, printer, CopySharedDelegate(inventory)).run(options)

    if log_file is not None:
        _write_log(log_file, summary)
    if summary.error is not None:
        console.print(f"[red]Hydration failed:[/red] {escape(str(summary.error))}")
        raise typer.Exit(1)


def plan(
    basepath: BasepathOption = None,
    project_root: ProjectRootOption = None,
    component: ComponentOption = None,
    hydrate_shared: HydrateSharedOption = True,
) -> None:
    """List the install jobs a run would execute, without running them."""
    options = _build_options(basepath=basepath, project_root=project_root, hydrate_shared=hydrate_shared)
    inventory = _inventory(options, component)
    reporter = RichProgressReporter(quiet=True)
    hydrator = Hydrator(inventory, reporter, RichPrinter(reporter, quiet=True))
    jobs = [job for job in hydrator.plan(options) if isinstance(job, InstallJob)]

    table = Table(show_lines=False)
    for header in ("path", "runtime", "command", "cleans"):
        table.add_column(header)
    for job in jobs:
        table.add_row(job.label, job.runtime.value, job.command, str(Path(*job.runtime.cache_parts)))
    console.print(table)
    console.print(f"({len(jobs)} jobs)")
