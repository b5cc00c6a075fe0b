from __future__ import annotations

import logging

from dep_hydrate.config import HydrateOptions
from dep_hydrate.core.aggregate import ResultAggregator
from dep_hydrate.core.discovery import discover_manifests
from dep_hydrate.core.executor import SequentialExecutor
from dep_hydrate.core.filter import filter_manifests
from dep_hydrate.core.jobs import build_jobs
from dep_hydrate.core.ports.inventory import InventoryProvider
from dep_hydrate.core.ports.printer import Printer
from dep_hydrate.core.ports.progress import ProgressReporter
from dep_hydrate.core.ports.shared import SharedHydrationDelegate
from dep_hydrate.models import Job, ManifestFile, RunSummary

logger = logging.getLogger(__name__)


def plan_manifests(options: HydrateOptions, inventory: InventoryProvider) -> list[ManifestFile]:
    """Discover manifests and keep the ones that belong to active components."""
    discovered = discover_manifests(options)
    manifests = filter_manifests(
        discovered,
        inventory.component_paths(),
        options.root,
        hydrates_project_root=options.hydrates_project_root,
    )
    logger.info("Discovered %d manifest(s), %d belong to active components", len(discovered), len(manifests))
    return manifests


class Hydrator:
    def __init__(
        self,
        inventory: InventoryProvider,
        reporter: ProgressReporter,
        printer: Printer,
        shared: SharedHydrationDelegate | None = None,
    ) -> None:
        self.inventory = inventory
        self.reporter = reporter
        self.printer = printer
        self.shared = shared

    def plan(self, options: HydrateOptions) -> list[Job]:
        return build_jobs(plan_manifests(options, self.inventory), options, self.shared)

    def run(self, options: HydrateOptions) -> RunSummary:
        manifests = plan_manifests(options, self.inventory)
        jobs = build_jobs(manifests, options, self.shared)
        aggregator = ResultAggregator(self.reporter, options)

        opening = aggregator.opening(len(manifests))
        results, error = SequentialExecutor(self.reporter, self.printer).run(jobs, options)
        records = aggregator.collect(opening, results, len(manifests), error)
        if error is None:
            logger.info("Hydrated %d path(s)", len(manifests))
        return RunSummary(records=records, results=results, error=error)


def hydrate(
    options: HydrateOptions,
    inventory: InventoryProvider | None = None,
    reporter: ProgressReporter | None = None,
    printer: Printer | None = None,
    shared: SharedHydrationDelegate | None = None,
) -> RunSummary:
    """Hydrate every active component below ``options.basepath`` with default adapters."""
    from dep_hydrate.adapters import CopySharedDelegate, DirectoryInventory, RichPrinter, RichProgressReporter

    inventory = inventory or DirectoryInventory(options.root)
    reporter = reporter or RichProgressReporter(quiet=options.quiet)
    printer = printer or RichPrinter(reporter, verbose=options.verbose, quiet=options.quiet)
    shared = shared or CopySharedDelegate(inventory)
    return Hydrator(inventory, reporter, printer, shared).run(options)
