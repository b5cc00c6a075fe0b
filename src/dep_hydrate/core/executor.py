from __future__ import annotations

import logging
import shutil
import subprocess
import time
from collections.abc import Sequence
from pathlib import Path

from dep_hydrate.config import HydrateOptions
from dep_hydrate.core.errors import CleanupError, CommandError, DelegateError, HydrationError
from dep_hydrate.core.ports.printer import CommandOutcome, Printer
from dep_hydrate.core.ports.progress import ProgressReporter
from dep_hydrate.models import ExecOptions, ExecutionResult, InstallJob, Job, Record, SharedJob

logger = logging.getLogger(__name__)


def remove_cache_dir(directory: Path, label: str | None = None) -> None:
    """Recursively delete *directory*; a missing directory counts as already clean.

    A symlinked cache is unlinked, leaving its target untouched.
    """
    try:
        if directory.is_symlink() or (directory.exists() and not directory.is_dir()):
            directory.unlink(missing_ok=True)
        else:
            shutil.rmtree(directory)
    except FileNotFoundError:
        return
    except OSError as exc:
        raise CleanupError(f"Could not remove {directory}: {exc}", label=label) from exc


def run_command(command: str, cwd: Path, options: ExecOptions, label: str | None = None) -> tuple[str, str]:
    """Run *command* through the shell and return (stdout, stderr).

    A non-zero exit, a spawn failure, and a timeout all raise ``CommandError``.
    """
    try:
        result = subprocess.run(
            command,
            shell=True,
            executable=options.shell,
            cwd=cwd,
            env=options.env,
            timeout=options.timeout,
            check=False,
            capture_output=True,
            text=True,
        )
    except subprocess.TimeoutExpired as exc:
        raise CommandError(
            f"{command} timed out after {options.timeout}s",
            command=command,
            label=label,
            stdout=_decode(exc.stdout),
            stderr=_decode(exc.stderr),
            timed_out=True,
        ) from exc
    except OSError as exc:
        raise CommandError(f"{command} could not be started: {exc}", command=command, label=label) from exc
    if result.returncode != 0:
        raise CommandError(
            f"{command} exited with status {result.returncode}",
            command=command,
            label=label,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    return result.stdout, result.stderr


def _decode(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class SequentialExecutor:
    """Run the job queue one job at a time, stopping at the first failure."""

    def __init__(self, reporter: ProgressReporter, printer: Printer) -> None:
        self._reporter = reporter
        self._printer = printer

    def run(self, jobs: Sequence[Job], options: HydrateOptions) -> tuple[list[ExecutionResult], HydrationError | None]:
        results: list[ExecutionResult] = []
        for job in jobs:
            if isinstance(job, SharedJob):
                result, error = self._run_shared(job, options)
            else:
                result, error = self._run_install(job)
            results.append(result)
            if error is not None:
                remaining = len(jobs) - len(results)
                logger.warning("Hydration of %s failed, skipping %d remaining job(s)", job.label, remaining)
                return results, error
        return results, None

    def _run_install(self, job: InstallJob) -> tuple[ExecutionResult, HydrationError | None]:
        now = time.monotonic()
        stdout = stderr = ""
        error: HydrationError | None = None
        self._reporter.start(f"Hydrating {job.label}")
        try:
            remove_cache_dir(job.cleanup_dir, label=job.label)
            logger.debug("Running %r in %s", job.command, job.cwd)
            stdout, stderr = run_command(job.command, job.cwd, job.options, label=job.label)
        except HydrationError as exc:
            error = exc
            stdout, stderr = exc.stdout, exc.stderr
            self._reporter.cancel()

        elapsed = time.monotonic() - now
        if error is None and not stdout and not stderr:
            # Silent installers still get a visible confirmation
            self._reporter.cancel()
            stdout = f"Done in {elapsed:.3f}s"

        record = self._printer.format(
            CommandOutcome(error=error, stdout=stdout, stderr=stderr, command=job.command, done=f"Hydrated {job.label}")
        )
        result = ExecutionResult(
            job=job,
            success=error is None,
            output=record,
            command=job.command,
            stdout=stdout,
            stderr=stderr,
            elapsed=elapsed,
        )
        return result, error

    def _run_shared(self, job: SharedJob, options: HydrateOptions) -> tuple[ExecutionResult, HydrationError | None]:
        now = time.monotonic()
        try:
            output = job.delegate.hydrate_shared(options, self._reporter)
        except DelegateError as exc:
            return self._shared_failure(job, exc, now), exc
        except Exception as exc:
            error = DelegateError(
                str(exc),
                label=job.label,
                stdout=_decode(getattr(exc, "stdout", None)),
                stderr=_decode(getattr(exc, "stderr", None)),
            )
            error.__cause__ = exc
            return self._shared_failure(job, error, now), error

        records: Record | list[Record] = output if isinstance(output, Record) else list(output)
        return ExecutionResult(job=job, success=True, output=records, elapsed=time.monotonic() - now), None

    def _shared_failure(self, job: SharedJob, error: DelegateError, started: float) -> ExecutionResult:
        record = self._printer.format(
            CommandOutcome(error=error, stdout=error.stdout, stderr=error.stderr, command="", done=job.label)
        )
        return ExecutionResult(job=job, success=False, output=record, elapsed=time.monotonic() - started)
