from __future__ import annotations


class HydrationError(Exception):
    """Base class for failures that abort the hydration queue."""

    def __init__(self, message: str, *, label: str | None = None, stdout: str = "", stderr: str = "") -> None:
        super().__init__(message)
        self.label = label
        self.stdout = stdout
        self.stderr = stderr


class CleanupError(HydrationError):
    """Removing a dependency cache directory failed."""


class CommandError(HydrationError):
    """An install command exited non-zero, could not be spawned, or timed out."""

    def __init__(
        self,
        message: str,
        *,
        command: str,
        label: str | None = None,
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
        timed_out: bool = False,
    ) -> None:
        super().__init__(message, label=label, stdout=stdout, stderr=stderr)
        self.command = command
        self.returncode = returncode
        self.timed_out = timed_out


class DelegateError(HydrationError):
    """The shared/views hydration delegate failed."""
