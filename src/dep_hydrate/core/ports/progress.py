from typing import Protocol


class ProgressReporter(Protocol):
    def start(self, label: str) -> str: ...

    def done(self, label: str) -> str: ...

    def cancel(self) -> None: ...

    def status(self, label: str) -> str: ...
