from pathlib import Path
from typing import Protocol


class InventoryProvider(Protocol):
    def component_paths(self) -> set[Path]: ...
