from dep_hydrate.adapters.inventory_fs import DEFAULT_GROUPS, DirectoryInventory, StaticInventory
from dep_hydrate.adapters.printer_rich import RichPrinter
from dep_hydrate.adapters.progress_rich import RichProgressReporter
from dep_hydrate.adapters.shared_copy import CopySharedDelegate, NullSharedDelegate, copy_destination

__all__ = [
    "DEFAULT_GROUPS",
    "CopySharedDelegate",
    "DirectoryInventory",
    "NullSharedDelegate",
    "RichPrinter",
    "RichProgressReporter",
    "StaticInventory",
    "copy_destination",
]
