"""Host selection bridge."""

from .selection_manager import SelectionManager, HostSelectionManager, VisualHost

__all__ = [
    "SelectionManager",
    "HostSelectionManager",
    "VisualHost",
]
