"""viz-interactivity: selection state shared by a visual, its legend and its labels."""

from ._version import __version__
from .core import (
    Identity,
    SelectionId,
    SelectableDataPoint,
    data_has_selection,
    points_from_frame,
    points_from_measures,
    selection_mask,
    selection_frame,
)
from .interactivity import (
    InteractiveBehavior,
    SelectionHandler,
    InteractivityServiceOptions,
    InteractivityService,
    create_interactivity_service,
)
from .host import SelectionManager, HostSelectionManager, VisualHost
from .filter import FilterManager, serialize_filter, deserialize_filter

__all__ = [
    "__version__",
    "Identity",
    "SelectionId",
    "SelectableDataPoint",
    "data_has_selection",
    "points_from_frame",
    "points_from_measures",
    "selection_mask",
    "selection_frame",
    "InteractiveBehavior",
    "SelectionHandler",
    "InteractivityServiceOptions",
    "InteractivityService",
    "create_interactivity_service",
    "SelectionManager",
    "HostSelectionManager",
    "VisualHost",
    "FilterManager",
    "serialize_filter",
    "deserialize_filter",
]
