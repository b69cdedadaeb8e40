"""Selection keys and selectable items."""

from .identity import Identity, SelectionId
from .selectable import SelectableDataPoint, data_has_selection
from .frame import (
    points_from_frame,
    points_from_measures,
    selection_mask,
    selection_frame,
)

__all__ = [
    "Identity",
    "SelectionId",
    "SelectableDataPoint",
    "data_has_selection",
    "points_from_frame",
    "points_from_measures",
    "selection_mask",
    "selection_frame",
]
