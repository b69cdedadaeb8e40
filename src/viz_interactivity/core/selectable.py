"""SelectableDataPoint: a displayable item whose selected flag the service owns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .identity import Identity


@dataclass
class SelectableDataPoint:
    """An item bound to the interactivity service.

    ``selected`` is written by the service on every sync; callers read it
    after each call. ``specific_identity`` is a finer-grained key for
    behaviors that select at a different granularity than they draw.
    """

    identity: Identity | None
    selected: bool = False
    specific_identity: Identity | None = None


def data_has_selection(data_points: Iterable[SelectableDataPoint]) -> bool:
    """Return True if at least one data point is selected."""
    return any(dp.selected for dp in data_points)
