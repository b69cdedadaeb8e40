"""Host-side selection store and the bridge protocol the service talks to."""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol, Sequence

import param

from ..filter.manager import FilterManager

logger = logging.getLogger(__name__)

SelectCallback = Callable[[], Any]
FilterCallback = Callable[[Any], Any]


class SelectionManager(Protocol):
    """What InteractivityService calls on the host.

    Implementations may also provide ``register_on_select_callback(cb)``;
    the service subscribes through it when present.
    """

    def select(self, selection_ids: Sequence[Any]) -> Any: ...

    def clear(self) -> Any: ...

    def apply_selection_filter(self) -> Any: ...

    def get_selection_ids(self) -> Sequence[Any]: ...


class HostSelectionManager(param.Parameterized):
    """Persistent host selection store.

    ``select``/``clear`` come from the visual and do not notify the
    registered callbacks. ``push_selection`` is the host-originated path
    (bookmark restore, cross-filtering) and does.
    """

    selection_ids = param.List(default=[], doc="Ids currently selected on the host")
    applied_filter = param.Dict(
        default=None, allow_None=True, doc="Last filter applied from the selection"
    )

    def __init__(self, **params):
        super().__init__(**params)
        self._select_callbacks: list[SelectCallback] = []
        self._filter_callbacks: list[FilterCallback] = []

    def select(self, selection_ids: Sequence[Any]) -> None:
        self.selection_ids = list(selection_ids)

    def clear(self) -> None:
        self.selection_ids = []

    def get_selection_ids(self) -> list:
        return list(self.selection_ids)

    def has_selection(self) -> bool:
        return len(self.selection_ids) > 0

    def register_on_select_callback(self, callback: SelectCallback) -> None:
        """Register a zero-argument callback for host-originated changes."""
        self._select_callbacks.append(callback)

    def on_filter(self, callback: FilterCallback) -> None:
        """Register a callback: fn(applied_filter)."""
        self._filter_callbacks.append(callback)

    def push_selection(self, selection_ids: Sequence[Any]) -> None:
        """Replace the store from the host side and notify subscribers."""
        self.selection_ids = list(selection_ids)
        logger.debug("Host pushed %d selection ids", len(self.selection_ids))
        for cb in self._select_callbacks:
            cb()

    def apply_selection_filter(self) -> None:
        """Turn the current selection into an applied filter."""
        self.applied_filter = FilterManager.get_filter(self.selection_ids)
        logger.debug("Applied selection filter: %s", self.applied_filter)
        for cb in self._filter_callbacks:
            cb(self.applied_filter)

    def __repr__(self) -> str:
        return f"HostSelectionManager(selected={len(self.selection_ids)})"


class VisualHost:
    """Minimal host that hands out selection managers."""

    def __init__(self) -> None:
        self._managers: list[HostSelectionManager] = []

    @property
    def selection_managers(self) -> list[HostSelectionManager]:
        return list(self._managers)

    def create_selection_manager(self) -> HostSelectionManager:
        manager = HostSelectionManager()
        self._managers.append(manager)
        return manager
