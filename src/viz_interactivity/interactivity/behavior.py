"""Interfaces between the interactivity service and a visual's behavior."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol

from ..core.selectable import SelectableDataPoint


class SelectionHandler(Protocol):
    """The selection-handling contract a behavior calls back into."""

    def handle_selection(
        self, data_point: SelectableDataPoint | None, multi_select: bool
    ) -> None: ...

    def handle_clear_selection(self) -> None: ...

    def apply_selection_filter(self) -> None: ...


class InteractiveBehavior(ABC):
    """Wires UI gestures to a SelectionHandler and redraws on request.

    ``behavior_options`` is whatever the visual passes to ``bind``; the
    service never looks inside it.
    """

    @abstractmethod
    def bind_events(
        self, behavior_options: Any, selection_handler: SelectionHandler
    ) -> None:
        ...

    @abstractmethod
    def render_selection(self, has_selection: bool) -> None:
        ...

    def hover_lasso_region(self, event: Any, rect: Any) -> None:
        """Optional: preview a lasso region."""

    def lasso_select(self, event: Any, rect: Any) -> None:
        """Optional: select everything inside a lasso region."""
