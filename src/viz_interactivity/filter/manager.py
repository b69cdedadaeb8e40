"""FilterManager: converts between selection id sequences and applied filters.

An applied filter is a plain JSON-transferable dict::

    {"filterType": "selection", "whereItems": [<SelectionId.to_dict()>, ...]}

The conversion is order-preserving in both directions.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.identity import SelectionId

FILTER_TYPE = "selection"


class FilterManager:
    """Stateless selection <-> filter conversions."""

    @staticmethod
    def get_filter(selection_ids: Sequence[SelectionId]) -> dict | None:
        """Build an applied filter for the ids, or None for an empty selection."""
        if not selection_ids:
            return None
        return {
            "filterType": FILTER_TYPE,
            "whereItems": [sid.to_dict() for sid in selection_ids],
        }

    @staticmethod
    def restore_selection_ids(applied_filter: Any) -> list[SelectionId]:
        """Return the selection ids encoded in an applied filter.

        ``None`` means no filter is applied and yields an empty list.
        """
        if applied_filter is None:
            return []
        if not isinstance(applied_filter, Mapping):
            raise ValueError(
                f"Applied filter must be a mapping, got {type(applied_filter).__name__}."
            )
        filter_type = applied_filter.get("filterType")
        if filter_type != FILTER_TYPE:
            raise ValueError(
                f"Unsupported filterType {filter_type!r}; expected {FILTER_TYPE!r}."
            )
        where_items = applied_filter.get("whereItems")
        if not isinstance(where_items, list):
            raise ValueError("Applied filter is missing its 'whereItems' list.")
        return [SelectionId.from_dict(item) for item in where_items]
