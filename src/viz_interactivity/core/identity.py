"""SelectionId: the identity key used for selection membership.

Ids are compared with ``includes`` (containment), never equality: a broader
id (fewer category constraints) subsumes every narrower id it agrees with.
Immutable; ``with_measure`` returns a new SelectionId.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable

import numpy as np
import pandas as pd


@runtime_checkable
class Identity(Protocol):
    """What the interactivity service needs from a selection key."""

    def includes(self, other: Any) -> bool: ...

    def has_identity(self) -> bool: ...


def _to_builtin(value: Any) -> Any:
    """Reduce a category value to a hashable, JSON-safe plain value.

    Missing values (NaN, NaT, pd.NA) all become None so they compare equal;
    timestamps become ISO strings.
    """
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    if isinstance(value, (pd.Timestamp, np.datetime64)):
        return pd.Timestamp(value).isoformat()
    if isinstance(value, np.generic):
        return value.item()
    return value


@dataclass(frozen=True)
class SelectionId:
    """Identifies a data point, a category or a measure for selection.

    ``categories`` holds ordered (column, value) pairs. An id with no
    categories is measure-only: it selects by series/measure alone.
    """

    categories: tuple[tuple[str, Any], ...] = ()
    measure: str | None = None

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[str, Any], measure: str | None = None
    ) -> SelectionId:
        """Create a SelectionId from a {column: value} mapping."""
        return cls(
            categories=tuple(
                (str(col), _to_builtin(val)) for col, val in mapping.items()
            ),
            measure=measure,
        )

    @classmethod
    def for_category(cls, **values: Any) -> SelectionId:
        return cls.from_mapping(values)

    @classmethod
    def for_measure(cls, measure: str) -> SelectionId:
        return cls(measure=measure)

    def with_measure(self, measure: str | None) -> SelectionId:
        return SelectionId(categories=self.categories, measure=measure)

    @property
    def category_map(self) -> dict[str, Any]:
        return dict(self.categories)

    def has_identity(self) -> bool:
        """True if bound to concrete category values, not only a measure."""
        return len(self.categories) > 0

    def includes(self, other: Any) -> bool:
        """Return True if this id subsumes ``other``.

        Every category constraint of ``self`` must appear with an equal
        value in ``other``; a measure on ``self`` must match exactly.
        """
        if not isinstance(other, SelectionId):
            return False
        if self.measure is not None and self.measure != other.measure:
            return False
        other_map = other.category_map
        for col, val in self.categories:
            if col not in other_map or other_map[col] != val:
                return False
        return True

    def to_dict(self) -> dict:
        """Serialize for JSON transfer."""
        return {
            "categories": [[col, _to_builtin(val)] for col, val in self.categories],
            "measure": self.measure,
        }

    @classmethod
    def from_dict(cls, data: Any) -> SelectionId:
        """Rebuild a SelectionId from ``to_dict`` output."""
        if not isinstance(data, Mapping):
            raise ValueError(
                f"SelectionId data must be a mapping, got {type(data).__name__}."
            )
        raw_categories = data.get("categories", [])
        if not isinstance(raw_categories, (list, tuple)):
            raise ValueError(
                f"SelectionId categories must be a list, got {type(raw_categories).__name__}."
            )
        measure = data.get("measure")
        if measure is not None and not isinstance(measure, str):
            raise ValueError(f"SelectionId measure must be a string, got {measure!r}.")
        categories = []
        for pair in raw_categories:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise ValueError(
                    f"SelectionId categories must be [column, value] pairs, got {pair!r}."
                )
            categories.append((str(pair[0]), _to_builtin(pair[1])))
        return cls(categories=tuple(categories), measure=measure)

    def __repr__(self) -> str:
        parts = [f"{col}={val!r}" for col, val in self.categories]
        if self.measure is not None:
            parts.append(f"measure={self.measure!r}")
        return f"SelectionId({', '.join(parts)})"
