"""Input validation for building selectable points from tables."""

from __future__ import annotations

from typing import Any

import pandas as pd


def validate_points_frame(data: Any, category_columns: list[str]) -> pd.DataFrame:
    """Validate that data is a DataFrame carrying the given category columns.

    Returns the validated DataFrame (unchanged).
    """
    if not isinstance(data, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(data).__name__}. "
            "Wrap your data with pd.DataFrame(records)."
        )
    if not category_columns:
        raise ValueError(
            "At least one category column is required to build selection ids. "
            "Use points_from_measures() for measure-only points."
        )
    missing = [c for c in category_columns if c not in data.columns]
    if missing:
        raise ValueError(
            f"Category columns not found in DataFrame: {missing[:5]}"
            + (f" (and {len(missing) - 5} more)" if len(missing) > 5 else "")
            + f". Available: {list(data.columns)[:10]}"
        )
    return data


def validate_selected_column(data: pd.DataFrame, column: str) -> pd.Series:
    """Validate and return a boolean column used to seed selection."""
    if column not in data.columns:
        raise ValueError(
            f"Selected column '{column}' not found in DataFrame. "
            f"Available: {list(data.columns)[:10]}"
        )
    series = data[column]
    if not pd.api.types.is_bool_dtype(series):
        raise TypeError(
            f"Selected column '{column}' must be boolean, got dtype {series.dtype}."
        )
    return series
