"""Build selectable points from DataFrames and report selection back as tables."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from .identity import SelectionId
from .selectable import SelectableDataPoint
from .validation import validate_points_frame, validate_selected_column


def points_from_frame(
    df: pd.DataFrame,
    category_columns: Sequence[str],
    measure: str | None = None,
    selected: str | None = None,
) -> list[SelectableDataPoint]:
    """Create one SelectableDataPoint per DataFrame row.

    Parameters
    ----------
    df : table of displayable items, one row per point
    category_columns : columns whose values form each point's identity
    measure : optional measure name attached to every identity
    selected : optional boolean column seeding each point's ``selected`` flag
    """
    category_columns = list(category_columns)
    df = validate_points_frame(df, category_columns)
    if selected is not None:
        seeds = validate_selected_column(df, selected).to_numpy(dtype=bool)
    else:
        seeds = np.zeros(len(df), dtype=bool)

    points: list[SelectableDataPoint] = []
    for row, seed in zip(df[category_columns].itertuples(index=False), seeds):
        identity = SelectionId.from_mapping(
            dict(zip(category_columns, row)), measure=measure
        )
        points.append(SelectableDataPoint(identity=identity, selected=bool(seed)))
    return points


def points_from_measures(measures: Iterable[str]) -> list[SelectableDataPoint]:
    """Create measure-only points, e.g. one per legend series."""
    return [
        SelectableDataPoint(identity=SelectionId.for_measure(name))
        for name in measures
    ]


def selection_mask(points: Sequence[SelectableDataPoint]) -> np.ndarray:
    """Boolean array of each point's ``selected`` flag, in order."""
    return np.fromiter((dp.selected for dp in points), dtype=bool, count=len(points))


def selection_frame(points: Sequence[SelectableDataPoint]) -> pd.DataFrame:
    """Tabulate points as category columns plus ``measure`` and ``selected``."""
    records = []
    for dp in points:
        record: dict = {}
        identity = dp.identity
        if isinstance(identity, SelectionId):
            record.update(identity.category_map)
            record["measure"] = identity.measure
        else:
            record["measure"] = None
        records.append(record)
    frame = pd.DataFrame.from_records(records)
    if "measure" not in frame.columns:
        frame["measure"] = pd.Series(dtype=object)
    frame["selected"] = selection_mask(points)
    return frame
