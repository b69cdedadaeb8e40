"""Tests for building selectable points from DataFrames."""

import numpy as np
import pandas as pd
import pytest

from viz_interactivity.core.frame import (
    points_from_frame,
    points_from_measures,
    selection_mask,
    selection_frame,
)
from viz_interactivity.core.identity import SelectionId
from viz_interactivity.core.selectable import SelectableDataPoint
from viz_interactivity.interactivity.options import InteractivityServiceOptions
from viz_interactivity.interactivity.service import InteractivityService


class TestPointsFromFrame:
    def test_one_point_per_row(self, sales_df):
        points = points_from_frame(sales_df, ["region", "year"])
        assert len(points) == 4
        assert points[1].identity == SelectionId.for_category(region="EU", year=2021)
        assert not any(dp.selected for dp in points)

    def test_measure_attached(self, sales_df):
        points = points_from_frame(sales_df, ["region"], measure="sales")
        assert all(dp.identity.measure == "sales" for dp in points)

    def test_selected_column_seeds_flags(self, sales_df):
        points = points_from_frame(sales_df, ["region", "year"], selected="flagged")
        assert [dp.selected for dp in points] == [True, False, False, True]

    @pytest.mark.parametrize("missing", [np.nan, pd.NA])
    def test_missing_category_value_selectable(self, behavior, missing):
        df = pd.DataFrame({"region": pd.Series(["EU", missing], dtype=object)})
        points = points_from_frame(df, ["region"])
        assert points[1].identity == SelectionId.for_category(region=None)

        service = InteractivityService()
        service.bind(points, behavior, None)
        service.handle_selection(points[1], False)
        assert service.selected_ids == [points[1].identity]
        assert [dp.selected for dp in points] == [False, True]

    def test_nullable_string_column(self, behavior):
        df = pd.DataFrame({"region": pd.array(["EU", None, None], dtype="string")})
        points = points_from_frame(df, ["region"])
        service = InteractivityService()
        service.bind(points, behavior, None)
        service.handle_selection(points[1], False)
        assert [dp.selected for dp in points] == [False, True, True]

    def test_not_a_dataframe_raises(self):
        with pytest.raises(TypeError, match="DataFrame"):
            points_from_frame({"region": ["EU"]}, ["region"])

    def test_no_category_columns_raises(self, sales_df):
        with pytest.raises(ValueError, match="category column"):
            points_from_frame(sales_df, [])

    def test_missing_category_column_raises(self, sales_df):
        with pytest.raises(ValueError, match="not found"):
            points_from_frame(sales_df, ["country"])

    def test_missing_selected_column_raises(self, sales_df):
        with pytest.raises(ValueError, match="not found"):
            points_from_frame(sales_df, ["region"], selected="picked")

    def test_non_boolean_selected_column_raises(self, sales_df):
        with pytest.raises(TypeError, match="boolean"):
            points_from_frame(sales_df, ["region"], selected="sales")

    def test_seeded_points_drive_override(self, sales_df, behavior):
        points = points_from_frame(sales_df, ["region", "year"], selected="flagged")
        service = InteractivityService()
        service.bind(
            points, behavior, None,
            InteractivityServiceOptions(override_selection_from_data=True),
        )
        assert service.selected_ids == [points[0].identity, points[3].identity]


class TestPointsFromMeasures:
    def test_measure_only_points(self):
        points = points_from_measures(["sales", "profit"])
        assert [dp.identity for dp in points] == [
            SelectionId.for_measure("sales"),
            SelectionId.for_measure("profit"),
        ]
        assert not any(dp.identity.has_identity() for dp in points)


class TestSelectionMask:
    def test_mask_follows_flags(self, sales_df):
        points = points_from_frame(sales_df, ["region", "year"], selected="flagged")
        mask = selection_mask(points)
        assert mask.dtype == bool
        np.testing.assert_array_equal(mask, [True, False, False, True])

    def test_mask_empty(self):
        assert selection_mask([]).shape == (0,)


class TestSelectionFrame:
    def test_columns_and_values(self, sales_df):
        points = points_from_frame(sales_df, ["region", "year"], selected="flagged")
        frame = selection_frame(points)
        assert list(frame.columns) == ["region", "year", "measure", "selected"]
        assert frame["region"].tolist() == ["EU", "EU", "US", "US"]
        assert frame["selected"].tolist() == [True, False, False, True]

    def test_mask_usable_on_source_frame(self, sales_df):
        service = InteractivityService()
        points = points_from_frame(sales_df, ["region", "year"])
        service.restore_selection([SelectionId.for_category(region="US")])
        service.apply_selection_state_to_data(points)
        picked = sales_df[selection_mask(points)]
        assert picked["sales"].tolist() == [8.0, 9.5]

    def test_points_without_selection_id(self):
        frame = selection_frame([SelectableDataPoint(identity=None, selected=True)])
        assert frame["measure"].tolist() == [None]
        assert frame["selected"].tolist() == [True]

    def test_empty(self):
        frame = selection_frame([])
        assert len(frame) == 0
        assert "selected" in frame.columns
        assert isinstance(frame, pd.DataFrame)
