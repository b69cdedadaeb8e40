"""Shared test fixtures for viz-interactivity."""

import pandas as pd
import pytest

from viz_interactivity.core.identity import SelectionId
from viz_interactivity.core.selectable import SelectableDataPoint
from viz_interactivity.host.selection_manager import HostSelectionManager
from viz_interactivity.interactivity.behavior import InteractiveBehavior
from viz_interactivity.interactivity.service import InteractivityService


class RecordingBehavior(InteractiveBehavior):
    """Behavior double that remembers what the service told it."""

    def __init__(self):
        self.behavior_options = None
        self.handler = None
        self.renders = []

    def bind_events(self, behavior_options, selection_handler):
        self.behavior_options = behavior_options
        self.handler = selection_handler

    def render_selection(self, has_selection):
        self.renders.append(has_selection)


def _category_points():
    return [
        SelectableDataPoint(identity=SelectionId.for_category(region=r, year=y))
        for r in ("EU", "US")
        for y in (2020, 2021)
    ]


@pytest.fixture
def chart_points():
    """EU/US x 2020/2021 points for the primary pool."""
    return _category_points()


@pytest.fixture
def label_points():
    """Same identities as chart_points, as separate label records."""
    return _category_points()


@pytest.fixture
def legend_points():
    """Region-level points, broader than the chart points."""
    return [
        SelectableDataPoint(identity=SelectionId.for_category(region="EU")),
        SelectableDataPoint(identity=SelectionId.for_category(region="US")),
    ]


@pytest.fixture
def measure_point():
    """A measure-only point (no category identity)."""
    return SelectableDataPoint(identity=SelectionId.for_measure("sales"))


@pytest.fixture
def behavior():
    return RecordingBehavior()


@pytest.fixture
def legend_behavior():
    return RecordingBehavior()


@pytest.fixture
def labels_behavior():
    return RecordingBehavior()


@pytest.fixture
def host():
    return HostSelectionManager()


@pytest.fixture
def service(host):
    return InteractivityService(host)


@pytest.fixture
def sales_df():
    """Small table of displayable points."""
    return pd.DataFrame({
        "region": ["EU", "EU", "US", "US"],
        "year": [2020, 2021, 2020, 2021],
        "sales": [10.0, 12.5, 8.0, 9.5],
        "flagged": [True, False, False, True],
    })
