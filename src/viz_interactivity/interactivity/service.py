"""InteractivityService: keeps selection consistent across a visual's pools.

A visual binds up to three pools of SelectableDataPoints (primary, legend,
labels). User gestures arrive through the SelectionHandler methods; each one
mutates the selected id list, resyncs every bound pool, tells the host and
re-renders. Host-originated changes come back in through
``restore_selection``.

Membership is always decided with ``Identity.includes`` (containment), so a
broad id such as a whole category selects every point it subsumes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Sequence

from ..core.identity import Identity
from ..core.selectable import SelectableDataPoint, data_has_selection
from ..filter.manager import FilterManager
from .behavior import InteractiveBehavior
from .options import InteractivityServiceOptions

logger = logging.getLogger(__name__)


def _noop() -> None:
    pass


def create_interactivity_service(host: Any) -> InteractivityService:
    """Create a service bound to a new selection manager from ``host``."""
    return InteractivityService(host.create_selection_manager())


class InteractivityService:
    """Selection state shared by a visual, its legend and its labels.

    Parameters
    ----------
    selection_manager : host bridge, or None to run without a host
    inverted_selection_mode : treat stored ids as exclusions (primary pool only)
    """

    def __init__(
        self,
        selection_manager: Any = None,
        inverted_selection_mode: bool = False,
    ) -> None:
        self._selection_manager = selection_manager

        self._render_selection_in_visual: Callable[[], None] = _noop
        self._render_selection_in_legend: Callable[[], None] = _noop
        self._render_selection_in_labels: Callable[[], None] = _noop

        self._selected_ids: list[Identity] = []
        self._is_inverted_selection_mode = inverted_selection_mode
        self._has_selection_override: bool | None = None
        self._behavior: InteractiveBehavior | None = None

        self.selectable_data_points: list[SelectableDataPoint] | None = None
        self.selectable_legend_data_points: list[SelectableDataPoint] | None = None
        self.selectable_labels_data_points: list[SelectableDataPoint] | None = None

        register = getattr(selection_manager, "register_on_select_callback", None)
        if register is not None:
            register(self._on_host_selection_changed)

    # --- Binding ---

    def bind(
        self,
        data_points: Iterable[SelectableDataPoint],
        behavior: InteractiveBehavior,
        behavior_options: Any,
        options: InteractivityServiceOptions | None = None,
    ) -> None:
        """Bind a pool of points to ``behavior`` and sync it with the selection."""
        data_points = list(data_points)

        if options is not None and options.override_selection_from_data:
            self._take_selection_state_from_data_points(data_points)

        pool = options.pool if options is not None else "primary"
        if pool == "legend":
            self.selectable_legend_data_points = data_points
            self._render_selection_in_legend = lambda: behavior.render_selection(
                self.legend_has_selection()
            )
        elif pool == "labels":
            self.selectable_labels_data_points = data_points
            self._render_selection_in_labels = lambda: behavior.render_selection(
                self.labels_has_selection()
            )
        else:
            self.selectable_data_points = data_points
            self._render_selection_in_visual = lambda: behavior.render_selection(
                self.has_selection()
            )

        if options is not None and options.has_selection_override is not None:
            self._has_selection_override = options.has_selection_override

        logger.debug("Bound %d points to the %s pool", len(data_points), pool)

        self._behavior = behavior
        behavior.bind_events(behavior_options, self)
        self.sync_selection_state()

    def clear_selection(self) -> None:
        """Deselect everything in every pool and re-render."""
        self._has_selection_override = None
        self._selected_ids = []
        for dp in self._all_data_points():
            dp.selected = False
        self._render_all()

    def apply_selection_state_to_data(
        self,
        data_points: Iterable[SelectableDataPoint],
        has_highlights: bool = False,
    ) -> bool:
        """Set ``selected`` on arbitrary points from the current selection.

        Highlighted data takes precedence over an existing selection: with
        ``has_highlights`` both the service's and the host's ids are wiped
        first. Returns True if any of the points ended up selected.
        """
        data_points = list(data_points)
        if has_highlights and self.has_selection():
            logger.debug("Highlights present; dropping %d selected ids", len(self._selected_ids))
            self._selected_ids = []
            if self._selection_manager is not None:
                self._selection_manager.clear()
            self.sync_selection_state()

        for dp in data_points:
            dp.selected = self._is_selected(dp.identity, self._selected_ids)
        return data_has_selection(data_points)

    def apply_selection_from_filter(self, applied_filter: Any) -> None:
        """Restore selection from a filter produced by FilterManager."""
        self.restore_selection(FilterManager.restore_selection_ids(applied_filter))

    def restore_selection(self, selection_ids: Sequence[Identity]) -> None:
        """Replace the selection verbatim, resync and re-render."""
        self.clear_selection()
        self._selected_ids = list(selection_ids)
        logger.debug("Restored %d selection ids", len(self._selected_ids))
        self.sync_selection_state()
        self._render_all()

    # --- Queries ---

    @property
    def selected_ids(self) -> list[Identity]:
        return list(self._selected_ids)

    @property
    def has_selection_override(self) -> bool | None:
        return self._has_selection_override

    @property
    def behavior(self) -> InteractiveBehavior | None:
        return self._behavior

    def has_selection(self) -> bool:
        return len(self._selected_ids) > 0

    def legend_has_selection(self) -> bool:
        if self.selectable_legend_data_points is None:
            return False
        return data_has_selection(self.selectable_legend_data_points)

    def labels_has_selection(self) -> bool:
        if self.selectable_labels_data_points is None:
            return False
        return data_has_selection(self.selectable_labels_data_points)

    def is_selection_mode_inverted(self) -> bool:
        return self._is_inverted_selection_mode

    # --- SelectionHandler ---

    def apply_selection_filter(self) -> None:
        if self._selection_manager is None:
            return
        self._selection_manager.apply_selection_filter()

    def handle_selection(
        self, data_point: SelectableDataPoint | None, multi_select: bool
    ) -> None:
        """Select ``data_point``; a point without identity clears the selection."""
        if data_point is None:
            return

        if data_point.identity is None:
            self.handle_clear_selection()
        else:
            self._select(data_point, multi_select)
            self._send_selection_to_host()
            self._render_all()

    def handle_clear_selection(self) -> None:
        self.clear_selection()
        self._send_selection_to_host()

    # --- Sync ---

    def sync_selection_state(self) -> None:
        """Make every bound pool's ``selected`` flags agree with the selection."""
        if self._is_inverted_selection_mode:
            self._sync_selection_state_inverted()
            return

        for pool in (self.selectable_data_points, self.selectable_legend_data_points):
            if pool is not None:
                self._update_data_points_by_selected_ids(pool, self._selected_ids)

        # Labels can be bound on their own.
        if self.selectable_labels_data_points is not None:
            for dp in self.selectable_labels_data_points:
                dp.selected = any(
                    sid.includes(dp.identity) for sid in self._selected_ids
                )

    def _sync_selection_state_inverted(self) -> None:
        # Only the primary pool follows inverted mode.
        data_points = self.selectable_data_points
        if data_points is None:
            return

        if not self._selected_ids:
            for dp in data_points:
                dp.selected = False
            return

        for dp in data_points:
            if self._is_selected(dp.identity, self._selected_ids):
                dp.selected = True
            elif dp.selected:
                dp.selected = False

    # --- Internals ---

    def _on_host_selection_changed(self) -> None:
        self.restore_selection(list(self._selection_manager.get_selection_ids()))

    def _render_all(self) -> None:
        self._render_selection_in_visual()
        self._render_selection_in_legend()
        self._render_selection_in_labels()

    def _select(self, data_point: SelectableDataPoint, multi_select: bool) -> None:
        identity = data_point.identity
        if identity is None:
            return

        selected = not data_point.selected or (
            not multi_select and len(self._selected_ids) > 1
        )

        if multi_select:
            if selected:
                data_point.selected = True
                self._selected_ids.append(identity)
                # Category-bound and measure-only ids never mix.
                if identity.has_identity():
                    self._remove_selection_ids_with_only_measures()
                else:
                    self._remove_selection_ids_except_only_measures()
            else:
                data_point.selected = False
                self._remove_id(identity)
        else:
            self.clear_selection()
            if selected:
                data_point.selected = True
                self._selected_ids.append(identity)

        logger.debug(
            "%s %r (multi_select=%s); %d ids selected",
            "Selected" if selected else "Deselected",
            identity,
            multi_select,
            len(self._selected_ids),
        )
        self.sync_selection_state()

    def _remove_id(self, to_remove: Identity) -> None:
        self._selected_ids = [
            sid for sid in self._selected_ids if not to_remove.includes(sid)
        ]

    def _remove_selection_ids_with_only_measures(self) -> None:
        self._selected_ids = [sid for sid in self._selected_ids if sid.has_identity()]

    def _remove_selection_ids_except_only_measures(self) -> None:
        self._selected_ids = [
            sid for sid in self._selected_ids if not sid.has_identity()
        ]

    def _send_selection_to_host(self) -> None:
        if self._selection_manager is None:
            return

        if self._selected_ids:
            logger.debug("Sending %d selection ids to host", len(self._selected_ids))
            self._selection_manager.select(list(self._selected_ids))
        else:
            self._selection_manager.clear()

    def _take_selection_state_from_data_points(
        self, data_points: Sequence[SelectableDataPoint]
    ) -> None:
        # Replaces rather than merges.
        self._selected_ids = [
            dp.identity
            for dp in data_points
            if dp.selected and dp.identity is not None
        ]

    def _all_data_points(self) -> list[SelectableDataPoint]:
        points: list[SelectableDataPoint] = []
        for pool in (
            self.selectable_data_points,
            self.selectable_legend_data_points,
            self.selectable_labels_data_points,
        ):
            if pool is not None:
                points.extend(pool)
        return points

    @staticmethod
    def _update_data_points_by_selected_ids(
        data_points: Sequence[SelectableDataPoint],
        selected_ids: Sequence[Identity],
    ) -> bool:
        found_matching_id = False
        for dp in data_points:
            dp.selected = InteractivityService._is_selected(dp.identity, selected_ids)
            if dp.selected:
                found_matching_id = True
        return found_matching_id

    @staticmethod
    def _is_selected(identity: Identity | None, selected_ids: Sequence[Identity]) -> bool:
        return any(sid.includes(identity) for sid in selected_ids)

    def __repr__(self) -> str:
        return (
            f"InteractivityService(selected={len(self._selected_ids)}, "
            f"inverted={self._is_inverted_selection_mode})"
        )
