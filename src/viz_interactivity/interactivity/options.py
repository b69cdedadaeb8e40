"""InteractivityServiceOptions: per-bind configuration."""

from __future__ import annotations

import param


class InteractivityServiceOptions(param.Parameterized):
    """Options for ``InteractivityService.bind``.

    Without ``is_legend`` or ``is_labels`` the points bind to the primary pool.
    """

    is_legend = param.Boolean(default=False, doc="Bind to the legend pool")
    is_labels = param.Boolean(default=False, doc="Bind to the labels pool")
    override_selection_from_data = param.Boolean(
        default=False,
        doc="Re-seed the selection from the incoming points' selected flags",
    )
    has_selection_override = param.Boolean(
        default=None, allow_None=True, doc="Stored for behaviors; None leaves it as is"
    )

    @property
    def pool(self) -> str:
        """Name of the pool these options route to."""
        if self.is_legend:
            return "legend"
        if self.is_labels:
            return "labels"
        return "primary"
