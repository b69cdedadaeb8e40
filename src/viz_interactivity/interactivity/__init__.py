"""Selection state synchronization between a visual, its peers and the host."""

from .behavior import InteractiveBehavior, SelectionHandler
from .options import InteractivityServiceOptions
from .service import InteractivityService, create_interactivity_service

__all__ = [
    "InteractiveBehavior",
    "SelectionHandler",
    "InteractivityServiceOptions",
    "InteractivityService",
    "create_interactivity_service",
]
