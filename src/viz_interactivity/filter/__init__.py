"""Selection filter round-trip."""

from .manager import FilterManager
from .serializers import serialize_filter, deserialize_filter

__all__ = [
    "FilterManager",
    "serialize_filter",
    "deserialize_filter",
]
