"""Hand-off of computed geometry to rendering surfaces."""

from .serializers import snapshot, serialize_layout

__all__ = ["snapshot", "serialize_layout"]
