"""AbstractLayout: the size-negotiation contract shared by all algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ..core.component import Component
from ..core.geometry import MAX_EXTENT, Bounds, Insets, Size


# Default spacing between neighbouring children
DEFAULT_HGAP = 0.0
DEFAULT_VGAP = 0.0

# Size hints a layout can negotiate with
METRICS = ("preferred", "minimum", "maximum")


class AbstractLayout(ABC):
    """Base class for layout algorithms.

    An instance holds only its construction-time configuration. The same
    instance may serve any number of containers; ``layout`` writes child
    bounds and nothing else.
    """

    @abstractmethod
    def preferred(self, container: Component) -> Size:
        """Size needed to fit every visible child at its preferred size."""
        ...

    @abstractmethod
    def minimum(self, container: Component) -> Size:
        ...

    @abstractmethod
    def maximum(self, container: Component) -> Size:
        ...

    @abstractmethod
    def layout(self, container: Component) -> None:
        """Assign bounds to the visible children of ``container``."""
        ...

    # --- Shared helpers ---

    @staticmethod
    def visible(items: Iterable[Component | None]) -> list[Component]:
        """Children that take part in layout, in order."""
        return [item for item in items if item is not None and item.is_visible()]

    @staticmethod
    def gap_total(count: int, gap: float) -> float:
        """Space taken by the gaps between ``count`` neighbours."""
        return max(count - 1, 0) * gap

    @staticmethod
    def metric_size(component: Component, metric: str) -> Size:
        """The component's preferred, minimum or maximum size."""
        if metric == "preferred":
            return component.preferred_size()
        if metric == "minimum":
            return component.minimum_size()
        if metric == "maximum":
            return component.maximum_size()
        raise ValueError(
            f"Unknown size metric '{metric}'. Use one of {', '.join(METRICS)}."
        )

    @staticmethod
    def content_rect(container: Component) -> Bounds:
        """Area available to children, in the container's own coordinates."""
        return container.bounds().inset(container.insets())

    @staticmethod
    def with_insets(width: float, height: float, insets: Insets) -> Size:
        return Size(width + insets.horizontal, height + insets.vertical)

    @staticmethod
    def saturate(size: Size) -> Size:
        """Cap a maximum-size result at MAX_EXTENT per axis."""
        return Size(min(size.width, MAX_EXTENT), min(size.height, MAX_EXTENT))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
