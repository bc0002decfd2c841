"""Border: five-region layout (north, south, east, west, center)."""

from __future__ import annotations

import logging

from ..core.component import Component
from ..core.geometry import Size
from .base import DEFAULT_HGAP, DEFAULT_VGAP, AbstractLayout

logger = logging.getLogger(__name__)


class Border(AbstractLayout):
    """Places up to five components against the edges and in the middle.

    North and south span the full content width at their preferred height.
    West and east take their preferred width in the band between them, and
    center gets whatever is left. A missing or hidden region takes no space
    and no gap; its neighbours absorb the space.
    """

    def __init__(
        self,
        center: Component | None = None,
        north: Component | None = None,
        south: Component | None = None,
        east: Component | None = None,
        west: Component | None = None,
        hgap: float = DEFAULT_HGAP,
        vgap: float = DEFAULT_VGAP,
    ) -> None:
        self._center = center
        self._north = north
        self._south = south
        self._east = east
        self._west = west
        self._hgap = hgap
        self._vgap = vgap

    @property
    def hgap(self) -> float:
        return self._hgap

    @property
    def vgap(self) -> float:
        return self._vgap

    def regions(self) -> dict[str, Component]:
        """Configured regions by name, omitting empty ones."""
        slots = {
            "center": self._center,
            "north": self._north,
            "south": self._south,
            "east": self._east,
            "west": self._west,
        }
        return {name: comp for name, comp in slots.items() if comp is not None}

    def _shown(self, component: Component | None) -> Component | None:
        if component is None or not component.is_visible():
            return None
        return component

    def _measure(self, container: Component, metric: str) -> Size:
        # Middle band: west + center + east side by side
        middle = self.visible((self._west, self._center, self._east))
        sizes = [self.metric_size(comp, metric) for comp in middle]
        width = sum(s.width for s in sizes) + self.gap_total(len(middle), self._hgap)
        height = max((s.height for s in sizes), default=0.0)

        edges = self.visible((self._north, self._south))
        for comp in edges:
            size = self.metric_size(comp, metric)
            width = max(width, size.width)
            height += size.height + self._vgap
        # No middle band: only the gap between north and south remains
        if edges and not middle:
            height -= self._vgap

        return self.with_insets(width, height, container.insets())

    def preferred(self, container: Component) -> Size:
        return self._measure(container, "preferred")

    def minimum(self, container: Component) -> Size:
        return self._measure(container, "minimum")

    def maximum(self, container: Component) -> Size:
        return self.saturate(self._measure(container, "maximum"))

    def layout(self, container: Component) -> None:
        content = self.content_rect(container)
        top = content.y
        bottom = content.bottom
        left = content.x
        right = content.right
        placed = 0

        north = self._shown(self._north)
        if north is not None:
            height = north.preferred_size().height
            north.set_bounds(x=left, y=top, width=right - left, height=height)
            top += height + self._vgap
            placed += 1

        south = self._shown(self._south)
        if south is not None:
            height = south.preferred_size().height
            south.set_bounds(x=left, y=bottom - height, width=right - left, height=height)
            bottom -= height + self._vgap
            placed += 1

        east = self._shown(self._east)
        if east is not None:
            width = east.preferred_size().width
            east.set_bounds(x=right - width, y=top, width=width, height=bottom - top)
            right -= width + self._hgap
            placed += 1

        west = self._shown(self._west)
        if west is not None:
            width = west.preferred_size().width
            west.set_bounds(x=left, y=top, width=width, height=bottom - top)
            left += width + self._hgap
            placed += 1

        center = self._shown(self._center)
        if center is not None:
            center.set_bounds(x=left, y=top, width=right - left, height=bottom - top)
            placed += 1

        logger.debug(f"Border layout placed {placed} regions in {content.width}x{content.height}")

    def __repr__(self) -> str:
        return f"Border(regions={sorted(self.regions())}, hgap={self._hgap}, vgap={self._vgap})"
