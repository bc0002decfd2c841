"""Flow: line-wrapping layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..core.component import Component
from ..core.geometry import Size
from .base import DEFAULT_HGAP, DEFAULT_VGAP, AbstractLayout

logger = logging.getLogger(__name__)


VALID_ALIGNMENTS = ("left", "center", "right")
DEFAULT_ALIGNMENT = "left"


@dataclass
class FlowRow:
    """Indices of the items sharing one line, with the line's extent."""

    indices: list[int] = field(default_factory=list)
    width: float = 0.0
    height: float = 0.0


def pack_rows(sizes: Sequence[Size], available: float, hgap: float = 0.0) -> list[FlowRow]:
    """Greedily group consecutive sizes into rows no wider than ``available``.

    The first item of a row is always accepted, so an item wider than the
    available width sits on a row of its own. ``available <= 0`` means
    unbounded: everything goes on one row.
    """
    bounded = available > 0
    rows: list[FlowRow] = []
    current: FlowRow | None = None

    for index, size in enumerate(sizes):
        if current is not None:
            extended = current.width + hgap + size.width
            if not bounded or extended <= available:
                current.indices.append(index)
                current.width = extended
                current.height = max(current.height, size.height)
                continue
        current = FlowRow(indices=[index], width=size.width, height=size.height)
        rows.append(current)

    return rows


class Flow(AbstractLayout):
    """Places items left-to-right, wrapping onto a new row when one fills up.

    Items keep their preferred size and sit at the top of their row. Each
    row is then shifted according to ``alignment``. Hidden items are skipped
    entirely: they take no room and never force a wrap.

    Sizes depend on the container's current width, so they are recomputed
    on every query.
    """

    def __init__(
        self,
        alignment: str = DEFAULT_ALIGNMENT,
        items: Sequence[Component] = (),
        hgap: float = DEFAULT_HGAP,
        vgap: float = DEFAULT_VGAP,
    ) -> None:
        if alignment not in VALID_ALIGNMENTS:
            raise ValueError(
                f"alignment must be one of {VALID_ALIGNMENTS}, got '{alignment}'"
            )
        self._alignment = alignment
        self._items = tuple(items)
        self._hgap = hgap
        self._vgap = vgap

    @property
    def items(self) -> tuple[Component, ...]:
        return self._items

    @property
    def alignment(self) -> str:
        return self._alignment

    def rows(self, container: Component, metric: str = "preferred") -> list[list[Component]]:
        """Visible items grouped into rows for the container's current width."""
        shown = self.visible(self._items)
        sizes = [self.metric_size(item, metric) for item in shown]
        packed = pack_rows(sizes, self.content_rect(container).width, self._hgap)
        return [[shown[i] for i in row.indices] for row in packed]

    def _measure(self, container: Component, metric: str) -> Size:
        insets = container.insets()
        sizes = [self.metric_size(item, metric) for item in self.visible(self._items)]
        container_width = container.bounds().width
        available = container_width - insets.horizontal if container_width > 0 else 0.0
        packed = pack_rows(sizes, available, self._hgap)

        height = sum(row.height for row in packed) + self.gap_total(len(packed), self._vgap)
        if container_width > 0:
            return Size(container_width, height + insets.vertical)
        natural = max((row.width for row in packed), default=0.0)
        return self.with_insets(natural, height, insets)

    def preferred(self, container: Component) -> Size:
        return self._measure(container, "preferred")

    def minimum(self, container: Component) -> Size:
        return self._measure(container, "minimum")

    def maximum(self, container: Component) -> Size:
        return self.saturate(self._measure(container, "maximum"))

    def _row_start(self, left: float, available: float, row_width: float) -> float:
        if available <= 0 or self._alignment == "left":
            return left
        if self._alignment == "right":
            return left + available - row_width
        return left + (available - row_width) / 2

    def layout(self, container: Component) -> None:
        content = self.content_rect(container)
        shown = self.visible(self._items)
        sizes = [item.preferred_size() for item in shown]
        packed = pack_rows(sizes, content.width, self._hgap)

        y = content.y
        for row in packed:
            x = self._row_start(content.x, content.width, row.width)
            for index in row.indices:
                size = sizes[index]
                shown[index].set_bounds(x=x, y=y, width=size.width, height=size.height)
                x += size.width + self._hgap
            y += row.height + self._vgap

        logger.debug(
            f"Flow layout placed {len(shown)} items on {len(packed)} rows "
            f"({self._alignment}-aligned, width {content.width})"
        )

    def __repr__(self) -> str:
        return f"Flow(alignment={self._alignment!r}, items={len(self._items)})"
