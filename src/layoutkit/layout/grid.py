"""Grid: uniform-cell grid layout and the dimension inference it shares."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ..core.component import Component
from ..core.geometry import Size
from .base import DEFAULT_HGAP, DEFAULT_VGAP, AbstractLayout
from .track import Track

logger = logging.getLogger(__name__)


VALID_FILLS = ("horizontal", "vertical")
DEFAULT_FILL = "horizontal"


def infer_dimensions(
    rows: int | None,
    columns: int | None,
    count: int,
    fill: str = DEFAULT_FILL,
) -> tuple[int, int]:
    """Resolve (rows, columns) for ``count`` items.

    - rows only: columns = ceil(count / rows)
    - columns only (or rows == 0): rows = ceil(count / columns)
    - neither: rows = count, columns = 0 (one item per row)
    - both, but too small: grow along the fill direction
    """
    rows = rows or 0
    columns = columns or 0

    if rows > 0 and columns == 0:
        return rows, math.ceil(count / rows)
    if columns > 0 and rows == 0:
        return math.ceil(count / columns), columns
    if rows == 0 and columns == 0:
        return count, 0

    if rows * columns < count:
        if fill == "vertical":
            columns = math.ceil(count / rows)
        else:
            rows = math.ceil(count / columns)
    return rows, columns


class Grid(AbstractLayout):
    """Lays items out in equal-size cells.

    The cell size is the content area divided evenly after gaps, so every
    visible item gets the same width and height. Hidden items keep their
    slot; the slot is simply left empty.

    Parameters
    ----------
    rows, columns : grid dimensions; missing ones are inferred from the
                    item count (see ``infer_dimensions``).
    items : components in fill order.
    fill : 'horizontal' fills each row left-to-right before moving down;
           'vertical' fills each column top-to-bottom before moving right.
    hgap, vgap : space between columns / rows.
    """

    def __init__(
        self,
        rows: int | None = None,
        columns: int | None = None,
        items: Sequence[Component] = (),
        fill: str = DEFAULT_FILL,
        hgap: float = DEFAULT_HGAP,
        vgap: float = DEFAULT_VGAP,
    ) -> None:
        if fill not in VALID_FILLS:
            raise ValueError(
                f"fill must be one of {VALID_FILLS}, got '{fill}'"
            )
        self._rows = rows
        self._columns = columns
        self._items = tuple(items)
        self._fill = fill
        self._hgap = hgap
        self._vgap = vgap

    @property
    def items(self) -> tuple[Component, ...]:
        return self._items

    @property
    def fill(self) -> str:
        return self._fill

    def dimensions(self) -> tuple[int, int]:
        """Inferred (rows, columns) for the current item count."""
        return infer_dimensions(self._rows, self._columns, len(self._items), self._fill)

    def _effective_dimensions(self) -> tuple[int, int]:
        """Dimensions safe for arithmetic: a zero column count means one column."""
        rows, columns = self.dimensions()
        if rows > 0 and columns == 0:
            columns = 1
        return rows, columns

    def cell_of(self, index: int) -> tuple[int, int]:
        """(row, column) slot of the item at ``index``."""
        rows, columns = self._effective_dimensions()
        if self._fill == "vertical":
            return index % rows, index // rows
        return index // columns, index % columns

    def _slots(self) -> list[tuple[Component, int, int]]:
        """Visible items with their (row, column) slot."""
        return [
            (item, *self.cell_of(index))
            for index, item in enumerate(self._items)
            if item.is_visible()
        ]

    def _measure(self, container: Component, metric: str) -> Size:
        rows, columns = self._effective_dimensions()
        sizes = [self.metric_size(item, metric) for item in self.visible(self._items)]
        cell_width = max((s.width for s in sizes), default=0.0)
        cell_height = max((s.height for s in sizes), default=0.0)
        width = columns * cell_width + self.gap_total(columns, self._hgap)
        height = rows * cell_height + self.gap_total(rows, self._vgap)
        return self.with_insets(width, height, container.insets())

    def preferred(self, container: Component) -> Size:
        return self._measure(container, "preferred")

    def minimum(self, container: Component) -> Size:
        return self._measure(container, "minimum")

    def maximum(self, container: Component) -> Size:
        return self.saturate(self._measure(container, "maximum"))

    def layout(self, container: Component) -> None:
        rows, columns = self._effective_dimensions()
        if rows == 0 or columns == 0:
            return
        content = self.content_rect(container)

        # Not clamped: too little space yields negative cell sizes
        cell_width = (content.width - (columns - 1) * self._hgap) / columns
        cell_height = (content.height - (rows - 1) * self._vgap) / rows
        col_track = Track.uniform(columns, cell_width, gap=self._hgap, offset=content.x)
        row_track = Track.uniform(rows, cell_height, gap=self._vgap, offset=content.y)

        slots = self._slots()
        for item, row, col in slots:
            x, width = col_track.span(col)
            y, height = row_track.span(row)
            item.set_bounds(x=x, y=y, width=width, height=height)

        logger.debug(
            f"Grid layout placed {len(slots)} of {len(self._items)} items "
            f"in {rows}x{columns} cells of {cell_width}x{cell_height}"
        )

    def __repr__(self) -> str:
        rows, columns = self.dimensions()
        return f"{type(self).__name__}(rows={rows}, columns={columns}, items={len(self._items)}, fill={self._fill!r})"
