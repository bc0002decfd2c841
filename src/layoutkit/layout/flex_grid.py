"""FlexGrid: grid whose rows and columns take their natural size."""

from __future__ import annotations

import logging

import numpy as np

from ..core.component import Component
from ..core.geometry import Size
from .grid import Grid
from .track import Track

logger = logging.getLogger(__name__)


class FlexGrid(Grid):
    """A Grid where each row is as tall as its tallest item and each column
    as wide as its widest item.

    Configuration, dimension inference and fill order are the same as Grid.
    Cells are anchored at the content top-left and are not stretched to fill
    any surplus space in the container; every visible item is sized exactly
    to its cell (column width x row height).
    """

    def _track_sizes(self, metric: str) -> tuple[np.ndarray, np.ndarray]:
        """Per-row heights and per-column widths for a size metric.

        Rows or columns holding no visible item have size 0.
        """
        rows, columns = self._effective_dimensions()
        heights = np.zeros(rows, dtype=np.float64)
        widths = np.zeros(columns, dtype=np.float64)
        for item, row, col in self._slots():
            size = self.metric_size(item, metric)
            heights[row] = max(heights[row], size.height)
            widths[col] = max(widths[col], size.width)
        return heights, widths

    def row_heights(self, metric: str = "preferred") -> list[float]:
        return self._track_sizes(metric)[0].tolist()

    def column_widths(self, metric: str = "preferred") -> list[float]:
        return self._track_sizes(metric)[1].tolist()

    def _measure(self, container: Component, metric: str) -> Size:
        heights, widths = self._track_sizes(metric)
        width = Track(widths, gap=self._hgap).total_size
        height = Track(heights, gap=self._vgap).total_size
        return self.with_insets(width, height, container.insets())

    def layout(self, container: Component) -> None:
        rows, columns = self._effective_dimensions()
        if rows == 0 or columns == 0:
            return
        content = self.content_rect(container)
        heights, widths = self._track_sizes("preferred")
        col_track = Track(widths, gap=self._hgap, offset=content.x)
        row_track = Track(heights, gap=self._vgap, offset=content.y)

        slots = self._slots()
        for item, row, col in slots:
            x, width = col_track.span(col)
            y, height = row_track.span(row)
            item.set_bounds(x=x, y=y, width=width, height=height)

        logger.debug(
            f"FlexGrid layout placed {len(slots)} of {len(self._items)} items "
            f"in {rows}x{columns} cells spanning {col_track.total_size}x{row_track.total_size}"
        )
