"""Track positions along one axis of a grid."""

from __future__ import annotations

from typing import Sequence

import numpy as np


class Track:
    """Start positions for a run of cells separated by a uniform gap.

    Cells may differ in size (FlexGrid) or all share one size (Grid).
    """

    def __init__(
        self,
        sizes: Sequence[float] | np.ndarray,
        gap: float = 0.0,
        offset: float = 0.0,
    ) -> None:
        self._sizes = np.asarray(sizes, dtype=np.float64)
        self._gap = gap
        self._offset = offset
        self._positions = self._compute_positions()

    @classmethod
    def uniform(cls, n_cells: int, cell_size: float, gap: float = 0.0, offset: float = 0.0) -> Track:
        return cls(np.full(n_cells, cell_size, dtype=np.float64), gap=gap, offset=offset)

    def _compute_positions(self) -> np.ndarray:
        """Each cell starts after every earlier cell and its trailing gap."""
        if len(self._sizes) == 0:
            return np.empty(0, dtype=np.float64)
        steps = self._sizes[:-1] + self._gap
        return self._offset + np.concatenate(([0.0], np.cumsum(steps)))

    @property
    def positions(self) -> np.ndarray:
        return self._positions

    @property
    def sizes(self) -> np.ndarray:
        return self._sizes

    def __len__(self) -> int:
        return len(self._sizes)

    @property
    def total_size(self) -> float:
        """Span of all cells and the gaps between them."""
        if len(self._sizes) == 0:
            return 0.0
        return float(self._positions[-1] + self._sizes[-1] - self._offset)

    def span(self, index: int) -> tuple[float, float]:
        """(start, size) of one cell as plain floats."""
        return float(self._positions[index]), float(self._sizes[index])
