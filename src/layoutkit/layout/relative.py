"""Relative: the minimal conforming layout."""

from __future__ import annotations

from ..core.component import Component
from ..core.geometry import Size
from .base import AbstractLayout


RELATIVE_SIZE = 100.0


class Relative(AbstractLayout):
    """Reports a constant 100x100 for every query and never moves children."""

    def preferred(self, container: Component) -> Size:
        return Size(RELATIVE_SIZE, RELATIVE_SIZE)

    def minimum(self, container: Component) -> Size:
        return Size(RELATIVE_SIZE, RELATIVE_SIZE)

    def maximum(self, container: Component) -> Size:
        return Size(RELATIVE_SIZE, RELATIVE_SIZE)

    def layout(self, container: Component) -> None:
        pass
