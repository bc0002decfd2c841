"""Panel: a component that also exposes children and an optional layout."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from .component import Box, Component
from .geometry import Bounds, Insets, Size

if TYPE_CHECKING:
    from ..layout.base import AbstractLayout


class Panel:
    """A container built by composition rather than inheritance.

    The panel's own geometry lives in a Box; children are a plain list;
    arrangement is delegated to ``layout``. When a layout is set, size
    queries are answered by the layout, otherwise by the Box's fixed hints.

    ``do_layout`` only arranges the direct children. Nested panels are laid
    out when someone calls ``do_layout`` on them (see ``layout_tree``).
    """

    def __init__(
        self,
        children: Iterable[Component] = (),
        layout: AbstractLayout | None = None,
        bounds: Bounds | None = None,
        insets: Insets | None = None,
        visible: bool = True,
        name: str | None = None,
        preferred: Size | tuple[float, float] = (0.0, 0.0),
    ) -> None:
        self._box = Box(
            preferred=preferred,
            bounds=bounds,
            insets=insets,
            visible=visible,
            name=name,
        )
        self.children: list[Component] = list(children)
        self.layout = layout

    @property
    def name(self) -> str | None:
        return self._box.name

    def bounds(self) -> Bounds:
        return self._box.bounds()

    def set_bounds(
        self,
        x: float | None = None,
        y: float | None = None,
        width: float | None = None,
        height: float | None = None,
    ) -> None:
        self._box.set_bounds(x=x, y=y, width=width, height=height)

    def preferred_size(self) -> Size:
        if self.layout is None:
            return self._box.preferred_size()
        return self.layout.preferred(self)

    def minimum_size(self) -> Size:
        if self.layout is None:
            return self._box.minimum_size()
        return self.layout.minimum(self)

    def maximum_size(self) -> Size:
        if self.layout is None:
            return self._box.maximum_size()
        return self.layout.maximum(self)

    def is_visible(self) -> bool:
        return self._box.is_visible()

    def set_visible(self, visible: bool) -> None:
        self._box.set_visible(visible)

    def insets(self) -> Insets:
        return self._box.insets()

    def do_layout(self) -> None:
        if self.layout is not None:
            self.layout.layout(self)

    def __repr__(self) -> str:
        kind = type(self.layout).__name__ if self.layout is not None else None
        return f"Panel({self.name!r}, layout={kind}, children={len(self.children)})"


def layout_tree(root: Component) -> int:
    """Lay out ``root`` and then every nested container, parents first.

    Each level is a separate ``do_layout`` hand-off, so a child panel sees
    the bounds its parent just assigned. Returns the number of containers
    laid out.
    """
    count = 0
    stack = [root]
    while stack:
        component = stack.pop()
        children = getattr(component, "children", None)
        if children is None:
            continue
        component.do_layout()
        count += 1
        # Reversed so siblings are visited in declaration order
        stack.extend(reversed(children))
    return count
