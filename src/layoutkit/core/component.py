"""Component: the capability interface every layout algorithm works against.

Algorithms only ever read sizes, visibility and insets from a component and
write its bounds. Anything providing these methods can be laid out; Box is
the stock leaf implementation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .geometry import MAX_EXTENT, Bounds, Insets, Size


@runtime_checkable
class Component(Protocol):
    """Protocol for anything a layout algorithm can size and place."""

    def bounds(self) -> Bounds:
        ...

    def set_bounds(
        self,
        x: float | None = None,
        y: float | None = None,
        width: float | None = None,
        height: float | None = None,
    ) -> None:
        """Overwrite only the supplied fields, keeping the others."""
        ...

    def preferred_size(self) -> Size:
        ...

    def minimum_size(self) -> Size:
        ...

    def maximum_size(self) -> Size:
        ...

    def is_visible(self) -> bool:
        ...

    def insets(self) -> Insets:
        ...

    def do_layout(self) -> None:
        """Run this component's own layout on itself, if it has one."""
        ...


class Box:
    """A leaf component with fixed size hints.

    Parameters
    ----------
    preferred : (width, height) or Size. Defaults to 0x0.
    minimum : (width, height) or Size. Defaults to 0x0.
    maximum : (width, height) or Size. Defaults to MAX_EXTENT on both axes.
    bounds : initial Bounds. Defaults to an empty rect at the origin.
    insets : Insets reported to layouts. Defaults to none.
    visible : whether layouts should consider this component.
    name : optional label used in exported snapshots.
    """

    def __init__(
        self,
        preferred: Size | tuple[float, float] = (0.0, 0.0),
        minimum: Size | tuple[float, float] = (0.0, 0.0),
        maximum: Size | tuple[float, float] = (MAX_EXTENT, MAX_EXTENT),
        bounds: Bounds | None = None,
        insets: Insets | None = None,
        visible: bool = True,
        name: str | None = None,
    ) -> None:
        self._preferred = _as_size(preferred)
        self._minimum = _as_size(minimum)
        self._maximum = _as_size(maximum)
        self._bounds = bounds if bounds is not None else Bounds()
        self._insets = insets if insets is not None else Insets()
        self._visible = visible
        self.name = name

    def bounds(self) -> Bounds:
        return self._bounds

    def set_bounds(
        self,
        x: float | None = None,
        y: float | None = None,
        width: float | None = None,
        height: float | None = None,
    ) -> None:
        # Single assignment of a new frozen Bounds: readers never see a half-applied update
        self._bounds = self._bounds.merge(x=x, y=y, width=width, height=height)

    def preferred_size(self) -> Size:
        return Size(self._preferred.width, self._preferred.height)

    def minimum_size(self) -> Size:
        return Size(self._minimum.width, self._minimum.height)

    def maximum_size(self) -> Size:
        return Size(self._maximum.width, self._maximum.height)

    def is_visible(self) -> bool:
        return self._visible

    def set_visible(self, visible: bool) -> None:
        self._visible = visible

    def insets(self) -> Insets:
        return self._insets

    def do_layout(self) -> None:
        pass

    def __repr__(self) -> str:
        label = f"{self.name!r}, " if self.name else ""
        return f"Box({label}preferred={self._preferred.width}x{self._preferred.height})"


def _as_size(value: Size | tuple[float, float]) -> Size:
    if isinstance(value, Size):
        return value
    width, height = value
    return Size(width, height)
