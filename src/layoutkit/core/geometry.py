"""Geometric value types shared by components and layout algorithms."""

from __future__ import annotations

from dataclasses import dataclass, replace


# Saturation value for maximum sizes when children impose no cap
MAX_EXTENT = 32767.0


@dataclass(frozen=True)
class Size:
    """A width/height pair. Every size query builds a fresh instance."""

    width: float
    height: float

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class Insets:
    """Padding between a container's bounds and its content area."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def to_dict(self) -> dict:
        return {
            "top": self.top,
            "bottom": self.bottom,
            "left": self.left,
            "right": self.right,
        }


@dataclass(frozen=True)
class Bounds:
    """An axis-aligned rectangle in the parent's coordinate space."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def merge(
        self,
        x: float | None = None,
        y: float | None = None,
        width: float | None = None,
        height: float | None = None,
    ) -> Bounds:
        """Return a copy with only the supplied fields replaced."""
        changes = {
            name: value
            for name, value in (("x", x), ("y", y), ("width", width), ("height", height))
            if value is not None
        }
        return replace(self, **changes)

    def inset(self, insets: Insets) -> Bounds:
        """Content rect in local coordinates: origin shifted by the insets.

        May be degenerate (zero or negative size) when the insets exceed
        the bounds.
        """
        return Bounds(
            x=insets.left,
            y=insets.top,
            width=self.width - insets.horizontal,
            height=self.height - insets.vertical,
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}
