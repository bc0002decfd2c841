"""create_layout: build any layout algorithm from its name and options."""

from __future__ import annotations

from typing import Any

from .layout.base import AbstractLayout
from .layout.border import Border
from .layout.flex_grid import FlexGrid
from .layout.flow import Flow
from .layout.grid import Grid
from .layout.relative import Relative


LAYOUT_KINDS: dict[str, type[AbstractLayout]] = {
    "border": Border,
    "grid": Grid,
    "flex_grid": FlexGrid,
    "flow": Flow,
    "relative": Relative,
}


def create_layout(kind: str, **options: Any) -> AbstractLayout:
    """Instantiate the layout registered under ``kind``.

    Parameters
    ----------
    kind : one of 'border', 'grid', 'flex_grid', 'flow', 'relative'
           (case-insensitive; '-' is accepted for '_').
    **options : passed to the layout's constructor, e.g. ``rows=2`` for a
                grid or ``alignment='center'`` for a flow.
    """
    key = kind.lower().replace("-", "_")
    if key not in LAYOUT_KINDS:
        valid = ", ".join(sorted(LAYOUT_KINDS))
        raise ValueError(f"Unknown layout kind '{kind}'. Use one of: {valid}.")
    return LAYOUT_KINDS[key](**options)
