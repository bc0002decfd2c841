"""layoutkit: pluggable layout algorithms for rectangular components."""

from ._version import __version__
from .api import create_layout, LAYOUT_KINDS
from .core.geometry import Size, Bounds, Insets, MAX_EXTENT
from .core.component import Component, Box
from .core.container import Panel, layout_tree
from .layout.base import AbstractLayout
from .layout.border import Border
from .layout.grid import Grid, infer_dimensions
from .layout.flex_grid import FlexGrid
from .layout.flow import Flow, pack_rows
from .layout.relative import Relative


__all__ = [
    "__version__",
    "create_layout",
    "LAYOUT_KINDS",
    "Size",
    "Bounds",
    "Insets",
    "MAX_EXTENT",
    "Component",
    "Box",
    "Panel",
    "layout_tree",
    "AbstractLayout",
    "Border",
    "Grid",
    "infer_dimensions",
    "FlexGrid",
    "Flow",
    "pack_rows",
    "Relative",
]
