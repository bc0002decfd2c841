"""Tests for the create_layout factory."""

import pytest

from layoutkit import create_layout, LAYOUT_KINDS
from layoutkit.core.component import Box
from layoutkit.layout.base import AbstractLayout
from layoutkit.layout.border import Border
from layoutkit.layout.flex_grid import FlexGrid
from layoutkit.layout.flow import Flow
from layoutkit.layout.grid import Grid
from layoutkit.layout.relative import Relative


class TestCreateLayout:
    @pytest.mark.parametrize("kind,cls", [
        ("border", Border),
        ("grid", Grid),
        ("flex_grid", FlexGrid),
        ("flow", Flow),
        ("relative", Relative),
    ])
    def test_kinds(self, kind, cls):
        layout = create_layout(kind)
        assert type(layout) is cls
        assert isinstance(layout, AbstractLayout)

    def test_case_and_dash_insensitive(self):
        assert type(create_layout("Flex-Grid")) is FlexGrid

    def test_options_forwarded(self):
        items = [Box(), Box(), Box()]
        grid = create_layout("grid", columns=2, items=items, fill="vertical")
        assert grid.dimensions() == (2, 2)
        assert grid.fill == "vertical"

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown layout kind"):
            create_layout("spiral")

    def test_invalid_option_value(self):
        with pytest.raises(ValueError):
            create_layout("flow", alignment="middle")

    def test_registry(self):
        assert set(LAYOUT_KINDS) == {"border", "grid", "flex_grid", "flow", "relative"}
