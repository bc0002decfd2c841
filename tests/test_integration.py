"""End-to-end tests: nested containers and mixed algorithms."""

import pytest

from layoutkit import (
    Border,
    Bounds,
    Box,
    FlexGrid,
    Flow,
    Grid,
    Insets,
    Panel,
    Relative,
    Size,
    layout_tree,
)


class TestNestedLayout:
    def test_preferred_propagates_through_panels(self):
        buttons = [Box(preferred=(30, 12)) for _ in range(3)]
        toolbar = Panel(children=buttons, layout=Flow(items=buttons, hgap=2))
        body = Box(preferred=(100, 80))
        root = Panel(
            children=[toolbar, body],
            layout=Border(north=toolbar, center=body, vgap=4),
            insets=Insets(top=2, bottom=2, left=2, right=2),
        )
        # toolbar natural width 94 < body 100
        assert toolbar.preferred_size() == Size(94, 12)
        assert root.preferred_size() == Size(104, 12 + 4 + 80 + 4)

    def test_full_window(self):
        header = Box(preferred=(0, 30), name="header")
        status = Box(preferred=(0, 20), name="status")
        tiles = [Box(preferred=(40, 40), name=f"tile{i}") for i in range(6)]
        sidebar_items = [Box(preferred=(w, 10), name=f"nav{i}") for i, w in enumerate((50, 20, 35))]

        sidebar = Panel(
            children=sidebar_items,
            layout=FlexGrid(columns=1, items=sidebar_items, vgap=5),
            name="sidebar",
        )
        gallery = Panel(children=tiles, layout=Grid(columns=3, items=tiles, hgap=10, vgap=10), name="gallery")
        root = Panel(
            children=[header, status, sidebar, gallery],
            layout=Border(north=header, south=status, west=sidebar, center=gallery),
            bounds=Bounds(0, 0, 400, 300),
            name="root",
        )

        assert sidebar.preferred_size() == Size(50, 40)
        assert layout_tree(root) == 3

        assert header.bounds() == Bounds(0, 0, 400, 30)
        assert status.bounds() == Bounds(0, 280, 400, 20)
        assert sidebar.bounds() == Bounds(0, 30, 50, 250)
        assert gallery.bounds() == Bounds(50, 30, 350, 250)

        # gallery: (350 - 20) / 3 = 110 wide, (250 - 10) / 2 = 120 tall
        assert tiles[0].bounds() == Bounds(0, 0, 110, 120)
        assert tiles[5].bounds() == Bounds(240, 130, 110, 120)
        assert [b.bounds().y for b in sidebar_items] == [0, 15, 30]
        assert {b.bounds().width for b in sidebar_items} == {50}

    @pytest.mark.parametrize("make_layout", [
        lambda items: Border(center=items[0], east=items[1]),
        lambda items: Grid(columns=2, items=items),
        lambda items: FlexGrid(columns=2, items=items),
        lambda items: Flow(items=items),
        lambda items: Relative(),
    ])
    def test_layout_never_touches_container(self, make_layout):
        items = [Box(preferred=(10, 10)), Box(preferred=(20, 20))]
        panel = Panel(children=items, layout=make_layout(items), bounds=Bounds(3, 4, 50, 60))
        panel.do_layout()
        assert panel.bounds() == Bounds(3, 4, 50, 60)

    @pytest.mark.parametrize("make_layout", [
        lambda items: Border(center=items[0], east=items[1]),
        lambda items: Grid(columns=2, items=items),
        lambda items: FlexGrid(columns=2, items=items),
        lambda items: Flow(items=items),
    ])
    def test_hidden_child_ignored_by_preferred(self, make_layout):
        solo = Panel()
        shown = [Box(preferred=(10, 10)), Box(preferred=(200, 200))]
        hidden_big = [Box(preferred=(10, 10)), Box(preferred=(200, 200), visible=False)]
        hidden_small = [Box(preferred=(10, 10)), Box(preferred=(1, 1), visible=False)]
        assert make_layout(hidden_big).preferred(solo) == make_layout(hidden_small).preferred(solo)
        assert make_layout(hidden_big).preferred(solo) != make_layout(shown).preferred(solo)
