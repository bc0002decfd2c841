"""Tests for the Relative layout."""

from layoutkit.core.component import Box
from layoutkit.core.container import Panel
from layoutkit.core.geometry import Bounds, Insets, Size
from layoutkit.layout.relative import Relative


class TestRelative:
    def test_constant_sizes(self, container, padded_container):
        layout = Relative()
        for panel in (container, padded_container, Panel()):
            assert layout.preferred(panel) == Size(100, 100)
            assert layout.minimum(panel) == Size(100, 100)
            assert layout.maximum(panel) == Size(100, 100)

    def test_fresh_instances(self, container):
        layout = Relative()
        assert layout.preferred(container) is not layout.preferred(container)

    def test_layout_leaves_children(self):
        children = [Box(bounds=Bounds(i, i, 10, 10)) for i in range(3)]
        panel = Panel(
            children=children,
            layout=Relative(),
            bounds=Bounds(0, 0, 500, 500),
            insets=Insets(top=5),
        )
        panel.do_layout()
        assert [c.bounds() for c in children] == [Bounds(i, i, 10, 10) for i in range(3)]
