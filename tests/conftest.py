"""Shared test fixtures for layoutkit."""

import pytest

from layoutkit.core.component import Box
from layoutkit.core.container import Panel
from layoutkit.core.geometry import Bounds, Insets


@pytest.fixture
def container():
    """200x200 panel at the origin, no insets."""
    return Panel(bounds=Bounds(0, 0, 200, 200))


@pytest.fixture
def padded_container():
    """300x200 panel offset from its parent, with uneven insets."""
    return Panel(
        bounds=Bounds(15, 25, 300, 200),
        insets=Insets(top=10, bottom=20, left=5, right=15),
    )


@pytest.fixture
def four_boxes():
    """Four boxes of different preferred sizes."""
    return [
        Box(preferred=(30, 10), name="a"),
        Box(preferred=(50, 20), name="b"),
        Box(preferred=(20, 40), name="c"),
        Box(preferred=(10, 5), name="d"),
    ]
