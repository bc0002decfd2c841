"""Tests for Track position computation."""

from layoutkit.layout.track import Track


class TestTrack:
    def test_uniform_positions(self):
        t = Track.uniform(4, 10.0)
        assert list(t.positions) == [0.0, 10.0, 20.0, 30.0]

    def test_with_offset_and_gap(self):
        t = Track.uniform(3, 10.0, gap=5.0, offset=2.0)
        assert list(t.positions) == [2.0, 17.0, 32.0]

    def test_varying_sizes(self):
        t = Track([10, 30, 20], gap=2.0)
        assert list(t.positions) == [0.0, 12.0, 44.0]
        assert t.total_size == 64.0

    def test_total_size_empty(self):
        t = Track([], gap=5.0)
        assert len(t) == 0
        assert t.total_size == 0.0

    def test_single_cell(self):
        t = Track([7.5], gap=100.0, offset=1.0)
        assert t.span(0) == (1.0, 7.5)
        assert t.total_size == 7.5

    def test_span_returns_floats(self):
        start, size = Track.uniform(2, 4.0).span(1)
        assert type(start) is float
        assert type(size) is float

    def test_negative_cells(self):
        t = Track.uniform(2, -5.0, gap=10.0)
        assert list(t.positions) == [0.0, 5.0]
