"""Shared fixtures for the rasterizer tests."""

from collections import Counter

import pytest

from soft_rasterizer.canvas import Canvas, Format


class RecordingCanvas(Canvas):
    """Canvas that also records every set() call, in order."""
    __slots__ = ['writes']

    def __init__(self, width, height, fmt=Format.RGB):
        super().__init__(width, height, fmt)
        self.writes = []

    def set(self, x, y, color):
        self.writes.append((x, y))
        return super().set(x, y, color)

    @property
    def write_counts(self):
        return Counter(self.writes)


@pytest.fixture
def canvas():
    return RecordingCanvas(200, 200)


@pytest.fixture
def make_canvas():
    def _make(width=200, height=200, fmt=Format.RGB):
        return RecordingCanvas(width, height, fmt)
    return _make
