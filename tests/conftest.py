"""Shared fixtures for cellgrid tests."""

import pytest

from cellgrid.core.buffer import Buffer, new_buffer
from cellgrid.core.cell import Cell, new
from cellgrid.core.color import Color
from cellgrid.core.options import bg_color, fg_color


@pytest.fixture
def styled_cell() -> Cell:
    """A cell with a glyph and both colors set."""
    return new("X", fg_color(Color.CYAN), bg_color(Color.MAGENTA))


@pytest.fixture
def buffer() -> Buffer:
    """A small 2x3 buffer."""
    return new_buffer((2, 3))
