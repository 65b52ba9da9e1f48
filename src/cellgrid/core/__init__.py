"""Core data structures for cell grids."""

from cellgrid.core.color import Color
from cellgrid.core.options import Option, OptionFunc, Options, bg_color, fg_color, new_options
from cellgrid.core.cell import Cell, new
from cellgrid.core.buffer import Buffer, Size, new_buffer
from cellgrid.core.errors import CellGridError, InvalidDimensionError

__all__ = [
    "Color",
    "Option",
    "OptionFunc",
    "Options",
    "fg_color",
    "bg_color",
    "new_options",
    "Cell",
    "new",
    "Buffer",
    "Size",
    "new_buffer",
    "CellGridError",
    "InvalidDimensionError",
]
