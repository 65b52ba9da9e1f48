"""
cellgrid: character cells and off-screen buffers for terminal dashboards

Quick Start:
    >>> import cellgrid
    >>> buf = cellgrid.new_buffer((80, 24))
    >>> buf[0, 0] = cellgrid.new("X", cellgrid.fg_color(cellgrid.Color.RED))
    >>> buf.size()
    Size(width=80, height=24)

Features:
    - Cells holding one rune and their display attributes
    - Composable configurators for partial or full attribute updates
    - Fixed-size column-major buffers with validated dimensions
"""

__version__ = "0.1.0"

# Attributes
from cellgrid.core.color import Color
from cellgrid.core.options import Option, OptionFunc, Options, bg_color, fg_color, new_options

# Cells and buffers
from cellgrid.core.cell import Cell, new
from cellgrid.core.buffer import Buffer, Size, new_buffer

# Errors
from cellgrid.core.errors import CellGridError, InvalidDimensionError

__all__ = [
    # Version
    "__version__",
    # Attributes
    "Color",
    "Option",
    "OptionFunc",
    "Options",
    "fg_color",
    "bg_color",
    "new_options",
    # Cells and buffers
    "Cell",
    "new",
    "Buffer",
    "Size",
    "new_buffer",
    # Errors
    "CellGridError",
    "InvalidDimensionError",
]
