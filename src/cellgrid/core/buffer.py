"""Buffer - fixed-size 2D grid of cells used as an off-screen render target."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, NamedTuple

from cellgrid.core.cell import Cell, new
from cellgrid.core.constants import MIN_EXTENT
from cellgrid.core.errors import InvalidDimensionError

logger = logging.getLogger(__name__)


class Size(NamedTuple):
    """Extent of a buffer in cells."""
    width: int
    height: int


@dataclass
class Buffer:
    """
    A grid of Cells stored column by column.

    Cells are addressed as ``buffer[x][y]`` (or ``buffer[x, y]``) with x the
    column and y the row. All columns have the same height and the
    dimensions never change after creation; use new_buffer() to build one.
    Buffers have no locking, callers sharing one across threads must
    serialize access themselves.
    """
    columns: list[list[Cell]]

    def size(self) -> Size:
        """Return the dimensions of the buffer."""
        if not self.columns:
            return Size(0, 0)
        return Size(len(self.columns), len(self.columns[0]))

    def _check_bounds(self, x: int, y: int) -> None:
        width, height = self.size()
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError(
                f"Position ({x}, {y}) out of bounds ({width}x{height})"
            )

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        self._check_bounds(x, y)
        return self.columns[x][y]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Store a copy of cell at position (x, y)."""
        self._check_bounds(x, y)
        self.columns[x][y] = cell.copy()

    def __getitem__(self, key: int | tuple[int, int]) -> list[Cell] | Cell:
        """Get a column with ``buffer[x]`` or a cell with ``buffer[x, y]``."""
        if isinstance(key, tuple):
            x, y = key
            return self.columns[x][y]
        return self.columns[key]

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set a cell using indexing: buffer[x, y] = cell."""
        x, y = pos
        self.columns[x][y] = cell.copy()

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[list[Cell]]:
        """Iterate over columns."""
        return iter(self.columns)

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples, column by column."""
        for x, column in enumerate(self.columns):
            for y, cell in enumerate(column):
                yield x, y, cell

    def fill(self, cell: Cell) -> None:
        """Set every position to its own copy of cell."""
        for column in self.columns:
            for y in range(len(column)):
                column[y] = cell.copy()


def new_buffer(size: tuple[int, int]) -> Buffer:
    """
    Create a buffer of the given (width, height), every cell empty.

    Raises:
        InvalidDimensionError: If width or height is below 1.
    """
    width, height = size
    if width < MIN_EXTENT or height < MIN_EXTENT:
        logger.debug("Rejecting buffer of size %dx%d", width, height)
        raise InvalidDimensionError((width, height))

    logger.debug("Allocating %dx%d buffer", width, height)
    return Buffer(columns=[[new() for _ in range(height)] for _ in range(width)])
