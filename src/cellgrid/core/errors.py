"""Errors raised by the cell grid core."""

from __future__ import annotations


class CellGridError(Exception):
    """Base class for cellgrid errors."""


class InvalidDimensionError(CellGridError, ValueError):
    """Raised when a buffer is requested with a non-positive width or height."""

    def __init__(self, size: tuple[int, int]) -> None:
        self.size = size
        width, height = size
        super().__init__(
            f"buffer dimensions must be positive, got width={width}, height={height}"
        )
