"""Shared constants for cell grids."""

# Rune of a cell that holds no glyph (rendered as a blank by the compositor)
EMPTY_RUNE = ""

# Smallest valid extent of a buffer in either dimension
MIN_EXTENT = 1
