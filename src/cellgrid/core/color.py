"""Color identifiers for cell attributes."""

from enum import IntEnum


class Color(IntEnum):
    """
    Display color of a cell's foreground or background.

    Colors are opaque identifiers; the numeric codes are fixed so a
    terminal driver can map them, but no arithmetic is defined on them.
    DEFAULT is the zero value and means "no color requested".
    """
    DEFAULT = 0
    BLACK = 1
    RED = 2
    GREEN = 3
    YELLOW = 4
    BLUE = 5
    MAGENTA = 6
    CYAN = 7
    WHITE = 8
