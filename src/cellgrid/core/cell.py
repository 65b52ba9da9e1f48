"""Cell - atomic unit of a buffer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cellgrid.core.constants import EMPTY_RUNE
from cellgrid.core.options import Option, Options, apply_options, new_options


@dataclass(slots=True)
class Cell:
    """
    A single character cell with its display attributes.

    Every cell owns its Options; an Options passed in is copied so that
    changing one cell's attributes is never visible through another.
    An empty rune means the cell holds no glyph.
    """
    rune: str = EMPTY_RUNE
    opts: Options = field(default_factory=Options)

    def __post_init__(self) -> None:
        self.opts = self.opts.copy()

    def apply(self, *opts: Option) -> None:
        """Apply configurators on top of the current options.

        Fields set earlier are kept unless a configurator overwrites them.
        """
        apply_options(self.opts, *opts)

    def copy(self) -> Cell:
        """Create a copy of this cell with its own options."""
        return Cell(rune=self.rune, opts=self.opts)

    def is_default(self) -> bool:
        """Check if this cell has no glyph and default options."""
        return self.rune == EMPTY_RUNE and self.opts.is_default()


def new(rune: str | int = EMPTY_RUNE, *opts: Option) -> Cell:
    """Create a cell holding rune, with options built from the configurators.

    The rune may be a one-character string or an integer code point; the
    code point 0 stands for "no glyph".
    """
    if isinstance(rune, int):
        rune = chr(rune) if rune else EMPTY_RUNE
    return Cell(rune=rune, opts=new_options(*opts))
