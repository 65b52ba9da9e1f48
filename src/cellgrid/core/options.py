"""Options - display attributes of a cell and the configurators that set them.

A configurator is anything implementing the ``Option`` protocol. Field setters
such as ``fg_color`` change one attribute and leave the rest alone, while an
``Options`` value used as a configurator replaces every attribute at once:

    >>> new_options(fg_color(Color.RED), bg_color(Color.BLUE))
    Options(fg_color=<Color.RED: 2>, bg_color=<Color.BLUE: 5>)
    >>> new_options(fg_color(Color.RED), Options(bg_color=Color.BLUE))
    Options(fg_color=<Color.DEFAULT: 0>, bg_color=<Color.BLUE: 5>)
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Callable, Protocol, runtime_checkable

from cellgrid.core.color import Color


@runtime_checkable
class Option(Protocol):
    """Protocol for configurators of an Options record."""

    def set(self, opts: Options) -> None:
        """Apply this configurator to opts in place."""
        ...


@dataclass(slots=True)
class Options:
    """
    Attributes of a cell.

    An Options with every field at its default is the same as requesting
    no attributes at all. Passed as a configurator it overwrites all
    fields of the target, discarding whatever was set before.
    """
    fg_color: Color = Color.DEFAULT
    bg_color: Color = Color.DEFAULT

    def set(self, opts: Options) -> None:
        """Overwrite every field of opts with the values of this record."""
        for f in fields(self):
            setattr(opts, f.name, getattr(self, f.name))

    def copy(self) -> Options:
        """Create an independent copy of these options."""
        return replace(self)

    def is_default(self) -> bool:
        """Check if no attribute has been set."""
        return self == Options()


class OptionFunc:
    """Adapts a plain callable taking an Options into an Option."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[Options], None]) -> None:
        self._fn = fn

    def set(self, opts: Options) -> None:
        self._fn(opts)


def fg_color(color: Color) -> Option:
    """Configurator that sets the foreground color."""
    def _set(opts: Options) -> None:
        opts.fg_color = color
    return OptionFunc(_set)


def bg_color(color: Color) -> Option:
    """Configurator that sets the background color."""
    def _set(opts: Options) -> None:
        opts.bg_color = color
    return OptionFunc(_set)


def apply_options(target: Options, *opts: Option) -> Options:
    """Apply configurators to target in order and return it.

    Later configurators win on conflicting fields.
    """
    for opt in opts:
        opt.set(target)
    return target


def new_options(*opts: Option) -> Options:
    """Build Options from an empty baseline and the given configurators."""
    return apply_options(Options(), *opts)
