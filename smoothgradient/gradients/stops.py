from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..colors.decompose import to_components
from ..colors.rgba import RGBAColor
from ..errors import InvalidArgumentError
from ..types.color_types import ColorLike, StopLike


@dataclass(frozen=True)
class ColorStop:
    """One anchor of a gradient. ``location`` is not range-checked."""
    color: RGBAColor
    location: float

    def __post_init__(self):
        if not isinstance(self.color, RGBAColor):
            object.__setattr__(self, 'color', to_components(self.color))
        object.__setattr__(self, 'location', float(self.location))


def as_stop(stop: StopLike) -> ColorStop:
    """Accept a ColorStop or a ``(color, location)`` pair."""
    if isinstance(stop, ColorStop):
        return stop
    if isinstance(stop, (tuple, list)) and len(stop) == 2:
        color, location = stop
        return ColorStop(to_components(color), location)
    raise InvalidArgumentError(f"Expected ColorStop or (color, location) pair, got {stop!r}")


def as_stops(stops: Iterable[StopLike]) -> List[ColorStop]:
    return [as_stop(s) for s in stops]


def stops_from_colors(colors: Sequence[ColorLike]) -> List[ColorStop]:
    """
    Spread colors evenly over [0, 1].

    Stop ``i`` of ``n`` sits at ``i / (n - 1)``; a lone color sits at 0.
    """
    n = len(colors)
    if n == 1:
        return [ColorStop(to_components(colors[0]), 0.0)]
    return [ColorStop(to_components(c), i / (n - 1)) for i, c in enumerate(colors)]
