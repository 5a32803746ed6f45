"""
Expand a sparse stop list into a dense one for linear rendering.

A renderer that can only draw straight color ramps between stops cannot
show an eased transition directly. Subdividing each span into ``n`` samples,
with the color eased and the location kept linear, approximates the curve
with ``n`` straight pieces.

For N >= 2 stops and ``n`` subdivisions the output has ``(N - 1) * n + 1``
stops: ``n`` samples per span starting at the span's first stop, then the
last input stop unchanged. Zero or one stop passes through as is.
"""

from __future__ import annotations
import warnings
from dataclasses import dataclass, field
from numbers import Integral
from typing import Any, Iterable, List, Tuple

import numpy as np

from ..colors.interpolate import np_lerp_components
from ..colors.rgba import RGBAColor
from ..defaults import DEFAULT_SMOOTH_TYPE, DEFAULT_SUBDIVISIONS, SUBDIVISION_WARNING_THRESHOLD
from ..easing.policy import EasingPolicy, as_policy
from ..errors import InvalidArgumentError, LargeSubdivisionWarning
from ..types.color_types import StopLike
from .stops import ColorStop, as_stops


def validate_subdivisions(subdivisions: Any, stacklevel: int = 2) -> int:
    """Check a subdivision count, warning once when it is unusually large.

    ``stacklevel`` counts from the caller: 1 blames the caller itself, 2 its caller.
    """
    if isinstance(subdivisions, bool) or not isinstance(subdivisions, Integral):
        raise InvalidArgumentError(f"subdivisions must be an integer, got {subdivisions!r}")
    if subdivisions < 1:
        raise InvalidArgumentError(f"subdivisions must be >= 1, got {subdivisions}")
    if subdivisions > SUBDIVISION_WARNING_THRESHOLD:
        warnings.warn(
            f"{subdivisions} subdivisions per span will produce a very long stop list",
            LargeSubdivisionWarning,
            stacklevel=stacklevel + 1,
        )
    return int(subdivisions)


def _subdivide_span(
    current: ColorStop,
    next_stop: ColorStop,
    linear_fractions: np.ndarray,
    color_fractions: np.ndarray,
) -> List[ColorStop]:
    locations = current.location + (next_stop.location - current.location) * linear_fractions
    colors = np_lerp_components(current.color.to_array(), next_stop.color.to_array(), color_fractions)
    return [
        ColorStop(RGBAColor(*rgba), float(loc))
        for rgba, loc in zip(colors.tolist(), locations.tolist())
    ]


def subdivide(
    stops: Iterable[StopLike],
    policy: Any = DEFAULT_SMOOTH_TYPE,
    subdivisions: int = DEFAULT_SUBDIVISIONS,
) -> List[ColorStop]:
    """
    Subdivide every span between adjacent stops.

    Args:
        stops: ColorStops or (color, location) pairs, in rendering order.
            Locations are not sorted; a span running backwards simply has a
            negative length.
        policy: Anything ``as_policy`` accepts: a policy, an easing name or
            enum member, or a number read as an exponent.
        subdivisions: Samples per span, at least 1.

    Returns:
        The expanded stop list.
    """
    stops = as_stops(stops)
    if len(stops) < 2:
        return stops

    return _expand(stops, as_policy(policy), validate_subdivisions(subdivisions, stacklevel=2))


def _expand(stops: List[ColorStop], policy: EasingPolicy, subdivisions: int) -> List[ColorStop]:
    if len(stops) < 2:
        return list(stops)
    linear_fractions = np.arange(subdivisions, dtype=np.float64) / subdivisions
    color_fractions = policy.apply_array(linear_fractions)

    result: List[ColorStop] = []
    for current, next_stop in zip(stops[:-1], stops[1:]):
        result.extend(_subdivide_span(current, next_stop, linear_fractions, color_fractions))
    result.append(stops[-1])
    return result


@dataclass(frozen=True)
class GradientSpec:
    """Everything needed to expand one gradient: stops, easing policy and subdivision count."""
    stops: Tuple[ColorStop, ...]
    policy: EasingPolicy = field(default_factory=lambda: as_policy(DEFAULT_SMOOTH_TYPE))
    subdivisions: int = DEFAULT_SUBDIVISIONS

    def __post_init__(self):
        object.__setattr__(self, 'stops', tuple(as_stops(self.stops)))
        object.__setattr__(self, 'policy', as_policy(self.policy))
        object.__setattr__(self, 'subdivisions', validate_subdivisions(self.subdivisions, stacklevel=3))

    @property
    def expanded_length(self) -> int:
        if len(self.stops) < 2:
            return len(self.stops)
        return (len(self.stops) - 1) * self.subdivisions + 1

    def expand(self) -> List[ColorStop]:
        return _expand(list(self.stops), self.policy, self.subdivisions)
