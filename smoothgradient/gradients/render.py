"""
Piecewise-linear rasterization of a stop list.

This is the plain linear-gradient primitive the subdivider targets: colors
are interpolated linearly between consecutive stops and nothing else. It
exists so expanded stop lists can be checked as pixels.
"""

from __future__ import annotations
from numbers import Integral
from typing import TYPE_CHECKING, Any, Sequence

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from ..colors.interpolate import np_lerp_components
from ..colors.rgba import CLEAR
from ..errors import InvalidArgumentError
from .stops import ColorStop

if TYPE_CHECKING:
    from .gradient import UnitPoint


def sample_stops(stops: Sequence[ColorStop], positions) -> NDArray:
    """
    Sample a stop list at arbitrary positions.

    Stops are used in the order given. A position inside several spans takes
    the first one. Positions outside every span take the first stop's color
    when they fall before the last stop's location, the last stop's color
    otherwise. Zero-length spans resolve to their later stop.

    Args:
        stops: Stops in rendering order
        positions: Positions along the gradient axis, any shape

    Returns:
        Colors, shape positions.shape + (4,)
    """
    p = np.asarray(positions, dtype=np.float64)
    if p.ndim == 0:
        return sample_stops(stops, p[None])[0]
    if len(stops) == 0:
        return np.broadcast_to(CLEAR.to_array(), p.shape + (4,)).copy()

    colors = np.array([s.color.components for s in stops], dtype=np.float64)
    locations = np.array([s.location for s in stops], dtype=np.float64)

    out = np.where((p >= locations[-1])[..., None], colors[-1], colors[0])
    # Walk spans backwards so the earliest matching span is written last.
    for i in range(len(stops) - 2, -1, -1):
        lo, hi = locations[i], locations[i + 1]
        if hi < lo:
            continue
        inside = (p >= lo) & (p <= hi)
        if not np.any(inside):
            continue
        if hi == lo:
            out[inside] = colors[i + 1]
            continue
        t = (p[inside] - lo) / (hi - lo)
        out[inside] = np_lerp_components(colors[i], colors[i + 1], t)
    return out


def _validate_size(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidArgumentError(f"{name} must be >= 1, got {value}")
    return int(value)


def render_linear(
    stops: Sequence[ColorStop],
    width: int,
    height: int,
    start_point: UnitPoint,
    end_point: UnitPoint,
) -> NDArray:
    """
    Render a linear gradient between two unit-space anchors.

    Each pixel center is projected onto the start -> end axis; the projection
    (0 at start, 1 at end) is the position handed to ``sample_stops``. When
    both anchors coincide the image is filled with the first stop's color.

    Returns:
        Float image, shape (height, width, 4)
    """
    width = _validate_size("width", width)
    height = _validate_size("height", height)

    xs = (np.arange(width, dtype=np.float64) + 0.5) / width
    ys = (np.arange(height, dtype=np.float64) + 0.5) / height
    gx, gy = np.meshgrid(xs, ys)

    start = start_point.as_array()
    axis = end_point.as_array() - start
    length_sq = float(axis @ axis)
    if length_sq == 0.0:
        if len(stops) == 0:
            return sample_stops(stops, np.zeros((height, width)))
        return np.broadcast_to(stops[0].color.to_array(), (height, width, 4)).copy()

    positions = ((gx - start[0]) * axis[0] + (gy - start[1]) * axis[1]) / length_sq
    return sample_stops(stops, positions)


def to_uint8(image: NDArray) -> NDArray:
    """Scale a [0, 1] float image to 0-255 ``uint8``."""
    clipped = bound_type_to_np_function[BoundType.CLAMP](np.asarray(image, dtype=np.float64), 0.0, 1.0)
    return np.round(clipped * 255).astype(np.uint8)
