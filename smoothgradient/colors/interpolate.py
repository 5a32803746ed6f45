"""Component-wise interpolation between two colors."""

from __future__ import annotations
import math

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from ..easing.policy import ExponentialPolicy
from .rgba import RGBAColor


def lerp_component(start: float, end: float, fraction: float) -> float:
    """
    start + (end - start) * fraction.

    Equal endpoints stay put for any fraction, so an infinite fraction from a
    degenerate exponent cannot turn the component into NaN.
    """
    delta = end - start
    if delta == 0:
        return start
    value = start + delta * fraction
    if math.isnan(value):
        return start
    return value


def lerp_components(start: RGBAColor, end: RGBAColor, fraction: float) -> RGBAColor:
    """Interpolate every channel, alpha included, by the same fraction."""
    return RGBAColor(*(lerp_component(s, e, fraction) for s, e in zip(start, end)))


def smooth_interpolated(start: RGBAColor, end: RGBAColor, fraction: float) -> RGBAColor:
    """Interpolate using a fraction that has already been eased."""
    return lerp_components(start, end, fraction)


def interpolated(start: RGBAColor, end: RGBAColor, fraction: float, exponent: float) -> RGBAColor:
    """
    Interpolate with ``fraction ** exponent`` in place of ``fraction``.

    Exponent 2 at a linear midpoint gives 0.25, a color closer to ``start``.
    """
    return lerp_components(start, end, ExponentialPolicy(exponent).apply(fraction))


def np_lerp_components(starts: NDArray, ends: NDArray, fractions: NDArray) -> NDArray:
    """
    Vectorized lerp_components.

    Args:
        starts: Start colors, shape (N, 4)
        ends: End colors, shape (N, 4)
        fractions: Per-row color fractions, shape (N,)

    Returns:
        Interpolated colors clamped to [0, 1], shape (N, 4)
    """
    starts = np.asarray(starts, dtype=np.float64)
    ends = np.asarray(ends, dtype=np.float64)
    f = np.asarray(fractions, dtype=np.float64)[..., None]
    delta = ends - starts
    with np.errstate(invalid='ignore'):
        out = starts + delta * f
    out = np.where((delta == 0) | np.isnan(out), starts, out)
    return bound_type_to_np_function[BoundType.CLAMP](out, 0.0, 1.0)
