"""
Scalar and vectorized easing curves.

Every curve maps a normalized fraction onto [0, 1] with f(0) == 0 and
f(1) == 1. Inputs are clamped to [0, 1] first; values outside that range are
never an error.

Scalar forms take and return plain floats. The ``np_`` forms take any
array-like and return an ``ndarray`` of the same shape.
"""

from __future__ import annotations
import math
from typing import Callable, Dict

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function, clamp01

from ..types.easing_types import EasingType

ScalarEasing = Callable[[float], float]
ArrayEasing = Callable[[NDArray], NDArray]

_HALF_PI = math.pi / 2


def _np_clamp01(u) -> NDArray:
    fn = bound_type_to_np_function[BoundType.CLAMP]
    return fn(np.asarray(u, dtype=np.float64), 0.0, 1.0)


# ===================== Scalar curves =====================

def linear(t: float) -> float:
    return float(clamp01(t))


def smoothstep(t: float) -> float:
    """Cubic Hermite curve 3t^2 - 2t^3; first derivative vanishes at both ends."""
    c = clamp01(t)
    return float(3 * c * c - 2 * c * c * c)


def smootherstep(t: float) -> float:
    """Quintic curve 6t^5 - 15t^4 + 10t^3; first and second derivatives vanish at both ends."""
    c = clamp01(t)
    t3 = c * c * c
    t4 = t3 * c
    t5 = t4 * c
    return float(6 * t5 - 15 * t4 + 10 * t3)


def smootheststep(t: float) -> float:
    """Septic curve -20t^7 + 70t^6 - 84t^5 + 35t^4; derivatives up to the third vanish at both ends."""
    c = clamp01(t)
    t4 = c * c * c * c
    t5 = t4 * c
    t6 = t5 * c
    t7 = t6 * c
    return float(-20 * t7 + 70 * t6 - 84 * t5 + 35 * t4)


def ease_in_out(t: float) -> float:
    """Quadratic ease-in-out, symmetric about t = 0.5."""
    c = clamp01(t)
    if c < 0.5:
        return float(2 * c * c)
    return float(1 - 2 * (1 - c) * (1 - c))


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out, symmetric about t = 0.5."""
    c = clamp01(t)
    if c < 0.5:
        return float(4 * c * c * c)
    return float(1 - (-2 * c + 2) ** 3 / 2)


def sine(t: float) -> float:
    """Ease-out quarter sine wave."""
    return math.sin(clamp01(t) * _HALF_PI)


def cosine(t: float) -> float:
    """Ease-in quarter cosine wave."""
    return 1 - math.cos(clamp01(t) * _HALF_PI)


# ===================== Vectorized curves =====================

def np_linear(u) -> NDArray:
    return _np_clamp01(u)


def np_smoothstep(u) -> NDArray:
    c = _np_clamp01(u)
    return 3 * c * c - 2 * c * c * c


def np_smootherstep(u) -> NDArray:
    c = _np_clamp01(u)
    t3 = c * c * c
    t4 = t3 * c
    t5 = t4 * c
    return 6 * t5 - 15 * t4 + 10 * t3


def np_smootheststep(u) -> NDArray:
    c = _np_clamp01(u)
    t4 = c * c * c * c
    t5 = t4 * c
    t6 = t5 * c
    t7 = t6 * c
    return -20 * t7 + 70 * t6 - 84 * t5 + 35 * t4


def np_ease_in_out(u) -> NDArray:
    c = _np_clamp01(u)
    return np.where(c < 0.5, 2 * c * c, 1 - 2 * (1 - c) * (1 - c))


def np_ease_in_out_cubic(u) -> NDArray:
    c = _np_clamp01(u)
    return np.where(c < 0.5, 4 * c * c * c, 1 - (-2 * c + 2) ** 3 / 2)


def np_sine(u) -> NDArray:
    return np.sin(_np_clamp01(u) * _HALF_PI)


def np_cosine(u) -> NDArray:
    return 1 - np.cos(_np_clamp01(u) * _HALF_PI)


easing_functions: Dict[EasingType, ScalarEasing] = {
    EasingType.LINEAR: linear,
    EasingType.SMOOTHSTEP: smoothstep,
    EasingType.SMOOTHERSTEP: smootherstep,
    EasingType.SMOOTHESTSTEP: smootheststep,
    EasingType.EASE_IN_OUT: ease_in_out,
    EasingType.EASE_IN_OUT_CUBIC: ease_in_out_cubic,
    EasingType.SINE: sine,
    EasingType.COSINE: cosine,
}

np_easing_functions: Dict[EasingType, ArrayEasing] = {
    EasingType.LINEAR: np_linear,
    EasingType.SMOOTHSTEP: np_smoothstep,
    EasingType.SMOOTHERSTEP: np_smootherstep,
    EasingType.SMOOTHESTSTEP: np_smootheststep,
    EasingType.EASE_IN_OUT: np_ease_in_out,
    EasingType.EASE_IN_OUT_CUBIC: np_ease_in_out_cubic,
    EasingType.SINE: np_sine,
    EasingType.COSINE: np_cosine,
}


def get_easing(easing: EasingType | str) -> ScalarEasing:
    """Look up a scalar curve by enum member or name."""
    return easing_functions[EasingType(easing)]


def get_np_easing(easing: EasingType | str) -> ArrayEasing:
    """Look up a vectorized curve by enum member or name."""
    return np_easing_functions[EasingType(easing)]


__all__ = [
    "linear",
    "smoothstep",
    "smootherstep",
    "smootheststep",
    "ease_in_out",
    "ease_in_out_cubic",
    "sine",
    "cosine",
    "np_linear",
    "np_smoothstep",
    "np_smootherstep",
    "np_smootheststep",
    "np_ease_in_out",
    "np_ease_in_out_cubic",
    "np_sine",
    "np_cosine",
    "easing_functions",
    "np_easing_functions",
    "get_easing",
    "get_np_easing",
]
