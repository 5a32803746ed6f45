"""
Turning arbitrary color values into RGBAColor.

Decomposition never raises. Inputs that cannot be read are replaced by the
fallback color (opaque black) and reported through the returned
``Decomposition`` so callers can tell a real color from a substitute:

>>> try_decompose((1.0, 0.5, 0.0)).color
RGBAColor(r=1.0, g=0.5, b=0.0, a=1.0)
>>> try_decompose("#ff000080").color.a
0.5019607843137255
>>> try_decompose(object()).is_fallback
True

Component counts follow the usual platform conventions: 4 is (r, g, b, a),
3 is (r, g, b) with opaque alpha, 2 is (gray, alpha) and 1 is gray, with the
gray value duplicated across r, g and b.
"""

from __future__ import annotations
import math
import string
import warnings
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Optional, Sequence

import numpy as np
from numpy import ndarray

from ..defaults import FALLBACK_COMPONENTS
from ..errors import DegradedColorWarning
from ..types.color_types import ColorLike
from ..types.format_type import ColorFormat, format_maxima
from .rgba import RGBAColor


class DecompositionStatus(str, Enum):
    SUCCESS = "success"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Decomposition:
    color: RGBAColor
    status: DecompositionStatus
    reason: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.status is DecompositionStatus.FALLBACK

    @classmethod
    def success(cls, color: RGBAColor) -> Decomposition:
        return cls(color, DecompositionStatus.SUCCESS)

    @classmethod
    def fallback(cls, reason: str) -> Decomposition:
        return cls(RGBAColor(*FALLBACK_COMPONENTS), DecompositionStatus.FALLBACK, reason)


def _parse_hex(text: str) -> Decomposition:
    digits = text.strip().removeprefix("#")
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    if len(digits) not in (6, 8):
        return Decomposition.fallback(f"Hex color {text!r} must have 3, 4, 6 or 8 digits")
    if not all(c in string.hexdigits for c in digits):
        return Decomposition.fallback(f"Hex color {text!r} contains non-hex digits")
    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(255)
    return Decomposition.success(RGBAColor(*(c / 255 for c in channels)))


def _from_components(components: Sequence[Any], format_type: ColorFormat) -> Decomposition:
    count = len(components)
    if count == 0:
        return Decomposition.fallback("Color has no components")
    if count > 4:
        return Decomposition.fallback(f"Color has {count} components, expected at most 4")

    values = []
    for v in components:
        if isinstance(v, bool) or not isinstance(v, (Real, np.integer, np.floating)):
            return Decomposition.fallback(f"Component {v!r} is not a number")
        v = float(v)
        if not math.isfinite(v):
            return Decomposition.fallback(f"Component {v!r} is not finite")
        values.append(v / format_maxima[format_type])

    if count == 4:
        r, g, b, a = values
    elif count == 3:
        r, g, b = values
        a = 1.0
    else:
        r = g = b = values[0]
        a = values[1] if count == 2 else 1.0
    return Decomposition.success(RGBAColor(r, g, b, a))


def _decompose_plain(color: Any, format_type: ColorFormat) -> Optional[Decomposition]:
    if isinstance(color, RGBAColor):
        return Decomposition.success(color)
    if isinstance(color, str):
        return _parse_hex(color)
    if isinstance(color, ndarray):
        if color.ndim != 1:
            return Decomposition.fallback(f"Expected a 1-D component array, got shape {color.shape}")
        return _from_components(color.tolist(), format_type)
    if isinstance(color, (tuple, list)):
        return _from_components(color, format_type)
    return None


def try_decompose(color: ColorLike, format_type: ColorFormat = ColorFormat.FLOAT) -> Decomposition:
    """
    Decompose ``color`` into normalized RGBA components.

    Args:
        color: RGBAColor, hex string, component sequence or 1-D array,
            or an object exposing ``to_components()`` or a ``value`` tuple.
            What those return is read as a plain color; it is not unwrapped again.
        format_type: Scale of numeric components (FLOAT 0-1, INT 0-255,
            PERCENTAGE 0-100). Ignored for hex strings and RGBAColor.

    Returns:
        Decomposition with status SUCCESS, or FALLBACK carrying opaque black
        and the reason the input was rejected.
    """
    try:
        format_type = ColorFormat(format_type)
    except ValueError:
        return Decomposition.fallback(f"Unknown color format {format_type!r}")

    result = _decompose_plain(color, format_type)
    if result is not None:
        return result

    name = type(color).__name__
    try:
        to_components_fn = getattr(color, "to_components", None)
        if callable(to_components_fn):
            inner, source = to_components_fn(), f"{name}.to_components()"
        else:
            inner, source = getattr(color, "value", None), f"{name}.value"
    except Exception as e:
        return Decomposition.fallback(f"Reading components from {name} failed: {e}")

    # One level of unwrapping only; a nested wrapper is rejected.
    result = _decompose_plain(inner, format_type)
    if result is None:
        return Decomposition.fallback(f"Unsupported color type {name} ({source} is {type(inner).__name__})")
    return result


def to_components(color: ColorLike, format_type: ColorFormat = ColorFormat.FLOAT) -> RGBAColor:
    """Like try_decompose(), but returns the color directly and warns when it fell back."""
    result = try_decompose(color, format_type)
    if result.is_fallback:
        warnings.warn(
            f"Using fallback color for {color!r}: {result.reason}",
            DegradedColorWarning,
            stacklevel=2,
        )
    return result.color
