"""
Color values and component conversion.

>>> from smoothgradient.colors import RGBAColor, lerp_components, try_decompose
>>> blue = RGBAColor(0.0, 0.0, 1.0)
>>> red = try_decompose("#f00").color
>>> lerp_components(blue, red, 0.25).components
(0.25, 0.0, 0.75, 1.0)
"""

from .rgba import RGBAColor, BLACK, WHITE, CLEAR
from .decompose import (
    Decomposition,
    DecompositionStatus,
    try_decompose,
    to_components,
)
from .interpolate import (
    lerp_component,
    lerp_components,
    smooth_interpolated,
    interpolated,
    np_lerp_components,
)

__all__ = [
    "RGBAColor", "BLACK", "WHITE", "CLEAR",
    "Decomposition", "DecompositionStatus", "try_decompose", "to_components",
    "lerp_component", "lerp_components", "smooth_interpolated", "interpolated",
    "np_lerp_components",
]
