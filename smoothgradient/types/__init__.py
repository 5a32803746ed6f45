from .easing_types import EasingType, SmoothStepType, EasingName
from .format_type import ColorFormat, format_maxima
from .color_types import Scalar, ComponentTuple, ColorLike, StopLike

__all__ = [
    "EasingType",
    "SmoothStepType",
    "EasingName",
    "ColorFormat",
    "format_maxima",
    "Scalar",
    "ComponentTuple",
    "ColorLike",
    "StopLike",
]
