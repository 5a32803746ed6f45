"""
Easing curves and the policies that apply them to gradient segments.

>>> from smoothgradient.easing import smootherstep, CurvePolicy, ExponentialPolicy
>>> smootherstep(0.25)
0.103515625
>>> CurvePolicy("ease_in_out").apply(0.25)
0.125
>>> ExponentialPolicy(2).apply(0.5)
0.25
"""

from .functions import (
    linear, smoothstep, smootherstep, smootheststep,
    ease_in_out, ease_in_out_cubic, sine, cosine,
    np_linear, np_smoothstep, np_smootherstep, np_smootheststep,
    np_ease_in_out, np_ease_in_out_cubic, np_sine, np_cosine,
    easing_functions, np_easing_functions, get_easing, get_np_easing,
)
from .policy import EasingPolicy, CurvePolicy, ExponentialPolicy, LINEAR, as_policy
from ..types.easing_types import EasingType, SmoothStepType

__all__ = [
    "linear", "smoothstep", "smootherstep", "smootheststep",
    "ease_in_out", "ease_in_out_cubic", "sine", "cosine",
    "np_linear", "np_smoothstep", "np_smootherstep", "np_smootheststep",
    "np_ease_in_out", "np_ease_in_out_cubic", "np_sine", "np_cosine",
    "easing_functions", "np_easing_functions", "get_easing", "get_np_easing",
    "EasingPolicy", "CurvePolicy", "ExponentialPolicy", "LINEAR", "as_policy",
    "EasingType", "SmoothStepType",
]
