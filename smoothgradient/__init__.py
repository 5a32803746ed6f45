"""
smoothgradient - Eased Multi-Stop Gradients
===========================================

Easing curves and the stop subdivision that lets a plain linear-gradient
renderer draw smooth, non-linear color transitions.

Key Features
------------
- Polynomial smoothstep family (smoothstep, smootherstep, smootheststep)
- Quadratic / cubic ease-in-out and quarter sine / cosine curves
- Exponential (power) color interpolation
- Scalar and vectorized (numpy) forms of every curve
- Stop-list subdivision: dense, piecewise-linear approximations of eased gradients
- Soft-failing color decomposition with an explicit fallback result
- Immutable color, stop and gradient values, safe to share across threads

Quick Start
-----------
>>> from smoothgradient import SmoothGradient, UnitPoint
>>>
>>> gradient = SmoothGradient.from_colors(
...     [(0, 0, 1, 1), (1, 0, 0, 1)],
...     start_point=UnitPoint.top,
...     end_point=UnitPoint.bottom,
...     smooth_type="smootherstep",
...     subdivisions=4,
... )
>>> len(gradient.subdivided_stops)
5
>>> gradient.subdivided_stops[1].color.r
0.103515625
>>>
>>> # Same thing without the gradient value
>>> from smoothgradient import subdivide, ColorStop, RGBAColor
>>> stops = [ColorStop(RGBAColor(0, 0, 1), 0.0), ColorStop(RGBAColor(1, 0, 0), 1.0)]
>>> len(subdivide(stops, policy=2.0, subdivisions=8))
9

Modules
-------
- easing: scalar / vectorized curves and easing policies
- colors: RGBAColor, decomposition, component interpolation
- gradients: color stops, subdivider, gradient values, reference renderer
- errors: exception and warning types
"""

from .errors import InvalidArgumentError, DegradedColorWarning, LargeSubdivisionWarning
from .types import EasingType, SmoothStepType, ColorFormat

from .easing import (
    linear, smoothstep, smootherstep, smootheststep,
    ease_in_out, ease_in_out_cubic, sine, cosine,
    EasingPolicy, CurvePolicy, ExponentialPolicy, as_policy,
)

from .colors import (
    RGBAColor, BLACK, WHITE, CLEAR,
    Decomposition, DecompositionStatus, try_decompose, to_components,
    lerp_components, smooth_interpolated, interpolated,
)

from .gradients import (
    ColorStop, stops_from_colors,
    GradientSpec, subdivide,
    sample_stops, render_linear, to_uint8,
    UnitPoint, SmoothGradient, ExponentialGradient,
)

__version__ = "1.0.0"
