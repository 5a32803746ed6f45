from .stops import ColorStop, as_stop, as_stops, stops_from_colors
from .subdivider import GradientSpec, subdivide, validate_subdivisions
from .render import sample_stops, render_linear, to_uint8
from .gradient import UnitPoint, SmoothGradient, ExponentialGradient

__all__ = [
    "ColorStop", "as_stop", "as_stops", "stops_from_colors",
    "GradientSpec", "subdivide", "validate_subdivisions",
    "sample_stops", "render_linear", "to_uint8",
    "UnitPoint", "SmoothGradient", "ExponentialGradient",
]
