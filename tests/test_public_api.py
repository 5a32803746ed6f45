import smoothgradient
from smoothgradient import (
    ColorStop, ExponentialGradient, RGBAColor, SmoothGradient, UnitPoint, subdivide, to_uint8,
)


def test_version():
    assert smoothgradient.__version__ == "1.0.0"


def test_end_to_end():
    stops = [ColorStop(RGBAColor(0, 0, 1, 1), 0.0), ColorStop(RGBAColor(1, 0, 0, 1), 1.0)]
    out = subdivide(stops, policy="smootherstep", subdivisions=4)
    assert len(out) == 5
    assert abs(out[1].color.r - 0.103515625) < 1e-12
    assert abs(out[1].color.b - (1 - 0.103515625)) < 1e-12


def test_gradients_render_to_pixels():
    smooth = SmoothGradient.from_colors(["#000", "#fff"], UnitPoint.top, UnitPoint.bottom, subdivisions=8)
    exponential = ExponentialGradient.from_colors(["#000", "#fff"], UnitPoint.top, UnitPoint.bottom, subdivisions=8)
    a = to_uint8(smooth.render(1, 10))
    b = to_uint8(exponential.render(1, 10))
    assert a.shape == b.shape == (10, 1, 4)
    # Both start dark and end light; the exponential one lags behind early on.
    assert a[0, 0, 0] < a[-1, 0, 0]
    assert b[2, 0, 0] <= a[2, 0, 0]
