"""Basic smoothgradient usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from smoothgradient import (
    ColorStop,
    ExponentialGradient,
    RGBAColor,
    SmoothGradient,
    UnitPoint,
    smootherstep,
    subdivide,
    try_decompose,
)


def demonstrate_easing() -> None:
    # Curves clamp their input, so out-of-range fractions are fine.
    for t in (-0.5, 0.0, 0.25, 0.5, 0.75, 1.0, 1.5):
        print(f"smootherstep({t}) = {smootherstep(t):.6f}")


def demonstrate_colors() -> None:
    print("hex:", try_decompose("#3366ff").color)
    # Gray + alpha, duplicated across r, g and b.
    print("gray/alpha:", try_decompose((0.5, 0.25)).color)
    bad = try_decompose("not a color")
    print("fallback:", bad.status.value, "-", bad.reason)


def demonstrate_gradients() -> None:
    stops = [
        ColorStop(RGBAColor(0.0, 0.0, 1.0), 0.0),
        ColorStop(RGBAColor(1.0, 0.0, 0.0), 1.0),
    ]
    for stop in subdivide(stops, policy="smootherstep", subdivisions=4):
        print(f"  {stop.location:.2f} -> {stop.color}")

    smooth = SmoothGradient.from_colors(
        ["#000000", "#ffffff", "#ff8800"],
        start_point=UnitPoint.leading,
        end_point=UnitPoint.trailing,
    )
    print("smooth gradient stops:", len(smooth.subdivided_stops))

    exponential = ExponentialGradient.from_colors(
        [(0, 0, 0, 1), (1, 1, 1, 1)],
        start_point=UnitPoint.top,
        end_point=UnitPoint.bottom,
        exponent=2.0,
        subdivisions=8,
    )
    image = exponential.render(width=4, height=16)
    print("exponential image shape:", image.shape)


if __name__ == "__main__":
    demonstrate_easing()
    demonstrate_colors()
    demonstrate_gradients()
