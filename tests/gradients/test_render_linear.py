import numpy as np
import pytest

from smoothgradient.colors import RGBAColor
from smoothgradient.errors import InvalidArgumentError
from smoothgradient.gradients import (
    ColorStop, UnitPoint, render_linear, sample_stops, subdivide, to_uint8,
)
from smoothgradient.easing import np_smootherstep

BLACK = RGBAColor(0.0, 0.0, 0.0, 1.0)
WHITE = RGBAColor(1.0, 1.0, 1.0, 1.0)
STOPS = [ColorStop(BLACK, 0.0), ColorStop(WHITE, 1.0)]


def test_sample_linear_between_two_stops():
    out = sample_stops(STOPS, [0.0, 0.25, 0.5, 1.0])
    assert out.shape == (4, 4)
    assert np.allclose(out[:, 0], [0.0, 0.25, 0.5, 1.0])
    assert np.allclose(out[:, 3], 1.0)


def test_sample_outside_range_takes_end_colors():
    stops = [ColorStop(BLACK, 0.2), ColorStop(WHITE, 0.8)]
    out = sample_stops(stops, [-1.0, 0.0, 0.9, 5.0])
    assert np.allclose(out[0], BLACK.to_array())
    assert np.allclose(out[1], BLACK.to_array())
    assert np.allclose(out[2], WHITE.to_array())
    assert np.allclose(out[3], WHITE.to_array())


def test_sample_scalar_position():
    assert np.allclose(sample_stops(STOPS, 0.5), [0.5, 0.5, 0.5, 1.0])


def test_sample_zero_length_span_takes_later_stop():
    red = RGBAColor(1.0, 0.0, 0.0)
    stops = [ColorStop(BLACK, 0.0), ColorStop(WHITE, 0.5), ColorStop(red, 0.5), ColorStop(BLACK, 1.0)]
    out = sample_stops(stops, [0.5, 0.75])
    assert np.allclose(out[0], WHITE.to_array())
    assert np.allclose(out[1], [0.5, 0.0, 0.0, 1.0])


def test_sample_empty_and_single():
    assert np.array_equal(sample_stops([], [0.1, 0.9]), np.zeros((2, 4)))
    single = sample_stops([ColorStop(WHITE, 0.5)], [0.0, 1.0])
    assert np.allclose(single, WHITE.to_array())


def test_subdivided_stops_approximate_the_curve():
    dense = subdivide(STOPS, policy="smootherstep", subdivisions=64)
    positions = np.linspace(0, 1, 101)
    sampled = sample_stops(dense, positions)[:, 0]
    assert np.allclose(sampled, np_smootherstep(positions), atol=1e-3)


def test_render_horizontal():
    image = render_linear(STOPS, 4, 3, UnitPoint.leading, UnitPoint.trailing)
    assert image.shape == (3, 4, 4)
    assert np.allclose(image[0, :, 0], [0.125, 0.375, 0.625, 0.875])
    assert np.allclose(image[2, :, 0], image[0, :, 0])


def test_render_vertical():
    image = render_linear(STOPS, 2, 4, UnitPoint.top, UnitPoint.bottom)
    assert np.allclose(image[:, 0, 1], [0.125, 0.375, 0.625, 0.875])


def test_render_reversed_axis():
    image = render_linear(STOPS, 4, 1, UnitPoint.trailing, UnitPoint.leading)
    assert np.allclose(image[0, :, 0], [0.875, 0.625, 0.375, 0.125])


def test_render_degenerate_axis_fills_first_stop():
    image = render_linear(STOPS, 3, 3, UnitPoint.center, UnitPoint.center)
    assert np.allclose(image, BLACK.to_array())


@pytest.mark.parametrize("width, height", [(0, 4), (4, 0), (-1, 1)])
def test_render_rejects_empty_images(width, height):
    with pytest.raises(InvalidArgumentError):
        render_linear(STOPS, width, height, UnitPoint.top, UnitPoint.bottom)


@pytest.mark.parametrize("width, height", [(2.5, 4), (4, 3.0), ("4", 4), (True, 4), (4, None)])
def test_render_rejects_non_integer_sizes(width, height):
    with pytest.raises(InvalidArgumentError):
        render_linear(STOPS, width, height, UnitPoint.top, UnitPoint.bottom)


def test_render_accepts_numpy_integer_sizes():
    image = render_linear(STOPS, np.int64(3), np.int32(2), UnitPoint.leading, UnitPoint.trailing)
    assert image.shape == (2, 3, 4)


def test_to_uint8():
    image = np.array([[[0.0, 0.5, 1.0, 2.0]]])
    out = to_uint8(image)
    assert out.dtype == np.uint8
    assert out.tolist() == [[[0, 128, 255, 255]]]
