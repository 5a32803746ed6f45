import math

import numpy as np
import pytest

from smoothgradient.easing import (
    CurvePolicy, ExponentialPolicy, EasingPolicy, LINEAR, as_policy, smootherstep,
)
from smoothgradient.errors import InvalidArgumentError
from smoothgradient.types.easing_types import EasingType, SmoothStepType


def test_curve_policy_from_name_and_enum():
    assert CurvePolicy("smootherstep") == CurvePolicy(EasingType.SMOOTHERSTEP)
    assert CurvePolicy(SmoothStepType.SMOOTHSTEP).easing is EasingType.SMOOTHSTEP
    assert CurvePolicy().easing is EasingType.SMOOTHERSTEP


def test_curve_policy_apply():
    policy = CurvePolicy("smootherstep")
    assert policy.apply(0.25) == smootherstep(0.25)
    assert policy(0.25) == smootherstep(0.25)
    assert np.allclose(policy.apply_array([0.0, 0.25, 1.0]), [0.0, 0.103515625, 1.0])


def test_curve_policy_unknown_easing():
    with pytest.raises(InvalidArgumentError):
        CurvePolicy("elastic")


def test_policies_are_immutable():
    policy = CurvePolicy("sine")
    with pytest.raises(AttributeError):
        policy.easing = EasingType.COSINE
    exp = ExponentialPolicy(2)
    with pytest.raises(AttributeError):
        exp.exponent = 3.0


def test_policies_hashable():
    assert len({CurvePolicy("sine"), CurvePolicy(EasingType.SINE), ExponentialPolicy(2), ExponentialPolicy(2.0)}) == 2


def test_exponential_basic():
    policy = ExponentialPolicy(2)
    assert policy.exponent == 2.0
    assert policy.apply(0.5) == 0.25
    assert policy.apply(0.0) == 0.0
    assert policy.apply(1.0) == 1.0


def test_exponential_one_is_linear():
    policy = ExponentialPolicy(1)
    for i in range(11):
        t = i / 10
        assert policy.apply(t) == t
    u = np.arange(7) / 7
    assert np.array_equal(policy.apply_array(u), u)


def test_exponential_front_and_back_loading():
    assert ExponentialPolicy(0.5).apply(0.25) == 0.5
    assert ExponentialPolicy(3).apply(0.5) == 0.125


def test_exponential_zero_maps_everything_to_one():
    policy = ExponentialPolicy(0)
    assert policy.apply(0.0) == 1.0
    assert policy.apply(0.3) == 1.0
    assert np.array_equal(policy.apply_array([0.0, 0.5, 1.0]), [1.0, 1.0, 1.0])


def test_exponential_negative_is_total():
    policy = ExponentialPolicy(-1)
    assert policy.apply(0.0) == math.inf
    assert policy.apply(0.5) == 2.0
    assert policy.apply(1.0) == 1.0
    result = policy.apply_array([0.0, 0.5, 1.0])
    assert result[0] == np.inf
    assert np.allclose(result[1:], [2.0, 1.0])


def test_exponential_clamps_input():
    policy = ExponentialPolicy(2)
    assert policy.apply(-3) == 0.0
    assert policy.apply(4) == 1.0


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, "2", None, True])
def test_exponential_rejects_invalid_exponent(bad):
    with pytest.raises(InvalidArgumentError):
        ExponentialPolicy(bad)


def test_as_policy():
    policy = CurvePolicy("sine")
    assert as_policy(policy) is policy
    assert as_policy("cosine") == CurvePolicy("cosine")
    assert as_policy(EasingType.SMOOTHSTEP) == CurvePolicy("smoothstep")
    assert as_policy(SmoothStepType.SMOOTHESTSTEP) == CurvePolicy("smootheststep")
    assert as_policy(3) == ExponentialPolicy(3.0)
    assert as_policy(np.float64(1.5)) == ExponentialPolicy(1.5)


@pytest.mark.parametrize("bad", [None, [1, 2], object(), False])
def test_as_policy_rejects(bad):
    with pytest.raises(InvalidArgumentError):
        as_policy(bad)


def test_linear_constant():
    assert isinstance(LINEAR, EasingPolicy)
    assert LINEAR.apply(0.4) == 0.4
