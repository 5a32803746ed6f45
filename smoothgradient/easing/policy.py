from __future__ import annotations
import math
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function, clamp01

from ..errors import InvalidArgumentError
from ..types.easing_types import EasingName, EasingType, SmoothStepType
from .functions import get_easing, get_np_easing


class EasingPolicy(ABC):
    """Maps a linear fraction along a segment to the fraction used for color."""

    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    @abstractmethod
    def apply(self, t: float) -> float:
        pass

    @abstractmethod
    def apply_array(self, u) -> NDArray:
        pass

    def __call__(self, t: float) -> float:
        return self.apply(t)


class CurvePolicy(EasingPolicy):
    __slots__ = ('easing',)
    easing: EasingType

    def __init__(self, easing: Union[EasingType, SmoothStepType, EasingName] = EasingType.SMOOTHERSTEP) -> None:
        value = easing.value if isinstance(easing, SmoothStepType) else easing
        try:
            resolved = EasingType(value)
        except ValueError:
            raise InvalidArgumentError(f"Unknown easing: {easing!r}") from None
        object.__setattr__(self, 'easing', resolved)

    def apply(self, t: float) -> float:
        return get_easing(self.easing)(t)

    def apply_array(self, u) -> NDArray:
        return get_np_easing(self.easing)(u)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurvePolicy):
            return NotImplemented
        return self.easing is other.easing

    def __hash__(self) -> int:
        return hash((CurvePolicy, self.easing))

    def __repr__(self) -> str:
        return f"CurvePolicy({self.easing.value!r})"


class ExponentialPolicy(EasingPolicy):
    """
    Raise the clamped fraction to ``exponent``.

    exponent == 1 is linear, < 1 front-loads the change, > 1 back-loads it.
    Degenerate exponents are allowed and never raise:

    - 0 maps every fraction, 0 included, to 1.
    - negative exponents map (0, 1) above 1 and 0 to +inf; the color
      interpolation clamps the resulting components.
    """

    __slots__ = ('exponent',)
    exponent: float

    def __init__(self, exponent: float = 2.0) -> None:
        if isinstance(exponent, bool) or not isinstance(exponent, Real):
            raise InvalidArgumentError(f"exponent must be a real number, got {exponent!r}")
        if not math.isfinite(exponent):
            raise InvalidArgumentError(f"exponent must be finite, got {exponent!r}")
        object.__setattr__(self, 'exponent', float(exponent))

    def apply(self, t: float) -> float:
        c = float(clamp01(t))
        if c == 0.0 and self.exponent < 0:
            return math.inf
        return c ** self.exponent

    def apply_array(self, u) -> NDArray:
        fn = bound_type_to_np_function[BoundType.CLAMP]
        c = fn(np.asarray(u, dtype=np.float64), 0.0, 1.0)
        with np.errstate(divide='ignore'):
            return np.power(c, self.exponent)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExponentialPolicy):
            return NotImplemented
        return self.exponent == other.exponent

    def __hash__(self) -> int:
        return hash((ExponentialPolicy, self.exponent))

    def __repr__(self) -> str:
        return f"ExponentialPolicy({self.exponent!r})"


LINEAR = CurvePolicy(EasingType.LINEAR)


def as_policy(value: Any) -> EasingPolicy:
    """
    Coerce ``value`` into an EasingPolicy.

    Accepts a policy, an EasingType / SmoothStepType member, an easing name,
    or a bare number, which is read as an exponent.
    """
    if isinstance(value, EasingPolicy):
        return value
    if isinstance(value, (EasingType, SmoothStepType, str)):
        return CurvePolicy(value)
    if isinstance(value, Real) and not isinstance(value, bool):
        return ExponentialPolicy(value)
    raise InvalidArgumentError(f"Cannot interpret {value!r} as an easing policy")
