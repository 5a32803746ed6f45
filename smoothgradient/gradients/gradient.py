from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, List, Sequence

import numpy as np

from ..defaults import DEFAULT_EXPONENT, DEFAULT_SMOOTH_TYPE, DEFAULT_SUBDIVISIONS
from ..easing.policy import CurvePolicy, EasingPolicy, ExponentialPolicy, as_policy
from ..errors import InvalidArgumentError
from ..types.color_types import ColorLike, StopLike
from .render import render_linear
from .stops import ColorStop, as_stops, stops_from_colors
from .subdivider import GradientSpec


@dataclass(frozen=True)
class UnitPoint:
    """A point in unit space, (0, 0) top-left and (1, 1) bottom-right."""
    x: float
    y: float

    zero: ClassVar[UnitPoint]
    center: ClassVar[UnitPoint]
    top: ClassVar[UnitPoint]
    bottom: ClassVar[UnitPoint]
    leading: ClassVar[UnitPoint]
    trailing: ClassVar[UnitPoint]
    top_leading: ClassVar[UnitPoint]
    top_trailing: ClassVar[UnitPoint]
    bottom_leading: ClassVar[UnitPoint]
    bottom_trailing: ClassVar[UnitPoint]

    def as_array(self) -> np.ndarray:
        return np.array((self.x, self.y), dtype=np.float64)


UnitPoint.zero = UnitPoint(0.0, 0.0)
UnitPoint.center = UnitPoint(0.5, 0.5)
UnitPoint.top = UnitPoint(0.5, 0.0)
UnitPoint.bottom = UnitPoint(0.5, 1.0)
UnitPoint.leading = UnitPoint(0.0, 0.5)
UnitPoint.trailing = UnitPoint(1.0, 0.5)
UnitPoint.top_leading = UnitPoint(0.0, 0.0)
UnitPoint.top_trailing = UnitPoint(1.0, 0.0)
UnitPoint.bottom_leading = UnitPoint(0.0, 1.0)
UnitPoint.bottom_trailing = UnitPoint(1.0, 1.0)


class _SubdividedGradient:
    """
    Base for gradients drawn as a dense linear ramp between two anchors.

    The anchors are carried along for the renderer; only the stops, the
    policy and the subdivision count affect the expanded stop list.
    """

    __slots__ = ('stops', 'start_point', 'end_point', 'subdivisions', '_spec', '_is_frozen')
    _is_frozen: bool

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        stops: Iterable[StopLike],
        start_point: UnitPoint,
        end_point: UnitPoint,
        policy: EasingPolicy,
        subdivisions: int,
    ) -> None:
        self._spec = GradientSpec(tuple(as_stops(stops)), policy, subdivisions)
        self.stops = self._spec.stops
        self.start_point = start_point
        self.end_point = end_point
        self.subdivisions = self._spec.subdivisions
        super().__setattr__('_is_frozen', True)

    @property
    def spec(self) -> GradientSpec:
        return self._spec

    @property
    def policy(self) -> EasingPolicy:
        return self._spec.policy

    @property
    def subdivided_stops(self) -> List[ColorStop]:
        return self._spec.expand()

    def render(self, width: int, height: int) -> np.ndarray:
        """Rasterize the subdivided stops into a (height, width, 4) float array."""
        return render_linear(self.subdivided_stops, width, height, self.start_point, self.end_point)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(stops={len(self.stops)}, policy={self.policy!r}, "
            f"subdivisions={self.subdivisions}, start_point={self.start_point}, end_point={self.end_point})"
        )


class SmoothGradient(_SubdividedGradient):
    """Linear gradient whose colors follow an easing curve between every pair of stops."""

    __slots__ = ()

    def __init__(
        self,
        stops: Iterable[StopLike],
        start_point: UnitPoint,
        end_point: UnitPoint,
        smooth_type: Any = DEFAULT_SMOOTH_TYPE,
        subdivisions: int = DEFAULT_SUBDIVISIONS,
    ) -> None:
        policy = as_policy(smooth_type)
        if not isinstance(policy, CurvePolicy):
            raise InvalidArgumentError(f"SmoothGradient needs an easing curve, got {smooth_type!r}")
        super().__init__(stops, start_point, end_point, policy, subdivisions)

    @property
    def smooth_type(self):
        return self.policy.easing

    @classmethod
    def from_colors(
        cls,
        colors: Sequence[ColorLike],
        start_point: UnitPoint,
        end_point: UnitPoint,
        smooth_type: Any = DEFAULT_SMOOTH_TYPE,
        subdivisions: int = DEFAULT_SUBDIVISIONS,
    ) -> SmoothGradient:
        """Create a SmoothGradient from evenly spaced colors."""
        return cls(stops_from_colors(colors), start_point, end_point, smooth_type, subdivisions)

    @classmethod
    def from_stops(
        cls,
        stops: Iterable[StopLike],
        start_point: UnitPoint,
        end_point: UnitPoint,
        smooth_type: Any = DEFAULT_SMOOTH_TYPE,
        subdivisions: int = DEFAULT_SUBDIVISIONS,
    ) -> SmoothGradient:
        return cls(stops, start_point, end_point, smooth_type, subdivisions)


class ExponentialGradient(_SubdividedGradient):
    """Linear gradient whose colors change with ``fraction ** exponent`` between every pair of stops."""

    __slots__ = ()

    def __init__(
        self,
        stops: Iterable[StopLike],
        start_point: UnitPoint,
        end_point: UnitPoint,
        exponent: float = DEFAULT_EXPONENT,
        subdivisions: int = DEFAULT_SUBDIVISIONS,
    ) -> None:
        super().__init__(stops, start_point, end_point, ExponentialPolicy(exponent), subdivisions)

    @property
    def exponent(self) -> float:
        return self.policy.exponent

    @classmethod
    def from_colors(
        cls,
        colors: Sequence[ColorLike],
        start_point: UnitPoint,
        end_point: UnitPoint,
        exponent: float = DEFAULT_EXPONENT,
        subdivisions: int = DEFAULT_SUBDIVISIONS,
    ) -> ExponentialGradient:
        """Create an ExponentialGradient from evenly spaced colors."""
        return cls(stops_from_colors(colors), start_point, end_point, exponent, subdivisions)

    @classmethod
    def from_stops(
        cls,
        stops: Iterable[StopLike],
        start_point: UnitPoint,
        end_point: UnitPoint,
        exponent: float = DEFAULT_EXPONENT,
        subdivisions: int = DEFAULT_SUBDIVISIONS,
    ) -> ExponentialGradient:
        return cls(stops, start_point, end_point, exponent, subdivisions)
