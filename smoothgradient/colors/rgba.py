from __future__ import annotations
import math
from typing import Iterator, Self, Tuple

import numpy as np
from numpy import ndarray
from boundednumbers import clamp01

from ..errors import InvalidArgumentError
from ..types.color_types import ComponentTuple, Scalar


class RGBAColor:
    """
    Immutable color with four normalized float components.

    Components are clamped into [0, 1] on construction. NaN is rejected,
    infinities clamp to the nearest bound.
    """

    __slots__ = ('_value', '_is_frozen')
    _is_frozen: bool

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: Scalar, g: Scalar, b: Scalar, a: Scalar = 1.0) -> None:
        values = []
        for name, v in zip("rgba", (r, g, b, a)):
            v = float(v)
            if math.isnan(v):
                raise InvalidArgumentError(f"Component {name} is NaN")
            values.append(float(clamp01(v)))
        self._value = tuple(values)
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @property
    def a(self) -> float:
        return self._value[3]

    @property
    def alpha(self) -> float:
        return self._value[3]

    @property
    def components(self) -> ComponentTuple:
        return self._value

    # ------------------ CONSTRUCTION / EXPORT ------------------
    @classmethod
    def from_array(cls, arr: ndarray) -> Self:
        """Build a color from a length-4 array (r, g, b, a)."""
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (4,):
            raise InvalidArgumentError(f"Expected shape (4,), got {arr.shape}")
        return cls(*arr.tolist())

    def to_array(self) -> ndarray:
        return np.array(self._value, dtype=np.float64)

    def to_int(self) -> Tuple[int, int, int, int]:
        """Components scaled to 0-255 and rounded."""
        return tuple(int(round(v * 255)) for v in self._value)  # type: ignore[return-value]

    def with_alpha(self, alpha: Scalar) -> Self:
        """Return a new instance with modified alpha channel."""
        return self.__class__(self.r, self.g, self.b, alpha)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RGBAColor):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"RGBAColor(r={r!r}, g={g!r}, b={b!r}, a={a!r})"

    def is_close(self, other: RGBAColor, tol: float = 1e-9) -> bool:
        return all(abs(x - y) <= tol for x, y in zip(self._value, other._value))


BLACK = RGBAColor(0.0, 0.0, 0.0, 1.0)
WHITE = RGBAColor(1.0, 1.0, 1.0, 1.0)
CLEAR = RGBAColor(0.0, 0.0, 0.0, 0.0)
