from __future__ import annotations
from typing import Any, Sequence, Tuple, Union
from numpy import ndarray

Scalar = int | float
ComponentTuple = Tuple[float, float, float, float]
# Anything try_decompose() is willing to look at: RGBAColor, component
# sequences, 1-D arrays, hex strings or duck-typed platform colors.
ColorLike = Union[Sequence[Scalar], ndarray, str, Any]
StopLike = Union[Any, Tuple[ColorLike, float]]
