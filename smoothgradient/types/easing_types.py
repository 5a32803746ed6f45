from enum import Enum
from typing import Literal


class EasingType(str, Enum):
    LINEAR = "linear"
    SMOOTHSTEP = "smoothstep"
    SMOOTHERSTEP = "smootherstep"
    SMOOTHESTSTEP = "smootheststep"
    EASE_IN_OUT = "ease_in_out"
    EASE_IN_OUT_CUBIC = "ease_in_out_cubic"
    SINE = "sine"
    COSINE = "cosine"


class SmoothStepType(str, Enum):
    """The polynomial smoothstep family, ordered by how many derivatives vanish at the ends."""
    SMOOTHSTEP = "smoothstep"
    SMOOTHERSTEP = "smootherstep"
    SMOOTHESTSTEP = "smootheststep"

    def apply(self, t: float) -> float:
        from ..easing.functions import easing_functions
        return easing_functions[EasingType(self.value)](t)


EasingName = Literal[
    "linear",
    "smoothstep",
    "smootherstep",
    "smootheststep",
    "ease_in_out",
    "ease_in_out_cubic",
    "sine",
    "cosine",
]
