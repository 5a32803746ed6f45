from .types.easing_types import SmoothStepType

DEFAULT_SUBDIVISIONS = 32
DEFAULT_EXPONENT = 2.0
DEFAULT_SMOOTH_TYPE = SmoothStepType.SMOOTHERSTEP

# Opaque black, used whenever a color cannot be decomposed.
FALLBACK_COMPONENTS = (0.0, 0.0, 0.0, 1.0)

# Subdividing past this still works, it just warns.
SUBDIVISION_WARNING_THRESHOLD = 4096
