"""Exception and warning types raised by smoothgradient."""


class InvalidArgumentError(ValueError):
    """A caller-supplied argument is outside what the operation accepts."""


class DegradedColorWarning(UserWarning):
    """A color could not be decomposed and was replaced by the fallback color."""


class LargeSubdivisionWarning(UserWarning):
    """A subdivision count is large enough to produce a very long stop list."""
