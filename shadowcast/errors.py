class ShadowcastError(Exception):
    """Base class for errors raised by the visibility core."""


class InvalidRay(ShadowcastError, ValueError):
    """A ray was built with a zero-length or non-finite direction."""


class DegenerateOccluder(ShadowcastError, ValueError):
    """An occluder polygon has too few/many vertices or is not convex."""
