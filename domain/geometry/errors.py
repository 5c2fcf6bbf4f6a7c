# domain/geometry/errors.py
"""
Errors raised when a geometric value cannot be constructed.

These intentionally do not derive from ValueError: pydantic folds ValueErrors
raised inside validators into a ValidationError, while any other exception
type propagates unchanged, so callers can catch the specific condition.
"""


class GeometryError(Exception):
    """Base class for invalid geometric constructions."""
    tag = "Geometry:iv"


class DegenerateVectorError(GeometryError):
    """Raised when a vector would have both components equal to zero."""
    tag = "Vector:iv"

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y
        super().__init__(f"Vector cannot have zero magnitude, got ({x}, {y})")


class DegenerateSegmentError(GeometryError):
    """Raised when both endpoints of a segment coincide within tolerance."""
    tag = "Segment:iv"

    def __init__(self, a, b):
        self.a = a
        self.b = b
        super().__init__(
            f"Segment cannot have zero length (endpoints {a} and {b} are the same)"
        )
