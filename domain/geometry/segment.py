# domain/geometry/segment.py
from typing import Optional
from pydantic import Field, model_validator
import logging
from domain.geometry.constants import EPSILON
from domain.geometry.errors import DegenerateSegmentError
from domain.geometry.point import Point, ORIGIN
from domain.geometry.vector import Vector
from utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


def _within_bounds(point: Point, start: Point, end: Point) -> bool:
    """Check if a point lies inside the axis-aligned box spanned by two corners."""
    return (min(start.x, end.x) <= point.x <= max(start.x, end.x)
            and min(start.y, end.y) <= point.y <= max(start.y, end.y))


class Segment(ImmutableModel):
    """
    Represents a line segment between two distinct points.

    The endpoints keep their declared order; only the text form reorders
    them by distance from the origin.
    """
    a: Point = Field(description="First endpoint of the segment")
    b: Point = Field(description="Second endpoint of the segment")

    @model_validator(mode="after")
    def validate_segment_length(self) -> "Segment":
        """Validate that the segment has non-zero length."""
        if self.a.is_close_to(self.b):
            raise DegenerateSegmentError(self.a, self.b)
        return self

    @classmethod
    def from_point_and_vector(cls, point: Point, vector: Vector) -> "Segment":
        """Create the segment from a point to that point displaced by a vector."""
        return cls(a=point, b=point + vector.as_point())

    @property
    def direction_vector(self) -> Point:
        """Get the displacement from a to b."""
        return self.b - self.a

    def _contains_within_bounds(self, point: Point) -> bool:
        # Bounding-box test only; callers must already know the point is collinear.
        return _within_bounds(point, self.a, self.b)

    def intersect(self, vector: Vector, tolerance: Optional[float] = None) -> Optional[Point]:
        """
        Find the intersection point with a vector anchored at the origin.

        The vector is read as the segment from the origin to its tip. This
        segment is parameterised as a + t*r and the vector as u*s, both with
        parameters in [0, 1].

        When the two segments are collinear the result is the first of these
        that falls inside the other segment's bounds: the origin, the vector
        tip, then this segment's a and b endpoints.

        Args:
            vector: The vector to intersect with
            tolerance: Threshold below which determinants count as zero

        Returns:
            The intersection point if it exists, None otherwise
        """
        if tolerance is None:
            tolerance = EPSILON

        r = self.direction_vector
        s = vector.as_point()
        k = ORIGIN - self.a

        numerator = k.cross(r)
        denominator = r.cross(s)

        if abs(numerator) < tolerance and abs(denominator) < tolerance:
            for candidate in (ORIGIN, s):
                if self._contains_within_bounds(candidate):
                    logger.debug(f"Collinear overlap of {self} and {vector} at {candidate}")
                    return candidate
            for endpoint in (self.a, self.b):
                if _within_bounds(endpoint, ORIGIN, s):
                    logger.debug(f"Collinear overlap of {self} and {vector} at {endpoint}")
                    return endpoint
            logger.debug(f"Collinear segments {self} and {vector} do not overlap")
            return None

        if abs(denominator) < tolerance:
            logger.debug(f"Segment {self} is parallel to {vector}")
            return None

        u = numerator / denominator
        t = k.cross(s) / denominator

        if 0 <= t <= 1 and 0 <= u <= 1:
            return self.a + r.scale(t)

        return None

    def format_as_string(self) -> str:
        """
        Format the segment as "sr(P1; P2)".

        P1 is the endpoint nearer the origin; when both are equally far,
        a comes first.
        """
        if self.b.distance_from_origin() < self.a.distance_from_origin():
            first, second = self.b, self.a
        else:
            first, second = self.a, self.b
        return f"sr({first}; {second})"

    def __str__(self) -> str:
        return self.format_as_string()
