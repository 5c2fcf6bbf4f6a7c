# domain/geometry/vector.py
from typing import Optional, TYPE_CHECKING
from pydantic import Field, model_validator
import math
from domain.geometry.constants import COORDINATE_DECIMALS
from domain.geometry.errors import DegenerateVectorError
from domain.geometry.point import Point
from utils.base_model import ImmutableModel

if TYPE_CHECKING:
    from domain.geometry.segment import Segment


class Vector(ImmutableModel):
    """
    Represents a 2D vector with non-zero magnitude.

    When used in intersection queries the vector is read as the segment
    running from the origin to its tip.
    """
    x: float = Field(description="X component")
    y: float = Field(description="Y component")

    @model_validator(mode="after")
    def validate_non_degenerate(self) -> "Vector":
        """Reject the zero vector."""
        if self.x == 0 and self.y == 0:
            raise DegenerateVectorError(self.x, self.y)
        return self

    @classmethod
    def from_point(cls, point: Point) -> "Vector":
        """Create the vector pointing from the origin to the given point."""
        return cls(x=point.x, y=point.y)

    @property
    def magnitude(self) -> float:
        """Get the length of the vector."""
        return math.sqrt(self.x ** 2 + self.y ** 2)

    def as_point(self) -> Point:
        """Get the tip of the vector when anchored at the origin."""
        return Point(x=self.x, y=self.y)

    def dot(self, other: "Vector") -> float:
        """Calculate the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cosine_similarity(self, other: "Vector") -> float:
        """
        Calculate the cosine of the angle between this vector and another.

        Both magnitudes are positive by construction, so the result is always
        defined and lies in [-1, 1] up to rounding.
        """
        return self.dot(other) / (self.magnitude * other.magnitude)

    def intersect(self, segment: "Segment", tolerance: Optional[float] = None) -> Optional[Point]:
        """Find where this vector crosses a segment. See Segment.intersect."""
        return segment.intersect(self, tolerance)

    def __str__(self) -> str:
        return f"<{self.x:.{COORDINATE_DECIMALS}f},{self.y:.{COORDINATE_DECIMALS}f}>"
