# domain/geometry/point.py
from typing import Optional
from pydantic import Field
import math
from domain.geometry.constants import EPSILON, COORDINATE_DECIMALS
from utils.base_model import ImmutableModel


class Point(ImmutableModel):
    """
    Represents a 2D point in Cartesian coordinates.

    A Point also doubles as a displacement: the difference of two points is
    returned as a Point, and the cross product treats both operands as
    vectors anchored at the origin.
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    def distance_from_origin(self) -> float:
        """Calculate the Euclidean distance to the origin."""
        return math.sqrt(self.x ** 2 + self.y ** 2)

    def is_close_to(self, other: "Point", tolerance: Optional[float] = None) -> bool:
        """
        Check if this point equals another point within the specified tolerance.

        Each axis is compared independently, so the test is a square box
        around this point rather than a circle.

        Args:
            other: The point to compare with
            tolerance: Strict upper bound for the per-axis difference.
                      If None, uses the default EPSILON value.

        Returns:
            True if both coordinate differences are below the tolerance
        """
        if tolerance is None:
            tolerance = EPSILON
        return abs(self.x - other.x) < tolerance and abs(self.y - other.y) < tolerance

    def cross(self, other: "Point") -> float:
        """2D cross product (determinant) of this point and another."""
        return self.x * other.y - self.y * other.x

    def __add__(self, other: "Point") -> "Point":
        """Vector addition of two points."""
        return Point(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        """Vector subtraction of two points."""
        return Point(x=self.x - other.x, y=self.y - other.y)

    def scale(self, factor: float) -> "Point":
        """Scale the point coordinates by a factor."""
        return Point(x=self.x * factor, y=self.y * factor)

    def format_as_tuple(self) -> str:
        """Format the point as "(x,y)" with coordinates rounded to two decimals."""
        return f"({self.x:.{COORDINATE_DECIMALS}f},{self.y:.{COORDINATE_DECIMALS}f})"

    def __str__(self) -> str:
        return self.format_as_tuple()


ORIGIN = Point(x=0.0, y=0.0)
