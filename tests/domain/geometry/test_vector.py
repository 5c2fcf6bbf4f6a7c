import pytest
from domain.geometry.errors import DegenerateVectorError, GeometryError
from domain.geometry.point import Point
from domain.geometry.segment import Segment
from domain.geometry.vector import Vector


class TestVector:
    def test_create_vector(self):
        v = Vector(x=1.0, y=0.0)
        assert v.x == 1.0
        assert v.y == 0.0

    def test_zero_vector(self):
        with pytest.raises(DegenerateVectorError) as exc_info:
            Vector(x=0.0, y=0.0)

        assert exc_info.value.tag == "Vector:iv"
        assert isinstance(exc_info.value, GeometryError)

    def test_tiny_vector_is_not_degenerate(self):
        # Only the exact zero vector is rejected
        v = Vector(x=1e-12, y=0.0)
        assert v.magnitude > 0

    def test_from_point(self):
        v = Vector.from_point(Point(x=3.0, y=-2.0))
        assert v.x == 3.0
        assert v.y == -2.0

    def test_from_origin_point(self):
        with pytest.raises(DegenerateVectorError):
            Vector.from_point(Point(x=0.0, y=0.0))

    def test_magnitude(self):
        assert Vector(x=3.0, y=4.0).magnitude == 5.0
        assert Vector(x=0.0, y=-2.0).magnitude == 2.0

    def test_dot(self):
        v1 = Vector(x=1.0, y=2.0)
        v2 = Vector(x=3.0, y=4.0)
        assert v1.dot(v2) == 11.0
        assert v2.dot(v1) == 11.0

    def test_cosine_similarity(self):
        v1 = Vector(x=1.0, y=0.0)

        assert v1.cosine_similarity(Vector(x=5.0, y=0.0)) == pytest.approx(1.0)
        assert v1.cosine_similarity(Vector(x=0.0, y=1.0)) == pytest.approx(0.0)
        assert v1.cosine_similarity(Vector(x=-2.0, y=0.0)) == pytest.approx(-1.0)
        assert Vector(x=3.0, y=4.0).cosine_similarity(Vector(x=4.0, y=3.0)) == pytest.approx(0.96)

    def test_as_point(self):
        p = Vector(x=2.0, y=5.0).as_point()
        assert isinstance(p, Point)
        assert p.x == 2.0
        assert p.y == 5.0

    def test_intersect_forwards_to_segment(self):
        segment = Segment(a=Point(x=0.0, y=4.0), b=Point(x=4.0, y=0.0))
        vector = Vector(x=4.0, y=4.0)

        from_vector = vector.intersect(segment)
        from_segment = segment.intersect(vector)

        assert from_vector is not None
        assert from_vector == from_segment

    def test_intersect_miss(self):
        segment = Segment(a=Point(x=0.0, y=4.0), b=Point(x=4.0, y=0.0))
        assert Vector(x=1.0, y=1.0).intersect(segment) is None

    def test_string_representation(self):
        assert str(Vector(x=1.0, y=-2.5)) == "<1.00,-2.50>"
        assert str(Vector(x=0.125, y=3)) == "<0.12,3.00>"

    def test_immutability(self):
        v = Vector(x=1.0, y=1.0)

        with pytest.raises(Exception):
            v.x = 0.0
