import io
import pytest
from domain.geometry.point import Point
from main import main, read_points


class TestReadPoints:
    def test_read_points(self):
        a, b = read_points(io.StringIO("1 2\n3.5 -4\n"))
        assert a == Point(x=1.0, y=2.0)
        assert b == Point(x=3.5, y=-4.0)

    def test_too_few_values(self):
        with pytest.raises(ValueError, match="Expected four coordinates"):
            read_points(io.StringIO("1 2 3"))

    def test_non_numeric(self):
        with pytest.raises(ValueError):
            read_points(io.StringIO("1 2 three 4"))


class TestMain:
    def test_prints_segment(self):
        out = io.StringIO()
        status = main(stdin=io.StringIO("3 4 0 0"), stdout=out)

        assert status == 0
        assert out.getvalue() == "sr((0.00,0.00); (3.00,4.00))\n"

    def test_degenerate_segment(self):
        out = io.StringIO()
        status = main(stdin=io.StringIO("1 1 1 1"), stdout=out)

        assert status == 1
        assert out.getvalue() == "Segment:iv\n"

    def test_invalid_input(self):
        out = io.StringIO()
        status = main(stdin=io.StringIO("1 1"), stdout=out)

        assert status == 1
        assert out.getvalue() == ""
