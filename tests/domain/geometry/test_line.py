import pytest
from geomprim.domain.geometry.vector import Vector
from geomprim.domain.geometry.line import Line


class TestLine:
    def test_create_line(self):
        line = Line(a=1.0, b=2.0, c=3.0)
        assert line.a == 1.0
        assert line.b == 2.0
        assert line.c == 3.0

    def test_default_line(self):
        line = Line()
        assert (line.a, line.b, line.c) == (1.0, -1.0, 0.0)
        assert line == Line.from_points(Vector(x=0.0, y=0.0), Vector(x=1.0, y=1.0))

    def test_from_points(self):
        line = Line.from_points(Vector(x=0.0, y=0.0), Vector(x=1.0, y=0.0))
        # Direction (1, 0) rotated clockwise gives the normal (0, -1)
        assert line.a == 0.0
        assert line.b == -1.0
        assert line.c == 0.0

    def test_from_points_normal_is_not_normalized(self):
        a = Vector(x=1.0, y=2.0)
        b = Vector(x=4.0, y=6.0)
        line = Line.from_points(a, b)

        assert line.normal == (b - a).perpendicular()
        assert line.normal.length == 5.0
        assert line.evaluate(a) == pytest.approx(0.0)
        assert line.evaluate(b) == pytest.approx(0.0)

    def test_from_coincident_points_is_not_rejected(self):
        p = Vector(x=2.0, y=3.0)
        line = Line.from_points(p, p)
        assert line.normal == Vector()

    def test_normal(self):
        normal = Line(a=3.0, b=-4.0, c=7.0).normal
        assert normal.x == 3.0
        assert normal.y == -4.0

    def test_evaluate_sign(self):
        # The y-axis, x = 0
        line = Line.from_points(Vector(x=0.0, y=0.0), Vector(x=0.0, y=1.0))
        assert line.evaluate(Vector(x=2.0, y=9.0)) > 0
        assert line.evaluate(Vector(x=-2.0, y=9.0)) < 0
        assert line.evaluate(Vector(x=0.0, y=-4.0)) == 0.0

    def test_scale_invariant_equality(self):
        assert Line(a=1.0, b=2.0, c=3.0) == Line(a=2.0, b=4.0, c=6.0)
        assert Line(a=1.0, b=2.0, c=3.0) == Line(a=-0.5, b=-1.0, c=-1.5)

        first = Line.from_points(Vector(x=0.0, y=0.0), Vector(x=1.0, y=1.0))
        second = Line.from_points(Vector(x=5.0, y=5.0), Vector(x=2.0, y=2.0))
        assert first == second

    def test_crossing_lines_differ(self):
        horizontal = Line.from_points(Vector(x=0.0, y=0.0), Vector(x=1.0, y=0.0))
        vertical = Line.from_points(Vector(x=0.0, y=0.0), Vector(x=0.0, y=1.0))
        assert horizontal != vertical

    def test_parallel_lines_differ(self):
        assert Line(a=0.0, b=1.0, c=0.0) != Line(a=0.0, b=1.0, c=-1.0)
        # Vertical lines have b = 0 on both sides
        assert Line(a=1.0, b=0.0, c=0.0) != Line(a=1.0, b=0.0, c=-1.0)

    def test_immutability(self):
        line = Line(a=1.0, b=1.0, c=0.0)

        with pytest.raises(Exception):
            line.c = 2.0

    def test_string_representation(self):
        assert str(Line(a=1.0, b=-1.0, c=0.5)) == "1.0 -1.0 0.5"
