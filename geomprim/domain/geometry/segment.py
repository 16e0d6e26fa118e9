# domain/geometry/segment.py
from pydantic import Field
from geomprim.domain.geometry.vector import Vector
from geomprim.domain.geometry.line import Line
from geomprim.utils.base_model import ImmutableModel


class Segment(ImmutableModel):
    """
    Represents the bounded piece of a line between two endpoints.

    Equal endpoints are allowed: such a degenerate segment stands for a
    single point, and the predicates and distances treat it that way.
    """
    a: Vector = Field(default_factory=Vector, description="First endpoint")
    b: Vector = Field(default_factory=lambda: Vector(x=1.0, y=1.0), description="Second endpoint")

    @property
    def is_degenerate(self) -> bool:
        """True when both endpoints coincide within EPS."""
        return self.a == self.b

    @property
    def line(self) -> Line:
        """The infinite line extending the segment."""
        return Line.from_points(self.a, self.b)

    @property
    def length(self) -> float:
        return (self.b - self.a).length

    @property
    def midpoint(self) -> Vector:
        return self.a.midpoint(self.b)

    def __str__(self) -> str:
        return f"{self.a} {self.b}"
