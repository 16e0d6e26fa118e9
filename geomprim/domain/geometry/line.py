# domain/geometry/line.py
from pydantic import Field
import logging
from geomprim.domain.geometry.vector import Vector
from geomprim.domain.geometry.constants import EPS
from geomprim.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Line(ImmutableModel):
    """
    Represents an infinite line by its implicit equation a·x + b·y + c = 0.

    Coefficients are never normalized, so two Line objects describing the
    same geometric line usually hold different numbers. Equality is therefore
    scale-invariant: lines compare equal when their coefficient triples are
    proportional.
    """
    a: float = Field(default=1.0, description="Coefficient of x")
    b: float = Field(default=-1.0, description="Coefficient of y")
    c: float = Field(default=0.0, description="Free term")

    __hash__ = None

    @classmethod
    def from_points(cls, first: Vector, second: Vector) -> "Line":
        """
        Build the line through two points.

        The normal (a, b) is the direction second - first rotated 90°
        clockwise, and c is solved so that the line passes through first.
        Coincident points give the ill-defined line (0, 0, 0); this is not
        rejected.
        """
        if first == second:
            logger.debug(f"Building a line from coincident points {first}")
        normal = (second - first).perpendicular()
        return cls(a=normal.x, b=normal.y, c=-(normal.x * first.x + normal.y * first.y))

    @property
    def normal(self) -> Vector:
        """Normal vector (a, b) of the line, not unit length."""
        return Vector(x=self.a, y=self.b)

    def evaluate(self, point: Vector) -> float:
        """Value of the implicit form at a point; its sign tells the side."""
        return self.a * point.x + self.b * point.y + self.c

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        # All three 2x2 minors of the coefficient matrix must vanish
        return (abs(self.a * other.b - other.a * self.b) < EPS
                and abs(self.b * other.c - other.b * self.c) < EPS
                and abs(self.a * other.c - other.a * self.c) < EPS)

    def format_as_text(self) -> str:
        """Format as three whitespace-separated scalars a, b, c."""
        return f"{self.a} {self.b} {self.c}"

    def __str__(self) -> str:
        return self.format_as_text()
