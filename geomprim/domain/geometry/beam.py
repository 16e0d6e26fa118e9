# domain/geometry/beam.py
from pydantic import Field
from geomprim.domain.geometry.vector import Vector
from geomprim.domain.geometry.line import Line
from geomprim.utils.base_model import ImmutableModel


class Beam(ImmutableModel):
    """
    Represents a ray that starts at origin, passes through the second point
    and extends infinitely beyond it.
    """
    origin: Vector = Field(default_factory=Vector, description="Starting point of the ray")
    through: Vector = Field(default_factory=lambda: Vector(x=1.0, y=1.0),
                            description="Point the ray passes through")

    @property
    def direction(self) -> Vector:
        """Direction vector from origin to the through point."""
        return self.through - self.origin

    @property
    def line(self) -> Line:
        """The infinite line carrying the ray."""
        return Line.from_points(self.origin, self.through)

    def __str__(self) -> str:
        return f"{self.origin} {self.through}"
