# domain/geometry/vector.py
from typing import Optional
from pydantic import Field, field_validator
import math
from geomprim.domain.geometry.constants import EPS
from geomprim.utils.base_model import ImmutableModel


class Vector(ImmutableModel):
    """
    Represents a 2D vector in Cartesian coordinates.

    The same type serves as a point and as a displacement. Equality is
    component-wise within the absolute tolerance EPS, and every higher level
    equality or incidence test in the package is built on it.
    """
    x: float = Field(default=0.0, description="X coordinate")
    y: float = Field(default=0.0, description="Y coordinate")

    # Tolerance equality is not transitive, so vectors cannot be hashed
    __hash__ = None

    @field_validator("x", "y")
    @classmethod
    def validate_coordinates(cls, value: float) -> float:
        """Validate that coordinates are finite numbers."""
        if not math.isfinite(value):
            raise ValueError(f"Coordinate must be a finite number, got {value}")
        return value

    @property
    def length(self) -> float:
        """Euclidean norm of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def perpendicular(self) -> "Vector":
        """Rotate the vector 90° clockwise: (x, y) -> (y, -x)."""
        return Vector(x=self.y, y=-self.x)

    def is_close_to(self, other: "Vector", tolerance: Optional[float] = None) -> bool:
        """
        Check if this vector matches another one component by component.

        Args:
            other: The vector to compare with
            tolerance: Strict bound on the difference of each coordinate.
                      If None, uses the default EPS value.

        Returns:
            True if both coordinate differences are below the tolerance
        """
        if tolerance is None:
            tolerance = EPS
        return abs(other.x - self.x) < tolerance and abs(other.y - self.y) < tolerance

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.is_close_to(other)

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(x=self.x - other.x, y=self.y - other.y)

    def __neg__(self) -> "Vector":
        return Vector(x=-self.x, y=-self.y)

    def scale(self, factor: float) -> "Vector":
        """Scale both coordinates by a factor."""
        return Vector(x=self.x * factor, y=self.y * factor)

    def midpoint(self, other: "Vector") -> "Vector":
        """Calculate the midpoint between this point and another point."""
        return Vector(x=(self.x + other.x) / 2, y=(self.y + other.y) / 2)

    def format_as_text(self) -> str:
        """Format as two whitespace-separated scalars, x first."""
        return f"{self.x} {self.y}"

    def __str__(self) -> str:
        return self.format_as_text()
