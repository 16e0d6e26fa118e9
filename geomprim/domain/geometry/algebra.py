# domain/geometry/algebra.py
"""
Products and angles over vectors.

The sign of vector_multiplication (the 2D cross product) is the only
orientation primitive in the package: side tests, betweenness and segment
intersection all reduce to it.
"""
import math
from geomprim.domain.geometry.constants import DEGREES_PER_RADIAN
from geomprim.domain.geometry.vector import Vector


def scalar_multiplication(a: Vector, b: Vector) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def vector_multiplication(a: Vector, b: Vector) -> float:
    """
    2D cross product a.x * b.y - a.y * b.x.

    Positive when b is counter-clockwise from a, negative when clockwise,
    zero when the vectors are collinear.
    """
    return a.x * b.y - a.y * b.x


def angle_cos(a: Vector, b: Vector) -> float:
    """
    Cosine of the angle between two vectors.

    Zero-length operands are not guarded and raise ZeroDivisionError.
    """
    return scalar_multiplication(a, b) / a.length / b.length


def angle(a: Vector, b: Vector) -> float:
    """Unsigned angle between two vectors in radians, in [0, π]."""
    # Rounding can push the cosine of (anti)parallel vectors past ±1
    return math.acos(max(-1.0, min(1.0, angle_cos(a, b))))


def deg_to_rad(x: float) -> float:
    return x / DEGREES_PER_RADIAN


def rad_to_deg(x: float) -> float:
    return x * DEGREES_PER_RADIAN
