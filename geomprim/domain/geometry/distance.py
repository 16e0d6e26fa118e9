# domain/geometry/distance.py
"""Distances from a point to the geometric value types."""
from typing import Union
from geomprim.domain.geometry.vector import Vector
from geomprim.domain.geometry.line import Line
from geomprim.domain.geometry.beam import Beam
from geomprim.domain.geometry.segment import Segment
from geomprim.domain.geometry.algebra import scalar_multiplication

Shape = Union[Vector, Line, Beam, Segment]


def point_distance(a: Vector, b: Vector) -> float:
    return (b - a).length


def line_distance(line: Line, point: Vector) -> float:
    """Perpendicular distance |a·x + b·y + c| / |(a, b)|."""
    return abs(line.evaluate(point)) / line.normal.length


def beam_distance(beam: Beam, point: Vector) -> float:
    """
    Distance from a point to a ray.

    A point projecting forward of the origin is measured against the ray's
    line, anything behind it against the origin. A ray whose two points
    coincide has no line and raises ZeroDivisionError.
    """
    if scalar_multiplication(beam.direction, point - beam.origin) >= 0:
        return line_distance(beam.line, point)
    return point_distance(beam.origin, point)


def segment_distance(segment: Segment, point: Vector) -> float:
    """
    Distance from a point to a segment.

    When the projection falls inside the segment the line distance is used,
    otherwise the distance to the nearer endpoint. A degenerate segment is
    measured as its single point.
    """
    if segment.is_degenerate:
        return point_distance(segment.a, point)

    forward_a = scalar_multiplication(segment.b - segment.a, point - segment.a)
    forward_b = scalar_multiplication(segment.a - segment.b, point - segment.b)
    if forward_a >= 0 and forward_b >= 0:
        return line_distance(segment.line, point)
    return min(point_distance(segment.a, point), point_distance(segment.b, point))


def dist(shape: Shape, point: Vector) -> float:
    """
    Distance from a point to a vector, line, beam or segment.

    Args:
        shape: The object to measure against
        point: The point being measured

    Returns:
        The Euclidean distance

    Raises:
        TypeError: If shape is not one of the supported types
    """
    if isinstance(shape, Vector):
        return point_distance(shape, point)
    if isinstance(shape, Line):
        return line_distance(shape, point)
    if isinstance(shape, Beam):
        return beam_distance(shape, point)
    if isinstance(shape, Segment):
        return segment_distance(shape, point)
    raise TypeError(f"Cannot measure distance to {type(shape).__name__}")
