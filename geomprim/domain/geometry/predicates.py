# domain/geometry/predicates.py
"""
Incidence, betweenness, side-of-line and segment intersection tests.

Every comparison uses the absolute tolerance EPS. Whether a test is strict
(< EPS) or inclusive (<= EPS, >= -EPS) decides how touching configurations
are classified, so each predicate keeps its own direction.
"""
import logging
from geomprim.domain.geometry.constants import EPS
from geomprim.domain.geometry.vector import Vector
from geomprim.domain.geometry.line import Line
from geomprim.domain.geometry.segment import Segment
from geomprim.domain.geometry.algebra import angle_cos, vector_multiplication

logger = logging.getLogger(__name__)


def lies_on(segment: Segment, point: Vector) -> bool:
    """
    Check if a point lies on a segment, endpoints included.

    A degenerate segment contains only its single point. Otherwise the point
    must be co-directional with the segment seen from both endpoints.
    """
    if segment.a == point or segment.b == point:
        return True
    if segment.is_degenerate:
        return False

    from_a = angle_cos(segment.b - segment.a, point - segment.a)
    from_b = angle_cos(segment.a - segment.b, point - segment.b)
    return abs(from_a - 1.0) < EPS and abs(from_b - 1.0) < EPS


def is_between(a: Vector, b: Vector, m: Vector) -> bool:
    """
    Check if direction m lies in the angular wedge spanned by a and b.

    Both cross products b×m and m×a must share a sign; values within EPS of
    zero count as either sign, so the bounding rays belong to the wedge.
    The test is symmetric under negation of m, so the vertically opposite
    wedge is accepted as well.
    """
    bm = vector_multiplication(b, m)
    ma = vector_multiplication(m, a)
    return (bm >= -EPS and ma >= -EPS) or (bm <= EPS and ma <= EPS)


def on_same_side(line: Line, a: Vector, b: Vector) -> bool:
    """
    Check if two points lie strictly on the same side of a line.

    A point on the line (within EPS) makes the answer False.
    """
    side_a = line.evaluate(a)
    side_b = line.evaluate(b)
    if abs(side_a) < EPS or abs(side_b) < EPS:
        return False
    return (side_a < 0 and side_b < 0) or (side_a > 0 and side_b > 0)


def on_same_side_eq(line: Line, a: Vector, b: Vector) -> bool:
    """
    Inclusive variant of on_same_side: a point on the line (within EPS)
    counts as being on the same side as anything.
    """
    side_a = line.evaluate(a)
    side_b = line.evaluate(b)
    if abs(side_a) < EPS or abs(side_b) < EPS:
        return True
    return (side_a < 0 and side_b < 0) or (side_a > 0 and side_b > 0)


def intersect(first: Segment, second: Segment) -> bool:
    """
    Check if two segments share at least one point.

    Cases are tried in a fixed order:
    - a shared endpoint intersects;
    - a degenerate segment intersects when its point lies on the other one;
    - collinear segments intersect when an endpoint of either one lies on
      the other;
    - otherwise the segments intersect unless the endpoints of one of them
      are strictly on one side of the other's line.
    """
    if (first.a == second.a or first.a == second.b
            or first.b == second.a or first.b == second.b):
        logger.debug("Segments share an endpoint")
        return True
    if first.is_degenerate:
        return lies_on(second, first.a)
    if second.is_degenerate:
        return lies_on(first, second.a)

    first_line = first.line
    second_line = second.line
    if first_line == second_line:
        logger.debug("Segments are collinear, checking overlap")
        return (lies_on(first, second.a) or lies_on(first, second.b)
                or lies_on(second, first.a) or lies_on(second, first.b))

    return not (on_same_side(first_line, second.a, second.b)
                or on_same_side(second_line, first.a, first.b))
