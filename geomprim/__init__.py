"""
geomprim - 2D computational geometry primitives

Vectors, lines, rays and segments with tolerance-based predicates and
distances for algorithmic problem solving.
"""
__version__ = "1.0"

import logging

from geomprim.domain.geometry.constants import EPS
from geomprim.domain.geometry.vector import Vector
from geomprim.domain.geometry.line import Line
from geomprim.domain.geometry.beam import Beam
from geomprim.domain.geometry.segment import Segment
from geomprim.domain.geometry.algebra import (
    scalar_multiplication, vector_multiplication, angle_cos, angle, deg_to_rad, rad_to_deg
)
from geomprim.domain.geometry.predicates import (
    lies_on, is_between, on_same_side, on_same_side_eq, intersect
)
from geomprim.domain.geometry.distance import dist
from geomprim.domain.geometry.text_io import (
    GeometryReader, parse_vector, parse_line, parse_beam, parse_segment,
    format_vector, format_line, format_beam, format_segment
)

# Applications configure handlers; the library only emits records
logging.getLogger(__name__).addHandler(logging.NullHandler())
