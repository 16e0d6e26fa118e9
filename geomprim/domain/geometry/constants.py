# domain/geometry/constants.py
"""Constants for geometric calculations."""
import math

# Every coordinate and coefficient is a plain Python float
Scalar = float

# Absolute tolerance for all approximate comparisons
EPS = 1e-8

DEGREES_PER_RADIAN = 180.0 / math.pi
