"""Side classification of a point relative to a directed segment.

Floating coordinates are promoted to ``numpy.longdouble`` before any
arithmetic so that subtraction and the determinant products lose as little
as possible. Integer and Fraction coordinates are exact and pass through.
"""

from enum import IntEnum
from numbers import Real

import numpy as np

from .elements import Point2D


class Side(IntEnum):
    """Position of a point relative to a directed segment."""

    RIGHT = -1
    ON = 0
    LEFT = 1


def promote(value):
    """Widen a floating coordinate; leave exact types untouched."""
    if isinstance(value, (float, np.floating)):
        return np.longdouble(value)
    return value


def determinant(ux, uy, vx, vy):
    """2x2 determinant |ux uy; vx vy|."""
    return ux * vy - uy * vx


def sign(value: Real) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def side(
    reference_start: Point2D,
    reference_end: Point2D,
    point: Point2D,
    promote_floats: bool = True,
) -> Side:
    """Classify a point against the line through a directed segment.

    Args:
        reference_start: First point of the reference segment
        reference_end: Second point of the reference segment
        point: Point to classify
        promote_floats: Compute floating coordinates in extended precision

    Returns:
        Side.LEFT, Side.RIGHT, or Side.ON
    """
    if promote_floats:
        sx, sy = promote(reference_start[0]), promote(reference_start[1])
        ex, ey = promote(reference_end[0]), promote(reference_end[1])
        px, py = promote(point[0]), promote(point[1])
    else:
        sx, sy = reference_start
        ex, ey = reference_end
        px, py = point

    det = determinant(ex - sx, ey - sy, px - sx, py - sy)
    return Side(sign(det))
