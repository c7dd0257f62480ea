"""Overlap analysis for segments already known to be collinear."""

from enum import IntEnum

from .elements import Point2D, Segment
from .ratio import SegmentRatio


class Axis(IntEnum):
    """Coordinate axis used to project collinear segments."""

    X = 0
    Y = 1


def dominant_axis(dx_a, dy_a, dx_b, dy_b) -> Axis:
    """Pick the axis along which the two segments extend the most.

    Projecting onto the larger extent keeps the ratio denominators away from
    zero for nearly axis-parallel segments. Ties go to X.
    """
    if abs(dx_a) + abs(dx_b) >= abs(dy_a) + abs(dy_b):
        return Axis.X
    return Axis.Y


def relate_collinear_points(
    a: Segment,
    b: Segment,
    policy,
    robust_a1: Point2D,
    robust_a2: Point2D,
    robust_b1: Point2D,
    robust_b2: Point2D,
    axis: Axis,
):
    """Project robust endpoints on ``axis`` and relate them."""
    return relate_collinear(
        a,
        b,
        policy,
        robust_a1[axis],
        robust_a2[axis],
        robust_b1[axis],
        robust_b2[axis],
    )


def relate_collinear(a: Segment, b: Segment, policy, oa1, oa2, ob1, ob2):
    """Relate two collinear segments given their 1-D projections.

    Projections keep the input endpoint order. Lengths are signed, so a
    reversed segment yields ratios consistent with the crossing case::

        a1--------->a2          (2..7)   length_a = 5
               b1----->b2       (5..8)   length_b = 3

        b1 w.r.t. a: (5-2)/5 = 3/5   on a
        b2 w.r.t. a: (8-2)/5 = 6/5   after a
        a1 w.r.t. b: (2-5)/3 = -1    before b
        a2 w.r.t. b: (7-5)/3 = 2/3   on b

    Args:
        a: First segment, passed through to the policy
        b: Second segment, passed through to the policy
        policy: Result policy
        oa1, oa2: Projections of A's endpoints
        ob1, ob2: Projections of B's endpoints

    Returns:
        ``policy.disjoint()`` or ``policy.segments_collinear(...)``
    """
    length_a = oa2 - oa1
    length_b = ob2 - ob1

    ra_from = SegmentRatio(oa1 - ob1, length_b)
    ra_to = SegmentRatio(oa2 - ob1, length_b)
    rb_from = SegmentRatio(ob1 - oa1, length_a)
    rb_to = SegmentRatio(ob2 - oa1, length_a)

    if (ra_from.before_start() and ra_to.before_start()) or (
        ra_from.after_end() and ra_to.after_end()
    ):
        return policy.disjoint()

    return policy.segments_collinear(a, b, ra_from, ra_to, rb_from, rb_to)
