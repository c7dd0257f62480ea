"""Relation engine for two planar segments.

Classification decisions (sides, degeneracy, collinearity, robust ratios)
are taken on the robust points. The floating ratio ``r`` that locates the
crossing point is computed separately from the raw points, in promoted
precision, and never feeds back into the classification.

See http://mathworld.wolfram.com/Line-LineIntersection.html
"""

import logging
import math
from typing import Optional, Tuple

from ..robust.policies import NoRescalePolicy, RobustPolicy
from .collinear import dominant_axis, relate_collinear_points
from .config import IntersectionConfig, RobustnessCounters
from .elements import Point2D, Segment, as_segment, points_equal
from .info import IntersectionInfo, SideInfo
from .policies import RelationPolicy, ResultPolicy
from .ratio import SegmentRatio
from .side import determinant, promote, side

logger = logging.getLogger(__name__)

RobustPoints = Tuple[Point2D, Point2D, Point2D, Point2D]


def cramers_rule(dx_a, dy_a, dx_b, dy_b, wx, wy):
    """Determinants of the 2x2 system locating the crossing along A.

    The ratio along A is ``da / d``; ``d == 0`` means the segments are
    parallel. The crossing point is ``(x1 + r * dx_a, y1 + r * dy_a)``.

    Returns:
        Tuple (d, da)
    """
    d = determinant(dx_a, dy_a, dx_b, dy_b)
    da = determinant(dx_b, dy_b, wx, wy)
    return d, da


def clamp_ratio(r: float) -> float:
    """Clamp a ratio into [0, 1]; in-range values are returned unchanged.

    NaN maps to 0, like a zero determinant.
    """
    if math.isnan(r) or r < 0:
        return 0.0
    if r > 1:
        return 1.0
    return r


class SegmentRelator:
    """Classifies the relation between two segments.

    The result shape is decided by the result policy; the robust points are
    either passed in explicitly or derived by the robust policy.
    """

    def __init__(
        self,
        policy: Optional[ResultPolicy] = None,
        robust_policy: Optional[RobustPolicy] = None,
        config: Optional[IntersectionConfig] = None,
        counters: Optional[RobustnessCounters] = None,
    ):
        """Initialize the relator.

        Args:
            policy: Result policy, defaults to RelationPolicy
            robust_policy: Robust-point policy, defaults to NoRescalePolicy
            config: Numeric switches, loaded from the environment if omitted
            counters: Optional tally of numeric fallbacks
        """
        self.policy = policy or RelationPolicy()
        self.robust_policy = robust_policy or NoRescalePolicy()
        self.config = config or IntersectionConfig.from_env()
        self.counters = counters

    def relate(self, a, b, robust_points: Optional[RobustPoints] = None):
        """Relate segment ``a`` to segment ``b``.

        Args:
            a: First segment (Segment or pair of points)
            b: Second segment (Segment or pair of points)
            robust_points: Robust (a1, a2, b1, b2); derived if omitted

        Returns:
            Whatever the result policy returns for the outcome
        """
        a = as_segment(a)
        b = as_segment(b)
        if robust_points is None:
            robust_points = self.robust_policy.robust_points(a, b)
        robust_a1, robust_a2, robust_b1, robust_b2 = robust_points
        policy = self.policy

        a_is_point = points_equal(robust_a1, robust_a2)
        b_is_point = points_equal(robust_b1, robust_b2)

        if a_is_point and b_is_point:
            if points_equal(robust_a1, robust_b1):
                return policy.degenerate(a, True)
            return policy.disjoint()

        promote_floats = self.config.promote_floats
        sides = SideInfo()
        sides.set(
            0,
            side(robust_b1, robust_b2, robust_a1, promote_floats),
            side(robust_b1, robust_b2, robust_a2, promote_floats),
        )
        sides.set(
            1,
            side(robust_a1, robust_a2, robust_b1, promote_floats),
            side(robust_a1, robust_a2, robust_b2, promote_floats),
        )

        if sides.same(0) or sides.same(1):
            # Both points are at the same side of the other segment
            return policy.disjoint()

        if a_is_point:
            return self._relate_point(a, True, robust_a1, robust_b1, robust_b2)
        if b_is_point:
            return self._relate_point(b, False, robust_b1, robust_a1, robust_a2)

        robust_dx_a = robust_a2[0] - robust_a1[0]
        robust_dy_a = robust_a2[1] - robust_a1[1]
        robust_dx_b = robust_b2[0] - robust_b1[0]
        robust_dy_b = robust_b2[1] - robust_b1[1]

        if not sides.collinear():
            info = IntersectionInfo(dx_a=a.dx, dy_a=a.dy, dx_b=b.dx, dy_b=b.dy)
            if self._compute_crossing(a, b, info, robust_points):
                return policy.segments_cross(sides, info, a, b)
            sides.set(0, 0, 0)
            sides.set(1, 0, 0)

        axis = dominant_axis(robust_dx_a, robust_dy_a, robust_dx_b, robust_dy_b)
        return relate_collinear_points(
            a, b, policy, robust_a1, robust_a2, robust_b1, robust_b2, axis
        )

    def _relate_point(
        self,
        point_segment: Segment,
        is_first: bool,
        robust_point: Point2D,
        robust_other1: Point2D,
        robust_other2: Point2D,
    ):
        """Degenerate segment that passed the side test, so it is on the other line.

        The point is placed along the other segment on its dominant axis. A
        point on the line but beyond either end is disjoint, where a side test
        alone would have called it degenerate.
        """
        axis = dominant_axis(
            robust_other2[0] - robust_other1[0],
            robust_other2[1] - robust_other1[1],
            0,
            0,
        )
        position = SegmentRatio(
            robust_point[axis] - robust_other1[axis],
            robust_other2[axis] - robust_other1[axis],
        )
        if not position.on_segment():
            return self.policy.disjoint()
        return self.policy.degenerate(point_segment, is_first)

    def _compute_crossing(
        self,
        a: Segment,
        b: Segment,
        info: IntersectionInfo,
        robust_points: RobustPoints,
    ) -> bool:
        """Fill ``info`` for a crossing; False if the robust determinant says collinear."""
        robust_a1, robust_a2, robust_b1, robust_b2 = robust_points
        robust_dx_a = robust_a2[0] - robust_a1[0]
        robust_dy_a = robust_a2[1] - robust_a1[1]
        robust_dx_b = robust_b2[0] - robust_b1[0]
        robust_dy_b = robust_b2[1] - robust_b1[1]

        robust_da0, robust_da = cramers_rule(
            robust_dx_a,
            robust_dy_a,
            robust_dx_b,
            robust_dy_b,
            robust_a1[0] - robust_b1[0],
            robust_a1[1] - robust_b1[1],
        )
        robust_db0, robust_db = cramers_rule(
            robust_dx_b,
            robust_dy_b,
            robust_dx_a,
            robust_dy_a,
            robust_b1[0] - robust_a1[0],
            robust_b1[1] - robust_a1[1],
        )

        if robust_da0 == 0:
            self._anomaly(
                "robust_collinear",
                "Robust determinant is zero for non-collinear sides, relating as collinear",
                a,
                b,
            )
            return False

        ax1, ay1, ax2, ay2, bx1, by1, bx2, by2 = self._floating(a, b)
        dx_a, dy_a = ax2 - ax1, ay2 - ay1
        dx_b, dy_b = bx2 - bx1, by2 - by1

        d, da = cramers_rule(dx_a, dy_a, dx_b, dy_b, ax1 - bx1, ay1 - by1)
        if d == 0:
            self._anomaly("zero_determinant", "Determinant is zero for crossing segments", a, b)
            r = 0.0
        else:
            r = float(da / d)
            if not math.isfinite(r):
                # Products overflowed the working type
                self._anomaly(
                    "zero_determinant", "Determinant overflowed for crossing segments", a, b
                )
                r = 0.0

        info.robust_ra = SegmentRatio(robust_da, robust_da0)
        info.robust_rb = SegmentRatio(robust_db, robust_db0)

        if self.config.check_ratio:
            db0, db = cramers_rule(dx_b, dy_b, dx_a, dy_a, bx1 - ax1, by1 - ay1)
            rb = float(db / db0) if db0 != 0 else None
            info.rb = rb if rb is not None and math.isfinite(rb) else None

        if r < 0 or r > 1:
            self._record("clamped_ratio")
            logger.debug(f"Clamping ratio {r!r} into [0, 1]{self._detail(a, b)}")
        info.r = clamp_ratio(r)
        return True

    def _floating(self, a: Segment, b: Segment):
        coords = (*a.first, *a.second, *b.first, *b.second)
        if self.config.promote_floats:
            return tuple(promote(c) for c in coords)
        return coords

    def _record(self, name: str) -> None:
        if self.counters is not None:
            self.counters.record(name)

    def _detail(self, a: Segment, b: Segment) -> str:
        if not self.config.debug_robustness:
            return ""
        return f" (A: {a.first} -> {a.second}, B: {b.first} -> {b.second})"

    def _anomaly(self, name: str, message: str, a: Segment, b: Segment) -> None:
        self._record(name)
        logger.warning(f"{message}{self._detail(a, b)}")


def relate_segments(
    a,
    b,
    policy: Optional[ResultPolicy] = None,
    robust_policy: Optional[RobustPolicy] = None,
    config: Optional[IntersectionConfig] = None,
    robust_points: Optional[RobustPoints] = None,
):
    """Relate two segments with a one-off relator.

    Args:
        a: First segment (Segment or pair of points)
        b: Second segment (Segment or pair of points)
        policy: Result policy, defaults to RelationPolicy
        robust_policy: Robust-point policy, defaults to NoRescalePolicy
        config: Numeric switches, loaded from the environment if omitted
        robust_points: Robust (a1, a2, b1, b2); derived if omitted

    Returns:
        Whatever the result policy returns for the outcome
    """
    relator = SegmentRelator(policy=policy, robust_policy=robust_policy, config=config)
    return relator.relate(a, b, robust_points=robust_points)
