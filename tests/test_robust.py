"""Tests for robust-point policies and exact classification."""

from fractions import Fraction

import pytest
from planar.intersection import (
    IntersectionConfig,
    IntersectionPointsPolicy,
    RelationKind,
    Segment,
    SegmentRatio,
    Side,
    relate_segments,
    side,
)
from planar.robust import ExactRationalPolicy, NoRescalePolicy


def relate(a, b, **kwargs):
    kwargs.setdefault("config", IntersectionConfig())
    return relate_segments(a, b, **kwargs)


class TestNoRescalePolicy:
    """Tests for the identity policy."""

    def test_point_unchanged(self):
        assert NoRescalePolicy().robust_point((0.1, 2)) == (0.1, 2)

    def test_robust_points_order(self):
        a = Segment((0, 0), (1, 1))
        b = Segment((2, 2), (3, 3))
        assert NoRescalePolicy().robust_points(a, b) == ((0, 0), (1, 1), (2, 2), (3, 3))


class TestExactRationalPolicy:
    """Tests for the Fraction policy."""

    def test_converts_to_fraction(self):
        x, y = ExactRationalPolicy().robust_point((0.5, 3))
        assert x == Fraction(1, 2)
        assert y == Fraction(3)
        assert isinstance(x, Fraction)

    def test_float_value_is_exact_not_decimal(self):
        x, _ = ExactRationalPolicy().robust_point((0.1, 0.0))
        assert x != Fraction(1, 10)
        assert float(x) == 0.1

    def test_infinite_coordinate_rejected(self):
        with pytest.raises(ValueError):
            ExactRationalPolicy().robust_point((float("inf"), 0.0))

    def test_nan_coordinate_rejected(self):
        with pytest.raises(ValueError):
            ExactRationalPolicy().robust_point((0.0, float("nan")))


class TestExactRelation:
    """Relations computed on exact robust points."""

    def test_robust_ratio_is_exact_third(self):
        relation = relate(
            ((0.0, 0.0), (3.0, 0.0)),
            ((1.0, -1.0), (1.0, 1.0)),
            robust_policy=ExactRationalPolicy(),
        )
        assert relation.kind == RelationKind.CROSSING
        assert relation.info.robust_ra == SegmentRatio(1, 3)
        assert isinstance(relation.info.robust_ra.numerator, Fraction)
        assert relation.info.r == pytest.approx(1 / 3)

    def test_tiny_determinant_sign(self):
        # (1e8 + 1) * (1e8 - 1) - 1e8 * 1e8 == -1, below double resolution
        # of the individual products
        robust = ExactRationalPolicy()
        start = robust.robust_point((0.0, 0.0))
        end = robust.robust_point((1e8 + 1, 1e8))
        point = robust.robust_point((1e8, 1e8 - 1))
        assert side(start, end, point) == Side.RIGHT

    def test_near_parallel_touch_at_endpoint(self):
        a = ((0.0, 0.0), (1e8 + 1, 1e8))
        b = ((1e8, 1e8 - 1), (2e8, 2e8 - 1))
        relation = relate(a, b, robust_policy=ExactRationalPolicy())

        assert relation.kind == RelationKind.CROSSING
        assert relation.sides.get(0, 1) == Side.ON
        assert relation.info.robust_ra.is_one()
        assert relation.info.robust_rb == SegmentRatio(1, 10**8)
        assert relation.info.robust_rb.in_segment()

    def test_near_parallel_touch_point(self):
        a = ((0.0, 0.0), (1e8 + 1, 1e8))
        b = ((1e8, 1e8 - 1), (2e8, 2e8 - 1))
        result = relate(
            a, b, policy=IntersectionPointsPolicy(), robust_policy=ExactRationalPolicy()
        )
        assert result.count == 1
        assert result.points[0] == pytest.approx((1e8 + 1, 1e8))

    def test_explicit_robust_points_match_policy(self):
        a = Segment((0.25, 0.5), (4.5, 2.0))
        b = Segment((1.0, 3.0), (3.0, -1.0))
        robust = ExactRationalPolicy()
        via_policy = relate(a, b, robust_policy=robust)
        explicit = relate(a, b, robust_points=robust.robust_points(a, b))
        assert via_policy == explicit
