"""Tests for SegmentRatio."""

from fractions import Fraction

import pytest
from planar.intersection.ratio import SegmentRatio


class TestNormalization:
    """Denominator sign normalization."""

    def test_negative_denominator_flips_signs(self):
        ratio = SegmentRatio(1, -2)
        assert ratio.numerator == -1
        assert ratio.denominator == 2

    def test_both_negative(self):
        ratio = SegmentRatio(-3, -4)
        assert ratio.numerator == 3
        assert ratio.denominator == 4

    def test_assign_normalizes(self):
        ratio = SegmentRatio.zero()
        ratio.assign(2, -5)
        assert ratio.numerator == -2
        assert ratio.denominator == 5


class TestPositionQueries:
    """Tests for before/on/after queries."""

    def test_before_start(self):
        ratio = SegmentRatio(-1, 2)
        assert ratio.before_start() is True
        assert ratio.on_segment() is False
        assert ratio.after_end() is False

    def test_after_end(self):
        ratio = SegmentRatio(3, 2)
        assert ratio.after_end() is True
        assert ratio.on_segment() is False

    def test_inside(self):
        ratio = SegmentRatio(1, 2)
        assert ratio.on_segment() is True
        assert ratio.in_segment() is True
        assert ratio.on_end() is False

    def test_at_start(self):
        ratio = SegmentRatio(0, 5)
        assert ratio.on_segment() is True
        assert ratio.in_segment() is False
        assert ratio.on_end() is True
        assert ratio.is_zero() is True

    def test_at_end(self):
        ratio = SegmentRatio(5, 5)
        assert ratio.on_segment() is True
        assert ratio.is_one() is True

    def test_negative_denominator_queries(self):
        # 3 / -2 == -1.5
        assert SegmentRatio(3, -2).before_start() is True
        # -3 / -2 == 1.5
        assert SegmentRatio(-3, -2).after_end() is True

    def test_float_parts(self):
        assert SegmentRatio(0.25, 0.5).in_segment() is True
        assert SegmentRatio(0.75, 0.5).after_end() is True


class TestComparison:
    """Division-free equality and ordering."""

    def test_equal_after_scaling(self):
        assert SegmentRatio(1, 2) == SegmentRatio(2, 4)

    def test_equal_with_sign_normalization(self):
        assert SegmentRatio(-1, -2) == SegmentRatio(1, 2)

    def test_not_equal(self):
        assert SegmentRatio(1, 3) != SegmentRatio(1, 2)

    def test_ordering(self):
        assert SegmentRatio(1, 3) < SegmentRatio(1, 2)
        assert SegmentRatio(3, 2) > SegmentRatio.one()
        assert SegmentRatio(-1, 4) < SegmentRatio.zero()

    def test_sorting(self):
        ratios = [SegmentRatio(3, 4), SegmentRatio(-1, 2), SegmentRatio(1, 8)]
        ordered = sorted(ratios)
        assert ordered == [SegmentRatio(-1, 2), SegmentRatio(1, 8), SegmentRatio(3, 4)]

    def test_fraction_against_int(self):
        assert SegmentRatio(Fraction(1, 3), Fraction(1)) == SegmentRatio(1, 3)

    def test_not_equal_to_other_types(self):
        assert (SegmentRatio(1, 2) == 0.5) is False

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(SegmentRatio(1, 2))


class TestEdgeValue:
    """Floating approximation."""

    def test_quarter(self):
        assert SegmentRatio(1, 4).edge_value() == pytest.approx(0.25)

    def test_fraction_parts(self):
        assert SegmentRatio(Fraction(1), Fraction(3)).edge_value() == pytest.approx(1 / 3)

    def test_zero_denominator(self):
        assert SegmentRatio(0, 0).edge_value() == 0.0
