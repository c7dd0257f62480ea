"""Robust-point policies.

A robust policy maps raw coordinates onto the representation used for
classification decisions. The relator only ever reads the robust points for
side tests and robust ratios; the raw points drive the floating ratio.
"""

from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Any, Tuple

Point2D = Tuple[Any, Any]


class RobustPolicy(ABC):
    """Derives robust points from raw points."""

    @abstractmethod
    def robust_point(self, point: Point2D) -> Point2D:
        """Return the robust counterpart of a raw point."""

    def robust_points(self, a, b) -> Tuple[Point2D, Point2D, Point2D, Point2D]:
        """Robust endpoints of both segments, in (a1, a2, b1, b2) order."""
        return (
            self.robust_point(a.first),
            self.robust_point(a.second),
            self.robust_point(b.first),
            self.robust_point(b.second),
        )


class NoRescalePolicy(RobustPolicy):
    """Uses the raw coordinates unchanged."""

    def robust_point(self, point: Point2D) -> Point2D:
        return (point[0], point[1])


class ExactRationalPolicy(RobustPolicy):
    """Converts coordinates to Fraction.

    Every finite float has an exact Fraction value, so side tests and
    Cramer's-rule determinants over these points carry no rounding error.

    Raises:
        ValueError: On infinite or NaN coordinates
    """

    def robust_point(self, point: Point2D) -> Point2D:
        try:
            return (Fraction(point[0]), Fraction(point[1]))
        except (OverflowError, ValueError) as e:
            raise ValueError(f"Cannot represent {point!r} exactly: {e}") from e
