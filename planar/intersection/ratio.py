"""Division-free fraction describing a position along a segment."""

from functools import total_ordering


@total_ordering
class SegmentRatio:
    """Ratio ``numerator / denominator`` kept unevaluated.

    0 is the start of the segment, 1 its end. The denominator is normalized
    to be non-negative so every query is a plain comparison of the numerator
    against 0 or against the denominator.
    """

    __slots__ = ("numerator", "denominator")
    __hash__ = None

    def __init__(self, numerator=0, denominator=1):
        self.numerator = numerator
        self.denominator = denominator
        self._normalize()

    def _normalize(self) -> None:
        if self.denominator < 0:
            self.numerator = -self.numerator
            self.denominator = -self.denominator

    @classmethod
    def zero(cls) -> "SegmentRatio":
        return cls(0, 1)

    @classmethod
    def one(cls) -> "SegmentRatio":
        return cls(1, 1)

    def assign(self, numerator, denominator) -> None:
        self.numerator = numerator
        self.denominator = denominator
        self._normalize()

    def before_start(self) -> bool:
        """Ratio < 0."""
        return bool(self.numerator < 0)

    def after_end(self) -> bool:
        """Ratio > 1."""
        return bool(self.numerator > self.denominator)

    def on_segment(self) -> bool:
        """0 <= ratio <= 1."""
        return bool(0 <= self.numerator <= self.denominator)

    def in_segment(self) -> bool:
        """0 < ratio < 1."""
        return bool(0 < self.numerator < self.denominator)

    def on_end(self) -> bool:
        """Ratio is exactly 0 or exactly 1."""
        return self.is_zero() or self.is_one()

    def is_zero(self) -> bool:
        return bool(self.numerator == 0)

    def is_one(self) -> bool:
        return bool(self.numerator == self.denominator)

    def edge_value(self) -> float:
        """Floating approximation, for reporting only. Zero if undefined."""
        if self.denominator == 0:
            return 0.0
        return float(self.numerator / self.denominator)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SegmentRatio):
            return NotImplemented
        return bool(
            self.numerator * other.denominator == other.numerator * self.denominator
        )

    def __lt__(self, other) -> bool:
        if not isinstance(other, SegmentRatio):
            return NotImplemented
        return bool(
            self.numerator * other.denominator < other.numerator * self.denominator
        )

    def __repr__(self) -> str:
        return f"SegmentRatio({self.numerator!r}, {self.denominator!r})"
