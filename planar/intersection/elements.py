"""Point and segment data classes for segment relation."""

from dataclasses import dataclass
from typing import Any, Tuple

Point2D = Tuple[Any, Any]


@dataclass(frozen=True)
class Segment:
    """A directed segment from ``first`` to ``second``.

    Coordinates keep whatever numeric type the caller supplied (int, float,
    numpy float or Fraction).
    """

    first: Point2D = (0.0, 0.0)
    second: Point2D = (0.0, 0.0)

    @property
    def dx(self):
        return self.second[0] - self.first[0]

    @property
    def dy(self):
        return self.second[1] - self.first[1]

    def reversed(self) -> "Segment":
        return Segment(first=self.second, second=self.first)

    def to_dict(self) -> dict:
        return {
            "first": [float(c) for c in self.first],
            "second": [float(c) for c in self.second],
        }


def points_equal(p: Point2D, q: Point2D) -> bool:
    """Exact coordinate-wise equality of two points."""
    return bool(p[0] == q[0] and p[1] == q[1])


def as_segment(value) -> Segment:
    """Convert a pair of points into a Segment.

    Args:
        value: A Segment, or any two-item sequence of (x, y) points

    Returns:
        Segment instance

    Raises:
        ValueError: If value is not a pair of 2-D points
    """
    if isinstance(value, Segment):
        return value
    try:
        first, second = value
        first = (first[0], first[1]) if len(first) == 2 else None
        second = (second[0], second[1]) if len(second) == 2 else None
    except (TypeError, ValueError, IndexError) as e:
        raise ValueError(f"Expected a pair of (x, y) points, got {value!r}") from e
    if first is None or second is None:
        raise ValueError(f"Expected a pair of (x, y) points, got {value!r}")
    return Segment(first=first, second=second)
