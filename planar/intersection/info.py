"""Per-call bookkeeping passed from the relator to result policies."""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .ratio import SegmentRatio


@dataclass
class SideInfo:
    """Sides of each segment's endpoints relative to the other segment.

    ``sides[0]`` holds the sides of A's endpoints w.r.t. B, ``sides[1]`` the
    sides of B's endpoints w.r.t. A.
    """

    sides: List[List[int]] = field(default_factory=lambda: [[0, 0], [0, 0]])

    def set(self, index: int, first: int, second: int) -> None:
        self.sides[index] = [int(first), int(second)]

    def get(self, index: int, which: int) -> int:
        return self.sides[index][which]

    def same(self, index: int) -> bool:
        """Both endpoints strictly on the same side."""
        return self.sides[index][0] * self.sides[index][1] == 1

    def collinear(self) -> bool:
        return all(s == 0 for pair in self.sides for s in pair)

    def zero(self, index: int) -> bool:
        return self.sides[index][0] == 0 and self.sides[index][1] == 0

    def crossing(self) -> bool:
        """Both segments have their endpoints on opposite sides."""
        return all(pair[0] * pair[1] == -1 for pair in self.sides)

    def touching(self) -> bool:
        """Not collinear, but at least one endpoint lies on the other segment's line."""
        if self.collinear():
            return False
        return any(s == 0 for pair in self.sides for s in pair)

    def reverse(self) -> "SideInfo":
        """Side info as seen from relating (B, A) instead of (A, B)."""
        return SideInfo(sides=[list(self.sides[1]), list(self.sides[0])])

    def to_dict(self) -> dict:
        return {"a": list(self.sides[0]), "b": list(self.sides[1])}


@dataclass
class IntersectionInfo:
    """Numeric details of a crossing.

    ``r`` is the floating ratio along A, clamped to [0, 1]. ``robust_ra``
    and ``robust_rb`` are the same intersection along A and B computed from
    the robust coordinates. ``rb`` is only filled when ratio checking is on.
    """

    dx_a: Any = 0
    dy_a: Any = 0
    dx_b: Any = 0
    dy_b: Any = 0
    r: float = 0.0
    robust_ra: SegmentRatio = field(default_factory=SegmentRatio.zero)
    robust_rb: SegmentRatio = field(default_factory=SegmentRatio.zero)
    rb: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "dx_a": float(self.dx_a),
            "dy_a": float(self.dy_a),
            "dx_b": float(self.dx_b),
            "dy_b": float(self.dy_b),
            "r": self.r,
            "robust_ra": self.robust_ra.edge_value(),
            "robust_rb": self.robust_rb.edge_value(),
            "rb": self.rb,
        }
