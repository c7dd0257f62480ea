"""Result policies: turn a segment classification into a caller type.

The relator never builds results itself. It calls exactly one of the four
policy methods and returns whatever that method returns.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .elements import Point2D, Segment
from .info import IntersectionInfo, SideInfo
from .ratio import SegmentRatio
from .spatial_utils import points_to_geometry


class ResultPolicy(ABC):
    """Interface every result policy implements."""

    @abstractmethod
    def disjoint(self):
        """Segments do not intersect."""

    @abstractmethod
    def degenerate(self, segment: Segment, a_degenerate: bool):
        """One segment is a single point lying on the other.

        Args:
            segment: The degenerate segment
            a_degenerate: True if it is the first argument of the relation
        """

    @abstractmethod
    def segments_cross(
        self, sides: SideInfo, info: IntersectionInfo, a: Segment, b: Segment
    ):
        """Segments cross or touch in a single point."""

    @abstractmethod
    def segments_collinear(
        self,
        a: Segment,
        b: Segment,
        ra_from: SegmentRatio,
        ra_to: SegmentRatio,
        rb_from: SegmentRatio,
        rb_to: SegmentRatio,
    ):
        """Segments are collinear and overlap or touch.

        ``ra_*`` place A's endpoints along B, ``rb_*`` place B's endpoints
        along A.
        """


class IntersectsPolicy(ResultPolicy):
    """Answers only whether the segments share at least one point."""

    def disjoint(self) -> bool:
        return False

    def degenerate(self, segment: Segment, a_degenerate: bool) -> bool:
        return True

    def segments_cross(self, sides, info, a, b) -> bool:
        return True

    def segments_collinear(self, a, b, ra_from, ra_to, rb_from, rb_to) -> bool:
        return True


class RelationKind(str, Enum):
    """Topological class of a segment pair."""

    DISJOINT = "disjoint"
    DEGENERATE = "degenerate"
    CROSSING = "crossing"
    COLLINEAR = "collinear"


@dataclass
class SegmentRelation:
    """Everything the relator reported about a segment pair."""

    kind: RelationKind
    sides: Optional[SideInfo] = None
    info: Optional[IntersectionInfo] = None
    degenerate_segment: Optional[Segment] = None
    a_degenerate: Optional[bool] = None
    ra_from: Optional[SegmentRatio] = None
    ra_to: Optional[SegmentRatio] = None
    rb_from: Optional[SegmentRatio] = None
    rb_to: Optional[SegmentRatio] = None

    @property
    def intersects(self) -> bool:
        return self.kind != RelationKind.DISJOINT

    def to_dict(self) -> dict:
        data = {"kind": self.kind.value, "intersects": self.intersects}
        if self.sides is not None:
            data["sides"] = self.sides.to_dict()
        if self.info is not None:
            data["info"] = self.info.to_dict()
        if self.degenerate_segment is not None:
            data["degenerate_segment"] = self.degenerate_segment.to_dict()
            data["a_degenerate"] = self.a_degenerate
        if self.kind == RelationKind.COLLINEAR:
            data["ratios"] = {
                "ra_from": self.ra_from.edge_value(),
                "ra_to": self.ra_to.edge_value(),
                "rb_from": self.rb_from.edge_value(),
                "rb_to": self.rb_to.edge_value(),
            }
        return data


class RelationPolicy(ResultPolicy):
    """Records the outcome and its supporting data in a SegmentRelation."""

    def disjoint(self) -> SegmentRelation:
        return SegmentRelation(kind=RelationKind.DISJOINT)

    def degenerate(self, segment: Segment, a_degenerate: bool) -> SegmentRelation:
        return SegmentRelation(
            kind=RelationKind.DEGENERATE,
            degenerate_segment=segment,
            a_degenerate=a_degenerate,
        )

    def segments_cross(self, sides, info, a, b) -> SegmentRelation:
        return SegmentRelation(kind=RelationKind.CROSSING, sides=sides, info=info)

    def segments_collinear(self, a, b, ra_from, ra_to, rb_from, rb_to) -> SegmentRelation:
        return SegmentRelation(
            kind=RelationKind.COLLINEAR,
            ra_from=ra_from,
            ra_to=ra_to,
            rb_from=rb_from,
            rb_to=rb_to,
        )


@dataclass
class IntersectionPoints:
    """Up to two intersection points with their positions along A and B.

    A degenerate result records ``(None, None)`` as its fractions: the point
    lies on the other segment but the policy is not told where.
    """

    count: int = 0
    points: List[Tuple[float, float]] = field(default_factory=list)
    fractions: List[Tuple[Optional[SegmentRatio], Optional[SegmentRatio]]] = field(
        default_factory=list
    )

    def add(
        self,
        point: Point2D,
        on_a: Optional[SegmentRatio] = None,
        on_b: Optional[SegmentRatio] = None,
    ) -> None:
        self.points.append((float(point[0]), float(point[1])))
        self.fractions.append((on_a, on_b))
        self.count = len(self.points)


class IntersectionPointsPolicy(ResultPolicy):
    """Computes the intersection point(s) in floating coordinates."""

    def disjoint(self) -> IntersectionPoints:
        return IntersectionPoints()

    def degenerate(self, segment: Segment, a_degenerate: bool) -> IntersectionPoints:
        result = IntersectionPoints()
        result.add(segment.first)
        return result

    def segments_cross(self, sides, info, a, b) -> IntersectionPoints:
        x = float(a.first[0]) + info.r * float(info.dx_a)
        y = float(a.first[1]) + info.r * float(info.dy_a)
        result = IntersectionPoints()
        result.add((x, y), info.robust_ra, info.robust_rb)
        return result

    def segments_collinear(self, a, b, ra_from, ra_to, rb_from, rb_to) -> IntersectionPoints:
        result = IntersectionPoints()
        on_a: List[SegmentRatio] = []

        # Endpoints of B exactly at an end of A are already covered by A's
        # own endpoints, so B's endpoints only count when strictly inside.
        if ra_from.on_segment():
            result.add(a.first, SegmentRatio.zero(), ra_from)
            on_a.append(SegmentRatio.zero())
        if rb_from.in_segment() and result.count < 2:
            result.add(b.first, rb_from, SegmentRatio.zero())
            on_a.append(rb_from)
        if ra_to.on_segment() and result.count < 2:
            result.add(a.second, SegmentRatio.one(), ra_to)
            on_a.append(SegmentRatio.one())
        if rb_to.in_segment() and result.count < 2:
            result.add(b.second, rb_to, SegmentRatio.one())
            on_a.append(rb_to)

        if result.count == 2 and on_a[1] < on_a[0]:
            result.points.reverse()
            result.fractions.reverse()
        return result


class GeometryPolicy(ResultPolicy):
    """Returns the intersection as a Shapely geometry."""

    def __init__(self):
        self._points = IntersectionPointsPolicy()

    def disjoint(self):
        return points_to_geometry(self._points.disjoint().points)

    def degenerate(self, segment, a_degenerate):
        return points_to_geometry(self._points.degenerate(segment, a_degenerate).points)

    def segments_cross(self, sides, info, a, b):
        return points_to_geometry(self._points.segments_cross(sides, info, a, b).points)

    def segments_collinear(self, a, b, ra_from, ra_to, rb_from, rb_to):
        result = self._points.segments_collinear(a, b, ra_from, ra_to, rb_from, rb_to)
        return points_to_geometry(result.points)


class RelationPointsPolicy(ResultPolicy):
    """Returns ``(SegmentRelation, IntersectionPoints)`` from a single relation."""

    def __init__(self):
        self._relation = RelationPolicy()
        self._points = IntersectionPointsPolicy()

    def disjoint(self):
        return self._relation.disjoint(), self._points.disjoint()

    def degenerate(self, segment, a_degenerate):
        return (
            self._relation.degenerate(segment, a_degenerate),
            self._points.degenerate(segment, a_degenerate),
        )

    def segments_cross(self, sides, info, a, b):
        return (
            self._relation.segments_cross(sides, info, a, b),
            self._points.segments_cross(sides, info, a, b),
        )

    def segments_collinear(self, a, b, ra_from, ra_to, rb_from, rb_to):
        return (
            self._relation.segments_collinear(a, b, ra_from, ra_to, rb_from, rb_to),
            self._points.segments_collinear(a, b, ra_from, ra_to, rb_from, rb_to),
        )
