"""Segment Relation Module

This module classifies the relation between two planar segments
(disjoint, degenerate, crossing, collinear) and locates the intersection,
using robust points for every classification decision.

Example usage:
    from planar.intersection import relate_segments, IntersectionPointsPolicy
    from planar.robust import ExactRationalPolicy

    relation = relate_segments(((0, 0), (10, 10)), ((0, 10), (10, 0)))
    print(relation.kind, relation.info.r)

    points = relate_segments(
        ((0, 0), (10, 10)),
        ((0, 10), (10, 0)),
        policy=IntersectionPointsPolicy(),
        robust_policy=ExactRationalPolicy(),
    )
"""

from .collinear import Axis, dominant_axis, relate_collinear
from .config import IntersectionConfig, RobustnessCounters
from .elements import Point2D, Segment, as_segment
from .info import IntersectionInfo, SideInfo
from .policies import (
    GeometryPolicy,
    IntersectionPoints,
    IntersectionPointsPolicy,
    IntersectsPolicy,
    RelationKind,
    RelationPointsPolicy,
    RelationPolicy,
    ResultPolicy,
    SegmentRelation,
)
from .ratio import SegmentRatio
from .relate import SegmentRelator, cramers_rule, relate_segments
from .side import Side, side

__all__ = [
    # Types
    "Point2D",
    "Segment",
    "Side",
    "SideInfo",
    "SegmentRatio",
    "IntersectionInfo",
    "Axis",
    # Engine
    "SegmentRelator",
    "relate_segments",
    "relate_collinear",
    "dominant_axis",
    "cramers_rule",
    "side",
    "as_segment",
    # Result policies
    "ResultPolicy",
    "IntersectsPolicy",
    "RelationPolicy",
    "RelationKind",
    "SegmentRelation",
    "IntersectionPointsPolicy",
    "IntersectionPoints",
    "GeometryPolicy",
    "RelationPointsPolicy",
    # Configuration
    "IntersectionConfig",
    "RobustnessCounters",
]
