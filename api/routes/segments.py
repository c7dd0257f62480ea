"""Segment relation routes."""

import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, FiniteFloat

from planar.intersection import (
    IntersectionConfig,
    IntersectsPolicy,
    RelationKind,
    RelationPointsPolicy,
    RobustnessCounters,
    Segment,
    SegmentRelator,
)
from planar.intersection.spatial_utils import points_to_geometry
from planar.robust import ExactRationalPolicy, NoRescalePolicy

logger = logging.getLogger(__name__)

router = APIRouter()

CONFIG = IntersectionConfig.from_env()
COUNTERS = RobustnessCounters()


class SegmentModel(BaseModel):
    """A segment given by its two endpoints."""

    start: tuple[FiniteFloat, FiniteFloat]
    end: tuple[FiniteFloat, FiniteFloat]

    def to_segment(self) -> Segment:
        return Segment(first=self.start, second=self.end)


class RelateRequest(BaseModel):
    """Two segments to relate."""

    a: SegmentModel
    b: SegmentModel
    exact: bool = False


class RelateResponse(BaseModel):
    """Relation between two segments."""

    kind: RelationKind
    intersects: bool
    points: list[tuple[float, float]]
    ratio: Optional[float] = None
    wkt: str


def _relator(policy, exact: bool) -> SegmentRelator:
    robust_policy = ExactRationalPolicy() if exact else NoRescalePolicy()
    return SegmentRelator(
        policy=policy, robust_policy=robust_policy, config=CONFIG, counters=COUNTERS
    )


@router.post("/relate", response_model=RelateResponse)
async def relate(request: RelateRequest):
    """Classify two segments and compute their intersection."""
    a = request.a.to_segment()
    b = request.b.to_segment()

    relation, points = _relator(RelationPointsPolicy(), request.exact).relate(a, b)

    logger.debug(f"Related {a} and {b}: {relation.kind.value}")

    return RelateResponse(
        kind=relation.kind,
        intersects=relation.intersects,
        points=points.points,
        ratio=relation.info.r if relation.info is not None else None,
        wkt=points_to_geometry(points.points).wkt,
    )


@router.post("/intersects")
async def intersects(request: RelateRequest):
    """Check whether two segments share at least one point."""
    result = _relator(IntersectsPolicy(), request.exact).relate(
        request.a.to_segment(), request.b.to_segment()
    )
    return {"intersects": result}


@router.get("/diagnostics")
async def diagnostics():
    """Numeric fallbacks taken since startup."""
    return {"counters": COUNTERS.snapshot()}
