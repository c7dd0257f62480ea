"""Shapely interop for segments and intersection results."""

from typing import List, Sequence, Tuple

from shapely.geometry import GeometryCollection, LineString, Point
from shapely.geometry.base import BaseGeometry

from .elements import Segment, as_segment


def segment_to_linestring(segment) -> LineString:
    """Convert a segment (or a pair of points) to a Shapely LineString.

    Degenerate segments still produce a two-vertex LineString, which Shapely
    treats as a zero-length line.
    """
    seg = as_segment(segment)
    return LineString(
        [
            (float(seg.first[0]), float(seg.first[1])),
            (float(seg.second[0]), float(seg.second[1])),
        ]
    )


def linestring_to_segment(line: LineString) -> Segment:
    """Convert a two-vertex LineString to a Segment.

    Raises:
        ValueError: If the LineString does not have exactly two vertices
    """
    coords: List[Tuple[float, float]] = [(c[0], c[1]) for c in line.coords]
    if len(coords) != 2:
        raise ValueError(f"Expected a two-vertex LineString, got {len(coords)} vertices")
    return Segment(first=coords[0], second=coords[1])


def points_to_geometry(points: Sequence[Tuple[float, float]]) -> BaseGeometry:
    """Build the geometry spanned by zero, one or two intersection points.

    Returns:
        Empty GeometryCollection, Point, or LineString
    """
    if not points:
        return GeometryCollection()
    if len(points) == 1 or tuple(points[0]) == tuple(points[1]):
        return Point(points[0])
    return LineString([points[0], points[1]])


def shapely_intersects(a, b) -> bool:
    """Intersection test done entirely by Shapely (floating GEOS predicate)."""
    return bool(segment_to_linestring(a).intersects(segment_to_linestring(b)))
