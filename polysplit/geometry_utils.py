"""
Thin layer over Shapely providing the geometric operations
the splitting relies on.
"""
import operator
from functools import (reduce,
                       singledispatch)
from typing import (Iterable,
                    Iterator,
                    List,
                    Optional)

from lz.iterating import pairwise
from shapely.geometry import (LinearRing,
                              LineString,
                              Polygon)
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient as orient_polygon

from polysplit.hints import Ring
from polysplit.utils import (drop_repeated,
                             signed_area)

MIN_RING_SIZE = 3


def area(polygon: Polygon) -> float:
    return polygon.area


def segments(ring: LinearRing) -> Iterator[LineString]:
    """
    Yields consecutive lines from the given ring.
    Doesn't work for degenerate geometries.
    """
    if ring.is_empty:
        raise ValueError("Empty ring doesn't have segments")
    pairs = pairwise(ring.coords)
    yield from map(LineString, pairs)


def boundary_segments(polygon: Polygon) -> List[LineString]:
    """Directed edges of the exterior ring in traversal order"""
    return list(segments(polygon.exterior))


def difference(polygon: Polygon, other: Polygon) -> BaseGeometry:
    return polygon.difference(other)


def unite(polygons: Iterable[Polygon]) -> BaseGeometry:
    """
    Union of the polygons folded pairwise.
    Cascaded union may drop whole parts when an endpoint of one cut
    lies on a side of a neighbouring part without being its vertex.
    """
    return reduce(operator.or_, polygons, Polygon())


def normalized_equals(polygon: BaseGeometry,
                      other: BaseGeometry,
                      *,
                      rel_tol: float) -> bool:
    """
    Checks if two geometries cover the same region
    regardless of the start vertex, orientation and collinear vertices.
    Regions that differ by slivers of relatively small area
    are considered equal.
    """
    if polygon.equals(other):
        return True
    reference_area = max(polygon.area, other.area)
    return polygon.symmetric_difference(other).area <= rel_tol * reference_area


def is_valid(geometry: BaseGeometry) -> bool:
    """Checks if geometry is a nonempty simple polygon without holes"""
    return (isinstance(geometry, Polygon)
            and not geometry.is_empty
            and not geometry.interiors
            and geometry.is_valid)


def is_simple_region(polygon: Polygon) -> bool:
    """Valid counterclockwise polygon of nonzero area"""
    return (is_valid(polygon)
            and signed_area(polygon.exterior.coords[:-1]) > 0)


def orient(polygon: Polygon) -> Polygon:
    """To counterclockwise. No holes"""
    return Polygon(orient_polygon(polygon, sign=1.).exterior)


def to_region(coordinates: Ring) -> Optional[Polygon]:
    """
    Polygon from ring coordinates with repeated consecutive points
    removed, or `None` if there are too few of them left.
    """
    points = drop_repeated(coordinates)
    if len(points) < MIN_RING_SIZE:
        return None
    return Polygon(points)


@singledispatch
def to_polygon(geometry) -> BaseGeometry:
    raise TypeError(f"Unsupported type: {type(geometry)}")


@to_polygon.register
def _(geometry: BaseGeometry) -> BaseGeometry:
    return geometry


@to_polygon.register(list)
@to_polygon.register(tuple)
def _(geometry) -> BaseGeometry:
    coordinates = [tuple(point) for point in geometry]
    region = to_region(coordinates)
    return Polygon() if region is None else region
