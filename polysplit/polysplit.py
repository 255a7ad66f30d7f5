import logging
import math
from dataclasses import (dataclass,
                         field)
from typing import (Iterator,
                    List,
                    Optional,
                    Sequence,
                    Tuple)

from shapely.geometry import (LineString,
                              Polygon)
from shapely.geometry.base import BaseGeometry

from polysplit.errors import (InternalConsistencyError,
                              InvalidInputError,
                              UnsplittableGeometryError)
from polysplit.geometry_utils import (area,
                                      boundary_segments,
                                      difference,
                                      is_simple_region,
                                      is_valid,
                                      normalized_equals,
                                      orient,
                                      to_polygon,
                                      to_region,
                                      unite)
from polysplit.hints import Coordinate
from polysplit.utils import (chain_cross,
                             cross,
                             find_root,
                             interpolate,
                             rotate)

DEFAULT_REL_TOL = 1e-9
MIN_PARTS_COUNT = 2
# both arcs between the edges of a pair should have at least one more edge
MIN_ARC_EDGES_COUNT = 2

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Cut:
    """
    Candidate dividing segment with the part of the polygon it cuts away.
    Cuts are compared by their lengths only.
    `parent` is the polygon being cut with the cut's endpoints
    inserted as vertices.
    """
    length: float
    start: Coordinate = field(compare=False)
    end: Coordinate = field(compare=False)
    cut_away: Polygon = field(compare=False)
    parent: Polygon = field(compare=False, repr=False)

    @property
    def line(self) -> LineString:
        return LineString([self.start, self.end])


def edge_pairs(count: int) -> Iterator[Tuple[int, int]]:
    """
    Yields indices of edges of a ring with `count` edges that can anchor
    a cut, i.e. both arcs between them contain at least one more edge.
    Pairs are yielded in ascending order.
    """
    for index in range(count):
        for other_index in range(index + MIN_ARC_EDGES_COUNT, count):
            if count - (other_index - index) < MIN_ARC_EDGES_COUNT:
                break
            yield index, other_index


def arc_cut(arc: Sequence[Coordinate],
            other_arc: Sequence[Coordinate],
            target: float,
            *,
            tolerance: float) -> Optional[Cut]:
    """
    Closes the arc by a cut so that the resulting polygon
    has the target area.
    Cut endpoints slide jointly along the two edges connecting the arcs:
    from the first vertex of the arc towards the last vertex of the other
    arc and from the last vertex of the arc towards the first vertex
    of the other arc. Area is a quadratic function of the sliding
    fraction and is solved for by bisection.
    :param arc: vertices of the boundary chain to cut away
    :param other_arc: vertices of the boundary chain to keep
    :param target: area of the part to cut away
    :param tolerance: absolute area tolerance
    :return: the cut or `None` if there is no admissible one
    """
    first, last = arc[0], arc[-1]
    before, after = other_arc[-1], other_arc[0]
    arc_cross = chain_cross(arc)

    def endpoints(fraction: float) -> Tuple[Coordinate, Coordinate]:
        return (interpolate(first, before, fraction),
                interpolate(last, after, fraction))

    def excess(fraction: float) -> float:
        start, end = endpoints(fraction)
        doubled_area = (cross(start, first) + arc_cross + cross(last, end)
                        + cross(end, start))
        return doubled_area / 2 - target

    fraction = find_root(excess, tolerance=tolerance)
    if fraction is None:
        return None
    start, end = endpoints(fraction)
    cut_away = to_region([start, *arc, end])
    rest = to_region([end, *other_arc, start])
    if (cut_away is None or rest is None
            or not is_simple_region(cut_away)
            or not is_simple_region(rest)):
        return None
    return Cut(length=math.dist(start, end),
               start=start,
               end=end,
               cut_away=cut_away,
               parent=to_region([start, *arc, end, *other_arc]))


def edge_pair_cuts(vertices: Sequence[Coordinate],
                   index: int,
                   other_index: int,
                   target: float,
                   *,
                   tolerance: float) -> List[Cut]:
    """
    Cuts of the target area anchored at the given pair of edges
    of a counterclockwise ring, one per traversal direction at most.
    """
    vertices = list(vertices)
    inner_arc = vertices[index + 1:other_index + 1]
    outer_arc = rotate(vertices,
                       other_index + 1)[:len(vertices) - len(inner_arc)]
    cuts = (arc_cut(arc, other_arc, target,
                    tolerance=tolerance)
            for arc, other_arc in [(inner_arc, outer_arc),
                                   (outer_arc, inner_arc)])
    return [cut for cut in cuts if cut is not None]


def step(polygon: Polygon,
         target: float,
         *,
         tolerance: float) -> Tuple[Polygon, Polygon, float]:
    """
    Cuts away a part of the target area by the shortest cut found
    among all the admissible edge pairs of the polygon.
    Ties are resolved in favor of the first found cut.
    :param polygon: polygon to cut
    :param target: area of the part to cut away
    :param tolerance: absolute area tolerance of the part
    :return: the cut away part, the remainder and the length of the cut
    """
    polygon = orient(polygon)
    vertices = [segment.coords[0] for segment in boundary_segments(polygon)]
    cuts = [cut
            for index, other_index in edge_pairs(len(vertices))
            for cut in edge_pair_cuts(vertices, index, other_index, target,
                                      tolerance=tolerance)]
    if not cuts:
        raise UnsplittableGeometryError(f"No cut of area {target} found "
                                        f"for the polygon: {polygon.wkt}")
    shortest_cut = min(cuts)
    logger.debug("Found %d candidate cuts, the shortest one is %s long",
                 len(cuts), shortest_cut.length)
    remainder = to_remainder(difference(shortest_cut.parent,
                                        shortest_cut.cut_away))
    return shortest_cut.cut_away, remainder, shortest_cut.length


def to_remainder(geometry: BaseGeometry) -> Polygon:
    if not isinstance(geometry, Polygon) or geometry.is_empty:
        raise UnsplittableGeometryError(f"Remainder is not a single polygon: "
                                        f"{geometry.wkt}")
    region = to_region(geometry.exterior.coords[:-1])
    if region is None or geometry.interiors:
        raise UnsplittableGeometryError(f"Remainder is degenerate: "
                                        f"{geometry.wkt}")
    return orient(region)


def check_partition(parts: Sequence[Polygon],
                    polygon: Polygon,
                    *,
                    rel_tol: float) -> None:
    """
    Checks that the parts add up to the polygon
    :raises InternalConsistencyError: if the total area of the parts
    or their union differs from the polygon
    """
    total_area = sum(map(area, parts))
    if not math.isclose(total_area, area(polygon), rel_tol=rel_tol):
        raise InternalConsistencyError(f"Area of the parts {total_area} "
                                       f"does not match original area "
                                       f"{area(polygon)}")
    if not normalized_equals(unite(parts), polygon, rel_tol=rel_tol):
        raise InternalConsistencyError("The union of the parts is not equal "
                                       "to the original polygon")


class PolygonSplitter:
    """
    Splits a simple polygon without holes to the given number of parts
    of equal area.
    The algorithm is greedy: on each step it cuts away a part
    of the required area with the shortest cut between two edges
    of the remaining polygon. It doesn't backtrack, so the total
    length of the cuts is not guaranteed to be minimal.
    """

    def __init__(self,
                 polygon,
                 parts_count: int,
                 *,
                 rel_tol: float = DEFAULT_REL_TOL) -> None:
        polygon = to_polygon(polygon)
        if not is_valid(polygon):
            raise InvalidInputError("Polygon is not valid!")
        if not isinstance(parts_count, int) or parts_count < MIN_PARTS_COUNT:
            raise InvalidInputError(f"Number of parts should be an integer "
                                    f"not less than {MIN_PARTS_COUNT}!")
        if rel_tol < 0:
            raise InvalidInputError("Tolerance should be non-negative!")
        self.polygon = polygon
        self.parts_count = parts_count
        self.rel_tol = rel_tol
        self.part_area = area(polygon) / parts_count

    def split(self) -> List[Polygon]:
        """
        :return: the cut away parts in order of cutting
        followed by the last remainder
        """
        logger.debug("Splitting polygon of area %s to %d parts",
                     area(self.polygon), self.parts_count)
        tolerance = self.rel_tol * self.part_area
        parts = []
        remainder = self.polygon
        for _ in range(self.parts_count - 1):
            part, remainder, _ = step(remainder, self.part_area,
                                      tolerance=tolerance)
            parts.append(part)
        parts.append(remainder)
        check_partition(parts, self.polygon, rel_tol=self.rel_tol)
        logger.debug("Polygon is split to %d parts", len(parts))
        return parts


def split(polygon,
          parts_count: int,
          *,
          rel_tol: float = DEFAULT_REL_TOL) -> List[Polygon]:
    """
    Splits polygon to parts of equal area
    :param polygon: simple polygon without holes or its vertices
    :param parts_count: number of parts, at least 2
    :param rel_tol: relative tolerance of the parts' areas
    :return: list of parts, the last one absorbs the rounding errors
    """
    return PolygonSplitter(polygon, parts_count, rel_tol=rel_tol).split()
