import math
from functools import partial
from itertools import combinations
from typing import (List,
                    Sequence,
                    Tuple)

from shapely.geometry import (LinearRing,
                              Polygon)

from tests.configs import REL_TOL

is_close = partial(math.isclose,
                   rel_tol=REL_TOL)


def to_coordinates(contour) -> List[Tuple[float, float]]:
    """Coordinates of a contour generated by `hypothesis_geometry`"""
    return [(vertex.x, vertex.y) for vertex in contour.vertices]


def to_linear_ring(contour) -> LinearRing:
    return LinearRing(to_coordinates(contour))


def to_shapely_polygon(contour) -> Polygon:
    return Polygon(to_coordinates(contour))


def are_pairwise_disjoint(parts: Sequence[Polygon],
                          *,
                          abs_tol: float) -> bool:
    """Checks that no two parts share interior area"""
    pairs = combinations(parts, 2)
    return all(part.intersection(other).area <= abs_tol
               for part, other in pairs)


def coordinates_of(parts: Sequence[Polygon]
                   ) -> List[List[Tuple[float, float]]]:
    return [list(part.exterior.coords) for part in parts]
