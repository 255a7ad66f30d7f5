from itertools import accumulate
from math import (cos,
                  pi,
                  sin)
from typing import (List,
                    Tuple)

from hypothesis import strategies as st
from hypothesis_geometry import planar
from shapely.geometry import (LinearRing,
                              Polygon)

from tests.configs import (MAX_ANGLE_WEIGHT,
                           MAX_CONTOUR_SIZE,
                           MAX_COORDINATE,
                           MAX_EDGES_COUNT,
                           MAX_PARTS_COUNT,
                           MAX_RADIUS,
                           MIN_CONTOUR_SIZE,
                           MIN_COORDINATE,
                           MIN_PARTS_COUNT,
                           MIN_RADIUS)
from tests.utils import (to_linear_ring,
                         to_shapely_polygon)

coordinates = st.integers(min_value=MIN_COORDINATE,
                          max_value=MAX_COORDINATE)
contours = planar.contours(coordinates,
                           max_size=MAX_CONTOUR_SIZE)
linear_rings = contours.map(to_linear_ring)
polygons = contours.map(to_shapely_polygon)
empty_linear_rings = st.builds(LinearRing)

parts_counts = st.integers(min_value=MIN_PARTS_COUNT,
                           max_value=MAX_PARTS_COUNT)
edges_counts = st.integers(min_value=0,
                           max_value=MAX_EDGES_COUNT)
fractions = st.floats(min_value=0.01,
                      max_value=0.99)


def to_cyclic_polygon(weights: List[int],
                      radius: float,
                      center: Tuple[int, int],
                      rotation: float) -> Polygon:
    """
    Convex polygon with vertices on a circle
    separated by angles proportional to the weights.
    """
    total = sum(weights)
    center_x, center_y = center
    angles = [rotation + 2 * pi * weight / total
              for weight in accumulate(weights[:-1], initial=0)]
    return Polygon([(center_x + radius * cos(angle),
                     center_y + radius * sin(angle))
                    for angle in angles])


cyclic_polygons = st.builds(
    to_cyclic_polygon,
    weights=st.lists(st.integers(min_value=1,
                                 max_value=MAX_ANGLE_WEIGHT),
                     min_size=MIN_CONTOUR_SIZE,
                     max_size=MAX_CONTOUR_SIZE),
    radius=st.floats(min_value=MIN_RADIUS,
                     max_value=MAX_RADIUS),
    center=st.tuples(coordinates, coordinates),
    rotation=st.floats(min_value=0,
                       max_value=2 * pi))
cyclic_polygons_and_fractions = st.tuples(cyclic_polygons, fractions)
