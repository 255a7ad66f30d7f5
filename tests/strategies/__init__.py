from .geometry import (cyclic_polygons,
                       cyclic_polygons_and_fractions,
                       edges_counts,
                       empty_linear_rings,
                       fractions,
                       linear_rings,
                       parts_counts,
                       polygons)
