"""Polygon splitting to parts of equal area"""
__version__ = '0.1.0-alpha'

from .errors import (InternalConsistencyError,
                     InvalidInputError,
                     PolygonSplitError,
                     UnsplittableGeometryError)
from .polysplit import (Cut,
                        PolygonSplitter,
                        split,
                        step)
