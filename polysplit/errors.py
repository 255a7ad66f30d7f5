class PolygonSplitError(Exception):
    """Base class for all the errors raised while splitting polygons"""


class InvalidInputError(PolygonSplitError, ValueError):
    """Input polygon is not a valid simple polygon or parts count is wrong"""


class UnsplittableGeometryError(PolygonSplitError):
    """
    Greedy cutting can't proceed on the current remaining polygon:
    either no edge pair admits a cut of the required area
    or the remainder degenerated.
    """


class InternalConsistencyError(PolygonSplitError, AssertionError):
    """
    Resulting parts don't add up to the original polygon.
    Indicates a defect, not a bad input.
    """
