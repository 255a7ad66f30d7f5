from typing import (Iterable,
                    Iterator,
                    List,
                    Optional,
                    Sequence,
                    Tuple,
                    TypeVar)

from lz.iterating import pairwise

from polysplit.hints import (Coordinate,
                             Function)

MAX_BISECTION_ITERATIONS = 100

T = TypeVar('T')


def interpolate(start: Coordinate,
                end: Coordinate,
                fraction: float) -> Coordinate:
    """Point of the segment from `start` to `end` at the given fraction"""
    start_x, start_y = start
    end_x, end_y = end
    return (start_x + fraction * (end_x - start_x),
            start_y + fraction * (end_y - start_y))


def cross(point: Coordinate, other: Coordinate) -> float:
    return point[0] * other[1] - other[0] * point[1]


def chain_cross(points: Iterable[Coordinate]) -> float:
    """
    Sum of cross products of consecutive points of an open chain.
    Adding the closing term and halving gives the shoelace area.
    """
    return sum(cross(point, next_point)
               for point, next_point in pairwise(points))


def signed_area(points: Sequence[Coordinate]) -> float:
    """Shoelace area of a ring, positive for counterclockwise rings"""
    if len(points) < 3:
        return 0.
    return (chain_cross(points) + cross(points[-1], points[0])) / 2


def drop_repeated(points: Iterable[T]) -> List[T]:
    """
    Removes consecutive duplicates of a ring
    including the ones wrapping around its end.
    """
    result: List[T] = []
    for point in points:
        if not result or point != result[-1]:
            result.append(point)
    while len(result) > 1 and result[0] == result[-1]:
        del result[-1]
    return result


def rotate(sequence: List[T], index: int) -> List[T]:
    return sequence[index:] + sequence[:index]


def monotonic_brackets(function: Function,
                       low: float = 0.,
                       high: float = 1.) -> Iterator[Tuple[float, float]]:
    """
    Splits the interval at the extremum of a quadratic function,
    so that the function is monotonic on each of the yielded intervals.
    Coefficients are recovered from the values at the ends and
    at the middle of the interval.
    """
    middle = (low + high) / 2
    low_value, middle_value, high_value = map(function, (low, middle, high))
    quadratic = 2 * (low_value - 2 * middle_value + high_value)
    linear = high_value - low_value - quadratic
    if quadratic:
        extremum = -linear / (2 * quadratic)
        if 0 < extremum < 1:
            divider = low + extremum * (high - low)
            yield low, divider
            yield divider, high
            return
    yield low, high


def bisect(function: Function,
           low: float,
           high: float,
           *,
           tolerance: float,
           max_iterations: int = MAX_BISECTION_ITERATIONS
           ) -> Optional[float]:
    """
    Searches for a root of a continuous function by bisection
    :param function: function of a single argument
    :param low: start of the interval
    :param high: end of the interval
    :param tolerance: maximum absolute value of the function
    that is considered to be zero
    :param max_iterations: maximum number of interval halvings
    :return: the root or `None` if the function doesn't change its sign
    on the interval or the search doesn't converge
    """
    if tolerance < 0:
        raise ValueError("Tolerance should be non-negative")
    low_value = function(low)
    if abs(low_value) <= tolerance:
        return low
    high_value = function(high)
    if abs(high_value) <= tolerance:
        return high
    if (low_value < 0) is (high_value < 0):
        return None
    for _ in range(max_iterations):
        middle = (low + high) / 2
        middle_value = function(middle)
        if abs(middle_value) <= tolerance:
            return middle
        if (middle_value < 0) is (low_value < 0):
            low, low_value = middle, middle_value
        else:
            high = middle
    return None


def find_root(function: Function,
              *,
              tolerance: float,
              low: float = 0.,
              high: float = 1.,
              max_iterations: int = MAX_BISECTION_ITERATIONS
              ) -> Optional[float]:
    """Smallest root of a quadratic function on the given interval"""
    roots = (bisect(function, start, end,
                    tolerance=tolerance,
                    max_iterations=max_iterations)
             for start, end in monotonic_brackets(function, low, high))
    return next((root for root in roots if root is not None), None)
