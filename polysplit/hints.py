from typing import (Protocol,
                    Sequence,
                    Tuple)

Coordinate = Tuple[float, float]
Ring = Sequence[Coordinate]


class Function(Protocol):
    def __call__(self, argument: float) -> float:
        ...
