import math
from typing import Iterable, List, Tuple


class City:
    """
    A point of the tour.

    Cities compare and hash by identity: two cities at the same
    coordinates are still two different stops.
    """
    __slots__ = ("name", "x", "y")

    def __init__(self, name, x, y):
        self.name = name
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"City({self.name!r}, {self.x}, {self.y})"


def euclidean_distance(a: City, b: City) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def manhattan_distance(a: City, b: City) -> float:
    return abs(a.x - b.x) + abs(a.y - b.y)


def cities_from_coordinates(coordinates: Iterable[Tuple[float, float]]) -> List[City]:
    """Create one city per (x, y) pair, named after its position in the input."""
    return [City(i, x, y) for i, (x, y) in enumerate(coordinates)]
