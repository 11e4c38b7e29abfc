import random

import matplotlib
import pytest

from city import cities_from_coordinates

matplotlib.use("Agg")


@pytest.fixture
def random_cities():
    """Factory for n cities scattered uniformly over a 100 x 100 square, seeded."""
    def make(n, seed):
        rng = random.Random(seed)
        return cities_from_coordinates((rng.uniform(0, 100), rng.uniform(0, 100)) for _ in range(n))
    return make
