import pytest

from acotsp import City, TSPInstance


@pytest.fixture
def unit_square():
    return TSPInstance([City(1, 0.0, 0.0), City(2, 0.0, 1.0), City(3, 1.0, 1.0), City(4, 1.0, 0.0)],
                       name="unit_square")


@pytest.fixture
def random_instance():
    return TSPInstance.random_euclidean(12, seed=3)
