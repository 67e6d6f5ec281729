from __future__ import annotations
import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from .errors import ConfigurationError


@dataclass(frozen=True)
class City:
    id: int
    x: float
    y: float


class TSPInstance:
    """A set of cities with Euclidean distances.

    Cities keep their external ids; the solver works on dense indices
    ``0..n-1`` in insertion order and maps back with ``ids()``.
    """

    def __init__(self, cities: Sequence[City], name: str = "euclidean_tsp"):
        self.cities: List[City] = list(cities)
        self.name = name
        self._index: Dict[int, int] = {}
        for k, c in enumerate(self.cities):
            if c.id in self._index:
                raise ConfigurationError(f"duplicate city id {c.id}")
            self._index[c.id] = k
        self._dist: Optional[np.ndarray] = None

    @staticmethod
    def random_euclidean(n: int, seed: Optional[int] = None, square_size: float = 100.0,
                         name: str = "random_euclidean") -> TSPInstance:
        rng = random.Random(seed)
        cities = [City(i + 1, rng.uniform(0, square_size), rng.uniform(0, square_size)) for i in range(n)]
        return TSPInstance(cities, name=name)

    def n_cities(self) -> int:
        return len(self.cities)

    def ids(self) -> List[int]:
        return [c.id for c in self.cities]

    def index_of(self, city_id: int) -> int:
        return self._index[city_id]

    def city(self, city_id: int) -> City:
        return self.cities[self._index[city_id]]

    @property
    def coords(self) -> List[tuple]:
        return [(c.x, c.y) for c in self.cities]

    def distance(self, id_a: int, id_b: int) -> float:
        a, b = self.city(id_a), self.city(id_b)
        return math.hypot(a.x - b.x, a.y - b.y)

    def distance_matrix(self) -> np.ndarray:
        """Index-based distance matrix, computed once."""
        if self._dist is None:
            xy = np.array(self.coords, dtype=float).reshape(-1, 2)
            diff = xy[:, None, :] - xy[None, :, :]
            self._dist = np.hypot(diff[..., 0], diff[..., 1])
        return self._dist

    def tour_length(self, tour: Sequence[int]) -> float:
        """Closed tour length for a sequence of city ids."""
        n = len(tour)
        dist = 0.0
        for k in range(n):
            dist += self.distance(tour[k], tour[(k + 1) % n])
        return dist
