from __future__ import annotations
from typing import Callable, List, Optional

import numpy as np

from .pheromone import PheromoneTable
from .transition import TransitionRule

EdgeCallback = Callable[[int, int], None]


class Agent:
    """One ant: builds a single closed tour over city indices, then is discarded."""

    def __init__(self, dist: np.ndarray, rng: np.random.Generator):
        self.dist = dist
        self.n = len(dist)
        self.rng = rng
        self.current_city: Optional[int] = None
        self.visited = np.zeros(self.n, dtype=bool)
        self.path: List[int] = []
        self.accumulated_cost = 0.0

    def construct(self, table: PheromoneTable, rule: TransitionRule,
                  on_step: Optional[EdgeCallback] = None, start: Optional[int] = None) -> List[int]:
        if self.path:
            raise RuntimeError("agent already built its tour")
        if start is None:
            start = int(self.rng.integers(self.n))
        current = start
        while True:
            self.current_city = current
            self.visited[current] = True
            self.path.append(current)
            candidates = np.flatnonzero(~self.visited)
            if candidates.size == 0:
                break
            nxt = rule.next_city(self.rng, table, current, candidates)
            self.accumulated_cost += float(self.dist[current, nxt])
            if on_step is not None:
                on_step(current, nxt)
            current = nxt
        # close the cycle
        self.accumulated_cost += float(self.dist[current, start])
        self.current_city = start
        return self.path
