from __future__ import annotations
import math
from typing import List, Sequence


class BestSolutionTracker:
    def __init__(self):
        self.best_path: List[int] = []
        self.best_cost = math.inf
        self.history: List[float] = []

    def update(self, path: Sequence[int], cost: float) -> bool:
        # strict: the first tour found keeps ties
        if cost < self.best_cost:
            self.best_path = list(path)
            self.best_cost = cost
            return True
        return False

    def record(self):
        self.history.append(self.best_cost)

    def best(self):
        return list(self.best_path), self.best_cost
