from __future__ import annotations
from typing import Sequence

import numpy as np

from .pheromone import PheromoneTable


def weighted_choice(rng: np.random.Generator, candidates: Sequence[int], weights: Sequence[float]) -> int:
    """Roulette-wheel pick of one candidate.

    Uses a single uniform draw in [0, 1) scaled by the total weight and walks
    the cumulative weights. Degenerate weight vectors fall back to a uniform
    pick: among the infinite weights if there are any, otherwise among all
    candidates when everything underflowed to zero.
    """
    candidates = np.asarray(candidates)
    if candidates.size == 0:
        raise ValueError("weighted_choice() needs at least one candidate")
    w = np.asarray(weights, dtype=float)
    if w.shape != candidates.shape:
        raise ValueError("candidates and weights differ in length")

    infinite = np.isposinf(w)
    if infinite.any():
        pool = candidates[infinite]
        return int(pool[rng.integers(pool.size)])
    top = w.max()
    if not top > 0:
        return int(candidates[rng.integers(candidates.size)])
    # rescale so the cumulative sum cannot overflow
    acc = np.cumsum(w / top)
    r = rng.random() * acc[-1]
    k = int(np.searchsorted(acc, r, side="right"))
    if k >= candidates.size:
        k = int(np.flatnonzero(w > 0)[-1])
    return int(candidates[k])


class TransitionRule:
    """w(i,j) = T(i,j)^alpha * (1/d(i,j))^beta over the unvisited cities."""

    def __init__(self, dist: np.ndarray, alpha: float, beta: float, distance_epsilon: float = 1e-10):
        self.alpha = alpha
        self.beta = beta
        safe = np.where(dist > 0, dist, distance_epsilon)
        with np.errstate(over="ignore", under="ignore", divide="ignore"):
            self._eta_beta = (1.0 / safe) ** beta

    def weights(self, table: PheromoneTable, current: int, candidates: np.ndarray) -> np.ndarray:
        with np.errstate(over="ignore", under="ignore", invalid="ignore"):
            w = table.row(current)[candidates] ** self.alpha * self._eta_beta[current, candidates]
        w[np.isnan(w)] = 0.0
        return w

    def probabilities(self, table: PheromoneTable, current: int, candidates: np.ndarray) -> np.ndarray:
        w = self.weights(table, current, candidates)
        infinite = np.isposinf(w)
        if infinite.any():
            return infinite / infinite.sum()
        top = w.max()
        if not top > 0:
            return np.full(len(candidates), 1.0 / len(candidates))
        w = w / top
        return w / w.sum()

    def next_city(self, rng: np.random.Generator, table: PheromoneTable, current: int,
                  candidates: np.ndarray) -> int:
        if len(candidates) == 0:
            raise ValueError(f"no unvisited city left from {current}")
        return weighted_choice(rng, candidates, self.weights(table, current, candidates))
