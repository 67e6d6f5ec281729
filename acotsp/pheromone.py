from __future__ import annotations
import threading
from typing import Sequence

import numpy as np


class PheromoneTable:
    """Symmetric trail matrix shared by one solve-run.

    Writes go through a lock so that a pair of mirrored cells is never
    observed half-updated. Reads are lock-free; the colony only mutates the
    table outside of parallel construction.
    """

    def __init__(self, n: int, initial: float, floor: float = 1e-12):
        self.n = n
        self.floor = floor
        self._tau = np.full((n, n), float(initial))
        self._lock = threading.Lock()

    def get(self, i: int, j: int) -> float:
        return float(self._tau[i, j])

    def row(self, i: int) -> np.ndarray:
        return self._tau[i]

    def set(self, i: int, j: int, value: float):
        with self._lock:
            self._tau[i, j] = value
            self._tau[j, i] = value

    def add(self, i: int, j: int, amount: float):
        with self._lock:
            v = self._tau[i, j] + amount
            self._tau[i, j] = v
            self._tau[j, i] = v

    def evaporate(self, persistence: float):
        with self._lock:
            self._tau *= persistence
            np.maximum(self._tau, self.floor, out=self._tau)

    def deposit(self, path: Sequence[int], amount: float):
        """Add ``amount`` to every edge of the closed ``path`` (indices)."""
        n = len(path)
        with self._lock:
            for k in range(n):
                i, j = path[k], path[(k + 1) % n]
                if i == j:
                    continue
                v = self._tau[i, j] + amount
                self._tau[i, j] = v
                self._tau[j, i] = v

    def snapshot(self) -> np.ndarray:
        with self._lock:
            return self._tau.copy()

    def __len__(self) -> int:
        return self.n
