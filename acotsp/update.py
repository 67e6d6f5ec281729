from __future__ import annotations
from typing import Sequence

from .config import ACOConfig
from .pheromone import PheromoneTable


class UpdatePolicy:
    """Evaporation plus online (per step) and offline (iteration-best) deposits."""

    def __init__(self, cfg: ACOConfig):
        self.online = cfg.online_pheromone_update
        self.offline = cfg.offline_pheromone_update
        self.persistence = cfg.pheromone_persistence
        self.deposit_factor = cfg.deposit_factor
        self.online_deposit = cfg.online_deposit
        self.min_cost = cfg.distance_epsilon

    def offline_amount(self, cost: float) -> float:
        return self.deposit_factor / max(cost, self.min_cost)

    def online_step(self, table: PheromoneTable, i: int, j: int):
        table.add(i, j, self.online_deposit)

    def apply(self, table: PheromoneTable, best_path: Sequence[int], best_cost: float) -> bool:
        """End-of-iteration update; returns True if the table changed."""
        if not self.offline:
            return False
        table.evaporate(self.persistence)
        table.deposit(best_path, self.offline_amount(best_cost))
        return True
