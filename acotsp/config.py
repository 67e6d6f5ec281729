from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

from .errors import ConfigurationError


@dataclass
class ACOConfig:
    population_size: int = 20          # ants per iteration
    max_iterations: int = 100
    pheromone_persistence: float = 0.5 # fraction of trail kept by evaporation
    alpha: float = 1.0                 # pheromone influence
    beta: float = 2.0                  # heuristic influence
    online_pheromone_update: bool = False
    offline_pheromone_update: bool = True
    initial_pheromone: float = 1.0
    deposit_factor: float = 1.0        # offline deposit = deposit_factor / cost
    online_deposit: float = 0.01       # fixed per-step online deposit
    pheromone_floor: float = 1e-12
    distance_epsilon: float = 1e-10    # stands in for zero distances
    seed: Optional[int] = None
    n_workers: int = 1

    def validate(self) -> ACOConfig:
        if _bad_int(self.population_size) or self.population_size < 1:
            raise ConfigurationError(f"population_size must be a positive integer, got {self.population_size!r}")
        if _bad_int(self.max_iterations) or self.max_iterations < 1:
            raise ConfigurationError(f"max_iterations must be a positive integer, got {self.max_iterations!r}")
        if _bad_int(self.n_workers) or self.n_workers < 1:
            raise ConfigurationError(f"n_workers must be a positive integer, got {self.n_workers!r}")
        if not 0.0 < self.pheromone_persistence <= 1.0:
            raise ConfigurationError(f"pheromone_persistence must be in (0, 1], got {self.pheromone_persistence}")
        if not (self.alpha >= 0 and self.beta >= 0):
            raise ConfigurationError(f"alpha and beta must be >= 0, got alpha={self.alpha} beta={self.beta}")
        for name in ("initial_pheromone", "pheromone_floor", "distance_epsilon"):
            if not getattr(self, name) > 0:
                raise ConfigurationError(f"{name} must be > 0, got {getattr(self, name)}")
        for name in ("deposit_factor", "online_deposit"):
            if not getattr(self, name) >= 0:
                raise ConfigurationError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.seed is not None and (_bad_int(self.seed) or self.seed < 0):
            raise ConfigurationError(f"seed must be a non-negative integer or None, got {self.seed!r}")
        return self

    def replace(self, **changes) -> ACOConfig:
        return replace(self, **changes)


def _bad_int(value) -> bool:
    return isinstance(value, bool) or not isinstance(value, int)
