from __future__ import annotations
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Union

import numpy as np

from .agent import Agent
from .config import ACOConfig
from .errors import ConfigurationError
from .pheromone import PheromoneTable
from .tracker import BestSolutionTracker
from .transition import TransitionRule
from .tsp import City, TSPInstance
from .update import UpdatePolicy

logger = logging.getLogger(__name__)


@dataclass
class ACOResult:
    best_path: List[int]
    best_cost: float
    history_best_costs: List[float]
    history_best_paths: List[List[int]]
    config: ACOConfig
    elapsed_sec: float


@dataclass
class IterationStats:
    iteration: int
    iteration_best_path: List[int]
    iteration_best_cost: float
    agent_costs: List[float]
    best_path: List[int]
    best_cost: float
    improved: bool


class AntColony:
    """Ant colony solver for the symmetric Euclidean TSP.

    Each iteration spawns ``population_size`` agents that build tours with the
    random-proportional rule, then (if enabled) evaporates the trail and lets
    the iteration-best ant deposit ``deposit_factor / cost`` on its edges.
    Online updates add ``online_deposit`` to each edge as it is walked.

    Paths in results are city ids; everything internal works on indices.
    """

    def __init__(self, cities: Union[TSPInstance, Sequence[City]], cfg: Optional[ACOConfig] = None):
        self.cfg = (cfg if cfg is not None else ACOConfig()).validate()
        self.instance = cities if isinstance(cities, TSPInstance) else TSPInstance(cities)
        self.n = self.instance.n_cities()
        if self.n < 2:
            raise ConfigurationError(f"need at least 2 distinct cities, got {self.n}")
        self.D = self.instance.distance_matrix()
        self.rule = TransitionRule(self.D, self.cfg.alpha, self.cfg.beta, self.cfg.distance_epsilon)
        self.policy = UpdatePolicy(self.cfg)
        self.table: Optional[PheromoneTable] = None
        self.tracker = BestSolutionTracker()
        self._ids = self.instance.ids()
        self._entropy = None

    def _init_run(self):
        cfg = self.cfg
        self.table = PheromoneTable(self.n, cfg.initial_pheromone, cfg.pheromone_floor)
        self.tracker = BestSolutionTracker()
        self._entropy = np.random.SeedSequence(cfg.seed).entropy

    def _spawn(self, iteration: int) -> List[Agent]:
        # one generator per agent so draws do not depend on scheduling
        return [Agent(self.D, np.random.default_rng([self._entropy, iteration, k]))
                for k in range(self.cfg.population_size)]

    def _construct(self, agents: List[Agent], pool: Optional[ThreadPoolExecutor]):
        online = self.policy.online
        if pool is None:
            on_step = (lambda i, j: self.policy.online_step(self.table, i, j)) if online else None
            for ant in agents:
                ant.construct(self.table, self.rule, on_step)
            return

        # parallel: the table stays read-only until every ant is done
        buffers = [[] for _ in agents]

        def build(k: int):
            on_step = (lambda i, j: buffers[k].append((i, j))) if online else None
            agents[k].construct(self.table, self.rule, on_step)

        list(pool.map(build, range(len(agents))))
        for edges in buffers:
            for i, j in edges:
                self.policy.online_step(self.table, i, j)

    def iterate(self) -> Iterator[IterationStats]:
        """Run the colony, yielding after every iteration.

        Stopping the generator early is how callers end a run before
        ``max_iterations``.
        """
        cfg = self.cfg
        self._init_run()
        logger.info("Starting ACO on %s: n=%d ants=%d iterations=%d online=%s offline=%s seed=%s",
                    self.instance.name, self.n, cfg.population_size, cfg.max_iterations,
                    cfg.online_pheromone_update, cfg.offline_pheromone_update, cfg.seed)
        pool = ThreadPoolExecutor(max_workers=cfg.n_workers) if cfg.n_workers > 1 else None
        try:
            for it in range(1, cfg.max_iterations + 1):
                agents = self._spawn(it)
                self._construct(agents, pool)

                costs = [ant.accumulated_cost for ant in agents]
                best = agents[int(np.argmin(costs))]
                self.policy.apply(self.table, best.path, best.accumulated_cost)

                path = [self._ids[i] for i in best.path]
                improved = self.tracker.update(path, best.accumulated_cost)
                self.tracker.record()
                logger.debug("Iteration %d: iteration best %.6f, global best %.6f%s", it,
                             best.accumulated_cost, self.tracker.best_cost, " (improved)" if improved else "")
                yield IterationStats(iteration=it, iteration_best_path=path,
                                     iteration_best_cost=best.accumulated_cost, agent_costs=costs,
                                     best_path=list(self.tracker.best_path),
                                     best_cost=self.tracker.best_cost, improved=improved)
        finally:
            if pool is not None:
                pool.shutdown()

    def run(self) -> ACOResult:
        start = time.time()
        history_paths: List[List[int]] = []
        for stats in self.iterate():
            history_paths.append(stats.best_path)
        elapsed = time.time() - start
        logger.info("Finished ACO on %s: best cost %.6f in %.2fs",
                    self.instance.name, self.tracker.best_cost, elapsed)
        return ACOResult(best_path=list(self.tracker.best_path), best_cost=self.tracker.best_cost,
                         history_best_costs=list(self.tracker.history),
                         history_best_paths=history_paths, config=self.cfg, elapsed_sec=elapsed)


def solve(cities: Union[TSPInstance, Sequence[City]], cfg: Optional[ACOConfig] = None, **overrides) -> ACOResult:
    cfg = cfg if cfg is not None else ACOConfig()
    if overrides:
        cfg = cfg.replace(**overrides)
    return AntColony(cities, cfg).run()
