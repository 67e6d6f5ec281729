from __future__ import annotations
import csv
import itertools
import logging
import statistics
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .colony import AntColony
from .config import ACOConfig
from .tsp import TSPInstance

logger = logging.getLogger(__name__)


def run_repeated_trials(instance: TSPInstance, cfg: ACOConfig, n_runs: int = 10, base_seed: int = 42,
                        label: str = "aco") -> Tuple[Dict[str, Any], List[Tuple[float, float, List[int]]]]:
    costs = []
    times = []
    best_paths = []
    for r in range(n_runs):
        res = AntColony(instance, cfg.replace(seed=base_seed + r)).run()
        costs.append(res.best_cost)
        times.append(res.elapsed_sec)
        best_paths.append(res.best_path)
    stats = {
        "mean_cost": statistics.mean(costs),
        "std_cost": statistics.stdev(costs) if len(costs) > 1 else 0.0,
        "min_cost": min(costs),
        "max_cost": max(costs),
        "median_cost": statistics.median(costs),
        "mean_time": statistics.mean(times),
        "label": label,
        "n_runs": n_runs,
    }
    logger.info("%s: mean cost %.4f over %d runs", label, stats["mean_cost"], n_runs)
    return stats, list(zip(costs, times, best_paths))


def _grid_points(param_grid: Dict[str, List[Any]]):
    keys = sorted(param_grid)
    for values in itertools.product(*(param_grid[k] for k in keys)):
        yield dict(zip(keys, values))


def _append_csv_row(csv_path: str, row: Dict[str, Any]):
    path = Path(csv_path)
    new_file = not path.exists()
    with path.open("a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(row))
        if new_file:
            writer.writeheader()
        writer.writerow(row)


def run_parameter_sweep(instance: TSPInstance, param_grid: Dict[str, List[Any]],
                        base_cfg: Optional[ACOConfig] = None, n_runs: int = 5, base_seed: int = 100,
                        csv_path: Optional[str] = None) -> List[Dict[str, Any]]:
    """Cartesian sweep over ``param_grid``; one summary row per combination.

    Every combination is validated up front, so a bad value fails before any
    run. Rows are appended to ``csv_path`` as they finish, with a header
    written only when the file is new.
    """
    base_cfg = base_cfg or ACOConfig()
    points = [(p, base_cfg.replace(**p).validate()) for p in _grid_points(param_grid)]
    rows = []
    for point, cfg in points:
        label = ",".join(f"{k}={v}" for k, v in point.items())
        stats, _ = run_repeated_trials(instance, cfg, n_runs=n_runs, base_seed=base_seed, label=label)
        rows.append({**point, **stats})
        if csv_path is not None:
            _append_csv_row(csv_path, rows[-1])
    return rows
