"""Reading problem files and rendering text reports.

Problem files hold one city per row: ``id x y``. Blank lines and lines
starting with ``#`` are ignored.
"""
from __future__ import annotations
from pathlib import Path
from typing import List, Sequence, Union

import numpy as np

from .errors import ProblemFormatError
from .pheromone import PheromoneTable
from .tsp import City, TSPInstance


def parse_problem_file(path: Union[str, Path]) -> List[City]:
    cities: List[City] = []
    seen = set()
    with open(path, encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split()
            if len(parts) != 3:
                raise ProblemFormatError(path, line_no, f"expected 'id x y', got {line!r}")
            try:
                city = City(int(parts[0]), float(parts[1]), float(parts[2]))
            except ValueError as e:
                raise ProblemFormatError(path, line_no, str(e)) from e
            if city.id in seen:
                raise ProblemFormatError(path, line_no, f"duplicate city id {city.id}")
            seen.add(city.id)
            cities.append(city)
    return cities


def format_cities(cities: Sequence[City]) -> str:
    lines = [f"{'city':>6} {'x':>12} {'y':>12}"]
    for c in cities:
        lines.append(f"{c.id:>6} {c.x:>12.4f} {c.y:>12.4f}")
    return "\n".join(lines)


def format_solution(instance: TSPInstance, path: Sequence[int], cost: float) -> str:
    lines = [f"{'step':>5} {'city':>6} {'x':>12} {'y':>12}"]
    for step, city_id in enumerate(path, start=1):
        c = instance.city(city_id)
        lines.append(f"{step:>5} {c.id:>6} {c.x:>12.4f} {c.y:>12.4f}")
    lines.append(f"Tour: {' -> '.join(map(str, list(path) + list(path[:1])))}")
    lines.append(f"Cost: {cost:.6f}")
    return "\n".join(lines)


def format_pheromone_table(table: Union[np.ndarray, PheromoneTable]) -> str:
    tau = table.snapshot() if isinstance(table, PheromoneTable) else np.asarray(table)
    return "\n".join(" ".join(f"{v:10.4g}" for v in row) for row in tau)


def format_matlab_matrix(instance: TSPInstance, path: Sequence[int], name: str = "solution_matrix") -> str:
    """MATLAB literal with one ``x y`` row per visited city, closed back to the start.

    Paste into MATLAB and plot with ``plot(m(:,1), m(:,2), 'x-')``.
    """
    rows = []
    for city_id in list(path) + list(path[:1]):
        c = instance.city(city_id)
        rows.append(f"  {c.x:.6g} {c.y:.6g};")
    return "\n".join([f"{name} = ["] + rows + ["];"])
