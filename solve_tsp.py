# solve_tsp.py
import argparse
import logging

from acotsp import ACOConfig, AntColony, TSPInstance
from acotsp.problem_io import (format_cities, format_matlab_matrix, format_pheromone_table,
                               format_solution, parse_problem_file)


def build_argparser():
    ap = argparse.ArgumentParser(description="Approximate a TSP tour with ant colony optimization.")
    ap.add_argument("problem", help="file with one 'id x y' row per city")
    d = ACOConfig()
    ap.add_argument("--ants", dest="population_size", type=int, default=d.population_size)
    ap.add_argument("--iters", dest="max_iterations", type=int, default=d.max_iterations)
    ap.add_argument("--persistence", dest="pheromone_persistence", type=float, default=d.pheromone_persistence)
    ap.add_argument("--alpha", type=float, default=d.alpha)
    ap.add_argument("--beta", type=float, default=d.beta)
    ap.add_argument("--online", dest="online_pheromone_update", action="store_true",
                    help="deposit pheromone on every step an ant takes")
    ap.add_argument("--no-offline", dest="offline_pheromone_update", action="store_false",
                    help="skip evaporation and the iteration-best deposit")
    ap.add_argument("--tau0", dest="initial_pheromone", type=float, default=d.initial_pheromone)
    ap.add_argument("--Q", dest="deposit_factor", type=float, default=d.deposit_factor)
    ap.add_argument("--online-deposit", type=float, default=d.online_deposit)
    ap.add_argument("--floor", dest="pheromone_floor", type=float, default=d.pheromone_floor,
                    help="lowest value evaporation can leave on an edge")
    ap.add_argument("--epsilon", dest="distance_epsilon", type=float, default=d.distance_epsilon,
                    help="distance used in place of zero between coincident cities")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--workers", dest="n_workers", type=int, default=d.n_workers)
    ap.add_argument("--print-cities", action="store_true")
    ap.add_argument("--print-pheromones", action="store_true", help="dump the final pheromone table")
    ap.add_argument("--matlab", action="store_true", help="print the tour as a MATLAB matrix")
    ap.add_argument("--verbose", action="store_true")
    return ap


def config_from_args(args):
    return ACOConfig(population_size=args.population_size, max_iterations=args.max_iterations,
                     pheromone_persistence=args.pheromone_persistence, alpha=args.alpha, beta=args.beta,
                     online_pheromone_update=args.online_pheromone_update,
                     offline_pheromone_update=args.offline_pheromone_update,
                     initial_pheromone=args.initial_pheromone, deposit_factor=args.deposit_factor,
                     online_deposit=args.online_deposit, pheromone_floor=args.pheromone_floor,
                     distance_epsilon=args.distance_epsilon, seed=args.seed, n_workers=args.n_workers)


def main(argv=None):
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    cities = parse_problem_file(args.problem)
    if args.print_cities:
        print(format_cities(cities))

    cfg = config_from_args(args)
    inst = TSPInstance(cities, name=args.problem)
    colony = AntColony(inst, cfg)
    res = colony.run()

    print(format_solution(inst, res.best_path, res.best_cost))
    if args.print_pheromones:
        print(format_pheromone_table(colony.table))
    if args.matlab:
        print(format_matlab_matrix(inst, res.best_path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
