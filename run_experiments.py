# run_experiments.py
import os, json, argparse, logging
import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from acotsp import TSPInstance, ACOConfig, AntColony
from acotsp.experiments import run_repeated_trials, run_parameter_sweep

OUTDIR = os.path.dirname(os.path.abspath(__file__))
UPDATE_MODES = {
    "offline": (False, True),
    "online": (True, False),
    "both": (True, True),
    "none": (False, False),
}


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def build_config(mode, n_ants=25, n_iterations=150):
    online, offline = UPDATE_MODES[mode]
    return ACOConfig(alpha=1.0, beta=3.0, pheromone_persistence=0.5, deposit_factor=1.0,
                     population_size=n_ants, max_iterations=n_iterations,
                     online_pheromone_update=online, offline_pheromone_update=offline)


def plot_scatter(details_by_mode, save_path):
    plt.figure()
    modes = list(details_by_mode.keys())
    jitter = np.random.default_rng(0)
    for i, mode in enumerate(modes, start=1):
        costs = [c for (c, t, path) in details_by_mode[mode]]
        x = jitter.normal(loc=i, scale=0.03, size=len(costs))
        plt.plot(x, costs, "o")
    plt.xticks(range(1, len(modes) + 1), modes)
    plt.ylabel("Best tour cost")
    plt.title("Best costs across runs")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_convergence(inst, mode, cfg, save_path):
    res = AntColony(inst, cfg).run()
    plt.figure()
    plt.plot(range(1, len(res.history_best_costs) + 1), res.history_best_costs)
    plt.xlabel("Iteration")
    plt.ylabel("Best-so-far tour cost")
    plt.title(f"{mode} update convergence")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=50)
    ap.add_argument("--square", type=float, default=100.0)
    ap.add_argument("--runs", type=int, default=5)
    ap.add_argument("--iters", type=int, default=150)
    ap.add_argument("--ants", type=int, default=25)
    ap.add_argument("--outdir", default=OUTDIR)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    inst = TSPInstance.random_euclidean(n=args.n, seed=123, square_size=args.square, name=f"demo{args.n}")
    configs = [(mode, build_config(mode, n_ants=args.ants, n_iterations=args.iters)) for mode in UPDATE_MODES]

    records = []
    details_by_mode = {}
    for mode, cfg in configs:
        stats, details = run_repeated_trials(inst, cfg, n_runs=args.runs, label=mode)
        print(mode, json.dumps(stats, indent=2))
        records.append(stats)
        details_by_mode[mode] = details

    df_summary = pd.DataFrame.from_records(records)
    df_summary.to_csv(ensure(os.path.join(args.outdir, "results_summary.csv")), index=False)
    plot_scatter(details_by_mode, os.path.join(args.outdir, "results_distribution.png"))

    for mode, cfg in configs:
        plot_convergence(inst, mode, cfg.replace(seed=7), os.path.join(args.outdir, f"convergence_{mode}.png"))

    grid = {"alpha": [0.5, 1.0, 1.5], "beta": [2.0, 3.0, 4.0], "pheromone_persistence": [0.5, 0.9]}
    rows = run_parameter_sweep(
        inst, grid, base_cfg=configs[0][1],
        n_runs=3, base_seed=500, csv_path=os.path.join(args.outdir, "offline_grid.csv")
    )
    best = pd.DataFrame(rows).sort_values("mean_cost").head(5)
    print("Grid search evaluated:", len(rows))
    print(best[["alpha", "beta", "pheromone_persistence", "mean_cost", "std_cost"]].to_string(index=False))


if __name__ == "__main__":
    main()
