import os, argparse, logging
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import imageio

from acotsp import TSPInstance, ACOConfig, AntColony
from acotsp.problem_io import parse_problem_file


def visualize(inst, cfg, outdir, step=5):
    os.makedirs(outdir, exist_ok=True)
    res = AntColony(inst, cfg).run()

    frames = []
    cx = [c.x for c in inst.cities]
    cy = [c.y for c in inst.cities]
    for it in range(0, len(res.history_best_paths), step):
        path = res.history_best_paths[it]
        cost = res.history_best_costs[it]
        closed = [inst.city(i) for i in path + path[:1]]

        plt.figure(figsize=(5, 5))
        plt.plot(cx, cy, "o")
        plt.plot([c.x for c in closed], [c.y for c in closed], "-")
        plt.title(f"best-so-far\niter={it+1}  cost={cost:.2f}")
        plt.axis("equal")
        plt.tight_layout()
        frame_path = os.path.join(outdir, f"frame_{it:03d}.png")
        plt.savefig(frame_path, dpi=120, bbox_inches="tight")
        plt.close()
        frames.append(frame_path)

    gif_path = os.path.join(outdir, "convergence.gif")
    with imageio.get_writer(gif_path, mode="I", duration=0.6) as writer:
        for fp in frames:
            writer.append_data(imageio.v2.imread(fp))

    print("Saved:", gif_path)
    return gif_path


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--problem", default=None, help="'id x y' file; a random instance is used otherwise")
    p.add_argument("--n", type=int, default=50, help="number of cities")
    p.add_argument("--iters", type=int, default=120)
    p.add_argument("--ants", type=int, default=25)
    p.add_argument("--online", action="store_true")
    p.add_argument("--square", type=float, default=100.0)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--outdir", default="viz")
    p.add_argument("--step", type=int, default=5, help="frame every k iterations")
    args = p.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if args.problem:
        inst = TSPInstance(parse_problem_file(args.problem), name=args.problem)
    else:
        inst = TSPInstance.random_euclidean(n=args.n, seed=args.seed, square_size=args.square, name=f"viz{args.n}")
    cfg = ACOConfig(alpha=1.0, beta=3.0, pheromone_persistence=0.5, population_size=args.ants,
                    max_iterations=args.iters, online_pheromone_update=args.online, seed=args.seed)
    visualize(inst, cfg, args.outdir, step=args.step)


if __name__ == "__main__":
    main()
