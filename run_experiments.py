# run_experiments.py
import os, json, argparse, logging
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from kopt import BenchmarkConfig
from kopt.experiments import run_repeated_trials, run_size_sweep

OUTDIR = os.path.dirname(os.path.abspath(__file__))


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def plot_scatter(df_details, save_path):
    plt.figure()
    for i, col in enumerate(["length_2opt", "length_3opt"], start=1):
        lengths = df_details[col].to_numpy()
        x = np.random.normal(loc=i, scale=0.03, size=len(lengths))
        plt.plot(x, lengths, "o")
    plt.xticks([1, 2], ["2-opt", "3-opt"])
    plt.ylabel("Tour length")
    plt.title("Local optimum lengths across trials")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_size_sweep(df_sweep, save_path):
    plt.figure()
    plt.plot(df_sweep["n_points"], df_sweep["mean_improvement_pct"], "o-")
    plt.xlabel("Number of points")
    plt.ylabel("Mean 3-opt vs 2-opt change (%)")
    plt.title("3-opt improvement over 2-opt")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=100, help="number of points per instance")
    ap.add_argument("--trials", type=int, default=20)
    ap.add_argument("--dims", type=int, choices=[2, 3], default=2)
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--sizes", type=int, nargs="*", default=None, help="also sweep these instance sizes")
    ap.add_argument("--outdir", default=OUTDIR)
    ap.add_argument("--verbose", "-v", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    cfg = BenchmarkConfig(n_points=args.n, n_trials=args.trials, dims=args.dims, seed=args.seed)
    stats, details = run_repeated_trials(cfg)
    print(json.dumps(stats, indent=2))
    print("avg 2-opt distance:", stats["mean_length_2opt"])
    print("avg 3-opt distance:", stats["mean_length_3opt"])
    print("avg 3-opt improvement % vs 2-opt:", stats["mean_improvement_pct"])

    df_details = pd.DataFrame.from_records(details)
    df_details.to_csv(ensure(os.path.join(args.outdir, "trials.csv")), index=False)
    pd.DataFrame.from_records([stats]).to_csv(os.path.join(args.outdir, "results_summary.csv"), index=False)
    plot_scatter(df_details, os.path.join(args.outdir, "results_distribution.png"))

    if args.sizes:
        rows = run_size_sweep(args.sizes, base_cfg=cfg, csv_path=os.path.join(args.outdir, "size_sweep.csv"))
        plot_size_sweep(pd.DataFrame.from_records(rows), os.path.join(args.outdir, "size_sweep.png"))
        print("Size sweep evaluated:", len(rows))


if __name__ == "__main__":
    main()
