from __future__ import annotations
import csv
import logging
import os
import random
import statistics
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .tsp import DistanceMatrix
from .two_opt import TwoOpt
from .three_opt import ThreeOpt

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkConfig:
    n_points: int = 100
    n_trials: int = 20
    dims: int = 2
    square_size: float = 1.0    # coordinates drawn uniformly from [0, square_size)
    seed: Optional[int] = None


def random_points(n: int, dims: int = 2, seed: Optional[int] = None, square_size: float = 1.0) -> List[Tuple[float, ...]]:
    if dims not in (2, 3):
        raise ValueError("dims must be 2 or 3.")
    rng = random.Random(seed)
    return [tuple(rng.uniform(0, square_size) for _ in range(dims)) for _ in range(n)]


def build_matrix(points: Sequence[Tuple[float, ...]], dims: int) -> DistanceMatrix:
    return DistanceMatrix.build_2d(points) if dims == 2 else DistanceMatrix.build_3d(points)


def compare_once(matrix: DistanceMatrix) -> Dict[str, Any]:
    """Run both optimizers from the identity tour on one instance."""
    res2 = TwoOpt(matrix).run()
    res3 = ThreeOpt(matrix).run()
    improvement = (res3.length - res2.length) / res2.length if res2.length > 0 else 0.0
    return {
        "start_length": matrix.tour_length(list(range(len(matrix)))),
        "length_2opt": res2.length,
        "length_3opt": res3.length,
        "sweeps_2opt": res2.n_sweeps,
        "sweeps_3opt": res3.n_sweeps,
        "time_2opt": res2.elapsed_sec,
        "time_3opt": res3.elapsed_sec,
        "improvement_3opt_vs_2opt": improvement,
    }


def run_repeated_trials(cfg: BenchmarkConfig, base_seed: int = 42):
    """Average 2-opt and 3-opt lengths over `cfg.n_trials` random instances."""
    if cfg.n_points < 0 or cfg.n_trials < 1:
        raise ValueError("n_points must be >= 0 and n_trials >= 1.")
    seed0 = cfg.seed if cfg.seed is not None else base_seed
    details = []
    for r in range(cfg.n_trials):
        cfg_r = BenchmarkConfig(**{**asdict(cfg), "seed": seed0 + r})
        pts = random_points(cfg_r.n_points, cfg_r.dims, seed=cfg_r.seed, square_size=cfg_r.square_size)
        row = {"trial": r, "seed": cfg_r.seed, **compare_once(build_matrix(pts, cfg_r.dims))}
        logger.debug("trial %d: 2-opt %.6f, 3-opt %.6f", r, row["length_2opt"], row["length_3opt"])
        details.append(row)

    lengths2 = [d["length_2opt"] for d in details]
    lengths3 = [d["length_3opt"] for d in details]
    stats = {
        "n_points": cfg.n_points,
        "dims": cfg.dims,
        "n_trials": cfg.n_trials,
        "mean_length_2opt": statistics.mean(lengths2),
        "mean_length_3opt": statistics.mean(lengths3),
        "std_length_2opt": statistics.stdev(lengths2) if len(lengths2) > 1 else 0.0,
        "std_length_3opt": statistics.stdev(lengths3) if len(lengths3) > 1 else 0.0,
        "mean_improvement_pct": 100.0 * statistics.mean(d["improvement_3opt_vs_2opt"] for d in details),
        "mean_time_2opt": statistics.mean(d["time_2opt"] for d in details),
        "mean_time_3opt": statistics.mean(d["time_3opt"] for d in details),
    }
    return stats, details


def run_size_sweep(sizes: Sequence[int], base_cfg: Optional[BenchmarkConfig] = None,
                   csv_path: Optional[str] = None) -> List[Dict[str, Any]]:
    base_cfg = base_cfg or BenchmarkConfig()
    rows = []
    for n in sizes:
        cfg = replace(base_cfg, n_points=n)
        stats, _ = run_repeated_trials(cfg)
        rows.append(stats)
        if csv_path is not None:
            write_header = not os.path.exists(csv_path)
            with open(csv_path, "a", newline="") as f:
                w = csv.DictWriter(f, fieldnames=stats.keys())
                if write_header:
                    w.writeheader()
                w.writerow(stats)
    return rows
