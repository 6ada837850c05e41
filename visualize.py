import os, argparse, tempfile, shutil, logging
import matplotlib.pyplot as plt
import imageio

from kopt import TwoOpt, ThreeOpt
from kopt.experiments import random_points, build_matrix

SOLVER_MAP = {"2opt": TwoOpt, "3opt": ThreeOpt}


def plot_tour(coords, tour, title, save_path):
    xs = [coords[i][0] for i in tour] + [coords[tour[0]][0]]
    ys = [coords[i][1] for i in tour] + [coords[tour[0]][1]]
    cx = [c[0] for c in coords]
    cy = [c[1] for c in coords]

    plt.figure(figsize=(5, 5))
    plt.plot(cx, cy, "o")
    plt.plot(xs, ys, "-")
    plt.plot([coords[tour[0]][0]], [coords[tour[0]][1]], "s")
    plt.title(title)
    plt.axis("equal")
    plt.tight_layout()
    plt.savefig(save_path, dpi=120, bbox_inches="tight")
    plt.close()


def visualize(coords, name, outdir, keep_frames=False):
    """Render one frame per sweep and stitch them into a GIF; also save the final tour."""
    os.makedirs(outdir, exist_ok=True)
    solver = SOLVER_MAP[name](build_matrix(coords, 2))
    res = solver.run()

    frames_dir = os.path.join(outdir, f"{name}_frames") if keep_frames else tempfile.mkdtemp(prefix=f"{name}_frames_")
    os.makedirs(frames_dir, exist_ok=True)

    frames = []
    tours = [list(range(len(coords)))] + solver.history_tours
    lengths = [solver.start_length] + solver.history_lengths
    for it, (tour, L) in enumerate(zip(tours, lengths)):
        frame_path = os.path.join(frames_dir, f"{name}_{it:03d}.png")
        plot_tour(coords, tour, f"{name} after sweep {it}\nlength={L:.4f}", frame_path)
        frames.append(frame_path)

    gif_path = os.path.join(outdir, f"{name}_sweeps.gif")
    with imageio.get_writer(gif_path, mode="I", duration=0.6) as writer:
        for fp in frames:
            writer.append_data(imageio.v2.imread(fp))

    final_png = os.path.join(outdir, f"{name}_final.png")
    plot_tour(coords, res.tour, f"{name} local optimum\nlength={res.length:.4f} sweeps={res.n_sweeps}", final_png)

    if not keep_frames:
        shutil.rmtree(frames_dir, ignore_errors=True)
    else:
        print("Frames saved in:", frames_dir)
    print("Saved:", gif_path, final_png)
    return res


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--algo", choices=["2opt", "3opt", "both"], default="both")
    p.add_argument("--n", type=int, default=40, help="number of points")
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--outdir", default="viz")
    p.add_argument("--keep-frames", action="store_true", help="keep the PNG frames used for the GIF(s)")
    p.add_argument("--verbose", "-v", action="store_true")
    args = p.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    if args.n < 2:
        p.error("--n must be at least 2 to draw a tour")
    coords = random_points(args.n, dims=2, seed=args.seed)
    names = ["2opt", "3opt"] if args.algo == "both" else [args.algo]
    for name in names:
        visualize(coords, name, args.outdir, keep_frames=args.keep_frames)


if __name__ == "__main__":
    main()
