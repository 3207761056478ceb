#!/usr/bin/env python
"""
NPE Evaluation Benchmark

Evaluates many random valid NPEs over one cell library and records the
minimum area, dead space, shape-curve sizes and evaluation time of each.

Usage:
    python benchmark_npe.py --count 40 --samples 500 --output results/bench.csv --plot results/bench.png
    python benchmark_npe.py --cells data/input_file.txt --samples 200
"""

import argparse
import os
import sys
import time
import numpy as np
import pandas as pd
from tqdm import tqdm

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from slicetree import build_tree, compute_min_area
from floorplan.utils import load_cells, random_cells, random_npe


def run_benchmark(cells, samples, seed=42, show_progress=True):
    """
    Evaluate `samples` random NPEs over `cells`.
    :return: DataFrame with one row per expression
    """
    rng = np.random.default_rng(seed)
    names = [cell.name for cell in cells]
    total_cell_area = sum(cell.area for cell in cells)
    rows = []
    for _ in tqdm(range(samples), desc="Evaluating NPEs", disable=not show_progress):
        npe = random_npe(names, rng)
        start = time.perf_counter()
        tree = build_tree(npe, cells)
        area = compute_min_area(tree)
        elapsed = time.perf_counter() - start
        curve_sizes = [len(tree.nodes[i].curve) for i in tree.operators] or [len(tree.root.curve)]
        rows.append({
            'npe': npe,
            'area': area,
            'dead_space_ratio': (area - total_cell_area) / area,
            'root_curve_size': len(tree.root.curve),
            'max_curve_size': max(curve_sizes),
            'time_ms': elapsed * 1000,
        })
    return pd.DataFrame(rows)


def plot_results(df, path):
    import matplotlib.pyplot as plt
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))
    ax1.hist(df['dead_space_ratio'], bins=30, color='tab:blue', alpha=0.8)
    ax1.set_xlabel("Dead space / bounding area")
    ax1.set_ylabel("Expressions")
    ax1.set_title("Dead space of random NPEs")
    ax1.grid(True, linestyle='--', alpha=0.7)
    ax2.scatter(df['max_curve_size'], df['time_ms'], s=10, alpha=0.6)
    ax2.set_xlabel("Largest shape curve")
    ax2.set_ylabel("Evaluation time (ms)")
    ax2.set_title("Evaluation cost")
    ax2.grid(True, linestyle='--', alpha=0.7)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark NPE evaluation on random expressions")
    parser.add_argument('--cells', help='Cell library file; random cells are generated if omitted')
    parser.add_argument('--count', type=int, default=20, help='Number of random cells to generate')
    parser.add_argument('--samples', type=int, default=200, help='Number of random NPEs')
    parser.add_argument('--seed', type=int, default=42, help='Random seed')
    parser.add_argument('--output', help='CSV file for per-expression results')
    parser.add_argument('--plot', help='PNG file for result plots')

    args = parser.parse_args(argv)

    if args.cells:
        cells = load_cells(args.cells)
    else:
        cells = random_cells(args.count, np.random.default_rng(args.seed))
    print(f"Benchmarking {args.samples} NPEs over {len(cells)} cells")

    df = run_benchmark(cells, args.samples, args.seed)

    print(df[['area', 'dead_space_ratio', 'max_curve_size', 'time_ms']].describe())
    best = df.loc[df['area'].idxmin()]
    print(f"Best NPE: {best['npe']} (area {best['area']:.4f})")

    if args.output:
        os.makedirs(os.path.dirname(os.path.abspath(args.output)), exist_ok=True)
        df.to_csv(args.output, index=False)
        print(f"✓ Saved results to {args.output}")
    if args.plot:
        os.makedirs(os.path.dirname(os.path.abspath(args.plot)), exist_ok=True)
        plot_results(df, args.plot)
        print(f"✓ Saved plot to {args.plot}")
    return df


if __name__ == '__main__':
    main()
