#!/usr/bin/env python
"""
Generate a Synthetic Cell Library

Writes random rectangular cells (area, aspect ratio, fixed flag) in the text
format read by evaluate_npe.py, or as CSV when the output ends in .csv.

Usage:
    python generate_cells.py --count 20 --output cells.txt
"""

import argparse
import os
import sys
import numpy as np

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from floorplan.utils import random_cells, save_cells


def generate_cells(count, output_file, seed=42, min_area=1.0, max_area=100.0, max_ratio=3.0, fixed_fraction=0.0):
    rng = np.random.default_rng(seed)
    print(f"Generating {count} cells...")
    cells = random_cells(count, rng, min_area=min_area, max_area=max_area, max_ratio=max_ratio,
                         fixed_fraction=fixed_fraction)
    save_cells(cells, output_file)
    print(f"✓ Saved to {output_file}")
    return cells


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate a synthetic cell library")
    parser.add_argument('--count', type=int, required=True, help='Number of cells')
    parser.add_argument('--output', type=str, required=True, help='Output file (.txt or .csv)')
    parser.add_argument('--seed', type=int, default=42, help='Random seed')
    parser.add_argument('--min-area', type=float, default=1.0, help='Smallest cell area')
    parser.add_argument('--max-area', type=float, default=100.0, help='Largest cell area')
    parser.add_argument('--max-ratio', type=float, default=3.0, help='Largest aspect ratio (and its inverse)')
    parser.add_argument('--fixed-fraction', type=float, default=0.0, help='Fraction of cells that cannot rotate')

    args = parser.parse_args(argv)

    generate_cells(args.count, args.output, args.seed, args.min_area, args.max_area, args.max_ratio,
                   args.fixed_fraction)


if __name__ == '__main__':
    main()
