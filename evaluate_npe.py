#!/usr/bin/env python
"""
Evaluate Normalized Polish Expressions

Prints the minimum floorplan area of each expression over a cell library.
Without --npe the three sample expressions are evaluated.

Usage:
    python evaluate_npe.py data/input_file.txt
    python evaluate_npe.py cells.csv --npe 12V3H --placement --plot plots
"""

import argparse
import json
import logging
import os
import sys

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from slicetree import FloorplanError, evaluate
from floorplan.config import DEFAULT_CELLS_FILE, SAMPLE_NPES
from floorplan.logging_config import setup_logging
from floorplan.utils import load_cells, convert_to_serializable


def print_placement(evaluation):
    for name, rect in sorted(evaluation.placement.items()):
        print(f"  {name}: x={rect.min_x:.4f} y={rect.min_y:.4f} w={rect.width:.4f} h={rect.height:.4f}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate the minimum area of slicing floorplans")
    parser.add_argument('cells', nargs='?', default=DEFAULT_CELLS_FILE, help='Cell library file (.txt or .csv)')
    parser.add_argument('--npe', action='append', help='Expression to evaluate (repeatable)')
    parser.add_argument('--placement', action='store_true', help='Print the position of every cell')
    parser.add_argument('--plot', metavar='DIR', help='Save a plot of each floorplan into DIR')
    parser.add_argument('--json', metavar='FILE', help='Write the results as JSON')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    cells = load_cells(args.cells)
    expressions = args.npe or list(SAMPLE_NPES)

    results = []
    failures = 0
    for i, npe in enumerate(expressions):
        print(f"NPE: {npe}")
        try:
            evaluation = evaluate(npe, cells)
        except FloorplanError as e:
            print(f"Error: {e}")
            results.append({'npe': npe, 'error': str(e)})
            failures += 1
            continue
        print(f"Cost: {evaluation.area}")
        if args.placement:
            print_placement(evaluation)
        if args.plot:
            from floorplan.plot import plot_evaluation
            os.makedirs(args.plot, exist_ok=True)
            plot_evaluation(evaluation, output=os.path.join(args.plot, f"floorplan_{i}.png"))
        results.append(evaluation.to_dict())

    if args.json:
        with open(args.json, 'w') as f:
            json.dump(convert_to_serializable(results), f, indent=2)
        print(f"✓ Saved results to {args.json}")

    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())
