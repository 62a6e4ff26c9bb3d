#!/usr/bin/env python3
"""
Walk through the reduction of a rational matrix to RREF, printing every step.

Usage:
  python examples/rref_walkthrough.py
  python examples/rref_walkthrough.py "[1 2 3; 2 4 7; 1 1 1]"
  python examples/rref_walkthrough.py "[1 2; 3 4]" --save-prefix /tmp/elim
"""
from __future__ import annotations

import argparse

from linalgtools import (
    EliminationTrace,
    draw_trace,
    exact_rank,
    parse_matrix,
    print_matrix,
    row_reduce,
)

DEFAULT = "[2 3/2 4/3 5/4; 3 2 5/3 3/2; 4 5/2 2 7/4]"


def main():
    ap = argparse.ArgumentParser(description="Step-by-step reduced row echelon form")
    ap.add_argument("matrix", nargs="?", default=DEFAULT, help="matrix literal, rows split by ';'")
    ap.add_argument("--save-prefix", default=None, help="also draw each step to PNG files")
    args = ap.parse_args()

    A = parse_matrix(args.matrix)

    trace = EliminationTrace()
    R, pivots = row_reduce(A, show_steps=True, sink=trace)
    for step in trace:
        print_matrix(step.matrix, step.label)

    print(f"pivots: {pivots}")
    print(f"rank:   {exact_rank(A)}")
    print_matrix(R, "Result")

    if args.save_prefix:
        draw_trace(trace, save_prefix=args.save_prefix)
        print(f"Saved {len(trace)} figures to {args.save_prefix}_step*.png")


if __name__ == "__main__":
    main()
