#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Command line front end: read a system from a file, solve it with
Cramer's rule and print the solution.
"""
import argparse
import logging
import sys

from .errors import ShapeError, SingularSystemError
from .io import format_solution, read_system
from .matrix_functions import determinant
from .solver import cramer_solve, cramer_solve_concurrent
from .timing import timeit_logger

logger = logging.getLogger(__name__)


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cramer-solve",
        description="Solve a small dense linear system A x = b with Cramer's rule.",
    )
    parser.add_argument(
        "path",
        type=str,
        help="Text file holding an augmented matrix, or a square matrix "
        "followed by a line of constants",
    )
    parser.add_argument(
        "--concurrent",
        action="store_true",
        help="Compute the per-unknown determinants concurrently",
    )
    parser.add_argument(
        "--processes",
        action="store_true",
        help="With --concurrent, use a process pool instead of threads",
    )
    parser.add_argument(
        "--precision", type=int, default=2, help="Digits printed after the point"
    )
    parser.add_argument(
        "--tol",
        type=_non_negative_float,
        default=0.0,
        help="Treat |det(A)| <= TOL as singular (default: exact zero)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.processes and not args.concurrent:
        parser.error("--processes requires --concurrent")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        A, b = read_system(args.path)
    except (OSError, ValueError) as e:
        print(f"Error reading {args.path}: {e}", file=sys.stderr)
        return 2

    print(f"Main determinant (detA): {determinant(A):.{args.precision}f}")

    try:
        with timeit_logger(logger, name="cramer") as sw:
            if args.concurrent:
                x = cramer_solve_concurrent(
                    A, b, tol=args.tol, processes=args.processes
                )
            else:
                x = cramer_solve(A, b, tol=args.tol)
    except SingularSystemError:
        print(
            "The system has no unique solution: "
            "it is inconsistent or has infinitely many solutions."
        )
        return 1
    except ShapeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("\nSolution:")
    print(format_solution(x, precision=args.precision))
    print(f"\nElapsed time: {sw.elapsed:.6f} s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
