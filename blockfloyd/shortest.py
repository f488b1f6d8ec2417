"""Command that computes all-pairs shortest paths of a matrix file on a process grid."""

import argparse
import sys
import time

from .grid import GridError, ProcessGrid, floyd, square_side
from .matrixfile import MatrixFileError, format_matrix, read_matrix

PROC_ERROR = 2
OPEN_ERROR = 3

PRINT_LIMIT = 32


def _print_matrix(matrix):
    dim = len(matrix)
    sys.stderr.write(f"{dim} x {dim} Matrix: \n")
    sys.stderr.write(format_matrix(matrix))


def main(argv=None):
    """Run blocked Floyd on a matrix file and report the result on stderr."""
    parser = argparse.ArgumentParser(
        prog="blockfloyd", description="All-pairs shortest paths on a square process grid."
    )
    parser.add_argument("matrix_file", help="binary adjacency matrix file")
    parser.add_argument(
        "-p", "--processes", type=int, default=1,
        help="number of grid processes (a perfect square)",
    )
    args = parser.parse_args(argv)

    try:
        square_side(args.processes)
    except GridError as exc:
        print(exc, file=sys.stderr)
        return PROC_ERROR

    try:
        matrix = read_matrix(args.matrix_file)
    except MatrixFileError as exc:
        print(exc, file=sys.stderr)
        return OPEN_ERROR

    try:
        grid = ProcessGrid(args.processes, len(matrix))
    except GridError as exc:
        print(exc, file=sys.stderr)
        return PROC_ERROR

    blocks = grid.scatter(matrix)
    if grid.dim <= PRINT_LIMIT:
        _print_matrix(grid.gather(blocks))

    start = time.perf_counter()
    blocks = floyd(grid, blocks)
    elapsed = time.perf_counter() - start
    print(f"Execution time: {elapsed:f}", file=sys.stderr)

    if grid.dim <= PRINT_LIMIT:
        _print_matrix(grid.gather(blocks))
    return 0


if __name__ == "__main__":
    sys.exit(main())