"""Command that writes a random adjacency matrix file."""

import random
import re
import sys

from .matrixfile import DEFAULT_MAX_WEIGHT, format_matrix, generate_matrix, write_matrix

INPUT_ERROR = 1
SIZE_ERROR = 2
WRITE_ERROR = 3

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)
PRINT_LIMIT = 32
USAGE = "Usage: generate <matrix size> <file> optional: <max weight>"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _strtol(text):
    """Parse a leading decimal integer, clamped to a 64-bit range; 0 if there is none."""
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    return max(LONG_MIN, min(LONG_MAX, int(match.group(1))))


def main(argv=None):
    """Generate a random matrix and write it to a file, printing small ones."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not 2 <= len(args) <= 3:
        print(USAGE)
        return INPUT_ERROR

    size = _strtol(args[0])
    if size <= 2:
        print("<matrix size> must be a number at least equal to 3")
        return SIZE_ERROR
    if size == LONG_MAX:
        print("Matrix size is too big")
        return SIZE_ERROR

    max_weight = _strtol(args[2]) if len(args) == 3 else DEFAULT_MAX_WEIGHT
    try:
        matrix = generate_matrix(size, max_weight, random.Random())
    except ValueError as exc:
        print(exc)
        return SIZE_ERROR

    try:
        write_matrix(args[1], matrix)
    except OSError as exc:
        print(f"Cannot write {args[1]}: {exc.strerror}")
        return WRITE_ERROR

    if size <= PRINT_LIMIT:
        print(format_matrix(matrix), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())