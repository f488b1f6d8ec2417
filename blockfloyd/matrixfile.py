"""Reading, writing, generating and printing adjacency matrices."""

import random
import struct

INF = (2**31 - 1) // 2
DEFAULT_MAX_WEIGHT = 9

_HEADER = struct.Struct("<q")
_CELL_SIZE = 4


class MatrixFileError(Exception):
    """Raised when a matrix file cannot be opened or is malformed."""


def read_matrix(path):
    """Read a square matrix: an 8-byte dimension followed by 4-byte cells, row by row."""
    try:
        with open(path, "rb") as handle:
            header = handle.read(_HEADER.size)
            if len(header) < _HEADER.size:
                raise MatrixFileError(f"File: {path} has no matrix dimension")
            (dim,) = _HEADER.unpack(header)
            if dim < 0:
                raise MatrixFileError(f"File: {path} has a negative dimension")
            body = handle.read(dim * dim * _CELL_SIZE)
    except FileNotFoundError as exc:
        raise MatrixFileError(f"File: {path} not found") from exc
    except IsADirectoryError as exc:
        raise MatrixFileError(f"File: {path} not found") from exc
    if len(body) < dim * dim * _CELL_SIZE:
        raise MatrixFileError(f"File: {path} is truncated")
    cells = struct.unpack(f"<{dim * dim}i", body)
    return [list(cells[row * dim:(row + 1) * dim]) for row in range(dim)]


def write_matrix(path, matrix):
    """Write a square matrix in the format read by :func:`read_matrix`."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    cells = [value for row in matrix for value in row]
    with open(path, "wb") as handle:
        handle.write(_HEADER.pack(size))
        handle.write(struct.pack(f"<{len(cells)}i", *cells))


def generate_matrix(size, max_weight=DEFAULT_MAX_WEIGHT, rng=None):
    """Generate a random weighted adjacency matrix with zero diagonal.

    Each off-diagonal edge gets a weight in 1..max_weight, or INF with
    probability 1/(max_weight + 1).
    """
    if size <= 2:
        raise ValueError("<matrix size> must be a number at least equal to 3")
    if max_weight < 1:
        raise ValueError("<max weight> must be a number at least equal to 1")
    if max_weight >= INF:
        raise ValueError("Max weight is too big")
    rng = rng if rng is not None else random.Random()

    def cell(i, j):
        if i == j:
            return 0
        weight = 1 + rng.randrange(max_weight + 1)
        return INF if weight == max_weight + 1 else weight

    return [[cell(i, j) for j in range(size)] for i in range(size)]


def format_row(values):
    """Format a row of distances, showing INF for unreachable entries."""
    return "".join(
        f"{'INF':>4}   " if value == INF else f"{value:4d}   " for value in values
    )


def format_matrix(matrix):
    """Format a matrix, one line per row."""
    return "".join(format_row(row) + "\n" for row in matrix)