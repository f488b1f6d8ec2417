"""A square grid of processes holding blocks of a matrix, and blocked Floyd."""

from math import isqrt

from .blocks import block_high, block_low, block_owner, block_size


class GridError(Exception):
    """Raised when a process grid cannot be formed."""


def square_side(processes):
    """Return the side of the square grid of ``processes``, which must be a perfect square."""
    if processes < 1:
        raise GridError("Number of processors must be positive")
    side = isqrt(processes)
    if side * side != processes:
        raise GridError("Number of processors must be a perfect square")
    return side


class ProcessGrid:
    """A q x q grid of processes, each owning a block of a dim x dim matrix."""

    def __init__(self, processes, dim):
        self.processes = processes
        self.q = square_side(processes)
        if self.q > dim:
            raise GridError("Too many processors")
        self.dim = dim

    def coords(self, rank):
        """Return (row, column) of ``rank`` in the grid, in row-major order."""
        if not 0 <= rank < self.processes:
            raise GridError(f"rank {rank} out of range")
        return divmod(rank, self.q)

    def block_shape(self, row, col):
        """Return (rows, cols) of the block held at grid position (row, col)."""
        return block_size(row, self.q, self.dim), block_size(col, self.q, self.dim)

    def _span(self, position):
        return range(block_low(position, self.q, self.dim), block_high(position, self.q, self.dim) + 1)

    def scatter(self, matrix):
        """Split a full matrix into blocks, one per rank."""
        if len(matrix) != self.dim or any(len(row) != self.dim for row in matrix):
            raise GridError(f"matrix must be {self.dim} x {self.dim}")
        blocks = []
        for rank in range(self.processes):
            row, col = self.coords(rank)
            cols = self._span(col)
            blocks.append([list(matrix[i][cols.start:cols.stop]) for i in self._span(row)])
        return blocks

    def gather(self, blocks):
        """Reassemble the full matrix from blocks, one per rank."""
        if len(blocks) != self.processes:
            raise GridError(f"expected {self.processes} blocks, got {len(blocks)}")
        matrix = [[] for _ in range(self.dim)]
        for rank, block in enumerate(blocks):
            row, col = self.coords(rank)
            rows, cols = self.block_shape(row, col)
            if len(block) != rows or any(len(line) != cols for line in block):
                raise GridError(f"block of rank {rank} must be {rows} x {cols}")
            for i, line in zip(self._span(row), block):
                matrix[i].extend(line)
        return matrix


def floyd(grid, blocks):
    """Run Floyd's all-pairs shortest paths over the grid's blocks.

    Returns new blocks; the ones passed in are left unchanged.
    """
    if len(blocks) != grid.processes:
        raise GridError(f"expected {grid.processes} blocks, got {len(blocks)}")
    q, n = grid.q, grid.dim
    result = [[list(line) for line in block] for block in blocks]
    for k in range(n):
        root = block_owner(k, q, n)
        local = k - block_low(root, q, n)
        col_vectors = [[line[local] for line in result[r * q + root]] for r in range(q)]
        row_vectors = [list(result[root * q + c][local]) for c in range(q)]
        for rank, block in enumerate(result):
            r, c = divmod(rank, q)
            row_vector = row_vectors[c]
            for line, via in zip(block, col_vectors[r]):
                line[:] = [min(d, via + w) for d, w in zip(line, row_vector)]
    return result