# blockfloyd

Computes all-pairs shortest paths on a weighted directed graph with the
Floyd–Warshall algorithm. The matrix is split in a checkerboard pattern over a
square grid of processes. For each pivot, every block is updated from the
pivot row and the pivot column that pass through it.

## Installation

```
pip install .
```

## Matrix files

A matrix file is binary and little-endian. It starts with the matrix
dimension as a signed 8-byte integer. Then come `dim × dim` signed 4-byte
weights in row-major order. A diagonal entry is `0`. A missing edge is stored
as the "infinity" value `(2**31 - 1) // 2`, available as
`blockfloyd.matrixfile.INF`, and is printed as `INF`.

## Commands

### Generating a matrix

`blockfloyd-generate` writes a random adjacency matrix with at least 3
vertices:

```
blockfloyd-generate 8 graph.bin
blockfloyd-generate 8 graph.bin 20
```

Each off-diagonal weight is drawn from 1 to the maximum weight, which
defaults to 9. Each edge has a probability of `1 / (max weight + 1)` of being
left missing. Matrices of at most 32 vertices are printed to standard output.
Exit codes:

- `1` for a wrong number of arguments.
- `2` for an invalid size or maximum weight.
- `3` when the file cannot be written.

### Solving a matrix

`blockfloyd` computes all-pairs shortest paths for a matrix file:

```
blockfloyd graph.bin
blockfloyd graph.bin --processes 4
```

`-p/--processes` sets the number of grid processes. It defaults to 1 and must
be a perfect square no larger than the square of the matrix dimension (the
grid side may not exceed the dimension).

All output goes to standard error. The computation time is always reported.
For matrices of at most 32 vertices, the input matrix and the resulting
distance matrix are printed as well. Exit codes:

- `2` for a bad process count.
- `3` when the file is missing or malformed.

## Library use

```python
import random
from blockfloyd.matrixfile import generate_matrix, write_matrix, read_matrix, format_matrix
from blockfloyd.grid import ProcessGrid, floyd

matrix = generate_matrix(6, 9, random.Random(1))
write_matrix("graph.bin", matrix)

matrix = read_matrix("graph.bin")
grid = ProcessGrid(4, len(matrix))      # a 2 x 2 process grid
blocks = grid.scatter(matrix)           # one block per rank, row-major
blocks = floyd(grid, blocks)            # returns new blocks
print(format_matrix(grid.gather(blocks)))
```

### Modules

`blockfloyd.blocks` provides the block decomposition helpers `block_low`,
`block_high`, `block_size` and `block_owner`.

`blockfloyd.grid` provides the following:

- `square_side` checks that a process count is a perfect square and returns
  its root.
- `ProcessGrid` offers `coords`, `block_shape`, `scatter` and `gather`.
- `floyd` runs the blocked algorithm.
- `GridError` reports an invalid grid, block count or block shape.

`blockfloyd.matrixfile` provides the following:

- `read_matrix`, `write_matrix`, `generate_matrix`, `format_row` and
  `format_matrix`.
- `MatrixFileError` for missing, truncated or malformed files.

## What it does not do

The grid is simulated. All blocks live in a single Python process, and
`floyd` updates them one after another. No work is spread over separate
processes or machines, so `--processes` changes how the matrix is
partitioned, not how fast it is solved.