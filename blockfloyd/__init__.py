"""Block-partitioned Floyd-Warshall all-pairs shortest paths on a simulated square process grid."""

__version__ = "0.1.0"