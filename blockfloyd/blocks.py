"""Block decomposition of an index range among processes."""


def block_low(rank, p, n):
    """Return the first index owned by ``rank`` when ``n`` items are split among ``p``."""
    return rank * n // p


def block_high(rank, p, n):
    """Return the last index owned by ``rank``."""
    return block_low(rank + 1, p, n) - 1


def block_size(rank, p, n):
    """Return how many indices ``rank`` owns."""
    return block_high(rank, p, n) - block_low(rank, p, n) + 1


def block_owner(index, p, n):
    """Return the rank that owns ``index``."""
    return (p * (index + 1) - 1) // n