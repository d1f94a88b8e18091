"""Enumeration of rooted trees by canonical level sequences.

A level sequence lists node depths (root at depth 1) in preorder. Every
rooted unordered tree has one canonical level sequence, the lexicographically
largest over all child orderings. Starting from the path ``[1, 2, ..., n]``,
the Beyer-Hedetniemi successor steps through all canonical sequences in
decreasing order and stops at the star ``[1, 2, ..., 2]``.

This enumeration shares nothing with the partition-based generator and is
used to cross-check it.
https://combinatorialpress.com/jcmcc-articles/volume-076/an-application-of-level-sequences-to-parallel-generation-of-rootedtrees/
"""

from typing import Iterator
import jax.numpy as jnp
from rootflip.trees.forest_types import Forest


def levels_to_parent(levels: list[int]) -> list[int]:
    """Convert a level sequence to a preorder parent array.

    Args:
        levels: depths ``L[0..n-1]`` in preorder with ``L[0] == 1``.

    Returns:
        ``parent`` with ``parent[0] == -1`` and ``0 <= parent[i] < i``.
    """
    parent: list[int] = [-1] * len(levels)
    ancestors: list[int] = []
    for i, depth in enumerate(levels):
        # Keep only the ancestors strictly above this depth.
        del ancestors[depth - 1 :]
        if ancestors:
            parent[i] = ancestors[-1]
        ancestors.append(i)
    return parent


def next_level_sequence(levels: list[int]) -> list[int] | None:
    """Beyer-Hedetniemi successor, or ``None`` once the star is reached."""
    n = len(levels)
    p = next((i for i in range(n - 1, -1, -1) if levels[i] > 2), -1)
    if p == -1:
        return None
    q = next(i for i in range(p - 1, -1, -1) if levels[i] == levels[p] - 1)
    period = p - q
    successor = levels[:]
    for i in range(p, n):
        successor[i] = successor[i - period]
    return successor


def iter_level_sequences(n: int) -> Iterator[list[int]]:
    """Yield every canonical level sequence with ``n`` nodes, largest first."""
    if n <= 0:
        return
    levels: list[int] | None = list(range(1, n + 1))
    while levels is not None:
        yield levels
        levels = next_level_sequence(levels)


def enumerate_level_forest(n: int) -> Forest:
    """All rooted trees with ``n`` nodes as a ``Forest``.

    Rows follow decreasing lexicographic order of the canonical level
    sequences, so the first row is the path and the last the star.
    """
    if n <= 0:
        raise ValueError(f"n must be >= 1, got {n}.")
    rows = [levels_to_parent(levels) for levels in iter_level_sequences(n)]
    return Forest(parent=jnp.asarray(rows, dtype=jnp.int32))
