"""Reference counts from the OEIS.

- A000081: number of rooted trees with n unlabeled nodes. https://oeis.org/A000081
- A000055: number of unrooted trees with n unlabeled nodes. https://oeis.org/A000055

Both tables are indexed by ``n``.
"""

A000081: tuple[int, ...] = (0, 1, 1, 2, 4, 9, 20, 48, 115, 286, 719, 1842)
A000055: tuple[int, ...] = (1, 1, 1, 1, 2, 3, 6, 11, 23, 47, 106, 235)


def a000081(n: int) -> int:
    """Number of rooted trees with ``n`` nodes, or 0 outside the table."""
    if n < 0 or n >= len(A000081):
        return 0
    return A000081[n]


def a000055(n: int) -> int:
    """Number of unrooted trees with ``n`` nodes, or 0 outside the table."""
    if n < 0 or n >= len(A000055):
        return 0
    return A000055[n]
