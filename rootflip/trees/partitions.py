"""Integer partitions in non-increasing order.

A partition of ``n`` lists positive parts ``p_1 >= p_2 >= ... >= p_m`` with
``sum(p) == n``. Keeping the parts non-increasing means each multiset of parts
appears once, and equal parts always sit next to each other. Tree generation
relies on that adjacency.
"""

from typing import Iterator


def iter_partitions(n: int, max_part: int | None = None) -> Iterator[tuple[int, ...]]:
    """Yield the partitions of ``n`` with every part at most ``max_part``.

    Partitions come out in reverse lexicographic order, e.g. for ``n = 4``:
    ``(4,)``, ``(3, 1)``, ``(2, 2)``, ``(2, 1, 1)``, ``(1, 1, 1, 1)``.
    ``n == 0`` yields the empty partition once; ``n < 0`` yields nothing.
    """
    if n < 0:
        return
    if max_part is None or max_part > n:
        max_part = n
    if n == 0:
        yield ()
        return
    for part in range(max_part, 0, -1):
        for rest in iter_partitions(n - part, part):
            yield (part,) + rest


def integer_partitions(n: int) -> list[tuple[int, ...]]:
    """All partitions of ``n`` as a list; see ``iter_partitions``."""
    return list(iter_partitions(n))
