"""Enumeration of rooted unordered trees from partitions of subtree sizes.

A rooted tree with ``n`` nodes is a root over a multiset of subtrees whose
sizes form a partition of ``n - 1``. For every partition (parts in
non-increasing order) we pick one already-enumerated tree per part. Where a
part equals the part before it, its pick must not come earlier in the list of
trees of that size than the previous pick, so each multiset of subtrees is
built exactly once. A canonical-form check guards the result.

Results are memoized per order in a ``TreeCache`` owned by the generator.
"""

from __future__ import annotations
import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Iterator, Sequence
from rootflip.config import EnumerationConfig
from rootflip.trees.forest_types import Forest
from rootflip.trees.partitions import iter_partitions
from rootflip.trees.tree_types import RootedTree

logger = logging.getLogger(__name__)


class TreeCache:
    """Generated trees keyed by order.

    All access goes through a re-entrant lock, since generating one order
    reads the entries of every smaller order while holding it.
    """

    def __init__(self) -> None:
        self._trees: dict[int, tuple[RootedTree, ...]] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def get(self, n: int) -> tuple[RootedTree, ...] | None:
        with self._lock:
            return self._trees.get(n)

    def put(self, n: int, trees: Sequence[RootedTree]) -> None:
        with self._lock:
            self._trees[n] = tuple(trees)

    def clear(self) -> None:
        with self._lock:
            self._trees.clear()

    def orders(self) -> list[int]:
        """Orders currently cached, ascending."""
        with self._lock:
            return sorted(self._trees)

    def __contains__(self, n: object) -> bool:
        with self._lock:
            return n in self._trees

    def __len__(self) -> int:
        with self._lock:
            return len(self._trees)


def _index_selections(
    set_sizes: Sequence[int], partition: Sequence[int]
) -> Iterator[tuple[int, ...]]:
    """Yield one index per part into that part's list of trees.

    Indices never decrease across a run of equal parts. This relies on equal
    parts being adjacent, which holds for non-increasing partitions.
    """
    indices = [0] * len(partition)

    def select(pos: int) -> Iterator[tuple[int, ...]]:
        if pos == len(partition):
            yield tuple(indices)
            return
        start = indices[pos - 1] if pos > 0 and partition[pos] == partition[pos - 1] else 0
        for i in range(start, set_sizes[pos]):
            indices[pos] = i
            yield from select(pos + 1)

    yield from select(0)


@dataclass(frozen=True, eq=False)
class RootedTreeGenerator:
    """Enumerates all rooted trees of a given order, A000081(n) of them.

    Each generator owns its cache unless one is passed in, so separate
    generators never share results.
    """

    cache: TreeCache = field(default_factory=TreeCache)
    config: EnumerationConfig = field(default_factory=EnumerationConfig)

    def generate(self, n: int) -> list[RootedTree]:
        """All pairwise non-isomorphic rooted trees with ``n`` nodes.

        Returns an empty list for ``n <= 0``.
        """
        return list(self._trees_of_order(n))

    def generate_up_to(self, max_n: int) -> list[list[RootedTree]]:
        """Trees for every order ``1..max_n``; entry ``n - 1`` holds order ``n``."""
        return [self.generate(n) for n in range(1, max_n + 1)]

    def generate_forest(self, n: int) -> Forest:
        """The trees of order ``n`` as a batch of parent arrays."""
        if n <= 0:
            raise ValueError(f"n must be >= 1, got {n}.")
        return Forest.from_trees(self._trees_of_order(n))

    def _trees_of_order(self, n: int) -> tuple[RootedTree, ...]:
        if n <= 0:
            return ()
        with self.cache.lock:
            cached = self.cache.get(n)
            if cached is not None:
                return cached
            if n > self.config.practical_max_order:
                logger.warning(
                    "Enumerating rooted trees of order %d beyond the practical limit %d; "
                    "this may be slow.",
                    n,
                    self.config.practical_max_order,
                )
            start = time.perf_counter()
            trees = self._build(n)
            self.cache.put(n, trees)
        logger.debug(
            "Generated %d rooted trees of order %d in %.4fs.",
            len(trees),
            n,
            time.perf_counter() - start,
        )
        return trees

    def _build(self, n: int) -> tuple[RootedTree, ...]:
        if n == 1:
            return (RootedTree.leaf(),)
        kept: list[RootedTree] = []
        seen: set[str] = set()
        duplicates = 0
        for partition in iter_partitions(n - 1):
            subtree_sets = [self._trees_of_order(part) for part in partition]
            set_sizes = [len(trees) for trees in subtree_sets]
            for selection in _index_selections(set_sizes, partition):
                tree = RootedTree.from_subtrees(
                    [subtree_sets[pos][idx] for pos, idx in enumerate(selection)]
                )
                if self.config.deduplicate:
                    form = tree.canonical()
                    if form in seen:
                        duplicates += 1
                        continue
                    seen.add(form)
                kept.append(tree)
        if duplicates:
            logger.debug("Dropped %d duplicate candidates at order %d.", duplicates, n)
        return tuple(kept)


_default_generator = RootedTreeGenerator()


def default_generator() -> RootedTreeGenerator:
    """The generator behind the module-level ``generate``."""
    return _default_generator


def generate(n: int) -> list[RootedTree]:
    """All rooted trees with ``n`` nodes, using the default generator's cache."""
    return _default_generator.generate(n)
