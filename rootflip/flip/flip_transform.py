"""Flip transform: rooted trees grouped into unrooted equivalence classes.

Every rooted tree with ``n`` nodes is a rooting of some unrooted tree with
``n`` nodes. Grouping the A000081(n) rooted trees by unrooted canonical form
gives A000055(n) clusters.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Iterable
from rootflip.flip.unrooted import unrooted_canonical
from rootflip.oeis import A000055, A000081
from rootflip.trees.generator import RootedTreeGenerator, default_generator
from rootflip.trees.tree_types import RootedTree

logger = logging.getLogger(__name__)

Cluster = list[RootedTree]


@dataclass(frozen=True)
class OrderSummary:
    """Rooted and unrooted counts for one order.

    ``canonicals`` follows generation order; ``cluster_sizes`` follows the
    order of ``group_into_clusters``.
    """

    order: int
    term_count: int
    cluster_count: int
    canonicals: tuple[str, ...]
    cluster_sizes: tuple[int, ...]


def group_into_clusters(trees: Iterable[RootedTree]) -> list[Cluster]:
    """Partition ``trees`` into classes of unrooted-isomorphic trees.

    Clusters appear in order of their first member; members keep input order.
    Trees of different sizes never share a cluster.
    """
    start = time.perf_counter()
    by_form: dict[str, Cluster] = {}
    count = 0
    for tree in trees:
        by_form.setdefault(unrooted_canonical(tree), []).append(tree)
        count += 1
    logger.debug(
        "Grouped %d trees into %d clusters in %.4fs.",
        count,
        len(by_form),
        time.perf_counter() - start,
    )
    return list(by_form.values())


def cluster_count(n: int, generator: RootedTreeGenerator | None = None) -> int:
    """Number of unrooted trees with ``n`` nodes, computed by clustering."""
    gen = generator if generator is not None else default_generator()
    return len(group_into_clusters(gen.generate(n)))


def verify(max_n: int = 6, generator: RootedTreeGenerator | None = None) -> bool:
    """Check generation and clustering against A000081 and A000055 for ``1..max_n``."""
    if max_n >= len(A000081):
        raise ValueError(
            f"Reference counts are tabulated up to n={len(A000081) - 1}, got max_n={max_n}."
        )
    gen = generator if generator is not None else default_generator()
    for n in range(1, max_n + 1):
        trees = gen.generate(n)
        if len(trees) != A000081[n]:
            logger.warning(
                "Order %d: generated %d rooted trees, expected %d.", n, len(trees), A000081[n]
            )
            return False
        clusters = group_into_clusters(trees)
        if len(clusters) != A000055[n]:
            logger.warning(
                "Order %d: found %d clusters, expected %d.", n, len(clusters), A000055[n]
            )
            return False
    return True


def summarize(n: int, generator: RootedTreeGenerator | None = None) -> OrderSummary:
    """Term count, cluster count, canonical forms and cluster sizes for order ``n``."""
    gen = generator if generator is not None else default_generator()
    trees = gen.generate(n)
    clusters = group_into_clusters(trees)
    return OrderSummary(
        order=n,
        term_count=len(trees),
        cluster_count=len(clusters),
        canonicals=tuple(tree.canonical() for tree in trees),
        cluster_sizes=tuple(len(cluster) for cluster in clusters),
    )
