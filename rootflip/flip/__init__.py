"""Flip transform from rooted trees to unrooted equivalence classes.

Exports
- ``unrooted_canonical``: smallest canonical form over all re-rootings.
- ``UnrootedTree``: an equivalence class with one rooted representative.
- ``group_into_clusters``: partition rooted trees by unrooted equivalence.
"""

from rootflip.flip.unrooted import UnrootedTree, unrooted_canonical
from rootflip.flip.flip_transform import (
    Cluster,
    OrderSummary,
    cluster_count,
    group_into_clusters,
    summarize,
    verify,
)

__all__ = [
    "UnrootedTree",
    "unrooted_canonical",
    "Cluster",
    "OrderSummary",
    "cluster_count",
    "group_into_clusters",
    "summarize",
    "verify",
]
