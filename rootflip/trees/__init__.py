"""Rooted unordered trees: representation, canonical forms and enumeration.

Exports
- ``RootedTree`` / ``TreeNode``: immutable rooted trees.
- ``canonical``: child-order independent string form.
- ``RootedTreeGenerator`` / ``generate``: all rooted trees with n nodes.
- ``reroot_at``: the same unrooted tree rooted elsewhere.
- ``Forest``: batched parent arrays.
"""

from rootflip.trees.tree_types import RootedTree, TreeNode
from rootflip.trees.canonical import canonical, parse_canonical
from rootflip.trees.forest_types import Forest
from rootflip.trees.generator import RootedTreeGenerator, TreeCache, generate
from rootflip.trees.reroot import (
    all_rerootings,
    reroot_at,
    reroot_at_index,
    reroot_with_origin,
)

__all__ = [
    "RootedTree",
    "TreeNode",
    "canonical",
    "parse_canonical",
    "Forest",
    "RootedTreeGenerator",
    "TreeCache",
    "generate",
    "all_rerootings",
    "reroot_at",
    "reroot_at_index",
    "reroot_with_origin",
]
