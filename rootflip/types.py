"""Top level types for rootflip.

Public API:
- Trees: RootedTree, TreeNode, Forest
- Enumeration: RootedTreeGenerator, TreeCache, EnumerationConfig
- Flip transform: UnrootedTree, Cluster, OrderSummary
- Errors: InvalidTree
"""

from rootflip.trees.tree_types import RootedTree, TreeNode
from rootflip.trees.forest_types import Forest
from rootflip.trees.generator import RootedTreeGenerator, TreeCache
from rootflip.config import EnumerationConfig
from rootflip.flip.unrooted import UnrootedTree
from rootflip.flip.flip_transform import Cluster, OrderSummary
from rootflip.errors import InvalidTree

__all__ = [
    # Trees
    "RootedTree",
    "TreeNode",
    "Forest",
    # Enumeration
    "RootedTreeGenerator",
    "TreeCache",
    "EnumerationConfig",
    # Flip transform
    "UnrootedTree",
    "Cluster",
    "OrderSummary",
    # Errors
    "InvalidTree",
]
