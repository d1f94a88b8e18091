"""Unrooted equivalence of rooted trees.

Two rooted trees are unrooted-equivalent when re-rooting one of them yields
the other. The unrooted canonical form of a tree is the smallest canonical
form over its re-rootings at every node; equivalent trees share it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import override
from rootflip.trees.reroot import all_rerootings
from rootflip.trees.tree_types import RootedTree


def unrooted_canonical(tree: RootedTree) -> str:
    """Smallest canonical form over all re-rootings of ``tree``.

    Costs one re-rooting and one canonicalization per node.
    """
    return min(rerooted.canonical() for rerooted in all_rerootings(tree))


@dataclass(frozen=True, eq=False)
class UnrootedTree:
    """An unrooted tree, described by one rooted representative.

    Equality, hashing and ordering use ``canonical``, the unrooted canonical
    form, so any representative of the class compares equal.
    """

    representative: RootedTree
    canonical: str

    @classmethod
    def of(cls, tree: RootedTree) -> UnrootedTree:
        return cls(representative=tree, canonical=unrooted_canonical(tree))

    @staticmethod
    def same_class(a: RootedTree, b: RootedTree) -> bool:
        """Whether ``a`` and ``b`` are the same tree once the root is ignored."""
        if a.node_count() != b.node_count():
            return False
        return unrooted_canonical(a) == unrooted_canonical(b)

    def node_count(self) -> int:
        return self.representative.node_count()

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnrootedTree):
            return NotImplemented
        return self.canonical == other.canonical

    @override
    def __hash__(self) -> int:
        return hash(self.canonical)

    def __lt__(self, other: UnrootedTree) -> bool:
        return self.canonical < other.canonical
