"""Re-rooting a tree at any of its nodes.

Re-rooting keeps the underlying unrooted tree and moves the root. Along the
path ``[target, parent(target), ..., old_root]`` the parent/child links are
reversed: each path node becomes the last child of the node before it and
keeps copies of its other children. Everything off the path is copied as is.
"""

from __future__ import annotations
from typing import Iterator
from rootflip.trees.tree_types import RootedTree, TreeNode


def _path_to_root(tree: RootedTree, target: TreeNode) -> list[TreeNode]:
    path: list[TreeNode] = []
    node: TreeNode | None = target
    while node is not None:
        path.append(node)
        node = node.parent
    if path[-1] is not tree.root():
        raise ValueError(f"{target!r} does not belong to {tree!r}.")
    return path


def reroot_with_origin(tree: RootedTree, target: TreeNode) -> tuple[RootedTree, TreeNode]:
    """Re-root ``tree`` at ``target``.

    Returns:
        The new tree and its node standing where the old root stood, so that
        re-rooting the result at that node recovers the original shape.

    Raises:
        ValueError: if ``target`` is not a node of ``tree``.
    """
    path = _path_to_root(tree, target)
    # Build from the old root down to the target; each level adopts the
    # previously built chain as its last child.
    chain: TreeNode | None = None
    origin: TreeNode | None = None
    for idx in range(len(path) - 1, -1, -1):
        node = path[idx]
        skip = path[idx - 1] if idx > 0 else None
        children = [child.clone() for child in node.children if child is not skip]
        if chain is not None:
            children.append(chain)
        chain = TreeNode(children)
        if origin is None:
            origin = chain
    assert chain is not None and origin is not None
    return RootedTree(chain), origin


def reroot_at(tree: RootedTree, target: TreeNode) -> RootedTree:
    """A new tree, unrooted-isomorphic to ``tree``, rooted at ``target``.

    Re-rooting at the current root returns a copy.
    """
    rerooted, _ = reroot_with_origin(tree, target)
    return rerooted


def reroot_at_index(tree: RootedTree, index: int) -> RootedTree:
    """Re-root at the node with preorder position ``index``."""
    nodes = tree.all_nodes()
    if not 0 <= index < len(nodes):
        raise ValueError(f"Node index {index} outside range [0, {len(nodes) - 1}].")
    return reroot_at(tree, nodes[index])


def all_rerootings(tree: RootedTree) -> Iterator[RootedTree]:
    """Yield ``tree`` re-rooted at each of its nodes, in preorder."""
    for node in tree.all_nodes():
        yield reroot_at(tree, node)
