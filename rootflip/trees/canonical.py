"""Canonical string forms of rooted trees.

A leaf is ``"()"``. An internal node is ``"("`` followed by the canonical forms
of its children, sorted as strings and concatenated, followed by ``")"``.
Sorting makes the form independent of child order, so two rooted trees are
isomorphic iff their canonical forms are equal.
"""

from __future__ import annotations
from rootflip.errors import InvalidTree
from rootflip.trees.tree_types import RootedTree, TreeNode


def node_canonical(root: TreeNode) -> str:
    """Canonical form of the subtree rooted at ``root``.

    Raises:
        InvalidTree: if a node is reached twice (the structure has a cycle or
            shares a subtree).
    """
    seen: set[int] = set()
    order: list[TreeNode] = []
    stack: list[TreeNode] = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            raise InvalidTree("Node reached twice while canonicalizing; not a tree.")
        seen.add(id(node))
        order.append(node)
        stack.extend(node.children)

    forms: dict[int, str] = {}
    for node in reversed(order):
        child_forms = sorted(forms.pop(id(child)) for child in node.children)
        forms[id(node)] = "(" + "".join(child_forms) + ")"
    return forms[id(root)]


def canonical(tree: RootedTree | TreeNode) -> str:
    """Canonical form of a tree, or of the subtree below a node."""
    if isinstance(tree, RootedTree):
        return tree.canonical()
    return node_canonical(tree)


def parse_canonical(text: str) -> RootedTree:
    """Inverse of ``canonical`` up to isomorphism.

    Any balanced parenthesis string is accepted; children are kept in the
    order they appear, so unsorted input yields an isomorphic tree whose
    canonical form is the sorted one.

    Raises:
        InvalidTree: on characters other than parentheses, unbalanced input,
            or text after the root closes.
    """
    if not text:
        raise InvalidTree("Cannot parse an empty canonical string.")
    stack: list[list[TreeNode]] = []
    root: TreeNode | None = None
    for pos, ch in enumerate(text):
        if root is not None:
            raise InvalidTree(f"Unexpected text after the root closes at position {pos}.")
        if ch == "(":
            stack.append([])
        elif ch == ")":
            if not stack:
                raise InvalidTree(f"Unbalanced ')' at position {pos}.")
            node = TreeNode(stack.pop())
            if stack:
                stack[-1].append(node)
            else:
                root = node
        else:
            raise InvalidTree(f"Unexpected character {ch!r} at position {pos}.")
    if root is None:
        raise InvalidTree(f"Unbalanced '(' in canonical string {text!r}.")
    return RootedTree(root)
