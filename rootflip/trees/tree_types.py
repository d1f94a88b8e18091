"""In-memory rooted trees.

A ``RootedTree`` owns one root ``TreeNode``; every node owns its children and
keeps a weak reference to its parent. Trees are built bottom-up and never
modified afterwards: copying, grafting and re-rooting always produce new
nodes.

Conventions
- Node ids are preorder positions assigned when the owning tree is built.
  They carry no meaning beyond telling nodes apart.
- Two trees are equal iff their canonical forms are equal.
"""

from __future__ import annotations
import weakref
from typing import Iterator, Sequence, override
from rootflip.errors import InvalidTree


class TreeNode:
    """A node of a rooted tree.

    Children are fixed at construction. Attaching a node that already has a
    parent, or that roots a live ``RootedTree``, raises ``InvalidTree`` and
    leaves every child untouched; use ``clone`` to reuse a subtree.
    """

    __slots__ = ("_id", "_children", "_parent", "_owner", "__weakref__")

    def __init__(self, children: Sequence[TreeNode] = ()) -> None:
        self._id = -1
        self._parent: weakref.ref[TreeNode] | None = None
        self._owner: weakref.ref[RootedTree] | None = None
        self._children: tuple[TreeNode, ...] = tuple(children)
        seen: set[int] = set()
        for child in self._children:
            if id(child) in seen:
                raise InvalidTree("The same node cannot be attached twice.")
            seen.add(id(child))
            if child.parent is not None:
                raise InvalidTree("Node already has a parent; clone it before attaching.")
            if child.owner is not None:
                raise InvalidTree("Node is the root of a tree; clone it before attaching.")
        for child in self._children:
            child._parent = weakref.ref(self)

    @property
    def id(self) -> int:
        return self._id

    @property
    def children(self) -> tuple[TreeNode, ...]:
        return self._children

    @property
    def parent(self) -> TreeNode | None:
        return self._parent() if self._parent is not None else None

    @property
    def owner(self) -> RootedTree | None:
        """The live tree this node is the root of, if any."""
        return self._owner() if self._owner is not None else None

    @property
    def is_leaf(self) -> bool:
        return not self._children

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def degree(self) -> int:
        """Number of children."""
        return len(self._children)

    @property
    def depth(self) -> int:
        """Number of edges between this node and the root."""
        d = 0
        node = self.parent
        while node is not None:
            d += 1
            node = node.parent
        return d

    def iter_preorder(self) -> Iterator[TreeNode]:
        """Yield this node and its descendants in preorder."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def subtree_size(self) -> int:
        return sum(1 for _ in self.iter_preorder())

    def clone(self) -> TreeNode:
        """Structural copy of the subtree rooted here, detached from any parent."""
        # Reversed preorder visits every child before its parent.
        built: dict[int, TreeNode] = {}
        for node in reversed(list(self.iter_preorder())):
            built[id(node)] = TreeNode([built.pop(id(child)) for child in node._children])
        return built[id(self)]

    @override
    def __repr__(self) -> str:
        return f"TreeNode(id={self._id}, degree={self.degree})"


def _number_preorder(root: TreeNode) -> int:
    """Assign preorder ids below ``root`` and return the node count."""
    seen: set[int] = set()
    count = 0
    for node in root.iter_preorder():
        if id(node) in seen:
            raise InvalidTree("Node reachable twice; the structure is not a tree.")
        seen.add(id(node))
        node._id = count
        count += 1
    return count


class RootedTree:
    """A rooted tree with unordered children.

    Example
    >>> tree = RootedTree.from_nested([[], [[]]])
    >>> tree.node_count()
    4
    >>> tree.canonical()
    '((())())'
    """

    __slots__ = ("_root", "_size", "_canonical", "__weakref__")

    def __init__(self, root: TreeNode | None = None) -> None:
        """Take ownership of ``root`` and its subtree.

        A root that already belongs to another live tree is cloned, so each
        tree owns its nodes exclusively.
        """
        if root is None:
            root = TreeNode()
        if root.parent is not None:
            raise InvalidTree("The root of a tree must not have a parent.")
        if root.owner is not None:
            root = root.clone()
        root._owner = weakref.ref(self)
        self._root = root
        self._size = _number_preorder(root)
        self._canonical: str | None = None

    @classmethod
    def leaf(cls) -> RootedTree:
        """The single-node tree."""
        return cls(TreeNode())

    @classmethod
    def from_subtrees(cls, subtrees: Sequence[RootedTree]) -> RootedTree:
        """Graft copies of ``subtrees`` under a fresh root."""
        return cls(TreeNode([tree.root().clone() for tree in subtrees]))

    @classmethod
    def from_nested(cls, shape: Sequence) -> RootedTree:
        """Build a tree from nested sequences, ``[]`` being a leaf.

        ``[[], [[]]]`` is a root with one leaf child and one child that has a
        single leaf child.
        """

        def build(sub: Sequence) -> TreeNode:
            return TreeNode([build(child) for child in sub])

        return cls(build(shape))

    @classmethod
    def from_canonical(cls, text: str) -> RootedTree:
        """Parse a canonical string such as ``"(()(()))"``."""
        from rootflip.trees.canonical import parse_canonical

        return parse_canonical(text)

    @classmethod
    def from_parent(cls, parent: Sequence[int]) -> RootedTree:
        """Build a tree from a preorder parent array.

        Args:
            parent: ``parent[0] == -1`` and ``0 <= parent[i] < i`` for ``i > 0``.
                Children keep increasing index order.

        Raises:
            InvalidTree: if the array violates the preorder convention.
        """
        values = [int(p) for p in parent]
        n = len(values)
        if n == 0:
            raise InvalidTree("A parent array must contain at least the root.")
        if values[0] != -1:
            raise InvalidTree(f"parent[0] must be -1 for the root, got {values[0]}.")
        children: list[list[int]] = [[] for _ in range(n)]
        for i in range(1, n):
            p = values[i]
            if not 0 <= p < i:
                raise InvalidTree(f"parent[{i}] must satisfy 0 <= parent[{i}] < {i}, got {p}.")
            children[p].append(i)
        nodes: dict[int, TreeNode] = {}
        for i in range(n - 1, -1, -1):
            nodes[i] = TreeNode([nodes.pop(c) for c in children[i]])
        return cls(nodes[0])

    def root(self) -> TreeNode:
        return self._root

    def node_count(self) -> int:
        return self._size

    def all_nodes(self) -> list[TreeNode]:
        """All nodes in preorder; the root comes first."""
        return list(self._root.iter_preorder())

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path."""
        best = 0
        stack: list[tuple[TreeNode, int]] = [(self._root, 0)]
        while stack:
            node, d = stack.pop()
            best = max(best, d)
            stack.extend((child, d + 1) for child in node.children)
        return best

    def canonical(self) -> str:
        if self._canonical is None:
            from rootflip.trees.canonical import node_canonical

            self._canonical = node_canonical(self._root)
        return self._canonical

    def copy(self) -> RootedTree:
        return RootedTree(self._root.clone())

    def parent_array(self) -> list[int]:
        """Preorder parent array with ``-1`` for the root."""
        out: list[int] = []
        for node in self._root.iter_preorder():
            parent = node.parent
            out.append(-1 if parent is None else parent.id)
        return out

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RootedTree):
            return NotImplemented
        return self.canonical() == other.canonical()

    @override
    def __hash__(self) -> int:
        return hash(self.canonical())

    def __lt__(self, other: RootedTree) -> bool:
        return self.canonical() < other.canonical()

    @override
    def __repr__(self) -> str:
        return f"RootedTree({self.canonical()!r})"
