from __future__ import annotations
from typing import NamedTuple, Sequence
import jax.numpy as jnp
import numpy as np
from rootflip.trees.tree_types import RootedTree


class Forest(NamedTuple):
    """A batch of rooted trees of one order, stored as parent arrays.

    Parameters
    - parent: 2D array of shape ``(num_trees, n)`` with dtype ``int32``.
      Each row encodes one rooted tree via its parent array in preorder:
      ``parent[0] == -1`` and for ``i > 0`` we have ``0 <= parent[i] < i``.

    Example
    >>> import jax.numpy as jnp
    >>> forest = Forest(parent=jnp.array([[-1, 0, 0], [-1, 0, 1]], dtype=jnp.int32))
    >>> forest.order, forest.size
    (3, 2)
    """

    parent: jnp.ndarray

    @property
    def order(self) -> int:
        """Number of nodes in each tree of the forest."""
        return int(self.parent.shape[1])

    @property
    def size(self) -> int:
        """Number of trees in the forest."""
        return int(self.parent.shape[0])

    @classmethod
    def from_trees(cls, trees: Sequence[RootedTree]) -> Forest:
        """Stack the parent arrays of ``trees``, which must share one order."""
        if not trees:
            raise ValueError("Cannot build a Forest from an empty sequence of trees.")
        order = trees[0].node_count()
        rows: list[list[int]] = []
        for idx, tree in enumerate(trees):
            if tree.node_count() != order:
                raise ValueError(
                    f"All trees in a Forest must have {order} nodes; "
                    f"tree {idx} has {tree.node_count()}."
                )
            rows.append(tree.parent_array())
        return cls(parent=jnp.asarray(rows, dtype=jnp.int32))

    def trees(self) -> list[RootedTree]:
        """Rebuild one ``RootedTree`` per row."""
        host = np.asarray(self.parent, dtype=np.int32)
        if host.ndim != 2:
            raise ValueError(f"Forest.parent must be 2D, got shape {host.shape}.")
        return [RootedTree.from_parent(row.tolist()) for row in host]
