import jax.numpy as jnp
import pytest

from rootflip.trees.generator import RootedTreeGenerator
from rootflip.trees.level_sequences import (
    enumerate_level_forest,
    iter_level_sequences,
    levels_to_parent,
    next_level_sequence,
)
from tests.conftest import A000081


def _check_preorder_parent_array(arr: jnp.ndarray) -> None:
    assert arr.dtype == jnp.int32, f"Expected dtype int32, got {arr.dtype}"
    n = int(arr.shape[0])
    assert int(arr[0]) == -1, f"Root parent must be -1, got {int(arr[0])}"
    for i in range(1, n):
        assert 0 <= int(arr[i]) < i, f"Parent at index {i} must be in [0, {i}), got {int(arr[i])}"


def test_levels_to_parent() -> None:
    assert levels_to_parent([1]) == [-1]
    assert levels_to_parent([1, 2, 3, 4]) == [-1, 0, 1, 2]
    assert levels_to_parent([1, 2, 2, 2]) == [-1, 0, 0, 0]
    assert levels_to_parent([1, 2, 3, 2]) == [-1, 0, 1, 0]


def test_successor_sequence_for_four_nodes() -> None:
    assert list(iter_level_sequences(4)) == [
        [1, 2, 3, 4],
        [1, 2, 3, 3],
        [1, 2, 3, 2],
        [1, 2, 2, 2],
    ]
    assert next_level_sequence([1, 2, 2, 2]) is None


@pytest.mark.parametrize("n", sorted(A000081))
def test_level_forest_counts(n: int) -> None:
    forest = enumerate_level_forest(n)
    assert forest.size == A000081[n]
    assert forest.order == n
    for i in range(min(forest.size, 50)):
        _check_preorder_parent_array(forest.parent[i])


@pytest.mark.parametrize("n", range(1, 10))
def test_level_forest_matches_partition_generator(n: int) -> None:
    from_levels = {tree.canonical() for tree in enumerate_level_forest(n).trees()}
    from_partitions = {tree.canonical() for tree in RootedTreeGenerator().generate(n)}
    assert from_levels == from_partitions


def test_non_positive_order_rejected() -> None:
    assert list(iter_level_sequences(0)) == []
    with pytest.raises(ValueError):
        enumerate_level_forest(0)
