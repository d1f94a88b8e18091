import pytest
from pytest_benchmark.fixture import BenchmarkFixture

from rootflip.flip.flip_transform import (
    OrderSummary,
    cluster_count,
    group_into_clusters,
    summarize,
    verify,
)
from rootflip.flip.unrooted import unrooted_canonical
from rootflip.trees.generator import RootedTreeGenerator
from rootflip.trees.tree_types import RootedTree
from tests.conftest import A000055, A000081, BENCH_CLUSTER_CASES, benchmark_wrapper


@pytest.mark.parametrize("n", sorted(A000055))
def test_cluster_counts(generator: RootedTreeGenerator, n: int) -> None:
    clusters = group_into_clusters(generator.generate(n))
    assert len(clusters) == A000055[n], (
        f"For n={n}, expected {A000055[n]} clusters, got {len(clusters)}"
    )


@pytest.mark.parametrize("n", range(1, 9))
def test_clusters_partition_the_input(generator: RootedTreeGenerator, n: int) -> None:
    trees = generator.generate(n)
    clusters = group_into_clusters(trees)
    members = [tree for cluster in clusters for tree in cluster]
    assert len(members) == len(trees)
    assert {id(tree) for tree in members} == {id(tree) for tree in trees}
    assert all(cluster for cluster in clusters)


@pytest.mark.parametrize("n", range(1, 8))
def test_clusters_are_unrooted_classes(generator: RootedTreeGenerator, n: int) -> None:
    clusters = group_into_clusters(generator.generate(n))
    forms = [{unrooted_canonical(tree) for tree in cluster} for cluster in clusters]
    assert all(len(f) == 1 for f in forms)
    assert len(set().union(*forms)) == len(clusters)


def test_three_nodes_form_one_cluster(generator: RootedTreeGenerator) -> None:
    trees = generator.generate(3)
    assert {t.canonical() for t in trees} == {"((()))", "(()())"}
    clusters = group_into_clusters(trees)
    assert len(clusters) == 1
    assert len(clusters[0]) == 2


def test_four_nodes_form_path_and_star(generator: RootedTreeGenerator) -> None:
    clusters = group_into_clusters(generator.generate(4))
    sizes = sorted(len(cluster) for cluster in clusters)
    # The path has two distinct rootings (end, inner); the star has two (centre, leaf).
    assert sizes == [2, 2]


def test_five_nodes_give_three_clusters(generator: RootedTreeGenerator) -> None:
    trees = generator.generate(5)
    assert len(trees) == 9
    clusters = group_into_clusters(trees)
    assert len(clusters) == 3
    # Path: 3 rootings, spider: 4 rootings, star: 2 rootings.
    assert sorted(len(cluster) for cluster in clusters) == [2, 3, 4]


def test_mixed_sizes_never_share_a_cluster() -> None:
    trees = [
        RootedTree.from_canonical("((()))"),
        RootedTree.from_canonical("(())"),
        RootedTree.from_canonical("(()())"),
        RootedTree.leaf(),
    ]
    clusters = group_into_clusters(trees)
    assert len(clusters) == 3
    for cluster in clusters:
        assert len({tree.node_count() for tree in cluster}) == 1


def test_empty_input() -> None:
    assert group_into_clusters([]) == []


def test_cluster_count(generator: RootedTreeGenerator) -> None:
    assert cluster_count(6, generator) == A000055[6]
    assert cluster_count(0, generator) == 0


def test_verify(generator: RootedTreeGenerator) -> None:
    assert verify(8, generator)
    with pytest.raises(ValueError):
        verify(12, generator)


def test_summarize(generator: RootedTreeGenerator) -> None:
    summary = summarize(5, generator)
    assert isinstance(summary, OrderSummary)
    assert summary.order == 5
    assert summary.term_count == A000081[5]
    assert summary.cluster_count == A000055[5]
    assert sum(summary.cluster_sizes) == summary.term_count
    assert len(set(summary.canonicals)) == summary.term_count


@pytest.mark.benchmark(group="clustering")
@pytest.mark.parametrize("n", BENCH_CLUSTER_CASES)
def test_clustering_benchmark(
    benchmark: BenchmarkFixture, generator: RootedTreeGenerator, n: int
) -> None:
    """Benchmark grouping a full generation into unrooted classes."""
    trees = generator.generate(n)
    clusters = benchmark_wrapper(benchmark, group_into_clusters, trees)
    assert len(clusters) == A000055[n]
