import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.graph import Graph


def _sample_graph() -> Graph:
    graph = Graph(6)
    for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (5, 4), (5, 1)]:
        graph.add_edge(u, v)
    return graph


def test_bfs_of_sample_graph():
    assert _sample_graph().bfs(0) == [0, 1, 2, 3, 4, 5]


def test_dfs_of_sample_graph():
    assert _sample_graph().dfs(0) == [0, 2, 5, 4, 1, 3]


def test_single_vertex_traversals():
    graph = Graph(1)
    assert graph.bfs(0) == [0]
    assert graph.dfs(0) == [0]


def test_traversal_stays_in_component():
    graph = Graph(4)
    graph.add_edge(0, 1)
    graph.add_edge(2, 3)
    assert sorted(graph.bfs(0)) == [0, 1]
    assert sorted(graph.dfs(3)) == [2, 3]


def test_edges_are_undirected():
    graph = Graph(2)
    graph.add_edge(1, 0)
    assert graph.bfs(0) == [0, 1]
    assert graph.dfs(1) == [1, 0]


def test_bad_start_raises():
    graph = Graph(3)
    with pytest.raises(IndexError):
        graph.bfs(3)
    with pytest.raises(IndexError):
        graph.dfs(-1)


def test_bad_edge_raises():
    graph = Graph(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 5)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Graph(-1)


@given(
    st.integers(min_value=1, max_value=12).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.lists(
                st.tuples(
                    st.integers(min_value=0, max_value=n - 1),
                    st.integers(min_value=0, max_value=n - 1),
                ),
                max_size=30,
            ),
        )
    )
)
def test_bfs_and_dfs_reach_same_vertices(data):
    size, edges = data
    graph = Graph(size)
    for u, v in edges:
        graph.add_edge(u, v)
    breadth = graph.bfs(0)
    depth = graph.dfs(0)
    assert breadth[0] == 0
    assert depth[0] == 0
    assert len(set(breadth)) == len(breadth)
    assert len(set(depth)) == len(depth)
    assert set(breadth) == set(depth)