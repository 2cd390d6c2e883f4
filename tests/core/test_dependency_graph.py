import pytest
from topsort.core.dependency_graph import DependencyGraph
from topsort.core.ordering import depth_first, top_sort
from topsort.core.parser import parse_lines


def test_dependency_graph_simple():
    graph = DependencyGraph()
    graph.add_edge('app', 'libc')

    assert graph.nodes == ['app', 'libc']
    assert graph.successors('app') == ['libc']
    assert graph.predecessors('libc') == ['app']
    assert top_sort(graph) == ['app', 'libc']
    assert depth_first(graph) == ['libc', 'app']


def test_add_node_is_idempotent():
    graph = DependencyGraph()
    assert graph.add_node('A') is True
    assert graph.add_node('A') is False
    assert graph.nodes == ['A']
    assert graph.successors('A') == []


def test_labels_are_case_sensitive():
    graph = DependencyGraph()
    graph.add_node('a')
    graph.add_node('A')
    assert len(graph) == 2
    assert 'a' in graph and 'A' in graph
    assert 'b' not in graph


def test_duplicate_edge_has_no_effect():
    once = DependencyGraph()
    once.add_edge('A', 'B')
    once.add_edge('B', 'C')

    twice = DependencyGraph()
    assert twice.add_edge('A', 'B') is True
    assert twice.add_edge('A', 'B') is False
    twice.add_edge('B', 'C')
    twice.add_edge('B', 'C')

    assert twice.edges() == once.edges()
    assert twice.in_degree('B') == 1
    assert top_sort(twice) == top_sort(once)
    assert depth_first(twice) == depth_first(once)


def test_adjacency_views_are_consistent():
    graph = DependencyGraph()
    for source, target in [('A', 'B'), ('B', 'C'), ('B', 'D'), ('E', 'D')]:
        graph.add_edge(source, target)

    for node in graph.nodes:
        for target in graph.successors(node):
            assert node in graph.predecessors(target)
        for source in graph.predecessors(node):
            assert node in graph.successors(source)
    assert graph.predecessors('D') == ['B', 'E']


def test_edge_endpoints_become_nodes_in_first_seen_order():
    graph = DependencyGraph()
    graph.add_edge('B', 'A')
    graph.add_node('C')
    graph.add_edge('A', 'C')
    assert graph.nodes == ['B', 'A', 'C']
    assert graph.edges() == [('B', 'A'), ('A', 'C')]


def test_ordering_does_not_mutate_graph():
    graph = DependencyGraph()
    graph.add_edge('A', 'B')
    graph.add_edge('B', 'C')
    edges = graph.edges()

    first = top_sort(graph)
    depth_first(graph)
    assert top_sort(graph) == first
    assert graph.edges() == edges


def test_parse_lines_fills_graph():
    graph = DependencyGraph()
    parse_lines(graph, '-', ',', iter(['A-B,F']))
    assert graph.nodes == ['A', 'B', 'F']
    assert graph.edges() == [('A', 'B')]


@pytest.mark.parametrize('label', ['', 'missing'])
def test_unknown_node_lookup_raises(label):
    graph = DependencyGraph()
    with pytest.raises(KeyError):
        graph.successors(label)
