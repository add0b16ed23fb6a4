"""Tests for vaneck.analysis."""
from vaneck.analysis.transitions import first_occurrences, value_counts, transition_graph

# 0, 3, 6, 0, 3, 3, 1, 0, 4, 0
SEED = [0, 3, 6]


def test_first_occurrences():
    assert first_occurrences(SEED, 10) == {0: 1, 3: 2, 6: 3, 1: 7, 4: 9}


def test_first_occurrences_within_seed():
    assert first_occurrences(SEED, 2) == {0: 1, 3: 2}


def test_value_counts():
    counts = value_counts(SEED, 10)
    assert counts[0] == 4
    assert counts[3] == 3
    assert counts[6] == counts[1] == counts[4] == 1
    assert sum(counts.values()) == 10


def test_transition_graph_edges():
    G = transition_graph(SEED, 10)
    assert sorted(G.nodes()) == [0, 1, 3, 4, 6]
    assert G.number_of_edges() == 8
    assert G[0][3]["weight"] == 2
    assert G.has_edge(3, 3)
    assert G.has_edge(4, 0)
    assert not G.has_edge(0, 0)


def test_transition_graph_weights_sum():
    n = 500
    G = transition_graph([13, 16, 0, 12, 15, 1], n)
    total = sum(w for _, _, w in G.edges(data="weight"))
    assert total == n - 1
