from __future__ import annotations

import networkx as nx


def transition_layout(G: nx.DiGraph, seed: int = 7, iterations: int = 200):
    """
    Spring layout for a transition graph.

    Falls back to a circular layout for graphs with fewer than 3 nodes,
    where spring_layout gives degenerate positions.
    """
    if G.number_of_nodes() < 3:
        return nx.circular_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=iterations, weight="weight")
