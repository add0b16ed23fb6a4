from __future__ import annotations

from collections import Counter
from itertools import islice
from typing import Dict, Sequence

import networkx as nx

from vaneck.core.engine import SequenceEngine, spoken_prefix


def first_occurrences(seed: Sequence[int], n: int) -> Dict[int, int]:
    """
    Map each value spoken within turns 1..n to the first turn it appears.
    """
    first: Dict[int, int] = {}
    for turn, x in enumerate(islice(SequenceEngine(seed, size_hint=n), n), start=1):
        if x not in first:
            first[x] = turn
    return first


def value_counts(seed: Sequence[int], n: int) -> Counter:
    """Frequency of each value within the first n turns."""
    return Counter(spoken_prefix(seed, n))


def transition_graph(seed: Sequence[int], n: int) -> nx.DiGraph:
    """
    Directed graph of consecutive terms within the first n turns.

    Edge u -> v carries weight = number of turns where v follows u.
    """
    G = nx.DiGraph()
    terms = spoken_prefix(seed, n)
    G.add_nodes_from(terms)
    for u, v in zip(terms, terms[1:]):
        if G.has_edge(u, v):
            G[u][v]["weight"] += 1
        else:
            G.add_edge(u, v, weight=1)
    return G
