from __future__ import annotations

from typing import List, Sequence

import matplotlib.pyplot as plt
import networkx as nx

from vaneck.analysis.transitions import transition_graph
from vaneck.core.engine import spoken_prefix
from .layouts import transition_layout


def plot_sequence(
    seed: Sequence[int],
    n: int,
    *,
    marker_size: float = 4.0,
    save_path: str | None = None,
) -> List[int]:
    """
    Scatter plot of value against turn for turns 1..n.

    If save_path is set, the figure is written there (PNG, 200 dpi) and closed;
    otherwise it is shown.
    """
    terms = spoken_prefix(seed, n)
    turns = range(1, len(terms) + 1)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.scatter(turns, terms, s=marker_size)
    ax.set_title(f"seed={list(seed)}  turns 1..{n}")
    ax.set_xlabel("turn")
    ax.set_ylabel("spoken value")
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return terms


def draw_transition_graph(
    seed: Sequence[int],
    n: int,
    *,
    layout_seed: int = 7,
    node_size: int = 140,
    max_nodes_to_draw: int = 400,
    save_path: str | None = None,
) -> nx.DiGraph:
    """
    Draw the transition graph of the first n terms.
    Graphs larger than max_nodes_to_draw get a placeholder instead.
    """
    G = transition_graph(seed, n)

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.set_title(f"transitions, turns 1..{n}   |V|={G.number_of_nodes()}  |E|={G.number_of_edges()}")
    ax.set_axis_off()

    if G.number_of_nodes() <= max_nodes_to_draw:
        nx.draw_networkx(
            G,
            pos=transition_layout(G, seed=layout_seed),
            ax=ax,
            with_labels=G.number_of_nodes() <= 60,
            node_size=node_size,
            arrows=True,
        )
    else:
        ax.text(
            0.5,
            0.5,
            f"Too large to draw\n(|V|={G.number_of_nodes()})",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return G
