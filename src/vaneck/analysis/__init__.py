from .transitions import first_occurrences, value_counts, transition_graph

__all__ = [
    "first_occurrences",
    "value_counts",
    "transition_graph",
]
