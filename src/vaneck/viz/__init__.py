from .layouts import transition_layout
from .draw import draw_transition_graph, plot_sequence

__all__ = [
    "transition_layout",
    "draw_transition_graph",
    "plot_sequence",
]
