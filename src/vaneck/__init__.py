"""
vaneck: the van Eck memory game. Computes the value spoken at a given turn
from a seed sequence, with helpers for prefixes, transition graphs, and plots.
"""

from .core.errors import InvalidInput
from .core.engine import SequenceEngine, iter_spoken, run, spoken_prefix
from .config import REFERENCE_SEED, REFERENCE_TARGET, RunConfig, parse_seed

# Analysis
from .analysis.transitions import first_occurrences, value_counts, transition_graph

__all__ = [
    # Core
    "InvalidInput",
    "SequenceEngine",
    "iter_spoken",
    "run",
    "spoken_prefix",
    # Config
    "REFERENCE_SEED",
    "REFERENCE_TARGET",
    "RunConfig",
    "parse_seed",
    # Analysis
    "first_occurrences",
    "value_counts",
    "transition_graph",
]
