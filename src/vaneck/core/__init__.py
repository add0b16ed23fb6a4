from .errors import InvalidInput
from .engine import (
    SequenceEngine,
    iter_spoken,
    run,
    spoken_prefix,
    validate_seed,
    validate_target,
)

__all__ = [
    "InvalidInput",
    "SequenceEngine",
    "iter_spoken",
    "run",
    "spoken_prefix",
    "validate_seed",
    "validate_target",
]
