from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Tuple

from vaneck.core.engine import validate_seed, validate_target
from vaneck.core.errors import InvalidInput


REFERENCE_SEED: Tuple[int, ...] = (13, 16, 0, 12, 15, 1)
REFERENCE_TARGET = 30_000_000

VANECK_SEED = os.environ.get("VANECK_SEED", ",".join(map(str, REFERENCE_SEED)))
VANECK_TARGET = os.environ.get("VANECK_TARGET", str(REFERENCE_TARGET))


def parse_seed(text: str) -> Tuple[int, ...]:
    """
    Parse a seed written as "0,3,6" or "0 3 6".
    """
    tokens = [t for t in re.split(r"[,\s]+", text.strip()) if t]
    try:
        terms = tuple(int(t) for t in tokens)
    except ValueError:
        raise InvalidInput(f"cannot parse seed {text!r}") from None
    return validate_seed(terms)


def parse_target(text: str) -> int:
    try:
        target = int(text)
    except ValueError:
        raise InvalidInput(f"cannot parse target {text!r}") from None
    return validate_target(target)


@dataclass(frozen=True)
class RunConfig:
    seed: Tuple[int, ...] = REFERENCE_SEED
    target: int = REFERENCE_TARGET

    def __post_init__(self):
        object.__setattr__(self, "seed", validate_seed(self.seed))
        validate_target(self.target)

    @classmethod
    def from_env(cls) -> "RunConfig":
        """Defaults, overridden by VANECK_SEED / VANECK_TARGET when set."""
        return cls(seed=parse_seed(VANECK_SEED), target=parse_target(VANECK_TARGET))
