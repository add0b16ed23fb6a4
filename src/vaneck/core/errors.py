from __future__ import annotations


class InvalidInput(ValueError):
    """Raised when a seed or target cannot start a run."""
