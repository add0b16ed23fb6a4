from __future__ import annotations

import logging


def setup_logger(name: str = "vaneck", level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stderr handler to the named logger.

    Repeated calls only adjust the level; no second handler is added.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
