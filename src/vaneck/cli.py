"""
Print the value spoken at a target turn, and how long it took.

Usage:
  vaneck                                  # reference seed, turn 30,000,000
  vaneck --seed 0,3,6 --target 2020
  vaneck --seed 1,3,2 --target 2020 --prefix 10
  vaneck --target 5000 --plot vaneck.png -v

Output (stdout):
  <value>
  Took <seconds> secs
"""
from __future__ import annotations

import argparse
import logging
import time
from typing import Optional, Sequence

from vaneck import config
from vaneck.config import RunConfig, parse_seed, parse_target
from vaneck.core.engine import run, spoken_prefix
from vaneck.core.errors import InvalidInput
from vaneck.log import setup_logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vaneck",
        description="Value spoken at a given turn of the van Eck memory game.",
    )
    parser.add_argument("--seed", default=None,
                        help="starting terms, e.g. 0,3,6 (default: VANECK_SEED or 13,16,0,12,15,1)")
    parser.add_argument("--target", default=None,
                        help="turn to report (default: VANECK_TARGET or 30000000)")
    parser.add_argument("--prefix", type=int, default=0,
                        help="also print the first N terms")
    parser.add_argument("--plot", default=None, metavar="PATH",
                        help="save a scatter plot of the first --plot-terms terms to PATH")
    parser.add_argument("--plot-terms", type=int, default=1000,
                        help="number of terms to plot (default: 1000)")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v for progress, -vv for engine debug output")
    return parser


def resolve_config(args: argparse.Namespace) -> RunConfig:
    seed = parse_seed(args.seed if args.seed is not None else config.VANECK_SEED)
    target = parse_target(args.target if args.target is not None else config.VANECK_TARGET)
    return RunConfig(seed=seed, target=target)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    setup_logger("vaneck", level)

    try:
        cfg = resolve_config(args)
        if args.prefix < 0 or args.plot_terms < 0:
            raise InvalidInput("--prefix and --plot-terms must be non-negative")
    except InvalidInput as e:
        parser.error(str(e))

    logger.info("seed=%s target=%d", list(cfg.seed), cfg.target)

    t0 = time.time()
    value = run(cfg.seed, cfg.target)
    elapsed = time.time() - t0

    print(value)
    print(f"Took {elapsed:.6f} secs")

    if args.prefix:
        print(" ".join(map(str, spoken_prefix(cfg.seed, args.prefix))))

    if args.plot:
        from vaneck.viz.draw import plot_sequence

        plot_sequence(cfg.seed, args.plot_terms, save_path=args.plot)
        logger.info("saved plot to %s", args.plot)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
