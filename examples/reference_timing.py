"""
Time the reference run against a few smaller targets.

Usage:
  python3 reference_timing.py                  # up to 30,000,000 turns
  python3 reference_timing.py --max-target 1000000
"""
import argparse
import time

from vaneck.config import REFERENCE_SEED, REFERENCE_TARGET
from vaneck.core.engine import run


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--seed', type=int, nargs='+', default=list(REFERENCE_SEED))
    parser.add_argument('--max-target', type=int, default=REFERENCE_TARGET,
                        help='Largest target to time (default: 30000000)')
    args = parser.parse_args()

    target = 2020
    while True:
        t0 = time.time()
        value = run(args.seed, target)
        elapsed = time.time() - t0
        print(f"  turn {target:>10,}: {value:>10}   ({elapsed:.3f}s)")
        if target >= args.max_target:
            break
        target = min(target * 10, args.max_target)


if __name__ == '__main__':
    main()
