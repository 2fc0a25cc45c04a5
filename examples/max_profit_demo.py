#!/usr/bin/env python3
"""
Max profit demo.

Usage:
    python3 examples/max_profit_demo.py          # sample horizons 7, 8, 13, 49
    python3 examples/max_profit_demo.py 49       # a single horizon
"""

import argparse
import sys

from maxprofit.engine.errors import OptimizerError
from maxprofit.engine.optimizer import optimize
from maxprofit.utils.scoring import format_counts

SAMPLE_HORIZONS = (7, 8, 13, 49)


def report(n: int) -> None:
    result = optimize(n)
    print(f"Time Unit: {n}")
    print(f"Output: {format_counts(result.best_counts)}")
    print(f"Earnings: ${result.max_profit}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Maximum-profit construction plan")
    parser.add_argument("time_unit", nargs="?", help="total time units available")
    args = parser.parse_args(argv)

    if args.time_unit is None:
        for index, n in enumerate(SAMPLE_HORIZONS, start=1):
            print(f"Test Case {index}: Time Unit = {n}")
            report(n)
            print()
        return 0

    try:
        n = int(args.time_unit)
        report(n)
    except (ValueError, OptimizerError) as e:
        print(f"Error: {e}")
        print("Usage: python3 examples/max_profit_demo.py <time_unit>")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
