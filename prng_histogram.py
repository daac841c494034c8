#!/usr/bin/env python3
"""
PRNG Histogram - draw from one generator and print its distribution
==================================================================
Version: 1.0.0

Builds the generator suite, pulls N samples from the selected generator
and prints the relative frequency histogram.

Usage:
    # List the menu
    python3 prng_histogram.py --list

    # 1000 LCG samples, 10 bins, seeded from the wall clock
    python3 prng_histogram.py --generator lcg --count 1000 --bins 10

    # Menu index works too (1-based); fixed seed for a replayable run
    python3 prng_histogram.py --generator 7 --count 5000 --bins 20 --seed 1234

    # Custom lineup and range, plus a chi-square uniformity check
    python3 prng_histogram.py --config suite_config.json --generator combine \\
        --count 10000 --min 0 --max 1 --chi-square
"""

import argparse
import json
import logging
import sys
import time
from typing import List, Optional

from pydantic import ValidationError

from prng_suite import (
    PRNGError,
    InvalidParameterError,
    SuiteConfig,
    build_suite,
    format_histogram,
    get_generator_info,
    histogram,
    uniformity_test,
)

logger = logging.getLogger("prng_histogram")


def resolve_generator_key(suite, choice: str):
    """Menu index (1-based) or suite name -> suite key."""
    if choice.isdigit():
        index = int(choice)
        if not 1 <= index <= len(suite):
            raise InvalidParameterError(
                f"Invalid choice {index}. Select 1..{len(suite)}"
            )
        return index - 1
    return choice.strip().lower()


def print_menu(suite):
    print("Choose a generator")
    for i, name in enumerate(suite.names(), start=1):
        description = get_generator_info(suite.spec(name).kind)['description']
        print(f"{i}: {name:12} - {description}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Draw samples from a PRNG and print a relative frequency histogram"
    )
    parser.add_argument('--generator', '-g', default='lcg',
                        help='Suite name or 1-based menu index (default: lcg)')
    parser.add_argument('--count', '-n', type=int, default=1000,
                        help='Number of samples to draw (default: 1000)')
    parser.add_argument('--bins', '-b', type=int, default=None,
                        help='Number of histogram intervals (default: from config)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Suite seed (default: wall-clock seconds)')
    parser.add_argument('--config', default=None,
                        help='Suite config JSON (default: built-in lineup)')
    parser.add_argument('--min', dest='min_range', type=float, default=None,
                        help='Histogram lower bound (default: generator range)')
    parser.add_argument('--max', dest='max_range', type=float, default=None,
                        help='Histogram upper bound (default: generator range)')
    parser.add_argument('--show-values', action='store_true',
                        help='Print the drawn values')
    parser.add_argument('--chi-square', action='store_true',
                        help='Run a chi-square uniformity test on the bins')
    parser.add_argument('--list', action='store_true',
                        help='List available generators and exit')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (default: from config)')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, (args.log_level or "INFO").upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    seed = args.seed if args.seed is not None else int(time.time())

    try:
        config = SuiteConfig.load(args.config) if args.config else SuiteConfig.default()
        if args.log_level is None:
            logging.getLogger().setLevel(config.log_level)

        suite = build_suite(config, seed=seed)

        if args.list:
            print_menu(suite)
            return 0

        key = resolve_generator_key(suite, args.generator)
        generator = suite.get(key)
        low, high = suite.histogram_range(key)
        if args.min_range is not None:
            low = args.min_range
        if args.max_range is not None:
            high = args.max_range
        bins = args.bins if args.bins is not None else config.default_bins

        logger.info(f"Drawing {args.count} samples from {suite.spec(key).name} (seed={seed})")
        values = generator.sample(args.count)

        if args.show_values:
            print("Random Values: " + ", ".join(f"{v:.6g}" for v in values))

        print(format_histogram(histogram(values, low, high, bins)))

        if args.chi_square:
            result = uniformity_test(values, low, high, bins)
            verdict = "uniform" if result['uniform'] else "NOT uniform"
            print(f"chi2={result['chi2']:.2f}, p={result['p_value']:.6f} ({verdict}, "
                  f"{result['in_range']} in range)")

    except PRNGError as e:
        logger.error(str(e))
        return 1
    except (FileNotFoundError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Bad suite config {args.config}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
