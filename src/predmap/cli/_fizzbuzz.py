"""``predmap fizzbuzz`` — print the sequence from 0 through the limit."""

import argparse
import logging

from predmap.demos.fizzbuzz import FizzBuzzRunner

logger = logging.getLogger("predmap.cli")


def run_fizzbuzz(args: argparse.Namespace) -> None:
    """Print one line per number from 0 through ``args.limit``."""
    logger.info("Running FizzBuzz up to %d", args.limit)
    for line in FizzBuzzRunner().run(args.limit):
        print(line)
