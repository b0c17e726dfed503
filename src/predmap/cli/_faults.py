"""``predmap fault`` and ``predmap faults`` — exercise the exception filter."""

import argparse
import logging

from predmap.demos.faults import ExceptionFilter, raise_fault

logger = logging.getLogger("predmap.cli")


def run_fault(args: argparse.Namespace) -> None:
    """Raise the named fault, catch it, and print the filter's response.

    An unknown name raises ``UnrecognisedFault`` instead, which the filter
    reports like any other fault.
    """
    exception_filter = ExceptionFilter()
    try:
        raise_fault(args.name, args.message)
    except Exception as exc:
        logger.debug("Caught %s: %s", type(exc).__name__, exc)
        print(exception_filter.respond(exc))


def list_faults(args: argparse.Namespace) -> None:
    """Print the fault shapes the filter has special handling for."""
    for line in ExceptionFilter.handled_descriptions():
        print(line)
