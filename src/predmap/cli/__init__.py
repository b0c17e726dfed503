"""predmap CLI — run the FizzBuzz and exception-filter demos.

Entry point registered as ``predmap`` in ``pyproject.toml``::

    [project.scripts]
    predmap = "predmap.cli:main"
"""

import argparse
import logging
import sys

_LOG_LEVELS = ("debug", "info", "warning", "error")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="predmap",
        description="predmap — predicate-indexed dispatch maps, with runnable demos.",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="warning",
        help="Logging level for the run (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- predmap fizzbuzz -------------------------------------------------
    fizzbuzz_parser = subparsers.add_parser("fizzbuzz", help="Print the FizzBuzz sequence")
    fizzbuzz_parser.add_argument("limit", type=int, help="Number to count to (inclusive)")

    # -- predmap fault ----------------------------------------------------
    fault_parser = subparsers.add_parser(
        "fault",
        help="Raise a named fault and print how the exception filter responds",
    )
    fault_parser.add_argument("name", help="Fault type name (see `predmap faults`)")
    fault_parser.add_argument("message", help="Message to include in the fault")

    # -- predmap faults ---------------------------------------------------
    subparsers.add_parser("faults", help="List the fault types the filter handles")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``predmap`` command."""
    parser = _build_parser()
    argv = sys.argv[1:] if argv is None else argv

    # "?" is accepted as a request for usage
    if argv[:1] == ["?"]:
        parser.print_help()
        sys.exit(0)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "fizzbuzz":
        from predmap.cli._fizzbuzz import run_fizzbuzz

        run_fizzbuzz(args)
    elif args.command == "fault":
        from predmap.cli._faults import run_fault

        run_fault(args)
    elif args.command == "faults":
        from predmap.cli._faults import list_faults

        list_faults(args)
