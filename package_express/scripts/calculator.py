"""
Package Express Shipping Quote Calculator
=========================================

Interactive CLI tool to quote shipping for a single package.

Usage:
    python -m package_express.scripts.calculator
    python -m package_express.scripts.calculator --verbose
"""

import argparse
import logging
import sys

from package_express.session import QuoteSession
from package_express.version import VERSION

# Exit status for a session cancelled with Ctrl+C or closed input
EXIT_CANCELLED = 130


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Quote shipping for one package via Package Express",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Limits:
  Weight                     50 lbs max
  Width + height + length    50 in max

Examples:
  python -m package_express
  python -m package_express --verbose
        """
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log state transitions and rejected input to stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}"
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr so the quote transcript on stdout is unchanged."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        state = QuoteSession().run()
        logging.getLogger(__name__).debug("Session finished in %s", state.name)
        return 0

    except (KeyboardInterrupt, EOFError):
        print("\n\nCancelled.")
        return EXIT_CANCELLED
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    sys.exit(main())
