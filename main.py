"""Main entry point for the growing flower demonstration.

Runs one flower through a fixed sequence of grow, random and wither steps
and prints its state after each phase.
"""

import argparse
import logging
import sys

from garden.config.demo_config import DemoConfig
from garden.config.flowers import DEMO_INITIAL_LENGTH, DEMO_SPECIES
from garden.contracts import CONTRACTS_ENV_VAR
from garden.demo import run_demo
from garden.exceptions import InvalidArgumentError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Growing Flower Demonstration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Fixed demonstration (Tulip, length 1)
  python main.py

  # Reproducible random phase
  python main.py --seed 42

  # Start from a longer rose and show every transition
  python main.py --species Rose --initial-length 11 --verbose

Contract checks default to on unless Python runs with -O.
Set {CONTRACTS_ENV_VAR}=0 or pass --no-contracts to skip them.
        """,
    )

    parser.add_argument(
        "--species",
        type=str,
        default=DEMO_SPECIES,
        help=f"Species label for the flower (default: {DEMO_SPECIES})",
    )

    parser.add_argument(
        "--initial-length",
        type=int,
        default=DEMO_INITIAL_LENGTH,
        help=f"Starting length, must be positive (default: {DEMO_INITIAL_LENGTH})",
    )

    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for the random phase (optional)"
    )

    parser.add_argument(
        "--no-contracts",
        action="store_true",
        help="Skip debug-only invariant and post-condition checks",
    )

    parser.add_argument("--verbose", action="store_true", help="Log every state transition")

    return parser


def main(argv=None) -> int:
    """Parse command-line arguments and run the demonstration."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = DemoConfig(
        species=args.species,
        initial_length=args.initial_length,
        seed=args.seed,
        check_contracts=False if args.no_contracts else None,
    )

    try:
        run_demo(config)
    except InvalidArgumentError as e:
        logger.error("Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
