"""Command-line demo for the flight roster."""

import argparse
import logging
import json
import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from data.generators.sample_roster import generate_sample_roster, print_instance_summary
from models import CapacityExceededError, RosterNetwork, TransferMode


def setup_logging(level: str = "INFO", log_file: str = None) -> None:
    """Configure logging."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    handlers = [logging.StreamHandler()]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=handlers
    )


def run_sample_roster(
    transfer_mode: TransferMode = TransferMode.ATOMIC,
    verbose: bool = True,
    output_file: str = None
) -> RosterNetwork:
    """
    Book the sample roster and run a few transfers.

    The scenario fills EF7890, then tries to move a passenger onto it,
    which is rejected. With the legacy transfer mode that rejection leaves
    the passenger's back-reference dangling, which the verification shows.
    """
    logger = logging.getLogger(__name__)

    logger.info("Generating sample roster...")
    flights, passengers = generate_sample_roster()
    ab123, cd456, ef7890 = flights
    p001, p002, p003, p004, p005, p006 = passengers

    logger.info("Booking passengers...")
    p001.join_flight(ab123, transfer_mode)
    p002.join_flight(ab123, transfer_mode)
    p003.join_flight(cd456, transfer_mode)
    p004.join_flight(cd456, transfer_mode)
    p005.join_flight(ef7890, transfer_mode)

    logger.info("Transferring passengers...")
    p001.join_flight(cd456, transfer_mode)
    p004.join_flight(None, transfer_mode)
    try:
        p002.join_flight(ef7890, transfer_mode)
    except CapacityExceededError as e:
        logger.warning(f"Transfer of {p002.identifier} rejected: {e}")

    if verbose:
        print_instance_summary(flights, passengers)

    network = RosterNetwork(flights, passengers)
    verification = network.verify_consistency()

    print("\nConsistency Verification:")
    print("-" * 40)
    for check, satisfied in verification.items():
        status = "PASS" if satisfied else "FAIL"
        print(f"  {check}: {status}")

    if output_file:
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(network.to_dict(), f, indent=2)
        logger.info(f"Roster saved to {output_file}")

    return network


def main(argv=None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Flight roster booking and transfer demo"
    )

    parser.add_argument(
        "--transfer-mode",
        type=str,
        default=TransferMode.ATOMIC.value,
        choices=[mode.value for mode in TransferMode],
        help="How transfers are sequenced (default: atomic)"
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file for roster JSON"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Log file path"
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress roster summary"
    )

    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    network = run_sample_roster(
        transfer_mode=TransferMode(args.transfer_mode),
        verbose=not args.quiet,
        output_file=args.output
    )

    return 0 if network.is_consistent else 1


if __name__ == "__main__":
    sys.exit(main())
