"""
Airdrop claim CLI entry point.

Host an allowlist round: publish its root, hand out membership proofs and
verify claims.

Usage::

    python -m airdrop_claim root --allowlist allowlist.yaml
    python -m airdrop_claim prove --allowlist allowlist.yaml --address 0x5aAe...eAed > claim.json
    python -m airdrop_claim claim --allowlist allowlist.yaml --input claim.json

Commands:
    root     Print the allowlist's root, epoch and member count
    prove    Print the private claim input for one member as JSON
    claim    Verify a private claim input and print the published record as JSON

Options:
    --allowlist  Path to the allowlist YAML file (required)
    --address    Member address, hex encoded (prove)
    --input      Path to a private claim input JSON file (claim)
    --epoch      Override the epoch claimed or checked against

Exit status:
    0  success
    1  address not on the allowlist, or claim rejected
    2  unreadable or invalid allowlist, claim input or address
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from airdrop_claim.subspecs.allowlist import AllowlistConfig
from airdrop_claim.subspecs.claim import PrivateInput, PublicInput
from airdrop_claim.subspecs.distributor import Distributor
from airdrop_claim.types import Bytes20, ClaimRejectedError, Uint64

logger = logging.getLogger(__name__)

INPUT_ERRORS = (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError)
"""Unreadable or invalid input files. Commands exit with status 2 on these."""

LOG_HANDLER_NAME = "airdrop_claim.cli"


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)

        timestamp = self.formatTime(record, self.datefmt)
        colored_time = f"{self.CYAN}{timestamp}{self.RESET}"

        levelname = f"{color}{record.levelname:8}{self.RESET}"

        name = f"{self.BLUE}{record.name}{self.RESET}"

        message = record.getMessage()

        return f"{colored_time} {levelname} {name}: {message}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """
    Configure logging for the CLI with optional colors.

    Logs go to stderr so that JSON written to stdout stays machine readable.
    A handler installed by an earlier call is replaced, not duplicated.
    """
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(LOG_HANDLER_NAME)
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == LOG_HANDLER_NAME:
            root.removeHandler(existing)
    root.setLevel(level)
    root.addHandler(handler)


def uint64_arg(value: str) -> Uint64:
    """Parse a command-line epoch."""
    try:
        return Uint64(int(value))
    except (ValueError, OverflowError) as e:
        raise argparse.ArgumentTypeError(f"invalid epoch {value!r}: {e}") from e


def load_distributor(allowlist_path: Path) -> Distributor | None:
    """Load an allowlist file and build its tree, or log why it cannot be used."""
    logger.info("Loading allowlist from %s", allowlist_path)
    try:
        config = AllowlistConfig.from_yaml_file(allowlist_path)
    except INPUT_ERRORS as e:
        logger.error("Cannot load allowlist %s: %s", allowlist_path, e)
        return None
    return Distributor.from_config(config)


def cmd_root(args: argparse.Namespace) -> int:
    """Print the allowlist commitment."""
    distributor = load_distributor(args.allowlist)
    if distributor is None:
        return 2
    summary = {
        "root": "0x" + distributor.root.hex(),
        "epoch": int(distributor.epoch),
        "members": len(distributor.tree),
    }
    print(json.dumps(summary, indent=2))
    return 0


def cmd_prove(args: argparse.Namespace) -> int:
    """Print the private claim input for one member."""
    distributor = load_distributor(args.allowlist)
    if distributor is None:
        return 2
    try:
        address = Bytes20(args.address)
    except ValueError as e:
        logger.error("Invalid address %s: %s", args.address, e)
        return 2

    try:
        private_input = distributor.prepare_claim(address, args.epoch)
    except ClaimRejectedError:
        logger.error("Address %s is not on the allowlist", args.address)
        return 1

    print(private_input.model_dump_json(by_alias=True, indent=2))
    return 0


def cmd_claim(args: argparse.Namespace) -> int:
    """Verify a private claim input and print the published record."""
    distributor = load_distributor(args.allowlist)
    if distributor is None:
        return 2

    try:
        private_input = PrivateInput.model_validate_json(args.input.read_text(encoding="utf-8"))
    except INPUT_ERRORS as e:
        logger.error("Cannot read claim input %s: %s", args.input, e)
        return 2

    public_input = distributor.public_input()
    if args.epoch is not None:
        public_input = PublicInput(root=public_input.root, epoch=args.epoch)

    try:
        output = distributor.submit(private_input, public_input)
    except ClaimRejectedError as e:
        print(e.message, file=sys.stderr)
        return 1

    print(output.model_dump_json(by_alias=True, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="airdrop_claim",
        description="Airdrop allowlist host",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    root_parser = subparsers.add_parser("root", help="Print the allowlist root")
    root_parser.set_defaults(handler=cmd_root)

    prove_parser = subparsers.add_parser("prove", help="Print a member's private claim input")
    prove_parser.add_argument(
        "--address",
        required=True,
        help="Member address, hex encoded with or without 0x",
    )
    prove_parser.set_defaults(handler=cmd_prove)

    claim_parser = subparsers.add_parser("claim", help="Verify a private claim input")
    claim_parser.add_argument(
        "--input",
        required=True,
        type=Path,
        help="Path to a private claim input JSON file",
    )
    claim_parser.set_defaults(handler=cmd_claim)

    for sub in (root_parser, prove_parser, claim_parser):
        sub.add_argument(
            "--allowlist",
            required=True,
            type=Path,
            help="Path to the allowlist YAML file",
        )
    for sub in (prove_parser, claim_parser):
        sub.add_argument(
            "--epoch",
            type=uint64_arg,
            default=None,
            help="Epoch to claim for or check against (default: the allowlist's epoch)",
        )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
