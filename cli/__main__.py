#!/usr/bin/env python3
"""
banksim CLI - Interactive bank account simulator.

Usage:
    python -m cli [--receipt-file NAME] [--log-level LEVEL]

Examples:
    python -m cli
    python -m cli --receipt-file ticket.txt
    python -m cli --log-level DEBUG
"""

import sys
import argparse
from cli import menu
from config import load_config
from services.base import Services
from logger import setup_logging


def build_parser():
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="banksim - Bank account simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--receipt-file",
        help="Receipt filename inside the receipt directory "
        "(default: from config, ticket_cuenta1.txt)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    parser.set_defaults(func=menu.run)
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        # Load configuration
        config = load_config()
        if args.log_level:
            config.log_level = args.log_level
        if not args.receipt_file:
            args.receipt_file = config.receipt_filename

        setup_logging(config)

        # Services container owns both session accounts
        services = Services(config)

        args.func(args, services)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
