#!/usr/bin/env python3
"""Main CLI entry point for folio."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from folio.cli.build.build_command import build_command
from folio.cli.config.config_command import config_command

VERSION = "0.1.0"
DESCRIPTION = "Generate a static HTML gallery from the images in a directory."


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True), show_time=False, show_path=False
            )
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="folio", description=DESCRIPTION)
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {VERSION}"
    )
    parser.add_argument(
        "-c",
        "--config",
        action="store_true",
        help="Write a default config.yaml file and exit",
    )
    parser.add_argument(
        "-d",
        "--directory",
        default=".",
        help="Gallery directory (default: current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output",
    )
    return parser


def main(argv: list[str] | None = None):
    """Main CLI dispatcher."""
    try:
        args = build_parser().parse_args(argv)
        setup_logging(args.verbose)

        if args.config:
            return config_command(args)
        return build_command(args)

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main() or 0)
