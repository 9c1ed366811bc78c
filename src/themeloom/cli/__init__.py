"""themeloom command line interface."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from themeloom import __version__
from themeloom.cli import show

COMMANDS = {"show": show}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="themeloom", description="Resolve and merge site themes")
    parser.add_argument("--version", action="version", version=f"themeloom {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, module in COMMANDS.items():
        sub = subparsers.add_parser(name, help=module.SUMMARY, description=module.SUMMARY)
        module.register_args(sub)
        sub.set_defaults(_handler=module.main)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args._handler(args)


__all__ = ["build_parser", "main"]
