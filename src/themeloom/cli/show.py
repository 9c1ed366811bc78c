"""
themeloom show command.

SUMMARY: Show the site config with all themes merged in

Loads the site config from SITE_DIR, resolves every declared theme, and
prints either the merged config or the flattened theme list.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from themeloom.cli._output import OutputFormatter
from themeloom.core.config import load_settings
from themeloom.core.exceptions import ConfigFileError, ThemeLoomError
from themeloom.core.themes import get_config_file, load_themes, prefer_default
from themeloom.core.themes.config_file import realize_config

SUMMARY = "Show the site config with all themes merged in"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "site_dir",
        nargs="?",
        default=".",
        help="Site root directory (default: current directory)",
    )
    parser.add_argument(
        "--config",
        dest="config_name",
        help="Config file name without extension (default: site-config)",
    )
    parser.add_argument(
        "--format",
        choices=["yaml", "json"],
        default="yaml",
        help="Output format (default: yaml)",
    )
    parser.add_argument(
        "--themes",
        action="store_true",
        help="Print the flattened theme list instead of the merged config",
    )
    parser.add_argument(
        "--restricted",
        action="store_true",
        default=None,
        help="Skip themes that cannot be found instead of failing",
    )


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(args.format)
    root_dir = Path(args.site_dir).resolve()

    try:
        settings = load_settings(config_name=args.config_name, restricted_mode=args.restricted)
        config_module, config_file_path = get_config_file(root_dir, settings.config_name)
        if config_module is None:
            raise ConfigFileError(
                f"No {settings.config_name} file found in {root_dir}",
                context={"config_file_path": str(config_file_path)},
            )
        site_config = realize_config(prefer_default(config_module), {}, config_file_path=config_file_path)
        result = load_themes(
            site_config or {},
            config_file_path=config_file_path,
            root_dir=root_dir,
            settings=settings,
        )
    except ThemeLoomError as exc:
        formatter.error(exc)
        return 1

    if args.themes:
        formatter.data([leaf.to_dict() for leaf in result.themes])
    else:
        formatter.data(result.config)
    return 0
