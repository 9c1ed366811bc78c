"""CLI output formatting utilities."""
from __future__ import annotations

import json
import sys
from typing import Any

from themeloom.core.exceptions import ThemeLoomError
from themeloom.core.utils.io import dump_yaml_string


class OutputFormatter:
    """Prints data as YAML or JSON."""

    def __init__(self, output_format: str = "yaml", indent: int = 2):
        self.output_format = output_format
        self.indent = indent

    @property
    def json_mode(self) -> bool:
        return self.output_format == "json"

    def data(self, payload: Any) -> None:
        if self.json_mode:
            print(json.dumps(payload, indent=self.indent, default=str))
        else:
            print(dump_yaml_string(payload).rstrip())

    def error(self, error: ThemeLoomError) -> None:
        """Output error result on stderr."""
        if self.json_mode:
            print(json.dumps(error.to_json_error(), indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {error}", file=sys.stderr)


__all__ = ["OutputFormatter"]
