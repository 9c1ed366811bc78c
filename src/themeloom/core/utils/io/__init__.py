"""I/O utilities for themeloom."""
from __future__ import annotations

from .yaml import dump_yaml_string, read_yaml

__all__ = [
    "dump_yaml_string",
    "read_yaml",
]
