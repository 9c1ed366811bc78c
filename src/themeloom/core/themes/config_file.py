"""Find and load a site/theme config file.

``<name>.py`` is preferred over ``<name>.yaml`` and ``<name>.yml``. Python
config files may expose a mapping, or a callable taking the theme options,
as ``default`` or ``config``.
"""
from __future__ import annotations

from pathlib import Path
from types import ModuleType
from typing import Any, NamedTuple, Optional

import yaml

from themeloom.core.exceptions import ConfigFileError
from themeloom.core.utils.io import read_yaml
from themeloom.core.utils.loader import load_module_from_path

CONFIG_SUFFIXES = (".py", ".yaml", ".yml")


class LoadedConfigFile(NamedTuple):
    config_module: Any
    config_file_path: Optional[Path]


def candidate_paths(directory: Path, name: str) -> list[Path]:
    return [Path(directory) / f"{name}{suffix}" for suffix in CONFIG_SUFFIXES]


def get_config_file(directory: Optional[Path], name: str) -> LoadedConfigFile:
    """Load ``<directory>/<name>.{py,yaml,yml}``.

    A missing file is not an error: ``config_module`` is ``None`` and
    ``config_file_path`` points at the first candidate.
    """
    if directory is None:
        return LoadedConfigFile(None, None)

    candidates = candidate_paths(directory, name)
    for path in candidates:
        if not path.is_file():
            continue
        if path.suffix == ".py":
            try:
                return LoadedConfigFile(load_module_from_path(path), path)
            except Exception as exc:
                raise ConfigFileError(
                    f"Failed to load {path}: {exc}",
                    context={"config_file_path": str(path)},
                ) from exc
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigFileError(
                f"Failed to parse {path}: {exc}",
                context={"config_file_path": str(path)},
            ) from exc
        if not isinstance(data, dict):
            raise ConfigFileError(
                f"{path} must contain a mapping at the top level",
                context={"config_file_path": str(path)},
            )
        return LoadedConfigFile(data, path)

    return LoadedConfigFile(None, candidates[0])


def prefer_default(value: Any) -> Any:
    """Return a module's ``default`` (or ``config``) export; other values unchanged."""
    if isinstance(value, ModuleType):
        for attr in ("default", "config"):
            if hasattr(value, attr):
                return getattr(value, attr)
        return None
    return value


def realize_config(value: Any, options: dict, *, config_file_path: Any = None) -> Optional[dict]:
    """Call factory configs with ``options``; check the result is a mapping."""
    if callable(value):
        try:
            config = value(options)
        except Exception as exc:
            raise ConfigFileError(
                f"Config factory in {config_file_path} failed: {exc!r}",
                context={"config_file_path": str(config_file_path)},
            ) from exc
    else:
        config = value
    if config is None:
        return None
    if not isinstance(config, dict):
        raise ConfigFileError(
            f"Config from {config_file_path} must be a mapping, got {type(config).__name__}",
            context={"config_file_path": str(config_file_path)},
        )
    return config


__all__ = [
    "CONFIG_SUFFIXES",
    "LoadedConfigFile",
    "candidate_paths",
    "get_config_file",
    "prefer_default",
    "realize_config",
]
