"""Resolve plugins that live inside the site under ``<root>/plugins/<name>``.

Local plugins are only considered for entries declared by the site itself.
Nested themes cannot rely on them: several themes could ship different local
plugins under the same name.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from themeloom.core.config import LoaderSettings, load_settings
from themeloom.core.exceptions import ConfigFileError, PluginNotFoundError
from themeloom.core.utils.io import read_yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalPlugin:
    resolve: Path
    name: str
    version: Optional[str] = None


class LocalPluginResolver:
    def __init__(self, settings: Optional[LoaderSettings] = None) -> None:
        self.settings = settings or load_settings()

    def local_path(self, identifier: str, root_dir: Path) -> Path:
        return Path(root_dir) / self.settings.plugins_dir / identifier

    def resolve(self, identifier: str, root_dir: Path) -> Optional[LocalPlugin]:
        """Resolve ``identifier`` as a local plugin of ``root_dir``.

        Returns:
            The plugin, or ``None`` when the local directory exists but is not
            a plugin (no manifest).

        Raises:
            PluginNotFoundError: nothing exists locally under that name.
            ConfigFileError: the manifest exists but cannot be read.
        """
        as_path = Path(identifier)
        local = as_path if as_path.is_absolute() else self.local_path(identifier, root_dir)
        if not local.is_dir():
            raise PluginNotFoundError(
                f'Unable to find plugin "{identifier}". Perhaps you need to install its package?',
                context={"theme_name": identifier, "path": str(local)},
            )

        manifest_path = local / self.settings.plugin_manifest
        if not manifest_path.is_file():
            logger.debug("%s has no %s; not a plugin", local, self.settings.plugin_manifest)
            return None

        try:
            manifest = read_yaml(manifest_path, default={}, raise_on_error=True)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigFileError(
                f"Failed to read plugin manifest {manifest_path}: {exc}",
                context={"config_file_path": str(manifest_path)},
            ) from exc
        if not isinstance(manifest, dict):
            raise ConfigFileError(
                f"Plugin manifest {manifest_path} must be a mapping",
                context={"config_file_path": str(manifest_path)},
            )

        version = manifest.get("version")
        return LocalPlugin(
            resolve=local,
            name=str(manifest.get("name") or identifier),
            version=str(version) if version is not None else None,
        )


__all__ = ["LocalPlugin", "LocalPluginResolver"]
