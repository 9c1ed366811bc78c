"""Build site and theme trees on disk for theme loading tests."""
from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_NAME = "site-config"


def write_config(
    directory: Path,
    config: Optional[Dict[str, Any]] = None,
    *,
    python: Optional[str] = None,
    name: str = CONFIG_NAME,
) -> Path:
    """Write ``<directory>/<name>.yaml`` (or ``.py`` when ``python`` is given)."""
    directory.mkdir(parents=True, exist_ok=True)
    if python is not None:
        path = directory / f"{name}.py"
        path.write_text(textwrap.dedent(python), encoding="utf-8")
    else:
        path = directory / f"{name}.yaml"
        path.write_text(yaml.safe_dump(config or {}, sort_keys=False), encoding="utf-8")
    return path


class SiteBuilder:
    def __init__(self, root: Path) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)
        self.config_file = root / f"{CONFIG_NAME}.yaml"

    def theme(
        self,
        name: str,
        config: Optional[Dict[str, Any]] = None,
        *,
        python: Optional[str] = None,
        inside: Optional[Path] = None,
    ) -> Path:
        """Install a theme under ``<inside or root>/themes/<name>``."""
        theme_dir = (inside or self.root) / "themes" / name
        theme_dir.mkdir(parents=True, exist_ok=True)
        if config is not None or python is not None:
            write_config(theme_dir, config, python=python)
        return theme_dir

    def local_plugin(self, name: str, manifest: Optional[str] = "name: {name}\nversion: 1.0.0\n") -> Path:
        plugin_dir = self.root / "plugins" / name
        plugin_dir.mkdir(parents=True, exist_ok=True)
        if manifest is not None:
            (plugin_dir / "plugin.yaml").write_text(manifest.format(name=name), encoding="utf-8")
        return plugin_dir
