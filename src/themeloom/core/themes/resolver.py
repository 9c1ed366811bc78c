"""Locate one theme and load its configuration."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from themeloom.core.config import LoaderSettings, load_settings
from themeloom.core.exceptions import (
    LocalPluginResolutionError,
    PluginNotFoundError,
    UnresolvableThemeError,
)

from .config_file import get_config_file, prefer_default, realize_config
from .local import LocalPluginResolver
from .model import ResolvedTheme
from .modules import ModuleResolver
from .spec import ThemeSpec, normalize_theme_spec

logger = logging.getLogger(__name__)


class ThemeResolver:
    """Turn a plugins entry into a :class:`ResolvedTheme`.

    Installed themes are found through the module resolver. Entries declared
    by the site itself may also be local plugins under ``<root>/plugins``.
    """

    def __init__(
        self,
        settings: Optional[LoaderSettings] = None,
        *,
        module_resolver: Optional[ModuleResolver] = None,
        local_resolver: Optional[LocalPluginResolver] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.module_resolver = module_resolver or ModuleResolver(self.settings)
        self.local_resolver = local_resolver or LocalPluginResolver(self.settings)

    def normalize(self, entry: Any, config_file_path: Any = None) -> ThemeSpec:
        return normalize_theme_spec(
            entry,
            config_file_path=config_file_path,
            validate=self.settings.validate_specs,
        )

    def resolve(
        self,
        theme_spec: Any,
        declaring_config_path: Any,
        is_top_level: bool,
        base_dir: Path,
    ) -> Optional[ResolvedTheme]:
        """Resolve ``theme_spec`` relative to ``base_dir``.

        Returns ``None`` when the entry is not a theme (or, in restricted
        mode, cannot be found).

        Raises:
            UnresolvableThemeError: the theme cannot be located.
            LocalPluginResolutionError: local plugin lookup failed.
        """
        spec = self.normalize(theme_spec, declaring_config_path)
        theme_name = spec.resolve
        base_dir = Path(base_dir)
        theme_dir: Optional[Path] = None
        path_to_local_theme: Optional[Path] = None

        try:
            theme_dir = self.module_resolver.resolve(theme_name, base_dir)
        except ModuleNotFoundError:
            # Restricted mode never looks at the local plugins directory.
            if is_top_level and not self.settings.restricted_mode:
                path_to_local_theme = self.local_resolver.local_path(theme_name, base_dir)
                try:
                    local = self.local_resolver.resolve(theme_name, base_dir)
                except PluginNotFoundError:
                    logger.debug("No local plugin named %s in %s", theme_name, base_dir)
                except Exception as exc:
                    raise LocalPluginResolutionError(
                        f"Failed to resolve {theme_name}: {exc}",
                        context={"theme_name": theme_name, "root_dir": str(base_dir)},
                    ) from exc
                else:
                    if local is None:
                        return None
                    theme_dir = local.resolve

            if theme_dir is None:
                if self.settings.restricted_mode:
                    logger.debug("Restricted mode: skipping unresolvable theme %s", theme_name)
                    return None
                raise UnresolvableThemeError(
                    theme_name,
                    config_file_path=declaring_config_path,
                    path_to_local_theme=path_to_local_theme,
                    resolution_paths=[
                        p / theme_name for p in self.module_resolver.resolution_paths(base_dir)
                    ],
                )

        config_module, config_file_path = get_config_file(theme_dir, self.settings.config_name)
        theme_config = realize_config(
            prefer_default(config_module),
            spec.options_copy(),
            config_file_path=config_file_path,
        )

        return ResolvedTheme(
            theme_name=theme_name,
            theme_config=theme_config,
            theme_spec=spec,
            theme_dir=theme_dir,
            parent_dir=base_dir,
            config_file_path=config_file_path,
        )


__all__ = ["ThemeResolver"]
