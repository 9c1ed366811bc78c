"""Resolve a site's themes and fold their configs into the site config."""
from __future__ import annotations

import logging
from functools import reduce
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from themeloom.core.config import LoaderSettings, load_settings
from themeloom.core.utils.merge import merge_configs

from .model import LoadedThemes, ThemeLeaf
from .resolver import ThemeResolver
from .walker import ThemeTreeWalker

logger = logging.getLogger(__name__)


def _plugin_entry(plugin: Any, parent_dir: Path) -> Dict[str, Any]:
    if isinstance(plugin, str):
        return {"resolve": plugin, "options": {}, "parent_dir": str(parent_dir)}
    return {
        "resolve": plugin.get("resolve"),
        "options": dict(plugin.get("options") or {}),
        "parent_dir": str(parent_dir),
    }


def augment_theme_config(leaf: ThemeLeaf) -> Dict[str, Any]:
    """Return the leaf's config with its plugins tagged and itself appended.

    The theme's own entry goes last so its hooks can override the plugins
    it declares, like a site does.
    """
    theme_config = dict(leaf.theme_config or {})
    theme_config["plugins"] = [
        *(_plugin_entry(p, leaf.theme_dir) for p in theme_config.get("plugins") or []),
        {
            "resolve": leaf.theme_name,
            "options": leaf.theme_spec.options_copy(),
            "parent_dir": str(leaf.parent_dir),
        },
    ]
    return theme_config


class ThemeGraphAssembler:
    def __init__(
        self,
        settings: Optional[LoaderSettings] = None,
        *,
        resolver: Optional[ThemeResolver] = None,
        walker: Optional[ThemeTreeWalker] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.resolver = resolver or ThemeResolver(self.settings)
        self.walker = walker or ThemeTreeWalker(self.resolver)

    def flatten(self, config: Mapping[str, Any], *, config_file_path: Any, root_dir: Path) -> List[ThemeLeaf]:
        themes: List[ThemeLeaf] = []
        for theme_spec in config.get("plugins") or []:
            resolved = self.resolver.resolve(
                theme_spec,
                config_file_path,
                is_top_level=True,
                base_dir=root_dir,
            )
            if resolved is None:
                continue
            themes.extend(self.walker.expand(resolved, root_dir))
        return themes

    def load_themes(
        self,
        config: Mapping[str, Any],
        *,
        config_file_path: Any,
        root_dir: Path,
    ) -> LoadedThemes:
        """Merge every theme config and then the site config, in order.

        Themes are merged furthest ancestor first; the site config is merged
        last and wins over everything.
        """
        config = config or {}
        root_dir = Path(root_dir)
        themes = self.flatten(config, config_file_path=config_file_path, root_dir=root_dir)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Flattened themes: %s", [leaf.to_dict() for leaf in themes])

        merged_themes = reduce(merge_configs, (augment_theme_config(t) for t in themes), {})
        return LoadedThemes(config=merge_configs(merged_themes, config), themes=themes)


def load_themes(
    config: Mapping[str, Any],
    *,
    config_file_path: Any,
    root_dir: Path,
    settings: Optional[LoaderSettings] = None,
) -> LoadedThemes:
    """Resolve the themes declared in ``config`` and return the merged config."""
    assembler = ThemeGraphAssembler(settings)
    return assembler.load_themes(config, config_file_path=config_file_path, root_dir=root_dir)


__all__ = ["ThemeGraphAssembler", "augment_theme_config", "load_themes"]
