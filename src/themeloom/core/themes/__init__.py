"""Theme resolution.

Usage:
    from themeloom.core.themes import load_themes

    config, themes = load_themes(site_config, config_file_path=path, root_dir=root)
"""
from __future__ import annotations

from .assembler import ThemeGraphAssembler, augment_theme_config, load_themes
from .config_file import LoadedConfigFile, get_config_file, prefer_default
from .local import LocalPlugin, LocalPluginResolver
from .model import LoadedThemes, ResolvedTheme, ThemeLeaf
from .modules import ModuleResolver
from .resolver import ThemeResolver
from .spec import ThemeSpec, normalize_theme_spec
from .walker import ThemeTreeWalker

__all__ = [
    "LoadedConfigFile",
    "LoadedThemes",
    "LocalPlugin",
    "LocalPluginResolver",
    "ModuleResolver",
    "ResolvedTheme",
    "ThemeGraphAssembler",
    "ThemeLeaf",
    "ThemeResolver",
    "ThemeSpec",
    "ThemeTreeWalker",
    "augment_theme_config",
    "get_config_file",
    "load_themes",
    "normalize_theme_spec",
    "prefer_default",
]
