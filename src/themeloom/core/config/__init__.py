"""themeloom configuration system.

Usage:
    from themeloom.core.config import load_settings

    settings = load_settings(restricted_mode=True)
"""
from __future__ import annotations

from .settings import ENV_PREFIX, LoaderSettings, load_settings

__all__ = [
    "ENV_PREFIX",
    "LoaderSettings",
    "load_settings",
]
