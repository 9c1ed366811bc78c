"""
themeloom - site theme resolution

Resolves the themes a site declares (and the themes those declare) into one
ordered list and merges their configs into the site config.
"""

from themeloom.core.themes import LoadedThemes, load_themes

__version__ = "1.0.0"
__all__ = ["__version__", "LoadedThemes", "load_themes"]
