"""Loader settings.

Settings sources (highest to lowest priority):
1. Keyword overrides passed to :func:`load_settings`
2. Environment variables: THEMELOOM_<FIELD>
3. Bundled defaults: themeloom.data/config/defaults.yaml
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from themeloom.core.exceptions import SettingsError
from themeloom.data import read_yaml

ENV_PREFIX = "THEMELOOM_"


@dataclass(frozen=True)
class LoaderSettings:
    """Knobs for theme resolution."""

    config_name: str = "site-config"
    modules_dir: str = "themes"
    plugins_dir: str = "plugins"
    plugin_manifest: str = "plugin.yaml"
    restricted_mode: bool = False
    validate_specs: bool = True


_TRUE = {"true", "1", "yes"}
_FALSE = {"false", "0", "no"}


def _as_bool(key: str, v: str) -> bool:
    low = v.strip().lower()
    if low in _TRUE:
        return True
    if low in _FALSE:
        return False
    raise SettingsError(
        f"{ENV_PREFIX}{key.upper()} must be one of true/false, 1/0, yes/no; got {v!r}",
        context={"setting": key, "value": v},
    )


def _coerce_type(key: str, value: str, field_type: Any) -> Any:
    if field_type in (bool, "bool"):
        return _as_bool(key, value)
    return value.strip()


def _iter_env_overrides(environ: Mapping[str, str]):
    for key in sorted(environ.keys()):
        if not key.startswith(ENV_PREFIX):
            continue
        raw = key[len(ENV_PREFIX):].lower()
        if not raw:
            continue
        yield raw, environ[key]


def load_settings(environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> LoaderSettings:
    """Build :class:`LoaderSettings` from defaults, environment and overrides.

    Keys that are not settings fields are ignored.

    Raises:
        SettingsError: a boolean setting has an unrecognised value.
    """
    field_types = {f.name: f.type for f in fields(LoaderSettings)}
    known = set(field_types)
    values: Dict[str, Any] = {k: v for k, v in read_yaml("config", "defaults.yaml").items() if k in known}

    env = os.environ if environ is None else environ
    for key, value in _iter_env_overrides(env):
        if key in known:
            values[key] = _coerce_type(key, value, field_types[key])

    values.update({k: v for k, v in overrides.items() if k in known and v is not None})
    return LoaderSettings(**values)


__all__ = ["ENV_PREFIX", "LoaderSettings", "load_settings"]
