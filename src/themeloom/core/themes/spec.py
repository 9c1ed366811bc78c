"""Theme references as they appear in a ``plugins`` list.

A plugins entry is either a bare identifier or a mapping
``{"resolve": identifier, "options": {...}}``. Both forms are normalized to
:class:`ThemeSpec` before resolution.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional

from jsonschema import Draft202012Validator

from themeloom.core.exceptions import InvalidThemeSpecError
from themeloom.data import read_yaml

SCHEMA_FILE = "theme-spec.schema.yaml"


@dataclass(frozen=True)
class ThemeSpec:
    resolve: str
    options: Dict[str, Any] = field(default_factory=dict)

    def options_copy(self) -> Dict[str, Any]:
        return dict(self.options or {})


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    schema = read_yaml("schemas", SCHEMA_FILE)
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def validate_entry(entry: Mapping[str, Any]) -> List[str]:
    """Return schema error messages for an object-form plugins entry."""
    errors = []
    for err in sorted(_validator().iter_errors(dict(entry)), key=lambda e: list(e.path)):
        path = "/".join(str(p) for p in err.path) or "<root>"
        errors.append(f"{path}: {err.message}")
    return errors


def normalize_theme_spec(
    entry: Any,
    *,
    config_file_path: Any = None,
    validate: bool = True,
) -> ThemeSpec:
    """Turn a plugins entry into a :class:`ThemeSpec`.

    Raises:
        InvalidThemeSpecError: entry is neither a non-empty string nor a
            mapping with a usable ``resolve`` key.
    """
    if isinstance(entry, ThemeSpec):
        return entry
    if isinstance(entry, str):
        if not entry.strip():
            raise InvalidThemeSpecError(
                "Plugin entries must not be empty strings",
                context={"entry": entry, "config_file_path": config_file_path, "errors": []},
            )
        return ThemeSpec(resolve=entry, options={})
    if not isinstance(entry, Mapping):
        raise InvalidThemeSpecError(
            f"Unsupported plugins entry: {entry!r}",
            context={"entry": repr(entry), "config_file_path": config_file_path, "errors": []},
        )

    errors: List[str] = validate_entry(entry) if validate else []
    resolve: Optional[Any] = entry.get("resolve")
    if not errors and not (isinstance(resolve, str) and resolve.strip()):
        errors.append("resolve: must be a non-empty string")
    if errors:
        raise InvalidThemeSpecError(
            f"Invalid plugins entry in {config_file_path}: " + "; ".join(errors),
            context={"entry": dict(entry), "config_file_path": config_file_path, "errors": errors},
        )
    return ThemeSpec(resolve=resolve, options=dict(entry.get("options") or {}))


__all__ = ["SCHEMA_FILE", "ThemeSpec", "normalize_theme_spec", "validate_entry"]
