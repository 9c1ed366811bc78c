from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class ThemeLoomError(Exception):
    """Base exception for theme loading."""

    context: Dict[str, Any]
    error_id: Optional[str] = None

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "error_id": self.error_id,
            "context": {k: _jsonable(v) for k, v in self.context.items()},
        }


def _jsonable(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if value is None or isinstance(value, (bool, int, float, str, dict)):
        return value
    return str(value)


class UnresolvableThemeError(ThemeLoomError, LookupError):
    """Raised when a declared theme cannot be located anywhere."""

    error_id = "10226"

    def __init__(
        self,
        theme_name: str,
        *,
        config_file_path: Any = None,
        path_to_local_theme: Any = None,
        resolution_paths: Any = (),
    ) -> None:
        searched = [str(p) for p in resolution_paths]
        lines = [f'Couldn\'t find the "{theme_name}" theme declared in "{config_file_path}".']
        if path_to_local_theme is not None:
            lines.append(f"Tried looking for a local theme in {path_to_local_theme}.")
        if searched:
            lines.append("Tried looking in:")
            lines.extend(f"  {p}" for p in searched)
        context = {
            "theme_name": theme_name,
            "config_file_path": config_file_path,
            "path_to_local_theme": path_to_local_theme,
            "resolution_paths": searched,
        }
        ThemeLoomError.__init__(self, "\n".join(lines), context=context)


class LocalPluginResolutionError(ThemeLoomError):
    """Raised when resolving a local plugin fails unexpectedly."""

    error_id = "10227"


class ThemeCycleError(ThemeLoomError, RecursionError):
    """Raised when a theme transitively declares itself."""

    error_id = "10228"


class InvalidThemeSpecError(ThemeLoomError, ValueError):
    """Raised when a plugins entry is not a valid theme reference."""

    error_id = "10229"


class ConfigFileError(ThemeLoomError):
    """Raised when a config file or manifest exists but cannot be loaded."""

    error_id = "10230"


class SettingsError(ThemeLoomError, ValueError):
    """Raised when a THEMELOOM_* setting has an unusable value."""


class PluginNotFoundError(ThemeLoomError, LookupError):
    """Raised by the local plugin resolver when nothing exists locally."""


__all__ = [
    "ThemeLoomError",
    "UnresolvableThemeError",
    "LocalPluginResolutionError",
    "ThemeCycleError",
    "InvalidThemeSpecError",
    "ConfigFileError",
    "PluginNotFoundError",
    "SettingsError",
]
