from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from .spec import ThemeSpec


@dataclass(frozen=True)
class ThemeLeaf:
    """One entry of the flattened theme list."""

    theme_name: str
    theme_config: Optional[Dict[str, Any]]
    theme_spec: ThemeSpec
    theme_dir: Path
    parent_dir: Path

    def to_dict(self) -> Dict[str, Any]:
        return {
            "theme_name": self.theme_name,
            "theme_config": self.theme_config,
            "options": self.theme_spec.options_copy(),
            "theme_dir": str(self.theme_dir),
            "parent_dir": str(self.parent_dir),
        }


@dataclass(frozen=True)
class ResolvedTheme:
    """A located theme together with its realized configuration."""

    theme_name: str
    theme_config: Optional[Dict[str, Any]]
    theme_spec: ThemeSpec
    theme_dir: Path
    parent_dir: Path
    config_file_path: Optional[Path]

    @property
    def key(self) -> Tuple[str, str]:
        return (str(self.theme_dir), self.theme_name)

    def declared_plugins(self) -> List[Any]:
        if not self.theme_config:
            return []
        return list(self.theme_config.get("plugins") or [])

    def to_leaf(self, parent_dir: Path) -> ThemeLeaf:
        return ThemeLeaf(
            theme_name=self.theme_name,
            theme_config=self.theme_config,
            theme_spec=self.theme_spec,
            theme_dir=self.theme_dir,
            parent_dir=parent_dir,
        )


class LoadedThemes(NamedTuple):
    config: Dict[str, Any]
    themes: List[ThemeLeaf]


__all__ = ["LoadedThemes", "ResolvedTheme", "ThemeLeaf"]
