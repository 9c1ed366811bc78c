"""Locate installed themes by identifier.

Lookup order for ``resolve(identifier, from_dir)``:
1. An absolute identifier that exists on disk
2. ``<dir>/<modules_dir>/<identifier>`` for ``from_dir`` and each ancestor
3. Every ``sys.path`` entry
4. ``importlib.util.find_spec`` for the importable spelling
"""
from __future__ import annotations

import importlib.util
import logging
import sys
from pathlib import Path
from typing import List, Optional

from themeloom.core.config import LoaderSettings, load_settings

logger = logging.getLogger(__name__)


def _candidate_names(identifier: str) -> List[str]:
    names = [identifier]
    importable = identifier.replace("-", "_")
    if importable != identifier:
        names.append(importable)
    return names


class ModuleResolver:
    def __init__(self, settings: Optional[LoaderSettings] = None) -> None:
        self.settings = settings or load_settings()

    def resolution_paths(self, from_dir: Path) -> List[Path]:
        """Directories searched for ``from_dir``, nearest first."""
        start = Path(from_dir).resolve()
        paths = [d / self.settings.modules_dir for d in (start, *start.parents)]
        paths.extend(Path(p) for p in sys.path if p)
        return paths

    def resolve(self, identifier: str, from_dir: Path) -> Path:
        """Return the theme directory for ``identifier``.

        Raises:
            ModuleNotFoundError: identifier cannot be located from ``from_dir``.
        """
        as_path = Path(identifier)
        if as_path.is_absolute() and as_path.exists():
            return as_path if as_path.is_dir() else as_path.parent

        for search_path in self.resolution_paths(from_dir):
            for name in _candidate_names(identifier):
                candidate = search_path / name
                if candidate.is_dir():
                    logger.debug("Resolved %s to %s", identifier, candidate)
                    return candidate
                if candidate.with_name(f"{name}.py").is_file():
                    logger.debug("Resolved %s to module in %s", identifier, search_path)
                    return search_path

        found = self._find_spec_dir(identifier)
        if found is not None:
            return found
        raise ModuleNotFoundError(
            f"No module named {identifier!r} reachable from {from_dir}", name=identifier
        )

    def _find_spec_dir(self, identifier: str) -> Optional[Path]:
        importable = identifier.replace("-", "_")
        if not all(part.isidentifier() for part in importable.split(".")):
            return None
        try:
            spec = importlib.util.find_spec(importable)
        except (ImportError, ValueError):
            return None
        if spec is None or not spec.origin or spec.origin in {"built-in", "frozen"}:
            return None
        return Path(spec.origin).parent


__all__ = ["ModuleResolver"]
