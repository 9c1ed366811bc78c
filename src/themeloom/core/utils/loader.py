"""Dynamic module loading for Python config files."""
from __future__ import annotations

import importlib.util
import logging
import re
from pathlib import Path
from types import ModuleType

logger = logging.getLogger(__name__)


def _module_name(path: Path, namespace: str) -> str:
    stem = re.sub(r"\W", "_", path.stem)
    parent = re.sub(r"\W", "_", path.parent.name) or "root"
    return f"{namespace}.{parent}.{stem}"


def load_module_from_path(
    path: Path,
    namespace: str = "themeloom.dynamic",
) -> ModuleType:
    """Load a Python module from file without adding it to sys.modules.

    Args:
        path: Path to the .py file
        namespace: Module namespace prefix for the loaded module

    Returns:
        The executed module

    Raises:
        ImportError: If no loader can be created for ``path``.
        Exception: Anything raised while executing the module body.
    """
    module_name = _module_name(path, namespace)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load module from {path}", path=str(path))
    module = importlib.util.module_from_spec(spec)
    logger.debug("Executing config module %s as %s", path, module_name)
    spec.loader.exec_module(module)
    return module


__all__ = ["load_module_from_path"]
