"""Expand a theme's declared parent themes into a flat, post-order list.

For a theme ``child`` declaring ``[parentA, parentB]`` the result is
``[...parentA's tree, parentA, ...parentB's tree, parentB, child]``: every
theme comes after the themes it declares, so later merges let it override
them. Siblings are resolved one at a time, each subtree fully expanded
before the next sibling is looked up.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, List, Optional, Tuple

from themeloom.core.exceptions import ThemeCycleError

from .model import ResolvedTheme, ThemeLeaf
from .resolver import ThemeResolver

logger = logging.getLogger(__name__)

_DONE = object()


@dataclass
class _Frame:
    theme: ResolvedTheme
    context_dir: Path
    remaining: Iterator[Any]


class ThemeTreeWalker:
    def __init__(self, resolver: Optional[ThemeResolver] = None) -> None:
        self.resolver = resolver or ThemeResolver()

    def expand(self, resolved: ResolvedTheme, context_dir: Path) -> List[ThemeLeaf]:
        """Flatten ``resolved`` and everything it declares.

        Raises:
            ThemeCycleError: a theme declares itself, directly or transitively.
        """
        leaves: List[ThemeLeaf] = []
        stack = [_Frame(resolved, Path(context_dir), iter(resolved.declared_plugins()))]
        chain: List[Tuple[str, str]] = [resolved.key]

        while stack:
            frame = stack[-1]
            entry = next(frame.remaining, _DONE)
            if entry is _DONE:
                stack.pop()
                chain.pop()
                leaves.append(frame.theme.to_leaf(frame.context_dir))
                continue

            parent = frame.theme
            child = self.resolver.resolve(
                entry,
                parent.config_file_path,
                is_top_level=False,
                base_dir=parent.theme_dir,
            )
            if child is None:
                continue
            if child.key in chain:
                names = [f.theme.theme_name for f in stack] + [child.theme_name]
                raise ThemeCycleError(
                    f"Theme {child.theme_name} declares itself: {' -> '.join(names)}",
                    context={
                        "theme_name": child.theme_name,
                        "theme_dir": str(child.theme_dir),
                        "chain": names,
                    },
                )
            logger.debug("%s declares %s", parent.theme_name, child.theme_name)
            stack.append(_Frame(child, parent.theme_dir, iter(child.declared_plugins())))
            chain.append(child.key)

        return leaves


__all__ = ["ThemeTreeWalker"]
