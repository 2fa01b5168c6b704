"""Filesystem backends for alias resolution.

All paths returned by a backend use forward slashes, whatever the host OS.
"""

from __future__ import annotations

import glob as globlib
import logging
import os
from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class FileSystemBackend(Protocol):
    """Capabilities the resolver needs from the filesystem."""

    def exists(self, path: str) -> bool:
        """Return True if a regular file is present at ``path``."""
        ...

    def is_dir(self, path: str) -> bool:
        """Return True if ``path`` is a directory."""
        ...

    def real_path(self, path: str) -> Optional[str]:
        """Return the canonical form of ``path`` or None if it does not exist."""
        ...

    def glob(self, pattern: str) -> List[str]:
        """Expand a shell pattern (with ``{a,b}`` braces) into existing paths."""
        ...

    def relative_to(self, path: str, base: str, sep: str = "/") -> str:
        """Strip ``base`` from the front of ``path``."""
        ...


def _split_top_level(body: str) -> List[str]:
    """Split a brace body on commas that are not nested in inner braces."""
    options: List[str] = []
    depth = 0
    current = ""
    for ch in body:
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch == "," and depth == 0:
            options.append(current)
            current = ""
            continue
        current += ch
    options.append(current)
    return options


def expand_braces(pattern: str) -> List[str]:
    """
    Expand csh-style brace alternatives in a glob pattern.

    ``"a/{b,c}/*.{js,css}"`` becomes four patterns, in the order the
    alternatives are written. Groups without a top-level comma (``"{x}"``) and
    unbalanced braces are kept literally.

    Args:
        pattern: Glob pattern possibly containing brace groups

    Returns:
        List of patterns with every brace group expanded
    """
    depth = 0
    start = -1
    for index, ch in enumerate(pattern):
        if ch == "{":
            if depth == 0:
                start = index
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                options = _split_top_level(pattern[start + 1:index])
                if len(options) < 2:
                    continue
                head, tail = pattern[:start], pattern[index + 1:]
                expanded: List[str] = []
                for option in options:
                    expanded.extend(expand_braces(head + option + tail))
                return expanded
    return [pattern]


class LocalBackend:
    """Backend for the local disk.

    Thin wrapper over ``os.path``/``glob`` that converts every result to
    forward slashes so the resolver can compare paths as plain strings.
    """

    def exists(self, path: str) -> bool:
        return bool(path) and os.path.isfile(path)

    def is_dir(self, path: str) -> bool:
        return bool(path) and os.path.isdir(path)

    def real_path(self, path: str) -> Optional[str]:
        """Resolve symlinks, ``.`` and ``..``.

        Args:
            path: Path to canonicalize

        Returns:
            The canonical absolute path, or None if the path does not exist
        """
        if not path:
            return None
        try:
            resolved = Path(path).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            logger.debug(f"Cannot canonicalize {path!r}: {e}")
            return None
        return resolved.as_posix()

    def glob(self, pattern: str) -> List[str]:
        """Expand ``pattern`` into existing paths.

        Each brace alternative is globbed separately and its matches are
        sorted; duplicates across alternatives are dropped keeping the first.
        """
        results: List[str] = []
        seen = set()
        for expanded in expand_braces(pattern):
            for match in sorted(globlib.glob(expanded)):
                match = match.replace("\\", "/")
                if match and match not in seen:
                    seen.add(match)
                    results.append(match)
        return results

    def relative_to(self, path: str, base: str, sep: str = "/") -> str:
        """Make ``path`` relative to ``base``.

        Both sides are canonicalized first when they exist. A path outside
        ``base`` is returned unchanged (with ``sep`` separators).

        Args:
            path: Path to shorten
            base: Directory to strip from the front of ``path``
            sep: Separator used in the result

        Returns:
            The relative path without a leading separator
        """
        full = (self.real_path(path) or path).replace("\\", "/")
        root = (self.real_path(base) or base).replace("\\", "/").rstrip("/")

        if root and (full == root or full.startswith(root + "/")):
            full = full[len(root):].lstrip("/")

        return full.replace("/", sep)
