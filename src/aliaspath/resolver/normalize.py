"""
String-level path helpers.

Nothing in this module touches the filesystem: separators, prefixes and
``.``/``..`` segments are handled purely lexically.
"""

import re
from typing import List, Optional, Tuple

ALIAS_SEPARATOR = ":"

_SEPARATORS_RE = re.compile(r"[/\\]+")
_PREFIX_RE = re.compile(r"^(?P<prefix>([a-zA-Z]+:)?//?)")
_PARENT_SUFFIX_RE = re.compile(r"/\.\.$|/\.\./$")
_ALIAS_FORBIDDEN_RE = re.compile(r"[^a-z0-9_.-]", re.IGNORECASE)


def clean_separators(path: Optional[str]) -> str:
    """Trim whitespace and collapse every run of ``/`` and ``\\`` into one ``/``."""
    if not path:
        return ""
    return _SEPARATORS_RE.sub("/", str(path).strip())


def clean_alias(alias: Optional[str]) -> str:
    """Strip every character outside ``[a-zA-Z0-9_.-]``."""
    if not alias:
        return ""
    return _ALIAS_FORBIDDEN_RE.sub("", str(alias))


def prefix(path: Optional[str]) -> Optional[str]:
    """
    Get the absolute-path prefix of a path.

    Args:
        path: Path such as ``"C:\\server\\file.txt"`` or ``"/srv/file.txt"``

    Returns:
        The drive letter and/or leading slash (``"C:/"``, ``"/"``), or None
        for relative paths and ``alias:file`` references
    """
    match = _PREFIX_RE.match(clean_separators(path))
    return match.group("prefix") if match else None


def clean(path: Optional[str]) -> str:
    """
    Normalize a path lexically.

    Separators become ``/`` and whitespace around each segment is trimmed.
    Empty and ``.`` segments are dropped; each ``..`` removes the previous
    segment. A ``..`` with nothing left to remove is ignored, so the result
    never climbs above its prefix. Cleaning an already clean path returns
    it unchanged.

    Args:
        path: Path to normalize (``"..\\test\\path\\folder\\"``)

    Returns:
        The normalized path (``"test/path/folder"``)
    """
    cleaned = clean_separators(path)
    head = prefix(cleaned) or ""
    tokens: List[str] = []

    for part in cleaned[len(head):].split("/"):
        part = part.strip()
        if not part or part == ".":
            continue
        if part == "..":
            if tokens:
                tokens.pop()
            continue
        tokens.append(part)

    return head + "/".join(tokens)


def has_parent_traversal(path: Optional[str]) -> bool:
    """Check whether a path ends with a ``..`` segment."""
    return bool(_PARENT_SUFFIX_RE.search(clean_separators(path)))


def split_source(source: Optional[str]) -> Tuple[str, str]:
    """Split ``"alias:relative/path"`` on the first separator.

    A source without a separator is treated as a bare alias.
    """
    alias, _, relative = str(source or "").partition(ALIAS_SEPARATOR)
    return alias, relative


def strip_leading_separators(path: str) -> str:
    return path.lstrip("\\/")
