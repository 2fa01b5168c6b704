"""
Alias-based path resolver.

Aliases map short names to ordered lists of directories. A source string
``"alias:relative/path"`` is resolved by probing each directory in order and
returning the first existing match.

Example:
    >>> resolver = PathResolver("/srv")
    >>> resolver.set("assets", "/srv/pkgA")
    >>> resolver.set("assets", "/srv/pkgB", Mode.APPEND)
    >>> resolver.get("assets:app.js")        # only /srv/pkgB/app.js exists
    '/srv/pkgB/app.js'
    >>> resolver.url("assets:app.js", is_full_url=False)
    '/pkgB/app.js'
"""

from __future__ import annotations

import logging
import os
import re
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Set, Union

from ..config import default_doc_root
from ..exceptions import (
    InvalidAliasError,
    InvalidModeError,
    LoopedAliasError,
    RootInvalidError,
    RootNotFoundError,
    RootNotSetError,
)
from ..filesystem import FileSystemBackend, LocalBackend
from ..types import Mode
from ..web import BaseUrlProvider, EnvironBaseUrl, StaticBaseUrl
from . import normalize
from .entries import DirectoryEntry, LiteralDir, VirtualRef

if TYPE_CHECKING:  # pragma: no cover
    from ..config import ResolverConfig

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class PathResolver:
    """
    Registers directories under aliases and resolves virtual paths against them.

    Each instance owns its alias table, its root directory and the real-path
    flag. Instances are not safe for concurrent mutation: serialize ``set``,
    ``remove`` and ``set_root`` against lookups when sharing one across threads.
    """

    MIN_ALIAS_LENGTH = 2
    ROOT_ALIAS = "root"

    def __init__(
        self,
        root: Optional[PathLike] = None,
        backend: Optional[FileSystemBackend] = None,
        base_url: Optional[Union[str, BaseUrlProvider]] = None,
        real_path: bool = True,
    ):
        """
        Initialize the resolver.

        Args:
            root: Root directory for URLs and relative paths. Defaults to the
                  document root (``$DOCUMENT_ROOT`` or the working directory)
            backend: Filesystem backend (local disk by default)
            base_url: Base URL string or provider used by ``url(..., is_full_url=True)``.
                      Defaults to the CGI/WSGI environment in ``os.environ``
            real_path: Return symlink-resolved paths (True) or normalized ones (False)

        Raises:
            RootNotFoundError: If the root is not an existing directory
        """
        self.fs: FileSystemBackend = backend if backend is not None else LocalBackend()
        if isinstance(base_url, str):
            self.base_url: BaseUrlProvider = StaticBaseUrl(base_url)
        else:
            self.base_url = base_url if base_url is not None else EnvironBaseUrl()
        self.is_real = real_path

        self._paths: Dict[str, List[DirectoryEntry]] = {}
        self._root: Optional[str] = None
        self._resolving: Set[str] = set()

        self.set_root(root or default_doc_root())

    @classmethod
    def from_config(
        cls, config: "ResolverConfig", backend: Optional[FileSystemBackend] = None
    ) -> "PathResolver":
        """
        Build a resolver and register the aliases declared in a config.

        Args:
            config: Validated resolver configuration
            backend: Optional filesystem backend

        Returns:
            A populated PathResolver
        """
        resolver = cls(
            root=config.root,
            backend=backend,
            base_url=config.base_url,
            real_path=config.real_path,
        )
        for alias, paths in config.aliases.items():
            resolver.set(alias, paths, config.mode)
        return resolver

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #

    def set(
        self,
        alias: str,
        paths: Union[PathLike, Iterable[PathLike]],
        mode: Union[Mode, str] = Mode.PREPEND,
    ) -> "PathResolver":
        """
        Register directories for an alias.

        Paths may be real directories (``"C:\\server\\site\\theme"``,
        ``"/srv/site/theme/../.."``) or references to other aliases
        (``"vendor:theme"``).

        Args:
            alias: Alias name; characters outside ``[a-zA-Z0-9_.-]`` are dropped
            paths: One path or an ordered list of paths
            mode: PREPEND (search first), APPEND (search last) or RESET

        Returns:
            self, for chaining

        Raises:
            InvalidAliasError: If the alias is too short or is "root"
            LoopedAliasError: If a path references the alias itself
            InvalidModeError: If mode is not prepend, append or reset
        """
        name = normalize.clean_alias(alias)

        if len(name) < self.MIN_ALIAS_LENGTH:
            raise InvalidAliasError(
                f"The minimum number of characters is {self.MIN_ALIAS_LENGTH}",
                alias=name or str(alias),
            )
        if name == self.ROOT_ALIAS:
            raise InvalidAliasError('Alias "root" is predefined', alias=name)

        try:
            mode = Mode(mode)
        except ValueError as e:
            raise InvalidModeError(
                f"Unknown mode {mode!r}", alias=name, context={"mode": str(mode)}
            ) from e
        if mode is Mode.RESET:
            self._paths[name] = []
            mode = Mode.PREPEND

        entries = self._paths.setdefault(name, [])
        looped = re.compile("^" + re.escape(name + normalize.ALIAS_SEPARATOR), re.IGNORECASE)

        for given in self._as_list(paths):
            path = normalize.clean_separators(given)
            if not path or self._index_of(entries, path) is not None:
                continue

            if looped.match(path):
                raise LoopedAliasError(
                    f'Added looped path "{path}" to key "{name}"', alias=name, path=path
                )

            entry = self._registerable(path)
            if entry is None:
                logger.debug(f"Skipping {path!r}: cannot canonicalize", extra={"alias": name})
                continue
            if self._index_of(entries, entry.raw) is not None:
                continue

            if mode is Mode.PREPEND:
                entries.insert(0, entry)
            else:
                entries.append(entry)
            logger.debug(f"Registered {entry.raw!r} ({mode.value})", extra={"alias": name})

        return self

    def remove(
        self, from_source: str, paths: Union[PathLike, Iterable[PathLike]]
    ) -> bool:
        """
        Remove directories from an alias.

        Args:
            from_source: Alias or source string (``"default"``, ``"default:file.txt"``)
            paths: One path or a list of paths, written any way they were registered

        Returns:
            True if at least one directory was removed
        """
        alias, _ = normalize.split_source(from_source)
        name = normalize.clean_alias(alias)
        entries = self._paths.get(name)
        if not entries:
            return False

        removed = False
        for given in self._as_list(paths):
            entry = self._registerable(normalize.clean_separators(given))
            if entry is None:
                continue
            index = self._index_of(entries, entry.raw)
            if index is not None:
                del entries[index]
                removed = True
                logger.debug(f"Removed {entry.raw!r}", extra={"alias": name})

        return removed

    # ------------------------------------------------------------------ #
    # Resolution
    # ------------------------------------------------------------------ #

    def get(self, source: str) -> Optional[str]:
        """
        Get the absolute path of a file or directory.

        Args:
            source: Virtual path, e.g. ``"default:file.txt"``

        Returns:
            The first existing candidate, or None
        """
        alias, relative = normalize.split_source(source)
        return self._find(self._resolve_paths(alias), relative)

    def glob(self, source: str) -> List[str]:
        """
        Expand a pattern in the first directory of an alias.

        Later directories are not searched, even if they would match.

        Args:
            source: Virtual pattern, e.g. ``"default:css/*.{css,less}"``

        Returns:
            Matching paths (empty list if none)
        """
        alias, relative = normalize.split_source(source)
        directories = self._resolve_paths(alias)
        if not directories:
            return []

        relative = normalize.strip_leading_separators(relative)
        pattern = normalize.clean(f"{directories[0]}/{relative}")
        return [match for match in self.fs.glob(pattern) if match]

    def get_paths(self, source: str) -> List[str]:
        """
        Get the resolved directory list of an alias.

        Args:
            source: Alias or source string; the relative part is ignored

        Returns:
            Directories in search order
        """
        alias, _ = normalize.split_source(source)
        return self._resolve_paths(alias)

    def has_alias(self, alias: str) -> bool:
        """Check whether an alias has been registered (even if now empty)."""
        return normalize.clean_alias(alias) in self._paths

    @property
    def aliases(self) -> List[str]:
        """Registered alias names in registration order."""
        return list(self._paths)

    # ------------------------------------------------------------------ #
    # URLs and relative paths
    # ------------------------------------------------------------------ #

    def url(self, source: str, is_full_url: bool = True) -> Optional[str]:
        """
        Get the URL of a file under the root directory.

        Args:
            source: Virtual or real path, optionally with a query string
                    (``"default:file.txt?ver=123"``)
            is_full_url: Prefix the base URL (True) or only ``/`` (False)

        Returns:
            The URL, or None if the file does not exist or is outside the root

        Raises:
            RootNotSetError: If no root directory is set
        """
        path_part, has_query, query = str(source).partition("?")

        path = self._clean_path_internal(path_part)
        if not path:
            return None

        relative = self._url_path(path)
        if not relative:
            return None

        if has_query:
            relative += f"?{query}"
        relative = f"/{relative}"

        if is_full_url:
            return f"{self.base_url.current_base_url()}{relative}"
        return relative

    def rel(self, source: str) -> Optional[str]:
        """
        Get the path of a file relative to the root directory.

        Args:
            source: Virtual path, e.g. ``"default:file.txt"``

        Returns:
            Root-relative path, or None if nothing was found
        """
        full_path = self.get(source)
        if full_path is None:
            return None
        return self.fs.relative_to(full_path, self.get_root(), "/")

    def rel_glob(self, source: str) -> List[str]:
        """Root-relative variant of :meth:`glob`."""
        root = self.get_root()
        return [self.fs.relative_to(item, root, "/") for item in self.glob(source)]

    # ------------------------------------------------------------------ #
    # Root and flags
    # ------------------------------------------------------------------ #

    def set_root(self, path: Optional[PathLike]) -> "PathResolver":
        """
        Set the root directory.

        Raises:
            RootInvalidError: If path is empty
            RootNotFoundError: If path is not an existing directory
        """
        if path is None or not str(os.fspath(path)).strip():
            raise RootInvalidError()

        path = os.fspath(path)
        if not self.fs.is_dir(path):
            raise RootNotFoundError(f"Not found directory: {path}", path=path)

        self._root = normalize.clean_separators(path)
        logger.debug(f"Root directory set to {self._root}")
        return self

    def get_root(self) -> str:
        """
        Get the root directory.

        Raises:
            RootNotSetError: If no root is set
        """
        if not self._root:
            raise RootNotSetError()
        return self._root

    def set_real_path_flag(self, is_real: bool = True) -> "PathResolver":
        """Return canonical (True) or normalized-but-unresolved (False) paths."""
        self.is_real = bool(is_real)
        return self

    def is_virtual(self, path: str) -> bool:
        """
        Check whether a path is a virtual ``alias:path`` reference.

        A registered alias (or ``root``) always wins; otherwise a path with an OS prefix
        (``"C:\\dir"``, ``"alias:/file"``) is real.

        Args:
            path: ``"default:file.txt"`` or ``"C:\\server\\file.txt"``
        """
        parts = str(path).split(normalize.ALIAS_SEPARATOR, 1)
        alias = normalize.clean_alias(parts[0])

        known = alias in self._paths or alias == self.ROOT_ALIAS
        if not known and normalize.prefix(path) is not None:
            return False

        return len(parts) == 2

    @staticmethod
    def prefix(path: str) -> Optional[str]:
        """Get the drive/slash prefix of a path (see :func:`normalize.prefix`)."""
        return normalize.prefix(path)

    @staticmethod
    def clean(path: str) -> str:
        """Normalize a path lexically (see :func:`normalize.clean`)."""
        return normalize.clean(path)

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _resolve_paths(self, alias: str) -> List[str]:
        """Resolve the directory list of an alias, following alias references."""
        name = normalize.clean_alias(alias)
        if name == self.ROOT_ALIAS:
            return [self.get_root()]

        if name in self._resolving:
            logger.warning(f"Circular alias reference through '{name}'", extra={"alias": name})
            return []

        self._resolving.add(name)
        try:
            result: List[str] = []
            for entry in self._paths.get(name, []):
                if isinstance(entry, VirtualRef):
                    path = self._find(self._resolve_paths(entry.alias), entry.subpath)
                    if not path:
                        logger.debug(f"Unresolved reference {entry.raw!r}", extra={"alias": name})
                        continue
                else:
                    path = entry.raw

                current = self._current_path(path)
                if current:
                    result.append(current)
            return result
        finally:
            self._resolving.discard(name)

    def _find(self, directories: List[str], relative: str) -> Optional[str]:
        """Return the first existing file or directory at ``relative`` below ``directories``."""
        relative = normalize.strip_leading_separators(relative)
        for directory in directories:
            candidate = normalize.clean(f"{directory}/{relative}")
            if self.fs.exists(candidate) or self.fs.is_dir(candidate):
                return candidate
        return None

    def _current_path(self, path: str) -> Optional[str]:
        if self.is_real:
            real = self.fs.real_path(path)
            return normalize.clean_separators(real) if real else None
        return path or None

    def _is_reference(self, path: str) -> bool:
        """
        Check whether a path should be stored as an alias reference.

        Besides :meth:`is_virtual`, any ``name:subpath`` whose name is already
        a well-formed alias counts, so references to aliases registered later
        (``"theme:/css"``) are followed once those aliases exist. Single-letter
        names are drive letters.
        """
        if self.is_virtual(path):
            return True
        alias, separator, _ = path.partition(normalize.ALIAS_SEPARATOR)
        return (
            bool(separator)
            and len(alias) >= self.MIN_ALIAS_LENGTH
            and alias == normalize.clean_alias(alias)
        )

    def _registerable(self, path: str) -> Optional[DirectoryEntry]:
        """Convert a separator-normalized path into the entry stored in the table."""
        if not path:
            return None
        if self._is_reference(path):
            return VirtualRef.parse(path)
        if normalize.has_parent_traversal(path):
            real = self.fs.real_path(path)
            return LiteralDir(normalize.clean_separators(real)) if real else None
        return LiteralDir(path)

    def _clean_path_internal(self, path: str) -> Optional[str]:
        path = normalize.clean_separators(path)
        if not path:
            return None
        if self.is_virtual(path):
            return path
        if normalize.has_parent_traversal(path):
            real = self.fs.real_path(path)
            return normalize.clean_separators(real) if real else None
        return path

    def _url_path(self, path: str) -> Optional[str]:
        """Turn a cleaned path into a root-relative URL path."""
        root = self.get_root()

        if self.is_virtual(path):
            path = self.get(path)
            if not path:
                return None
        elif not (self.fs.exists(path) or self.fs.is_dir(path)):
            return None

        roots = [root]
        real_root = self.fs.real_path(root)
        if real_root:
            roots.append(normalize.clean_separators(real_root))

        for candidate in roots:
            base = candidate.rstrip("/")
            if path.lower().startswith(base.lower() + "/"):
                return path[len(base):].lstrip("/") or None

        return None

    @staticmethod
    def _as_list(paths: Union[PathLike, Iterable[PathLike], None]) -> List[str]:
        if paths is None:
            return []
        if isinstance(paths, (str, os.PathLike)):
            return [os.fspath(paths)]
        return [os.fspath(path) for path in paths if path is not None]

    @staticmethod
    def _index_of(entries: List[DirectoryEntry], raw: str) -> Optional[int]:
        for index, entry in enumerate(entries):
            if entry.raw == raw:
                return index
        return None

    def __repr__(self) -> str:
        return (
            f"PathResolver(root={self._root}, "
            f"aliases={len(self._paths)}, "
            f"real_path={self.is_real})"
        )
