"""Filesystem collaborator used by the path resolver.

The resolver never touches the disk directly; every existence check,
canonicalization and glob expansion goes through a backend implementing
:class:`FileSystemBackend`.

Example:
    >>> from aliaspath.filesystem import LocalBackend
    >>> fs = LocalBackend()
    >>> fs.glob("/etc/{hosts,hostname}")
    ['/etc/hosts', '/etc/hostname']
"""

from .core import FileSystemBackend, LocalBackend, expand_braces

__all__ = ["FileSystemBackend", "LocalBackend", "expand_braces"]
