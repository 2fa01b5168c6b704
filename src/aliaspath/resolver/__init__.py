"""Alias table, path normalization and resolution."""

from .core import PathResolver
from .entries import DirectoryEntry, LiteralDir, VirtualRef
from .normalize import clean, prefix

__all__ = [
    "PathResolver",
    "DirectoryEntry",
    "LiteralDir",
    "VirtualRef",
    "clean",
    "prefix",
]
