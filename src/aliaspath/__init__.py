"""
aliaspath - Virtual path resolution for template and asset loading

Register ordered lists of directories under short aliases and resolve
"alias:relative/path" strings to files, glob matches, URLs or root-relative
paths, probing directories in priority order.

License: Apache-2.0
"""

__version__ = "0.1.0"

from .config import ResolverConfig, default_doc_root
from .exceptions import (
    AliasError,
    ConfigurationError,
    InvalidAliasError,
    InvalidModeError,
    LoopedAliasError,
    PathResolverError,
    RootError,
    RootInvalidError,
    RootNotFoundError,
    RootNotSetError,
)
from .filesystem import FileSystemBackend, LocalBackend
from .registry import ResolverRegistry
from .resolver import LiteralDir, PathResolver, VirtualRef
from .types import Mode
from .web import BaseUrlProvider, EnvironBaseUrl, StaticBaseUrl

__all__ = [
    # Version
    "__version__",
    # Resolver
    "PathResolver",
    "Mode",
    "LiteralDir",
    "VirtualRef",
    "ResolverRegistry",
    # Collaborators
    "FileSystemBackend",
    "LocalBackend",
    "BaseUrlProvider",
    "EnvironBaseUrl",
    "StaticBaseUrl",
    # Configuration
    "ResolverConfig",
    "default_doc_root",
    # Errors
    "PathResolverError",
    "AliasError",
    "InvalidAliasError",
    "InvalidModeError",
    "LoopedAliasError",
    "RootError",
    "RootInvalidError",
    "RootNotFoundError",
    "RootNotSetError",
    "ConfigurationError",
]
