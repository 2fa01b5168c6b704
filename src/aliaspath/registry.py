"""
Named resolver registry.

Hosts that need several independent alias tables (one per site, theme or
tenant) create a :class:`ResolverRegistry` and pass it around explicitly.
There is no process-wide default instance.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional

from .exceptions import ConfigurationError
from .resolver import PathResolver

logger = logging.getLogger(__name__)


class ResolverRegistry:
    """
    Maps names to PathResolver instances.

    The registry's own map is guarded by a lock; the resolvers it hands out
    are not, so callers still serialize mutations of a shared resolver.
    """

    def __init__(self, factory: Optional[Callable[[], PathResolver]] = None):
        """
        Initialize the registry.

        Args:
            factory: Builds a resolver for ``get_or_create``. Defaults to
                     ``PathResolver()`` rooted at the document root.
        """
        self._factory = factory or PathResolver
        self._resolvers: Dict[str, PathResolver] = {}
        self._lock = threading.Lock()

    def register(self, name: str, resolver: PathResolver) -> PathResolver:
        """
        Register a resolver under a name.

        Raises:
            ConfigurationError: If the name is empty or already refers to a
                different resolver
        """
        if not name:
            raise ConfigurationError("Resolver name must not be empty")

        with self._lock:
            existing = self._resolvers.get(name)
            if existing is not None and existing is not resolver:
                raise ConfigurationError(
                    f"Resolver name '{name}' already refers to a different resolver",
                    context={"name": name},
                )
            self._resolvers[name] = resolver
            logger.debug(f"Resolver registered: {name}")
            return resolver

    def get(self, name: str) -> Optional[PathResolver]:
        with self._lock:
            return self._resolvers.get(name)

    def get_or_create(self, name: str) -> PathResolver:
        """Get a resolver, building it with the factory on first use."""
        with self._lock:
            resolver = self._resolvers.get(name)
            if resolver is None:
                resolver = self._factory()
                self._resolvers[name] = resolver
                logger.debug(f"Resolver created: {name}")
            return resolver

    def unregister(self, name: str) -> bool:
        """Remove a resolver. Returns False if the name was not registered."""
        with self._lock:
            if self._resolvers.pop(name, None) is None:
                logger.warning(f"Cannot unregister '{name}': not found in registry")
                return False
            logger.debug(f"Resolver unregistered: {name}")
            return True

    def names(self) -> List[str]:
        with self._lock:
            return list(self._resolvers)

    def clear(self) -> None:
        with self._lock:
            self._resolvers.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._resolvers

    def __len__(self) -> int:
        with self._lock:
            return len(self._resolvers)
