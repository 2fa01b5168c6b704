"""
Configuration for path resolvers.

This module defines the pydantic schema used to build a
:class:`~aliaspath.resolver.PathResolver` from code or from a YAML manifest:

    root: /srv/www
    real_path: true
    base_url: https://example.com
    aliases:
      assets:
        - /srv/www/theme/assets
        - /srv/www/vendor/assets
      templates: assets:templates
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .exceptions import ConfigurationError
from .types import Mode

logger = logging.getLogger(__name__)

DEFAULT_DOC_ROOT_ENV = "DOCUMENT_ROOT"


def default_doc_root(env_var: str = DEFAULT_DOC_ROOT_ENV) -> str:
    """
    Get the process document root.

    Args:
        env_var: Environment variable holding the web server's document root

    Returns:
        The variable's value when set, otherwise the current working
        directory, as an absolute path with forward slashes
    """
    value = os.environ.get(env_var) or "."
    return Path(value).resolve().as_posix()


class ResolverConfig(BaseModel):
    """
    Pydantic schema for path resolver settings.

    Falls back to the document root (see :func:`default_doc_root`) when no
    root is given.
    """

    root: Optional[str] = Field(
        None, description="Root directory for URLs and relative paths (document root if None)"
    )
    doc_root_env: str = Field(
        DEFAULT_DOC_ROOT_ENV,
        description="Environment variable consulted when root is not set",
    )
    real_path: bool = Field(
        True, description="Return symlink-resolved paths (True) or normalized paths (False)"
    )
    base_url: Optional[str] = Field(
        None, description="Base URL for absolute URLs (read from the request environment if None)"
    )
    aliases: Dict[str, List[str]] = Field(
        default_factory=dict, description="Alias name -> ordered list of directories"
    )
    mode: Mode = Field(Mode.APPEND, description="How manifest directories are registered")

    model_config = ConfigDict(extra="forbid")

    @field_validator("aliases", mode="before")
    @classmethod
    def _coerce_alias_lists(cls, value: Any) -> Any:
        """Accept a single path string per alias."""
        if value is None:
            return {}
        if isinstance(value, dict):
            return {
                name: [paths] if isinstance(paths, str) else paths
                for name, paths in value.items()
            }
        return value

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.rstrip("/") or None

    @model_validator(mode="after")
    def _default_root(self) -> "ResolverConfig":
        """Fill in the document root when no root was configured."""
        if not self.root:
            object.__setattr__(self, "root", default_doc_root(self.doc_root_env))
            logger.debug(f"No root configured, using document root {self.root}")
        return self

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ResolverConfig":
        """
        Load a configuration from a YAML manifest.

        A relative ``root`` is taken relative to the manifest's directory.

        Args:
            path: Manifest file

        Returns:
            Validated ResolverConfig

        Raises:
            ConfigurationError: If the file is unreadable, not a YAML mapping,
                or fails validation
        """
        manifest = Path(path)
        try:
            data = yaml.safe_load(manifest.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read manifest: {e}", config_source=str(manifest)
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in manifest: {e}", config_source=str(manifest)
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Manifest must be a mapping, got {type(data).__name__}",
                config_source=str(manifest),
            )

        root = data.get("root")
        if isinstance(root, str) and root and not Path(root).is_absolute():
            data["root"] = (manifest.parent / root).resolve().as_posix()

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid manifest: {e}", config_source=str(manifest)
            ) from e
