"""Shared enums for aliaspath."""

from enum import Enum


class Mode(str, Enum):
    """How new directories are added to an alias."""

    PREPEND = "prepend"  # searched before existing directories
    APPEND = "append"  # searched after existing directories
    RESET = "reset"  # drop existing directories, then prepend
