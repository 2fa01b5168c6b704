"""
Directory entries stored in an alias table.

An alias maps to an ordered list of entries. Each entry is either a plain
directory or a reference to another alias that is re-resolved on every
lookup, so registering ``"vendor:templates"`` keeps following ``vendor``
even when its directories change later.
"""

from dataclasses import dataclass
from typing import Union

from .normalize import clean_alias, split_source


@dataclass(frozen=True)
class LiteralDir:
    """A directory path, normalized (and canonicalized when it ended in ``..``)."""

    raw: str


@dataclass(frozen=True)
class VirtualRef:
    """A lazily resolved ``alias:subpath`` reference.

    Attributes:
        raw: The normalized reference exactly as registered
        alias: Sanitized name of the referenced alias
        subpath: Path below the referenced alias
    """

    raw: str
    alias: str
    subpath: str

    @classmethod
    def parse(cls, raw: str) -> "VirtualRef":
        alias, subpath = split_source(raw)
        return cls(raw=raw, alias=clean_alias(alias), subpath=subpath)


DirectoryEntry = Union[LiteralDir, VirtualRef]
