"""Shared fixtures for the aliaspath test suite."""

import fnmatch
from pathlib import Path
from typing import Iterable, List, Optional

import pytest

from aliaspath.filesystem import expand_braces
from aliaspath.resolver import PathResolver, clean


def _norm(path: str) -> str:
    return path.replace("\\", "/").rstrip("/") or "/"


class MemoryBackend:
    """In-memory filesystem backend; paths are compared case-sensitively."""

    def __init__(self, dirs: Iterable[str] = (), files: Iterable[str] = ()):
        self.dirs = {_norm(d) for d in dirs}
        self.files = {_norm(f) for f in files}

    def exists(self, path: str) -> bool:
        return _norm(path) in self.files

    def is_dir(self, path: str) -> bool:
        return _norm(path) in self.dirs

    def real_path(self, path: str) -> Optional[str]:
        candidate = _norm(clean(path))
        if candidate in self.dirs or candidate in self.files:
            return candidate
        return None

    def glob(self, pattern: str) -> List[str]:
        results: List[str] = []
        for expanded in expand_braces(pattern):
            for candidate in sorted(self.files | self.dirs):
                if fnmatch.fnmatchcase(candidate, expanded) and candidate not in results:
                    results.append(candidate)
        return results

    def relative_to(self, path: str, base: str, sep: str = "/") -> str:
        path, base = _norm(path), _norm(base)
        if path.startswith(base + "/"):
            path = path[len(base) + 1:]
        return path.replace("/", sep)


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """An existing, symlink-free root directory."""
    directory = tmp_path.resolve() / "www"
    directory.mkdir()
    return directory


@pytest.fixture
def resolver(root: Path) -> PathResolver:
    return PathResolver(root, base_url="http://test.dev")


@pytest.fixture
def touch():
    """Create a file (and its parents) and return its path."""

    def _touch(path: Path, content: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _touch


@pytest.fixture
def windows_site() -> MemoryBackend:
    """A Windows-style site tree held in memory."""
    return MemoryBackend(
        dirs=["C:/", "C:/site", "C:/site/theme", "C:/site/theme/css", "C:/vendor"],
        files=["C:/site/theme/css/app.css", "C:/site/index.php", "c:/site/lower.txt"],
    )
