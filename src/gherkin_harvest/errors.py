from __future__ import annotations

from typing import Optional


class GherkinHarvestError(Exception):
    """Base class for every failure raised while harvesting scenarios."""


class TraversalError(GherkinHarvestError):
    """The source tree could not be walked or a file could not be read."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")


class NoFilesFound(GherkinHarvestError):
    def __init__(self, base_dir: str, extension: str = ".py"):
        self.base_dir = base_dir
        self.extension = extension
        super().__init__(f"no {extension} source files found within {base_dir}")


class ParseError(GherkinHarvestError):
    """A source file could not be decoded or parsed into a syntax tree."""

    def __init__(self, path: str, message: str, lineno: Optional[int] = None):
        self.path = path
        self.lineno = lineno
        where = f"{path}:{lineno}" if lineno else path
        super().__init__(f"{where}: {message}")
