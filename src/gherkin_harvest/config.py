from __future__ import annotations
from dataclasses import dataclass, field
import os
from typing import FrozenSet

_TRUTHY = {"1", "true", "True", "yes", "Y"}


def _env_workers() -> int:
    raw = os.getenv("GHERKIN_HARVEST_WORKERS", "1")
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"GHERKIN_HARVEST_WORKERS must be an integer, got {raw!r}")


def _env_skip_dirs() -> FrozenSet[str]:
    raw = os.getenv("GHERKIN_HARVEST_SKIP_DIRS", "")
    return frozenset(x.strip() for x in raw.split(",") if x.strip())


@dataclass
class ExtractConfig:
    """Knobs for a harvest run.

    Defaults are read from the environment when the config is built, so a
    plain ``ExtractConfig()`` picks up ``GHERKIN_HARVEST_*`` overrides.
    """
    extension: str = field(default_factory=lambda: os.getenv("GHERKIN_HARVEST_EXT", ".py"))
    keep_delimiters: bool = field(
        default_factory=lambda: os.getenv("GHERKIN_HARVEST_KEEP_DELIMITERS", "0") in _TRUTHY
    )
    workers: int = field(default_factory=_env_workers)
    skip_dirs: FrozenSet[str] = field(default_factory=_env_skip_dirs)

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if not self.extension.startswith("."):
            self.extension = "." + self.extension
        self.skip_dirs = frozenset(self.skip_dirs)
