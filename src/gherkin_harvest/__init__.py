"""Harvest ``gherkin.Scenario("...")`` narratives from Python source trees.

Scenarios are found by a syntactic walk over each file's AST; the marker call
is never executed. See :func:`extract` for the entry point.
"""

from . import gherkin
from .config import ExtractConfig
from .errors import GherkinHarvestError, NoFilesFound, ParseError, TraversalError
from .extract import extract, extract_file, match_marker_call
from .types import Results
from .utils import iter_source_files, normalize_scenario

__all__ = [
    "gherkin",
    "ExtractConfig",
    "GherkinHarvestError",
    "NoFilesFound",
    "ParseError",
    "TraversalError",
    "extract",
    "extract_file",
    "match_marker_call",
    "Results",
    "iter_source_files",
    "normalize_scenario",
]
