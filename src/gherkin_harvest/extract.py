# src/gherkin_harvest/extract.py
from __future__ import annotations

import ast
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from tqdm import tqdm

from .config import ExtractConfig
from .errors import NoFilesFound, ParseError
from .types import Results
from .utils import iter_source_files, normalize_scenario, read_source, split_string_literal

logger = logging.getLogger(__name__)

MARKER_QUALIFIER = "gherkin"
MARKER_NAME = "Scenario"

# ---------------------------
# Matching
# ---------------------------

def match_marker_call(node: ast.AST, source: str, keep_delimiters: bool = False) -> Optional[str]:
    """
    Return the normalized scenario text if ``node`` is a marker call, else None.

    A marker call looks like ``gherkin.Scenario("...")``:
      - callee is an attribute ``Scenario`` on the bare name ``gherkin``
      - exactly one argument (positional or keyword)
      - that argument is a single plain string literal

    The literal is taken verbatim from ``source`` (no escape processing).
    Matching is purely syntactic; what ``gherkin`` is bound to is irrelevant.
    """
    if not isinstance(node, ast.Call):
        return None
    func = node.func
    if not isinstance(func, ast.Attribute) or func.attr != MARKER_NAME:
        return None
    if not isinstance(func.value, ast.Name) or func.value.id != MARKER_QUALIFIER:
        return None
    if len(node.args) != 1 or node.keywords:
        return None

    arg = node.args[0]
    # f-strings are JoinedStr, bytes have a bytes value; neither is accepted
    if not isinstance(arg, ast.Constant) or not isinstance(arg.value, str):
        return None
    raw = ast.get_source_segment(source, arg)
    if raw is None:
        return None
    parts = split_string_literal(raw)
    if parts is None:
        return None
    _prefix, _quote, body, rest = parts
    if rest.strip():
        # implicit concatenation: "a" "b"
        return None

    return normalize_scenario(raw if keep_delimiters else body)


class ScenarioVisitor(ast.NodeVisitor):
    """Depth-first walk collecting scenarios in source order."""

    def __init__(self, source: str, keep_delimiters: bool = False):
        self.source = source
        self.keep_delimiters = keep_delimiters
        self.gherkins: List[str] = []

    def visit_Call(self, node: ast.Call) -> None:
        scenario = match_marker_call(node, self.source, self.keep_delimiters)
        if scenario is not None:
            self.gherkins.append(scenario)
        self.generic_visit(node)

# ---------------------------
# Public APIs
# ---------------------------

def extract_file(path: str, cfg: Optional[ExtractConfig] = None) -> List[str]:
    """Parse one file and return its scenarios in encounter order."""
    cfg = cfg or ExtractConfig()
    source = read_source(path)
    try:
        tree = ast.parse(source, filename=path)
    except SyntaxError as e:
        raise ParseError(path, e.msg or "invalid syntax", e.lineno) from e
    except ValueError as e:
        # e.g. source containing null bytes
        raise ParseError(path, str(e)) from e

    v = ScenarioVisitor(source, keep_delimiters=cfg.keep_delimiters)
    v.visit(tree)
    logger.debug("%s: %d scenario(s)", path, len(v.gherkins))
    return v.gherkins


def extract(base_dir: str, cfg: Optional[ExtractConfig] = None, progress: bool = False) -> Results:
    """
    Visit every source file under ``base_dir`` and collect the scenarios.

    Any traversal or parse failure aborts the whole run; no partial Results
    are ever returned. With ``cfg.workers > 1`` files are parsed in a thread
    pool but merged back in enumeration order, so the output is identical.
    """
    cfg = cfg or ExtractConfig()
    files = list(iter_source_files(base_dir, cfg.extension, cfg.skip_dirs))
    if not files:
        raise NoFilesFound(base_dir, cfg.extension)
    logger.debug("found %d %s file(s) under %s", len(files), cfg.extension, base_dir)

    scenarios: List[str] = []
    desc = f"Harvest scenarios (workers={cfg.workers})"
    if cfg.workers > 1:
        with ThreadPoolExecutor(max_workers=cfg.workers) as ex:
            per_file = ex.map(lambda p: extract_file(p, cfg), files)
            for found in tqdm(per_file, total=len(files), desc=desc, disable=not progress):
                scenarios.extend(found)
    else:
        for path in tqdm(files, desc=desc, disable=not progress):
            scenarios.extend(extract_file(path, cfg))

    logger.info("walked %d file(s) under %s, %d scenario(s)", len(files), base_dir, len(scenarios))
    return Results(walked=files, scenarios=scenarios)
