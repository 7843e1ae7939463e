# src/gherkin_harvest/pipelines/extract_scenarios.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from ..config import ExtractConfig
from ..errors import GherkinHarvestError
from ..extract import extract


def write_jsonl(scenarios: List[str], f: TextIO) -> None:
    for i, s in enumerate(scenarios):
        f.write(json.dumps({"index": i, "scenario": s}, ensure_ascii=False) + "\n")


def write_markdown(scenarios: List[str], f: TextIO, title: str = "Scenarios") -> None:
    f.write(f"# {title}\n")
    for s in scenarios:
        f.write(f"\n```gherkin\n{s}\n```\n")


_WRITERS = {"jsonl": write_jsonl, "md": write_markdown}


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Collect gherkin.Scenario(...) literals from a Python source tree.")
    parser.add_argument("--base_dir", type=str, required=True, help="Root directory to scan.")
    parser.add_argument("--out", type=str, default=None, help="Output path (default: stdout).")
    parser.add_argument("--format", type=str, choices=sorted(_WRITERS), default="jsonl", help="Output format.")
    parser.add_argument("--workers", type=int, default=None, help="Parse files concurrently (default: 1).")
    parser.add_argument("--keep_delimiters", action="store_true", help="Keep the literal's quotes in each scenario.")
    parser.add_argument("--skip_dir", action="append", default=None, help="Directory name to prune (repeatable).")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar.")
    parser.add_argument("--log_level", type=str, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    cfg = ExtractConfig()
    if args.workers is not None:
        cfg.workers = args.workers
    if args.keep_delimiters:
        cfg.keep_delimiters = True
    if args.skip_dir:
        cfg.skip_dirs = cfg.skip_dirs | frozenset(args.skip_dir)
    if cfg.workers < 1:
        parser.error("--workers must be >= 1")

    try:
        results = extract(args.base_dir, cfg, progress=args.progress)
    except GherkinHarvestError as e:
        print(f"[ERROR] {e}", file=sys.stderr, flush=True)
        return 1

    writer = _WRITERS[args.format]
    if args.out:
        out_path = Path(args.out).resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("w", encoding="utf-8") as f:
            writer(results.scenarios, f)
    else:
        writer(results.scenarios, sys.stdout)

    print(
        f"[EXTRACT] base_dir={args.base_dir} files={len(results.walked)} "
        f"scenarios={len(results.scenarios)} out={args.out or '-'}",
        file=sys.stderr,
        flush=True,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
