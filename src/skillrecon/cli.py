from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from skillrecon import api
from skillrecon.config import load_engine_config
from skillrecon.loader import read_json


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="skillrecon",
        description="Headless utilities for normalizing career reports and reconciling framework skills.",
    )
    subparsers = ap.add_subparsers(dest="command", required=True)

    normalize = subparsers.add_parser("normalize", help="Force a generated report into the 11-section contract.")
    _add_normalize_args(normalize)
    normalize.set_defaults(func=_cmd_normalize)

    analyze = subparsers.add_parser("analyze", help="Reconcile framework skills, gaps and strengths into chart data.")
    _add_analyze_args(analyze)
    analyze.set_defaults(func=_cmd_analyze)

    args = ap.parse_args(argv)
    return args.func(args)


# ---------------- CLI subcommands ----------------


def _add_normalize_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("input", help="Raw report JSON file. Use '-' for stdin.")
    ap.add_argument("--indent", type=int, default=2)
    ap.add_argument("--quiet", action="store_true", help="Do not print substitution warnings to stderr.")
    ap.epilog = _NORMALIZE_EPILOG


def _add_analyze_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("input", help="Analysis input JSON file. Use '-' for stdin.")
    ap.add_argument("--config", default=None, help="Optional YAML/JSON/TOML config override (merged with pyproject.toml).")
    ap.add_argument(
        "--framework",
        action="append",
        default=None,
        help="Restrict output to this framework (repeatable). Default: every framework found.",
    )
    ap.add_argument("--top", type=int, default=None, help="Ranked entries per framework (default from config).")
    ap.add_argument("--indent", type=int, default=2)
    ap.epilog = _ANALYZE_EPILOG


def _read_input(value: str) -> Any:
    try:
        if value == "-":
            return read_json(None, sys.stdin.read())
        return read_json(Path(value))
    except json.JSONDecodeError as e:
        raise SystemExit(f"Invalid input JSON: {e}") from e


def _emit_warnings(warnings) -> None:
    for msg in warnings:
        print(msg, file=sys.stderr)


def _cmd_normalize(args: argparse.Namespace) -> int:
    result = api.normalize_document(_read_input(args.input))
    print(json.dumps(result.as_json(), indent=args.indent))
    if not args.quiet:
        _emit_warnings(result.warnings)
    return 0


def _cmd_analyze(args: argparse.Namespace) -> int:
    data = _read_input(args.input)
    try:
        cfg = load_engine_config(override_path=Path(args.config) if args.config else None)
        result = api.analyze_document(data, config=cfg, frameworks=args.framework, top_n=args.top)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    print(json.dumps(result.as_json(), indent=args.indent))
    _emit_warnings(result.warnings)
    return 0


_NORMALIZE_EPILOG = """examples:
  skillrecon normalize generated.json > report.json
  skillrecon normalize - --quiet < generated.json
"""

_ANALYZE_EPILOG = """examples:
  skillrecon analyze analysis.json --framework "SFIA 9" --top 5
  skillrecon analyze - --config skillrecon.yaml < analysis.json

input JSON:
  {
    "sfiaSkills": [{"skill": "...", "level": "Level 4", "description": "..."}],
    "digcompCompetencies": [{"competency": "...", "level": "...", "description": "..."}],
    "frameworkSkills": [{"skill": "...", "framework": "...", "level": "...", "description": "..."}],
    "skillGaps": [{"skill": "...", "importance": "High", "description": "...", "framework": "SFIA 9"}],
    "skillStrengths": [{"skill": "...", "level": "...", "relevance": "High", "description": "..."}]
  }
"""


if __name__ == "__main__":
    raise SystemExit(main())
