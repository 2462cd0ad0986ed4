"""Command-line front end: ``taut check``, ``taut table`` and ``taut demo``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from tautology.config import ConfigError, TautologyConfig, load_config_from_env
from tautology.errors import TautologyError
from tautology.evaluator import truth_table
from tautology.oracle import DEMO_FORMULAS, check, enforce_variable_limit
from tautology.parser import generate

logger = logging.getLogger(__name__)

EXIT_TAUTOLOGY = 0
EXIT_NOT_TAUTOLOGY = 1
EXIT_ERROR = 2


def _table_line(cells: List[str], result: str) -> str:
    return " ".join(cells + ["|", result])


def cmd_check(args: argparse.Namespace, config: TautologyConfig) -> int:
    result = check(args.formula, config)
    if args.json:
        print(json.dumps({"formula": args.formula, **result.to_dict()}, ensure_ascii=False))
    else:
        print(result)
    return EXIT_TAUTOLOGY if result.is_tautology else EXIT_NOT_TAUTOLOGY


def cmd_table(args: argparse.Namespace, config: TautologyConfig) -> int:
    expr = generate(args.formula)
    enforce_variable_limit(expr, config)
    rows = list(truth_table(expr))
    print(_table_line(list(rows[0][0]), str(expr)))
    for row, value in rows:
        print(_table_line(["1" if v else "0" for v in row.values()], "1" if value else "0"))
    return EXIT_TAUTOLOGY if all(value for _, value in rows) else EXIT_NOT_TAUTOLOGY


def cmd_demo(args: argparse.Namespace, config: TautologyConfig) -> int:
    for formula in DEMO_FORMULAS:
        print(f"{formula}: {check(formula, config)}")
    return EXIT_TAUTOLOGY


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taut",
        description="Decide whether a propositional formula is a tautology by exhaustive truth table.",
    )
    parser.add_argument("--config", help="Path to a YAML config file (overrides TAUT_CONFIG).")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (overrides the config file and TAUT_LOG_LEVEL).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_check = sub.add_parser("check", help="Check one formula.")
    p_check.add_argument("formula", help="Formula, e.g. '(p → (q → p))'.")
    p_check.add_argument("--json", action="store_true", help="Emit the result as JSON.")
    p_check.set_defaults(func=cmd_check)

    p_table = sub.add_parser("table", help="Print the full truth table of a formula.")
    p_table.add_argument("formula")
    p_table.set_defaults(func=cmd_table)

    p_demo = sub.add_parser("demo", help="Check the built-in example formulas.")
    p_demo.set_defaults(func=cmd_demo)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        config = load_config_from_env(args.config)
    except (ConfigError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    level = args.log_level or config.log_level
    logging.basicConfig(level=getattr(logging, level), format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        return args.func(args, config)
    except TautologyError as e:
        logger.debug("Check failed: %s", e.to_dict())
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
