#!/usr/bin/env python3
"""Print the overflow policy matrix for an integer kind.

Evaluates each operation under wrap, panic and saturate on boundary operands
(MIN, -1, 0, 1, MAX, ...) and prints the results as markdown or JSON.

Usage:
    python scripts/semantics_table.py u8
    python scripts/semantics_table.py i32 --op div --op rem
    python scripts/semantics_table.py i8 --operand -128 --operand -1 --json
"""

import argparse
import logging
import sys
from pathlib import Path

import structlog

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from overflower.kinds import KINDS, kind_by_name  # noqa: E402
from overflower.report import build_report, format_markdown_report  # noqa: E402
from overflower.types import Arity, Operation  # noqa: E402

logger = structlog.get_logger()

REPORTABLE_OPERATIONS = [op.value for op in Operation if op.arity is not Arity.REDUCTION]


def main() -> int:
    parser = argparse.ArgumentParser(description="Overflow policy matrix for an integer kind")
    parser.add_argument("kind", choices=sorted(KINDS), help="Integer kind (e.g. u8, i32)")
    parser.add_argument(
        "--op",
        dest="operations",
        action="append",
        choices=REPORTABLE_OPERATIONS,
        help="Operation to include (repeatable, default: all)",
    )
    parser.add_argument(
        "--operand",
        dest="operands",
        action="append",
        type=int,
        help="Operand value (repeatable, default: boundary values)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of markdown")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    kind = kind_by_name(args.kind)
    operations = [Operation(op) for op in args.operations] if args.operations else None

    try:
        report = build_report(kind, operations=operations, operands=args.operands)
    except ValueError as e:
        logger.error("report_failed", kind=kind.name, error=str(e))
        return 1

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(format_markdown_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
