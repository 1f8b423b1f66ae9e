"""Semantics report: the policy matrix evaluated on boundary operands.

The report runs every requested operation under each of its policies through
the public entry points, so it shows exactly what callers get, failures
included. Used by scripts/semantics_table.py.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field

from overflower.errors import OverflowerError
from overflower.ints import fixed_type
from overflower.kinds import IntKind
from overflower.ops import entry_point
from overflower.types import Arity, Operation, Policy

__all__ = [
    "Outcome",
    "TableRow",
    "SemanticsReport",
    "boundary_values",
    "shift_counts",
    "build_report",
    "format_markdown_report",
]


class Outcome(BaseModel):
    """Result of one operation under one policy."""

    policy: Policy
    value: int | None = Field(default=None, description="Result, if the call returned")
    error: str | None = Field(default=None, description="Exception class name, if it raised")

    @property
    def failed(self) -> bool:
        return self.error is not None

    def display(self) -> str:
        return self.error if self.error is not None else str(self.value)


class TableRow(BaseModel):
    """One operation applied to one operand tuple, under every policy."""

    operation: Operation
    operands: list[int]
    outcomes: list[Outcome]

    def outcome(self, policy: Policy) -> Outcome:
        for outcome in self.outcomes:
            if outcome.policy is policy:
                return outcome
        raise KeyError(f"No {policy.value} outcome for {self.operation.value}")


class SemanticsReport(BaseModel):
    """Policy matrix for one integer kind."""

    kind: str
    bits: int
    signed: bool
    min: int
    max: int
    rows: list[TableRow] = Field(default_factory=list)


def boundary_values(kind: IntKind) -> list[int]:
    """MIN, MIN+1, -1, 0, 1, MAX-1 and MAX, where representable."""
    candidates = [kind.min, kind.min + 1, -1, 0, 1, kind.max - 1, kind.max]
    return sorted({value for value in candidates if kind.contains(value)})


def shift_counts(kind: IntKind) -> list[int]:
    """Shift amounts around the edges of the kind's width."""
    return [0, 1, kind.bits - 1, kind.bits, kind.bits + 1]


def _operand_tuples(operation: Operation, kind: IntKind, values: Sequence[int]) -> Iterable[tuple[int, ...]]:
    arity = operation.arity
    if arity is Arity.UNARY:
        return ((value,) for value in values)
    if arity is Arity.SHIFT:
        return itertools.product(values, shift_counts(kind))
    if arity is Arity.BINARY:
        return itertools.product(values, values)
    raise ValueError(f"Report does not cover {arity.value} operations ({operation.value})")


def _evaluate(operation: Operation, policy: Policy, kind: IntKind, operands: tuple[int, ...]) -> Outcome:
    fixed = fixed_type(kind)
    args: list[object] = [fixed(operands[0])]
    if operation.arity is Arity.BINARY:
        args.append(fixed(operands[1]))
    elif operation.arity is Arity.SHIFT:
        args.append(operands[1])

    try:
        result = entry_point(operation, policy)(*args)
    except OverflowerError as err:
        return Outcome(policy=policy, error=type(err).__name__)
    return Outcome(policy=policy, value=int(result))


def build_report(
    kind: IntKind,
    operations: Iterable[Operation] | None = None,
    operands: Sequence[int] | None = None,
) -> SemanticsReport:
    """Evaluate the policy matrix for a kind.

    Args:
        kind: Integer kind to report on
        operations: Operations to include (default: every non-reduction operation)
        operands: Operand values (default: boundary_values(kind))

    Raises:
        ValueError: If an operand is out of range for the kind, or a
            reduction operation is requested
    """
    if operations is None:
        operations = [op for op in Operation if op.arity is not Arity.REDUCTION]
    values = list(operands) if operands is not None else boundary_values(kind)

    report = SemanticsReport(
        kind=kind.name,
        bits=kind.bits,
        signed=kind.signed,
        min=kind.min,
        max=kind.max,
    )
    for operation in operations:
        for args in _operand_tuples(operation, kind, values):
            outcomes = [_evaluate(operation, policy, kind, args) for policy in operation.policies]
            report.rows.append(TableRow(operation=operation, operands=list(args), outcomes=outcomes))
    return report


def format_markdown_report(report: SemanticsReport) -> str:
    """Render a report as markdown tables, one per operation."""
    lines = [
        f"# Overflow semantics: {report.kind}",
        "",
        f"**Bits:** {report.bits}  **Signed:** {report.signed}  "
        f"**Range:** [{report.min}, {report.max}]",
        "",
    ]

    for operation, rows in itertools.groupby(report.rows, key=lambda row: row.operation):
        policies = operation.policies
        lines.extend([
            f"## {operation.value}",
            "",
            "| operands | " + " | ".join(policy.value for policy in policies) + " |",
            "|----------|" + "|".join("-" * (len(policy.value) + 2) for policy in policies) + "|",
        ])
        for row in rows:
            cells = [row.outcome(policy).display() for policy in policies]
            operands = ", ".join(str(value) for value in row.operands)
            lines.append(f"| {operands} | " + " | ".join(cells) + " |")
        lines.append("")

    return "\n".join(lines)
