"""Policy-aware sum over an iterable.

The iterable is consumed once, in order. Under the panic policy the first
element that overflows the running total raises, and nothing after it is
pulled from the iterator.

Int literals carry no width, so without `into` the element type is taken
from the first element that is not a literal: `sum_wrap([200, U8(100)])`
sums as u8, like `add_wrap(200, U8(100))`. Leading literals are held back
until that element is seen.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable
from typing import Any

from overflower.dispatch import has_checked_capability, is_untyped_literal, resolve
from overflower.types import Operation, Policy

__all__ = ["sum_wrap", "sum_panic"]


def _element_type(head: list[Any]) -> type:
    """Pick the operand type from the leading literals and the element after them."""
    last_type = type(head[-1])
    if has_checked_capability(last_type):
        return last_type
    return type(head[0])


def _sum(policy: Policy, values: Iterable[Any], into: type | None) -> Any:
    if into is None:
        iterator = iter(values)
        head = []
        for item in iterator:
            head.append(item)
            if not is_untyped_literal(item):
                break
        if not head:
            return 0
        into = _element_type(head)
        values = itertools.chain(head, iterator)
    return resolve(Operation.SUM, policy, into)(values)


def _sum_entry(policy: Policy) -> Callable[..., Any]:
    def entry(values: Iterable[Any], into: type | None = None) -> Any:
        return _sum(policy, values, into)

    entry.__name__ = entry.__qualname__ = f"sum_{policy.value}"
    entry.__doc__ = (
        f"Sum values under the {policy.value} policy.\n\n"
        "Args:\n"
        "    values: Finite iterable of same-typed operands and int literals\n"
        "    into: Result type; defaults to the type of the first element\n"
        "        that is not an int literal. An empty iterable without `into`\n"
        "        sums to 0.\n"
    )
    return entry


sum_wrap = _sum_entry(Policy.WRAP)
sum_panic = _sum_entry(Policy.PANIC)
