"""Test helpers module for shared test utilities.

- constants: the fixed-width types grouped by signedness
- operands: boundary operand values per kind
"""

from tests.helpers.constants import FIXED_TYPES, SIGNED_TYPES, UNSIGNED_TYPES
from tests.helpers.operands import boundary_operands, operand_pairs

__all__ = [
    # Constants
    "FIXED_TYPES",
    "SIGNED_TYPES",
    "UNSIGNED_TYPES",
    # Operands
    "boundary_operands",
    "operand_pairs",
]
