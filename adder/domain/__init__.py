"""
Domain Layer

Operands, fixed-width integer arithmetic and input parsing rules.
No dependencies on external frameworks.
"""

from adder.domain.models import (
    INT_BITS,
    INT_MAX,
    INT_MIN,
    InputFormatError,
    Operand,
    Summation,
    add,
    format_result,
    parse_operand,
    wrap_int,
)
