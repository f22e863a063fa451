"""
Domain Models

Pure value objects for the summation use case.
Integer arithmetic follows a fixed-width signed int (32 bits):
tokens outside the range are rejected, sums wrap around.
"""

from dataclasses import dataclass
from typing import Optional
import re


# =============================================================================
# CONSTANTS
# =============================================================================

INT_BITS = 32
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1

# ASCII digits with an optional sign; no grouping separators, no underscores
_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# ERRORS
# =============================================================================

class InputFormatError(ValueError):
    """
    Raised when an input token cannot be read as an integer operand.

    `token` is the offending text, or None when input ended before
    an integer could be read.
    """

    def __init__(self, message: str, token: Optional[str] = None):
        super().__init__(message)
        self.token = token


# =============================================================================
# ARITHMETIC
# =============================================================================

def wrap_int(value: int, bits: int = INT_BITS) -> int:
    """Reduce value into the signed range of a `bits`-wide two's-complement int."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


# =============================================================================
# VALUE OBJECTS
# =============================================================================

@dataclass(frozen=True, slots=True)
class Operand:
    """One of the two user-supplied integers."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Operand must be an int, got {type(self.value).__name__}")
        if not INT_MIN <= self.value <= INT_MAX:
            raise ValueError(f"Operand {self.value} outside {INT_BITS}-bit range")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Summation:
    """Two operands and their wrapped sum."""
    first: Operand
    second: Operand

    @property
    def total(self) -> int:
        return wrap_int(self.first.value + self.second.value)

    @property
    def overflowed(self) -> bool:
        """True when the exact sum did not fit and wrapped around."""
        return self.total != self.first.value + self.second.value


# =============================================================================
# DOMAIN SERVICES
# =============================================================================

def parse_operand(token: str) -> Operand:
    """
    Parse a single whitespace-free token into an Operand.

    Raises:
        InputFormatError: token is not a base-10 integer or is out of range
    """
    if not _INTEGER_TOKEN.fullmatch(token):
        raise InputFormatError(f"expected an integer but got {token!r}", token=token)

    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        raise InputFormatError(
            f"{token!r} is out of range for a {INT_BITS}-bit integer "
            f"({INT_MIN}..{INT_MAX})",
            token=token,
        )
    return Operand(value)


def add(first: Operand, second: Operand) -> Summation:
    return Summation(first=first, second=second)


def format_result(summation: Summation) -> str:
    """Render the result sentence (no trailing newline)."""
    return f"The sum of {summation.first} and {summation.second} is: {summation.total}"
