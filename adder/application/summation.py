"""
Summation Use Case

The whole program flow: prompt, read, prompt, read, add, report.
Each step is a straight call; a malformed token aborts the run with
InputFormatError and nothing after it is printed.
"""

import sys
from typing import Any, TextIO

from pydantic import BaseModel, ConfigDict, Field, model_validator

from adder.domain.models import (
    INT_MAX,
    INT_MIN,
    Summation,
    add,
    format_result,
    wrap_int,
)
from adder.infrastructure.logging_setup import get_logger
from adder.infrastructure.token_reader import TokenReader

logger = get_logger(__name__)

FIRST_PROMPT = "Enter the first number: "
SECOND_PROMPT = "Enter the second number: "


# =============================================================================
# RESULT MODEL
# =============================================================================

class SummationResult(BaseModel):
    """Outcome of a completed run."""
    model_config = ConfigDict(frozen=True)

    first: int = Field(..., ge=INT_MIN, le=INT_MAX)
    second: int = Field(..., ge=INT_MIN, le=INT_MAX)
    total: int = Field(..., ge=INT_MIN, le=INT_MAX)
    overflowed: bool = False

    @model_validator(mode="after")
    def check_total(self) -> "SummationResult":
        expected = wrap_int(self.first + self.second)
        if self.total != expected:
            raise ValueError(
                f"total {self.total} does not match {self.first} + {self.second} = {expected}"
            )
        return self

    @classmethod
    def from_summation(cls, summation: Summation) -> "SummationResult":
        return cls(
            first=summation.first.value,
            second=summation.second.value,
            total=summation.total,
            overflowed=summation.overflowed,
        )

    def message(self) -> str:
        return f"The sum of {self.first} and {self.second} is: {self.total}"

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


# =============================================================================
# USE CASE
# =============================================================================

def _prompt(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def run(reader: TokenReader, out: TextIO = sys.stdout) -> SummationResult:
    """
    Prompt for two integers on `reader`, write their sum to `out`.

    Args:
        reader: Open token reader supplying the operands
        out: Destination for prompts and the result line

    Returns:
        The completed SummationResult

    Raises:
        InputFormatError: an operand could not be read as an integer
    """
    _prompt(out, FIRST_PROMPT)
    first = reader.next_int()
    logger.debug("First operand: %s", first)

    _prompt(out, SECOND_PROMPT)
    second = reader.next_int()
    logger.debug("Second operand: %s", second)

    summation = add(first, second)
    if summation.overflowed:
        logger.debug(
            "Sum of %s and %s wrapped around to %s", first, second, summation.total
        )
    else:
        logger.debug("Sum: %s", summation.total)

    out.write(format_result(summation) + "\n")
    out.flush()

    return SummationResult.from_summation(summation)
