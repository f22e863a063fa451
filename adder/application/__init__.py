"""
Application Layer

The summation use case and its result model.
"""

from adder.application.summation import (
    FIRST_PROMPT,
    SECOND_PROMPT,
    SummationResult,
    run,
)
