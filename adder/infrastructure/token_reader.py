"""
Token Reader

Whitespace-delimited token reader over a text stream.
This is the program's single input handle: acquire it once, use it as a
context manager, and it is released when the block exits.
"""

import sys
from collections import deque
from typing import Deque, Optional, TextIO

from adder.domain.models import InputFormatError, Operand, parse_operand
from adder.infrastructure.logging_setup import get_logger

logger = get_logger(__name__)


class TokenReader:
    """
    Reads tokens lazily, one line at a time.

    Tokens are split on any whitespace, so several integers may share
    a line or be spread over several lines. A token that fails to parse
    stays pending, like a scanner that refuses to consume a mismatch.
    """

    def __init__(self, stream: Optional[TextIO] = None, owns_stream: bool = False):
        self.stream = stream if stream is not None else sys.stdin
        self.owns_stream = owns_stream
        self._pending: Deque[str] = deque()
        self._closed = False

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the reader; closes the stream only if the reader owns it."""
        if self._closed:
            return
        self._closed = True
        self._pending.clear()
        if self.owns_stream:
            self.stream.close()
        logger.debug("Token reader closed (owns_stream=%s)", self.owns_stream)

    def __enter__(self) -> "TokenReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    def _ensure_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed token reader")

    def _fill(self) -> bool:
        """Pull lines until a token is pending. Returns False at end of input."""
        while not self._pending:
            line = self.stream.readline()
            if line == "":
                return False
            self._pending.extend(line.split())
        return True

    def has_next(self) -> bool:
        self._ensure_open()
        return self._fill()

    def next_token(self) -> Optional[str]:
        """Return the next token, or None when input is exhausted."""
        self._ensure_open()
        if not self._fill():
            return None
        return self._pending.popleft()

    def next_int(self) -> Operand:
        """
        Read the next token as an integer operand.

        Raises:
            InputFormatError: the token is malformed or out of range,
                or input ended first
        """
        self._ensure_open()
        if not self._fill():
            raise InputFormatError("expected an integer but input ended")

        operand = parse_operand(self._pending[0])
        self._pending.popleft()
        return operand
