"""
CLI Interface

Command-line entry point for the summation program.
Running it with no arguments starts the prompt sequence immediately.
"""

import argparse
import sys
from typing import List, Optional, TextIO

from adder import __version__
from adder.application.summation import run
from adder.domain.models import InputFormatError
from adder.infrastructure.config import get_config
from adder.infrastructure.logging_setup import get_logger, setup_logging
from adder.infrastructure.token_reader import TokenReader

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INPUT_FORMAT = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adder",
        description="Read two integers from standard input and print their sum",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive
  adder

  # Piped input
  printf '2\\n3\\n' | python -m adder

Environment:
  LOG_LEVEL=DEBUG   # Diagnostics on stderr
  DEBUG=true        # Also print tracebacks for rejected input
        """
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit status
    """
    build_parser().parse_args(argv)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    setup_logging(stream=stderr)
    config = get_config()
    logger.debug("Starting summation (log_level=%s, debug=%s)", config.log_level, config.debug)

    try:
        with TokenReader(stdin) as reader:
            result = run(reader, out=stdout)
    except InputFormatError as e:
        if config.debug:
            logger.exception("Input rejected")
        else:
            logger.info("Input rejected: %s", e)
        print(f"Error: {e}", file=stderr)
        return EXIT_INPUT_FORMAT
    except KeyboardInterrupt:
        print("\n[EXIT] Interrupted by user", file=stderr)
        return EXIT_INTERRUPTED

    logger.debug("Finished: %s", result.to_dict())
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
