"""
Adder

Interactive CLI that reads two integers and prints their sum.

Architecture:
    - adder/domain: Operands, 32-bit arithmetic, token parsing
    - adder/infrastructure: Token reader, configuration, logging
    - adder/application: The summation use case
    - adder/interfaces: CLI entry point

Usage:
    $ printf '2\\n3\\n' | python -m adder
    Enter the first number: Enter the second number: The sum of 2 and 3 is: 5

    from adder.application import run
    from adder.infrastructure import TokenReader

    with TokenReader() as reader:
        result = run(reader)
"""

__version__ = "1.0.0"
