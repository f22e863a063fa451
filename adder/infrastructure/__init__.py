"""
Infrastructure Layer

Input handle, configuration and logging adapters.
"""

from adder.infrastructure.config import AppConfig, get_config, reload_config
from adder.infrastructure.logging_setup import get_logger, setup_logging
from adder.infrastructure.token_reader import TokenReader
