"""
Configuration Module

Centralized configuration for the CLI.
Settings only affect diagnostics; prompts, output and arithmetic are fixed.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AppConfig:
    """Main application configuration."""
    log_level: str = "WARNING"
    debug: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(
            log_level=os.getenv("LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
            debug=_env_flag("DEBUG"),
        )


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Return the cached AppConfig, building it from the environment on first use."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """Rebuild the cached AppConfig after LOG_LEVEL/DEBUG change."""
    global _config
    _config = AppConfig.from_env()
    return _config
