"""
Configuration Management - Loads builder defaults from the environment
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

LOGGER_NAME = "sidecar"


@dataclass
class BuilderConfig:
    """Clause builder configuration settings"""

    default_sanitizer: str = "int"
    default_joiner: str = "OR"
    fragment_separator: str = " "
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BuilderConfig":
        """Load builder config from environment variables"""
        return cls(
            default_sanitizer=os.getenv("SIDECAR_DEFAULT_SANITIZER", "int"),
            default_joiner=os.getenv("SIDECAR_DEFAULT_JOINER", "OR"),
            fragment_separator=os.getenv("SIDECAR_FRAGMENT_SEPARATOR", " "),
            log_level=os.getenv("SIDECAR_LOG_LEVEL", "INFO").upper(),
        )


# Global configuration instance (lazy-loaded)
_config: BuilderConfig | None = None


def get_builder_config() -> BuilderConfig:
    """Get or create global configuration instance."""
    global _config
    if _config is None:
        _config = BuilderConfig.from_env()
    return _config


def reset_builder_config() -> None:
    """Drop the cached configuration so the next access re-reads the environment."""
    global _config
    _config = None


def configure_logging(config: BuilderConfig | None = None) -> logging.Logger:
    """Apply the configured log level to the package logger"""
    config = config or get_builder_config()
    package_logger = logging.getLogger(LOGGER_NAME)

    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {config.log_level!r}, using INFO")
        level = logging.INFO

    package_logger.setLevel(level)
    return package_logger
