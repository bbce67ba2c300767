"""Configuration package."""

from .config import Settings
from .enums import Environment, LogFormat, LogLevel
from .logging import LoggingConfig, setup_logging

__all__ = [
    "Settings",
    "Environment",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "setup_logging",
]
