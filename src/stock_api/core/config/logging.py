"""Logging configuration and setup for the stock API."""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, Field, field_validator
from structlog.types import EventDict, WrappedLogger

from ...infrastructure.logging.structured_logger import add_request_context, mask_sensitive_data
from .enums import LogFormat, LogLevel


class LoggingConfig(BaseModel):
    """Centralized logging configuration."""

    # Basic Configuration
    level: LogLevel = Field(default=LogLevel.INFO, description="Logging level for the application")
    format: LogFormat = Field(default=LogFormat.JSON, description="Output format for log messages")

    # Output Configuration
    console_enabled: bool = Field(default=True, description="Enable console output")
    file_enabled: bool = Field(default=False, description="Enable file output")
    file_path: str = Field(default="logs/app.log", description="Log file path")

    # Advanced Configuration
    max_file_size: int = Field(
        default=10 * 1024 * 1024,  # 10MB
        description="Maximum log file size in bytes",
    )

    backup_count: int = Field(default=5, description="Number of backup files to keep")
    correlation_id_enabled: bool = Field(default=True, description="Include correlation IDs in logs")

    # Third-party Logging Levels
    third_party_levels: dict[str, LogLevel] = Field(
        default_factory=lambda: {
            "httpx": LogLevel.WARNING,
            "uvicorn": LogLevel.INFO,
            "uvicorn.access": LogLevel.WARNING,
            "fastapi": LogLevel.INFO,
        },
        description="Logging levels for third-party libraries",
    )

    @field_validator("max_file_size")
    @classmethod
    def validate_file_size(cls, v: int) -> int:
        """Validate file size is reasonable."""
        if v < 1024 * 1024:  # 1MB minimum
            raise ValueError("Max file size must be at least 1MB")
        if v > 100 * 1024 * 1024:  # 100MB maximum
            raise ValueError("Max file size cannot exceed 100MB")
        return v


class LoggingSetup:
    """One-time configuration of stdlib logging and structlog."""

    _configured: bool = False

    @classmethod
    def configure(cls, config: LoggingConfig, force: bool = False) -> None:
        """Configure structured logging.

        Args:
            config: Logging configuration
            force: Reconfigure even if logging was already set up
        """
        if cls._configured and not force:
            return

        handlers: list[logging.Handler] = []

        if config.console_enabled:
            handlers.append(cls._create_console_handler(config))

        if config.file_enabled:
            handlers.append(cls._create_file_handler(config))

        logging.basicConfig(level=config.level.value, handlers=handlers or [logging.NullHandler()], force=True)

        for lib_name, level in config.third_party_levels.items():
            logging.getLogger(lib_name).setLevel(level.value)

        processors: list[Any] = [
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            cls._add_timestamp,
        ]
        if config.correlation_id_enabled:
            processors.append(add_request_context)
        processors.extend(
            [
                mask_sensitive_data,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer() if config.format == LogFormat.JSON else cls._text_renderer,
            ]
        )

        structlog.configure(
            processors=processors,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        cls._configured = True

        structlog.get_logger(__name__).info(
            "Logging system initialized",
            level=config.level.value,
            format=config.format.value,
            console_enabled=config.console_enabled,
            file_enabled=config.file_enabled,
            file_path=config.file_path if config.file_enabled else None,
        )

    @staticmethod
    def _create_console_handler(config: LoggingConfig) -> logging.StreamHandler[Any]:
        """Create console handler; structlog has already rendered the message."""
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        return handler

    @staticmethod
    def _create_file_handler(config: LoggingConfig) -> logging.Handler:
        """Create rotating file handler."""
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        handler = RotatingFileHandler(
            filename=log_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        return handler

    @staticmethod
    def _add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        """Add timestamp to log entry."""
        event_dict["timestamp"] = datetime.now(UTC).isoformat()
        return event_dict

    @staticmethod
    def _text_renderer(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        """Render log entry as text."""
        timestamp = event_dict.pop("timestamp", "")
        level = event_dict.pop("level", "info")
        logger_name = event_dict.pop("logger", "")
        event = event_dict.pop("event", "")

        msg_parts: list[str] = [
            str(timestamp),
            str(level).upper(),
            str(logger_name),
            str(event),
        ]

        if event_dict:
            extra = " ".join(f"{k}={v}" for k, v in event_dict.items())
            msg_parts.append(f"[{extra}]")

        return " | ".join(filter(None, msg_parts))


def setup_logging(config: LoggingConfig, force: bool = False) -> None:
    """Set up application logging."""
    LoggingSetup.configure(config, force=force)
