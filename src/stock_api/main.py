"""
Stock API - Application Launcher.

This module provides the main entry point and server configuration for
the Stock Management API, for both development and production.
"""

import signal
import sys
from collections.abc import Callable
from typing import Any

import uvicorn
from fastapi import FastAPI
from uvicorn.config import Config
from uvicorn.server import Server

from .core.dependencies import get_settings
from .infrastructure.logging.structured_logger import get_logger
from .presentation.app import create_app


class ApplicationManager:
    """
    Manages the application lifecycle with graceful shutdown handling.

    Holds the application instance, the running server and the cleanup
    handlers to run on shutdown.
    """

    def __init__(self) -> None:
        """Initialize the application manager."""
        self.app: FastAPI | None = None
        self.server: Server | None = None
        self.logger = get_logger("app.manager")
        self._shutdown_handlers: list[Callable[[], None]] = []

    def create_application(self) -> FastAPI:
        """
        Create the FastAPI application instance once.

        Returns:
            FastAPI: Configured application instance
        """
        if self.app is None:
            self.logger.info("Creating new application instance")
            self.app = create_app()
            self.logger.info("Application instance created successfully")

        return self.app

    def register_shutdown_handler(self, handler: Callable[[], None]) -> None:
        """
        Register a cleanup handler for graceful shutdown.

        Args:
            handler: Callable to execute during shutdown
        """
        self._shutdown_handlers.append(handler)
        self.logger.debug("Shutdown handler registered", handler=handler.__name__)

    def shutdown(self) -> None:
        """Run the registered shutdown handlers and stop the server."""
        self.logger.info("Initiating graceful shutdown")

        for handler in self._shutdown_handlers:
            try:
                handler()
                self.logger.debug("Shutdown handler executed", handler=handler.__name__)
            except Exception as e:
                self.logger.error("Shutdown handler failed", handler=handler.__name__, error=str(e), exc_info=True)

        if self.server:
            self.logger.info("Stopping server")
            self.server.should_exit = True

        self.logger.info("Graceful shutdown completed")


# Global application manager instance
app_manager = ApplicationManager()


def setup_signal_handlers() -> None:
    """Setup SIGTERM and SIGINT handlers for graceful shutdown."""
    logger = get_logger("app.signals")

    def signal_handler(signum: int, frame) -> None:
        """Handle shutdown signals gracefully."""
        signal_name = "SIGTERM" if signum == signal.SIGTERM else "SIGINT" if signum == signal.SIGINT else f"Signal-{signum}"

        logger.info("Shutdown signal received", signal=signal_name)

        app_manager.shutdown()
        sys.exit(0)

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    logger.info("Signal handlers configured")


def get_server_config(host: str = "0.0.0.0", port: int = 8080, **kwargs: Any) -> dict[str, Any]:
    """
    Get server configuration for development and production.

    Args:
        host: Server host address
        port: Server port number
        **kwargs: Additional server configuration options

    Returns:
        Dict[str, Any]: Server configuration dictionary
    """
    settings = get_settings()
    logger = get_logger("app.config")

    config: dict[str, Any] = {
        "host": host,
        "port": port,
        "log_level": "debug" if settings.DEBUG else settings.LOG_LEVEL.value.lower(),
        "access_log": False,  # LoggingMiddleware logs every request
        "server_header": False,
        "date_header": False,
    }

    if settings.is_production:
        config.update({"workers": 1, "loop": "auto", "http": "auto"})
        logger.info("Production server configuration applied")
    else:
        logger.info("Development server configuration applied")

    config.update(kwargs)

    logger.info("Server configuration prepared", config=config)
    return config


def get_application() -> FastAPI:
    """
    Get the application instance for ASGI servers and tests.

    Returns:
        FastAPI: The configured application instance
    """
    return app_manager.create_application()


def run_development_server(host: str | None = None, port: int | None = None, reload: bool = False, **kwargs: Any) -> None:
    """
    Run the development server.

    Args:
        host: Server host address (defaults to settings)
        port: Server port number (defaults to settings)
        reload: Enable auto-reload; needs the import string rather than the app object
        **kwargs: Additional server configuration
    """
    logger = get_logger("app.dev")
    settings = get_settings()

    host = host or settings.API_HOST
    port = port or settings.API_PORT

    logger.info("Starting development server", host=host, port=port, reload=reload, debug=settings.DEBUG)

    try:
        config = get_server_config(host=host, port=port, **kwargs)

        if reload:
            uvicorn.run("stock_api.main:get_application", factory=True, reload=True, reload_dirs=["src"], **config)
        else:
            setup_signal_handlers()
            uvicorn.run(app_manager.create_application(), **config)

    except KeyboardInterrupt:
        logger.info("Development server stopped by user")
    except Exception as e:
        logger.error("Development server failed", error=str(e), exc_info=True)
        raise


def run_production_server(host: str = "0.0.0.0", port: int = 8080, **kwargs: Any) -> None:
    """
    Run the production server.

    Args:
        host: Server host address
        port: Server port number
        **kwargs: Additional server configuration
    """
    logger = get_logger("app.prod")

    logger.info("Starting production server", host=host, port=port)

    try:
        setup_signal_handlers()

        app = app_manager.create_application()

        config = get_server_config(host=host, port=port, **kwargs)
        config["reload"] = False

        app_manager.server = Server(Config(app, **config))
        app_manager.server.run()

    except KeyboardInterrupt:
        logger.info("Production server stopped by user")
    except Exception as e:
        logger.error("Production server failed", error=str(e), exc_info=True)
        raise


if __name__ == "__main__":
    run_development_server()
