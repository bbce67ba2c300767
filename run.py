#!/usr/bin/env python3
"""
Development runner script for the Stock Management API.

Usage:
    python run.py                    # Run with default settings
    python run.py --port 9000        # Run on custom port
    python run.py --reload           # Enable auto-reload
    python run.py --production       # Run with the production server setup
"""

import argparse

from stock_api.core.dependencies import get_settings
from stock_api.main import run_development_server, run_production_server


def main():
    """Main entry point for the server runner."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run Stock Management API")
    parser.add_argument(
        "--host",
        default=settings.API_HOST,
        help=f"Host to bind to (default: {settings.API_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.API_PORT,
        help=f"Port to bind to (default: {settings.API_PORT})",
    )
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument("--production", action="store_true", help="Use the production server setup")

    args = parser.parse_args()

    print(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    print(f"Server: http://{args.host}:{args.port}")
    if not settings.is_production:
        print(f"Documentation: http://{args.host}:{args.port}/docs")
    print(f"Health Check: http://{args.host}:{args.port}/health")

    if args.production:
        run_production_server(host=args.host, port=args.port)
    else:
        run_development_server(host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
