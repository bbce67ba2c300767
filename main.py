"""
Stock Management API - Root Entry Point.

All application logic lives in src/stock_api.

For development: python main.py
For production: point uvicorn or gunicorn at ``main:app``
"""

from stock_api.main import get_application, run_development_server

# App instance for ASGI servers (uvicorn, gunicorn, ...)
app = get_application()

if __name__ == "__main__":
    run_development_server()
