"""Demo bot handlers."""

from botrouter.handlers.router import setup_routes

__all__ = ["setup_routes"]
