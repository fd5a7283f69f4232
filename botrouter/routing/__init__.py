"""Generic routing: Router and per-route Handler."""

from botrouter.routing.handler import Handler
from botrouter.routing.router import Router, generate_key

__all__ = ["Handler", "Router", "generate_key"]
