"""Logging and environment configuration.

This package must NEVER import from ``botsdk/``.  ``botcore.config`` is not
imported here because it reads the environment at import time.
"""

from botcore.logger import SDKLogger

__all__ = [
    "SDKLogger",
]
