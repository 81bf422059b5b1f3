"""HTTP API for fitai."""

from .app import create_app

__all__ = ["create_app"]
