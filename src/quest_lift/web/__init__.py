"""Web API for quest-lift."""

from .app import create_app

__all__ = ["create_app"]
