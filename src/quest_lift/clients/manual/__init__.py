"""Interactive profile input."""

from .client import ManualInputClient

__all__ = ["ManualInputClient"]
