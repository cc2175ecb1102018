"""API routers module."""

from autobal.api import epochs, health

__all__ = ["epochs", "health"]
