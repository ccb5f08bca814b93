"""API clients for external services."""

from .render import RenderClient

__all__ = ["RenderClient"]
