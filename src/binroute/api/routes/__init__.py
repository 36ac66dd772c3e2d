"""Route group exports."""

from . import bins, health, routes

__all__ = ["bins", "routes", "health"]
