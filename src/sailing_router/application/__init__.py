"""
Application layer for the Sailing Router.

This layer provides the public API for the sailing route engine.
It acts as a facade, handling dependency initialization and providing
a simple interface for consumers.
"""

from src.sailing_router.application.sailing_router import SailingRouter

__all__ = ["SailingRouter"]
