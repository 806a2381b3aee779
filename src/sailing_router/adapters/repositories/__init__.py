"""
Repository adapters for the sailing connection graph.
"""

from src.sailing_router.adapters.repositories.connection_index import (
    ConnectionIndex,
    PortIndex,
    build_connection_frame,
    build_port_index,
)

__all__ = [
    "ConnectionIndex",
    "PortIndex",
    "build_connection_frame",
    "build_port_index",
]
