"""Runtime service assembly."""

from .dependencies import Gateway, build_gateway

__all__ = ["Gateway", "build_gateway"]
