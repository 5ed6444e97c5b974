"""Ordered bidirectional map, environment-gated debug output and a ready-handshake TCP client."""

__version__ = "0.1.0"
__all__ = ["bimap", "debug", "network"]