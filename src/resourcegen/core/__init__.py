"""Core primitives shared across resourcegen."""

from .errors import InvalidNameError, ResourceGenError, UnknownTransportError

__all__ = ["InvalidNameError", "ResourceGenError", "UnknownTransportError"]
