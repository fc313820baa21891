"""Custom exception types raised while planning a resource."""

from __future__ import annotations


class ResourceGenError(RuntimeError):
    """Base class for planning failures surfaced to the caller."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidNameError(ResourceGenError):
    """Raised when a resource name is empty or otherwise unusable."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"invalid resource name {name!r}: name must not be empty")


class UnknownTransportError(ResourceGenError):
    """Raised when the requested transport kind is not one of the known kinds."""

    def __init__(self, kind: object, known: tuple[str, ...] = ()) -> None:
        self.kind = kind
        message = f"unknown transport type {kind!r}"
        if known:
            message += f" (expected one of: {', '.join(known)})"
        super().__init__(message)
