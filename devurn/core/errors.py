from __future__ import annotations

from typing import Mapping

from .types import ErrorKind


class DevUrnError(ValueError):
    """Base error for rejected identifiers and URNs."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


class InvalidInputError(DevUrnError):
    pass


class UnknownSubtypeError(DevUrnError):
    def __init__(self, subtype: str, message: str | None = None) -> None:
        super().__init__(
            ErrorKind.UNKNOWN_SUBTYPE, message or f"Unknown subtype: {subtype}"
        )
        self.subtype = subtype


class MalformedUrnError(DevUrnError):
    def __init__(self, urn: str, message: str | None = None) -> None:
        super().__init__(ErrorKind.MALFORMED_URN, message or "Invalid DEV URN format")
        self.urn = urn


def error_for_kind(
    kind: ErrorKind, message: str, context: Mapping[str, object] | None = None
) -> DevUrnError:
    """Rebuild the matching exception for an error reported over the wire.

    ``context`` carries the ``subtype``/``urn`` fields of the error body.
    """
    context = context or {}
    if kind is ErrorKind.MALFORMED_URN:
        return MalformedUrnError(str(context.get("urn", "")), message)
    if kind is ErrorKind.UNKNOWN_SUBTYPE:
        return UnknownSubtypeError(str(context.get("subtype", "")), message)
    return InvalidInputError(kind, message)


__all__ = [
    "DevUrnError",
    "InvalidInputError",
    "MalformedUrnError",
    "UnknownSubtypeError",
    "error_for_kind",
]
