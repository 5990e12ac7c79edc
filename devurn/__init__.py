"""Generate, validate, detect and decode RFC 9039 DEV URNs."""

from __future__ import annotations

from .core import (
    DetectionPolicy,
    DevUrnError,
    ErrorKind,
    InvalidInputError,
    MalformedUrnError,
    SubtypeDescriptor,
    UnknownSubtypeError,
    UrnBreakdown,
    ValidationResult,
    breakdown,
    detect,
    generate,
    list_subtypes,
    validate,
)

__version__ = "1.0.0"

__all__ = [
    "DetectionPolicy",
    "DevUrnError",
    "ErrorKind",
    "InvalidInputError",
    "MalformedUrnError",
    "SubtypeDescriptor",
    "UnknownSubtypeError",
    "UrnBreakdown",
    "ValidationResult",
    "breakdown",
    "create_app",
    "detect",
    "generate",
    "list_subtypes",
    "validate",
]


def __getattr__(name: str):
    if name == "create_app":
        from .api.server import create_app

        return create_app
    raise AttributeError(f"module 'devurn' has no attribute {name!r}")
