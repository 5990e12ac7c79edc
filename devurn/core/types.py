from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum

URN_SCHEME = "urn"
DEV_NAMESPACE = "dev"


class ErrorKind(str, Enum):
    EMPTY_INPUT = "empty-input"
    INVALID_LENGTH = "invalid-length"
    INVALID_CHARACTER = "invalid-character"
    INVALID_FORMAT = "invalid-format"
    INVALID_PEN = "invalid-pen"
    EMPTY_IDENTIFIER = "empty-identifier"
    UNKNOWN_SUBTYPE = "unknown-subtype"
    MALFORMED_URN = "malformed-urn"


@dataclass(frozen=True)
class SubtypeDescriptor:
    key: str
    name: str
    description: str
    format_spec: str
    example: str

    def to_dict(self) -> dict[str, str]:
        return {
            "subtype": self.key,
            "name": self.name,
            "description": self.description,
            "format": self.format_spec,
            "example": self.example,
        }


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: ErrorKind | None = None
    message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> "ValidationResult":
        return cls(is_valid=False, error=error, message=message)


@dataclass(frozen=True)
class DevUrn:
    """Parsed ``urn:dev:<subtype>:<identifier>`` value."""

    subtype: str
    identifier: str
    namespace: str = DEV_NAMESPACE

    def __str__(self) -> str:
        return f"{URN_SCHEME}:{self.namespace}:{self.subtype}:{self.identifier}"


@dataclass(frozen=True)
class UrnBreakdown:
    urn: str
    namespace: str
    subtype: str
    identifier: str
    description: str
    format: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


__all__ = [
    "DEV_NAMESPACE",
    "DevUrn",
    "ErrorKind",
    "SubtypeDescriptor",
    "URN_SCHEME",
    "UrnBreakdown",
    "ValidationResult",
]
