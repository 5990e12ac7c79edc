from __future__ import annotations

from .decoder import breakdown, parse_urn
from .detector import DEFAULT_POLICY, DetectionPolicy, detect
from .encoder import build_urn, generate, mac_to_eui64
from .errors import (
    DevUrnError,
    InvalidInputError,
    MalformedUrnError,
    UnknownSubtypeError,
)
from .normalize import is_hex_of_length, normalize_hex
from .registry import SUBTYPES, entries, keys, list_subtypes, lookup
from .types import (
    DevUrn,
    ErrorKind,
    SubtypeDescriptor,
    UrnBreakdown,
    ValidationResult,
)
from .validation import validate

__all__ = [
    "DEFAULT_POLICY",
    "DetectionPolicy",
    "DevUrn",
    "DevUrnError",
    "ErrorKind",
    "InvalidInputError",
    "MalformedUrnError",
    "SUBTYPES",
    "SubtypeDescriptor",
    "UnknownSubtypeError",
    "UrnBreakdown",
    "ValidationResult",
    "breakdown",
    "build_urn",
    "detect",
    "entries",
    "generate",
    "is_hex_of_length",
    "keys",
    "list_subtypes",
    "lookup",
    "mac_to_eui64",
    "normalize_hex",
    "parse_urn",
    "validate",
]
