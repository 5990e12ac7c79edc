"""Structural validation of raw identifiers per DEV URN subtype.

``validate`` never raises: every failure is reported as a
:class:`ValidationResult` carrying the :class:`ErrorKind` and a message
suitable for showing next to an input field.
"""

from __future__ import annotations

import re
from typing import Callable

from .normalize import is_hex_of_length, normalize_hex, trim_input
from .types import ErrorKind, ValidationResult

EUI48_HEX_LENGTH = 12
EUI64_HEX_LENGTH = 16
ONE_WIRE_HEX_LENGTH = 16

_PEN_DIGITS = re.compile(r"[0-9]+")

_PEN_MESSAGE = "PEN must be a positive integer without leading zeros"


def is_valid_pen(segment: str) -> bool:
    """Private Enterprise Number: ASCII digits, positive, no leading zero."""
    if _PEN_DIGITS.fullmatch(segment) is None:
        return False
    return not segment.startswith("0")


def has_segment_count(parts: list[str], expected: int) -> bool:
    return len(parts) == expected


def is_eui_length(hex_value: str) -> bool:
    return len(hex_value) in (EUI48_HEX_LENGTH, EUI64_HEX_LENGTH)


def is_one_wire_length(hex_value: str) -> bool:
    return len(hex_value) == ONE_WIRE_HEX_LENGTH


def _validate_mac(value: str) -> ValidationResult:
    if not is_eui_length(normalize_hex(value)):
        return ValidationResult.fail(
            ErrorKind.INVALID_LENGTH,
            "MAC address must be 12 hex characters (MAC-48/EUI-48) "
            "or 16 hex characters (EUI-64)",
        )
    if not is_hex_of_length(value):
        return ValidationResult.fail(
            ErrorKind.INVALID_CHARACTER,
            "MAC address must contain only hexadecimal characters",
        )
    return ValidationResult.ok()


def _validate_one_wire(value: str) -> ValidationResult:
    if not is_one_wire_length(normalize_hex(value)):
        return ValidationResult.fail(
            ErrorKind.INVALID_LENGTH,
            "1-Wire identifier must be exactly 16 hexadecimal characters",
        )
    if not is_hex_of_length(value, ONE_WIRE_HEX_LENGTH):
        return ValidationResult.fail(
            ErrorKind.INVALID_CHARACTER,
            "1-Wire identifier must contain only hexadecimal characters",
        )
    return ValidationResult.ok()


def _pen_scoped(
    format_spec: str, labels: tuple[str, ...]
) -> Callable[[str], ValidationResult]:
    """Build a validator for ``PEN:<labels...>`` identifiers."""

    def _validate(value: str) -> ValidationResult:
        parts = value.split(":")
        if not has_segment_count(parts, len(labels) + 1):
            return ValidationResult.fail(
                ErrorKind.INVALID_FORMAT, f"Format must be {format_spec}"
            )
        if not is_valid_pen(parts[0]):
            return ValidationResult.fail(ErrorKind.INVALID_PEN, _PEN_MESSAGE)
        for label, segment in zip(labels, parts[1:]):
            if not segment:
                return ValidationResult.fail(
                    ErrorKind.EMPTY_IDENTIFIER, f"{label} cannot be empty"
                )
        return ValidationResult.ok()

    return _validate


_VALIDATORS: dict[str, Callable[[str], ValidationResult]] = {
    "mac": _validate_mac,
    "ow": _validate_one_wire,
    "org": _pen_scoped("PEN:identifier", ("Identifier",)),
    "os": _pen_scoped("PEN:serial", ("Serial number",)),
    "ops": _pen_scoped("PEN:product:serial", ("Product class", "Serial number")),
}


def validate(subtype: str, raw: str) -> ValidationResult:
    value = trim_input(raw)
    if not value:
        return ValidationResult.fail(ErrorKind.EMPTY_INPUT, "Input cannot be empty")
    validator = _VALIDATORS.get(subtype)
    if validator is None:
        return ValidationResult.fail(ErrorKind.UNKNOWN_SUBTYPE, "Unknown subtype")
    return validator(value)


__all__ = [
    "EUI48_HEX_LENGTH",
    "EUI64_HEX_LENGTH",
    "ONE_WIRE_HEX_LENGTH",
    "has_segment_count",
    "is_eui_length",
    "is_one_wire_length",
    "is_valid_pen",
    "validate",
]
