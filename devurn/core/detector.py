"""Heuristic subtype detection for undeclared input.

Two inputs are ambiguous by construction and are settled by policy rather
than by looking at the content:

* a bare 16 hex digit string is both a valid EUI-64 (``mac``) and a valid
  1-Wire identifier (``ow``); the default reports ``mac``.
* ``PEN:value`` fits both ``org`` and ``os``; the default reports ``org``.

Both defaults can be changed through :class:`DetectionPolicy`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .normalize import trim_input

_DELIMITED_EUI48 = re.compile(r"(?:[0-9a-fA-F]{2}[:-]){5}[0-9a-fA-F]{2}")
_DELIMITED_EUI64 = re.compile(r"(?:[0-9a-fA-F]{2}[:-]){7}[0-9a-fA-F]{2}")
_BARE_EUI48 = re.compile(r"[0-9a-fA-F]{12}")
_BARE_HEX64 = re.compile(r"[0-9a-fA-F]{16}")
_PEN_PREFIXED = re.compile(r"[0-9]+:.+")

_BARE_HEX64_CHOICES = ("mac", "ow")
_TWO_SEGMENT_CHOICES = ("org", "os")


@dataclass(frozen=True)
class DetectionPolicy:
    bare_eui64_subtype: str = "mac"
    two_segment_subtype: str = "org"

    def __post_init__(self) -> None:
        if self.bare_eui64_subtype not in _BARE_HEX64_CHOICES:
            raise ValueError(
                f"bare_eui64_subtype must be one of {_BARE_HEX64_CHOICES}, "
                f"got {self.bare_eui64_subtype!r}"
            )
        if self.two_segment_subtype not in _TWO_SEGMENT_CHOICES:
            raise ValueError(
                f"two_segment_subtype must be one of {_TWO_SEGMENT_CHOICES}, "
                f"got {self.two_segment_subtype!r}"
            )


DEFAULT_POLICY = DetectionPolicy()


def detect(raw: str, policy: DetectionPolicy = DEFAULT_POLICY) -> str | None:
    value = trim_input(raw)

    if _BARE_HEX64.fullmatch(value):
        return policy.bare_eui64_subtype
    if (
        _DELIMITED_EUI48.fullmatch(value)
        or _DELIMITED_EUI64.fullmatch(value)
        or _BARE_EUI48.fullmatch(value)
    ):
        return "mac"

    if _PEN_PREFIXED.match(value):
        segments = value.split(":")
        if len(segments) == 2:
            return policy.two_segment_subtype
        if len(segments) == 3:
            return "ops"
    return None


__all__ = ["DEFAULT_POLICY", "DetectionPolicy", "detect"]
