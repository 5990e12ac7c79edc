"""Closed set of DEV URN subtypes (RFC 9039 section 4)."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .types import SubtypeDescriptor

_DESCRIPTORS = (
    SubtypeDescriptor(
        key="mac",
        name="MAC/EUI Address",
        description="MAC-48, EUI-48, or EUI-64 address",
        format_spec="XX:XX:XX:XX:XX:XX or XX-XX-XX-XX-XX-XX or XXXXXXXXXXXX",
        example="00:1B:44:11:3A:B7",
    ),
    SubtypeDescriptor(
        key="ow",
        name="1-Wire Device",
        description="1-Wire device identifier (64-bit)",
        format_spec="16 hexadecimal characters",
        example="10E2073A01080063",
    ),
    SubtypeDescriptor(
        key="org",
        name="Organization Defined",
        description="Organization-specific identifier using PEN",
        format_spec="PEN:identifier",
        example="32473:foo",
    ),
    SubtypeDescriptor(
        key="os",
        name="Organization Serial",
        description="Organization serial number using PEN",
        format_spec="PEN:serial",
        example="32473:12345",
    ),
    SubtypeDescriptor(
        key="ops",
        name="Organization Product+Serial",
        description="Organization product class and serial using PEN",
        format_spec="PEN:product:serial",
        example="32473:switch:12345",
    ),
)

SUBTYPES: Mapping[str, SubtypeDescriptor] = MappingProxyType(
    {descriptor.key: descriptor for descriptor in _DESCRIPTORS}
)


def lookup(key: str) -> SubtypeDescriptor | None:
    return SUBTYPES.get(key)


def keys() -> tuple[str, ...]:
    return tuple(SUBTYPES)


def entries() -> tuple[tuple[str, SubtypeDescriptor], ...]:
    return tuple(SUBTYPES.items())


def list_subtypes() -> tuple[SubtypeDescriptor, ...]:
    return tuple(SUBTYPES.values())


__all__ = ["SUBTYPES", "entries", "keys", "list_subtypes", "lookup"]
