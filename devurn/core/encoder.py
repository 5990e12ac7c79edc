from __future__ import annotations

import logging

from .errors import InvalidInputError, UnknownSubtypeError
from .normalize import normalize_hex, trim_input
from .registry import lookup
from .types import DevUrn
from .validation import EUI48_HEX_LENGTH, EUI64_HEX_LENGTH, validate

logger = logging.getLogger(__name__)

# Universal/local bit of the first octet, inverted in the modified EUI-64 form.
UNIVERSAL_LOCAL_BIT = 0x02
EUI48_TO_EUI64_FILLER = "fffe"


def _flip_universal_local(first_octet: str) -> str:
    return f"{int(first_octet, 16) ^ UNIVERSAL_LOCAL_BIT:02x}"


def mac_to_eui64(raw: str) -> str:
    """Expand a MAC-48/EUI-48 or EUI-64 address into the modified EUI-64 form.

    A 48-bit address gets ``fffe`` inserted between the OUI and the
    device-specific half; both lengths then have the universal/local bit of
    the first octet inverted.
    """
    hex_value = normalize_hex(raw)
    if len(hex_value) == EUI48_HEX_LENGTH:
        oui, device = hex_value[:6], hex_value[6:]
        return _flip_universal_local(oui[:2]) + oui[2:] + EUI48_TO_EUI64_FILLER + device
    if len(hex_value) == EUI64_HEX_LENGTH:
        return _flip_universal_local(hex_value[:2]) + hex_value[2:]
    raise ValueError(f"Invalid MAC address length: {len(hex_value)} hex characters")


def build_urn(subtype: str, identifier: str) -> DevUrn:
    return DevUrn(subtype=subtype, identifier=identifier)


def generate(subtype: str, raw: str) -> str:
    if lookup(subtype) is None:
        raise UnknownSubtypeError(subtype)
    result = validate(subtype, raw)
    if not result.is_valid:
        raise InvalidInputError(result.error, result.message)

    value = trim_input(raw)
    if subtype == "mac":
        identifier = mac_to_eui64(value)
    elif subtype == "ow":
        identifier = normalize_hex(value)
    else:
        identifier = value

    urn = str(build_urn(subtype, identifier))
    logger.debug("Generated DEV URN subtype=%s urn=%s", subtype, urn)
    return urn


__all__ = ["UNIVERSAL_LOCAL_BIT", "build_urn", "generate", "mac_to_eui64"]
