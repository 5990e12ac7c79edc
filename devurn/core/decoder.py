from __future__ import annotations

import logging

from .errors import MalformedUrnError, UnknownSubtypeError
from .registry import SUBTYPES, lookup
from .types import DEV_NAMESPACE, URN_SCHEME, DevUrn, UrnBreakdown

logger = logging.getLogger(__name__)

_MIN_SEGMENTS = 4


def parse_urn(urn: str) -> DevUrn:
    """Split a DEV URN into subtype and identifier.

    Everything after ``urn:dev:<subtype>:`` is the identifier, colons
    included, so ``urn:dev:ops:32473:switch:12345`` keeps
    ``32473:switch:12345`` intact.
    """
    parts = urn.split(":")
    if len(parts) < _MIN_SEGMENTS or parts[0] != URN_SCHEME or parts[1] != DEV_NAMESPACE:
        raise MalformedUrnError(urn)
    subtype = parts[2]
    if lookup(subtype) is None:
        raise UnknownSubtypeError(subtype)
    return DevUrn(subtype=subtype, identifier=":".join(parts[3:]))


def breakdown(urn: str) -> UrnBreakdown:
    parsed = parse_urn(urn)
    descriptor = SUBTYPES[parsed.subtype]
    logger.debug("Decoded DEV URN subtype=%s identifier=%s", parsed.subtype, parsed.identifier)
    return UrnBreakdown(
        urn=urn,
        namespace=parsed.namespace,
        subtype=parsed.subtype,
        identifier=parsed.identifier,
        description=descriptor.description,
        format=descriptor.format_spec,
    )


__all__ = ["breakdown", "parse_urn"]
