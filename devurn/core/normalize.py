from __future__ import annotations

import re

_NON_HEX = re.compile(r"[^0-9a-fA-F]")
_LOWER_HEX = re.compile(r"[0-9a-f]*")

# ECMAScript WhiteSpace and LineTerminator code points.
_TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim_input(raw: str) -> str:
    """Strip surrounding spaces, line terminators and byte order marks.

    ASCII control characters such as ``\\x1f`` are kept and fail validation.
    """
    return raw.strip(_TRIM_CHARS)


def normalize_hex(raw: str) -> str:
    """Drop separators and any other non-hex characters, then lower-case."""
    return _NON_HEX.sub("", raw).lower()


def is_hex_of_length(raw: str, expected_length: int | None = None) -> bool:
    hex_value = normalize_hex(raw)
    if expected_length is not None and len(hex_value) != expected_length:
        return False
    return _LOWER_HEX.fullmatch(hex_value) is not None


__all__ = ["is_hex_of_length", "normalize_hex", "trim_input"]
