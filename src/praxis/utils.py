from __future__ import annotations

import re

_HEX_QUANTITY = re.compile(r"0x[0-9a-fA-F]+")


def number_to_hex(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Number must be non-negative: {value}")
    return hex(value)


def hex_to_number(value: str) -> int:
    """Decode a 0x-prefixed hex quantity.

    Python ints are unbounded, so values past 2**53 (or 2**256) come back
    exact rather than truncated.
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected a hex string, got {type(value).__name__}")
    if not _HEX_QUANTITY.fullmatch(value):
        raise ValueError(f"Invalid hex quantity: {value!r}")
    return int(value, 16)
