"""Hex/byte conversions shared by the codec and the validator.

These are the only two conversion functions in the package. Both are total
over their input domain: they either return a value or raise
[InvalidHexError][decodenote.core.exceptions.InvalidHexError], and never
truncate odd-length input the way naive pairwise slicing would.
"""

from __future__ import annotations

import re

from decodenote.core.exceptions import InvalidHexError


_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def bytes_to_hex(data: bytes | bytearray | list[int]) -> str:
    """Render bytes as lowercase hex.

    Raises:
        InvalidHexError: If a list element is outside 0-255.
    """
    try:
        return bytes(data).hex()
    except (TypeError, ValueError) as e:
        raise InvalidHexError(f"cannot render as hex: {e}") from e


def hex_to_bytes(text: str, *, expected_length: int | None = None, name: str = "value") -> bytes:
    """Parse hex text (either case) into bytes.

    Args:
        text: Hex digits with no prefix or separators.
        expected_length: Required number of bytes, if any.
        name: Field name for error messages.

    Raises:
        InvalidHexError: On odd length, a non-hex digit, or a byte length
            different from *expected_length*.
    """
    if not isinstance(text, str):
        raise InvalidHexError(f"{name} must be a str, got {type(text).__name__}")
    if len(text) % 2:
        raise InvalidHexError(f"{name} has odd hex length {len(text)}")
    if not _HEX_RE.fullmatch(text):
        raise InvalidHexError(f"{name} contains non-hex characters")
    data = bytes.fromhex(text)
    if expected_length is not None and len(data) != expected_length:
        raise InvalidHexError(f"{name} must be {expected_length} bytes, got {len(data)}")
    return data


def is_hex(text: str, length: int | None = None) -> bool:
    """Return True if *text* is hex of exactly *length* characters (any length if None)."""
    if not isinstance(text, str) or not _HEX_RE.fullmatch(text):
        return False
    return length is None or len(text) == length
