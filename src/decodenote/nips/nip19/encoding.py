"""
Bech32 text encoding with an extended length limit.

The ``bech32`` reference implementation caps encoded strings at 90
characters, which is far too short for NIP-19 identifiers that embed
several relay hints. This module reuses the library's charset, checksum
polymod and bit regrouping primitives, and only replaces the framing so the
limit can be raised (1023 characters by default).

Note:
    NIP-19 uses the original bech32 checksum constant (1), not bech32m.
"""

from __future__ import annotations

from bech32 import CHARSET, bech32_hrp_expand, bech32_polymod, convertbits

from decodenote.core.config import DEFAULT_MAX_IDENTIFIER_LENGTH
from decodenote.core.exceptions import InvalidEncodingError


_SEPARATOR = "1"
_CHECKSUM_LENGTH = 6
_BECH32_CONST = 1


def decode_bech32(
    text: str, *, max_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH
) -> tuple[str, bytes]:
    """Decode bech32 *text* into its prefix and 8-bit payload.

    Args:
        text: The full bech32 string, e.g. ``npub1...``.
        max_length: Longest accepted input, in characters.

    Returns:
        ``(hrp, payload)`` with the human-readable part lower-cased.

    Raises:
        InvalidEncodingError: On overlong or mixed-case input, characters
            outside the printable ASCII range or the bech32 charset, a
            missing separator, a bad checksum, or non-zero padding bits.
    """
    if len(text) > max_length:
        raise InvalidEncodingError(f"bech32 text exceeds {max_length} characters")
    if any(ord(c) < 33 or ord(c) > 126 for c in text):
        raise InvalidEncodingError("bech32 text contains non-printable characters")
    if text.lower() != text and text.upper() != text:
        raise InvalidEncodingError("bech32 text mixes upper and lower case")

    text = text.lower()
    pos = text.rfind(_SEPARATOR)
    if pos < 1 or pos + _CHECKSUM_LENGTH + 1 > len(text):
        raise InvalidEncodingError("bech32 separator missing or misplaced")

    hrp = text[:pos]
    data_part = text[pos + 1 :]
    if any(c not in CHARSET for c in data_part):
        raise InvalidEncodingError("bech32 data contains characters outside the charset")

    words = [CHARSET.find(c) for c in data_part]
    if bech32_polymod(bech32_hrp_expand(hrp) + words) != _BECH32_CONST:
        raise InvalidEncodingError("bech32 checksum mismatch")

    payload = convertbits(words[:-_CHECKSUM_LENGTH], 5, 8, False)
    if payload is None:
        raise InvalidEncodingError("bech32 payload has invalid padding")
    return hrp, bytes(payload)


def encode_bech32(hrp: str, payload: bytes) -> str:
    """Encode *payload* under *hrp* as bech32 text.

    There is no length limit on encoding; the caller decides what is sensible.

    Raises:
        InvalidEncodingError: If *hrp* is empty or contains characters
            outside the printable ASCII range.
    """
    if not hrp or any(ord(c) < 33 or ord(c) > 126 for c in hrp):
        raise InvalidEncodingError(f"invalid bech32 prefix: {hrp!r}")
    hrp = hrp.lower()
    words = convertbits(list(payload), 8, 5, True)
    polymod = bech32_polymod(bech32_hrp_expand(hrp) + words + [0] * _CHECKSUM_LENGTH)
    polymod ^= _BECH32_CONST
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(_CHECKSUM_LENGTH)]
    return hrp + _SEPARATOR + "".join(CHARSET[w] for w in words + checksum)
