"""Hex conversion and display formatting helpers.

Attributes:
    hex: The single ``bytes_to_hex`` / ``hex_to_bytes`` pair used by the
        codec and the validator. Raises
        [InvalidHexError][decodenote.core.exceptions.InvalidHexError] on
        malformed input.
    formatting: Absolute/relative timestamp rendering and id truncation for
        reports.

Note:
    The utils layer imports only ``decodenote.core.exceptions``; it never
    reaches into ``decodenote.nips`` or ``decodenote.inspector``.
"""

from .formatting import TimestampDisplay, format_timestamp, truncate_id
from .hex import bytes_to_hex, hex_to_bytes, is_hex


__all__ = [
    "TimestampDisplay",
    "bytes_to_hex",
    "format_timestamp",
    "hex_to_bytes",
    "is_hex",
    "truncate_id",
]
