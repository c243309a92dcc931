"""
Type-Length-Value record parsing and encoding for NIP-19 payloads.

A TLV payload is a flat concatenation of ``[type: 1 byte][length: 1 byte]
[value: length bytes]`` records. Parsing is an explicit cursor loop over the
byte string: no recursion, and every read is bounds-checked against the
remaining payload before it happens.

See Also:
    [decode_identifier()][decodenote.nips.nip19.codec.decode_identifier]:
        Interprets the parsed records per identifier prefix.
"""

from __future__ import annotations

from collections.abc import Iterable

from decodenote.core.exceptions import InvalidEncodingError, TruncatedPayloadError
from decodenote.models.constants import TLV_TYPE_NAMES
from decodenote.models.identifier import TlvRecord
from decodenote.utils.hex import bytes_to_hex


_HEADER_LENGTH = 2
_MAX_VALUE_LENGTH = 0xFF


def tlv_type_name(tlv_type: int) -> str:
    """Return the display name for a TLV type code, ``unknown(<n>)`` if unrecognised."""
    return TLV_TYPE_NAMES.get(tlv_type, f"unknown({tlv_type})")


def iter_tlv(payload: bytes) -> Iterable[tuple[int, bytes]]:
    """Yield ``(type, value)`` pairs in payload order.

    Raises:
        TruncatedPayloadError: If a header or a value would read past the
            end of *payload*. Nothing past the bad record is yielded, and
            callers must discard what was yielded before it.
    """
    offset = 0
    end = len(payload)
    while offset < end:
        if end - offset < _HEADER_LENGTH:
            raise TruncatedPayloadError(f"TLV header truncated at offset {offset}")
        tlv_type = payload[offset]
        length = payload[offset + 1]
        start = offset + _HEADER_LENGTH
        if start + length > end:
            raise TruncatedPayloadError(
                f"TLV record at offset {offset} declares {length} bytes, "
                f"only {end - start} remain"
            )
        yield tlv_type, payload[start : start + length]
        offset = start + length


def parse_tlv(payload: bytes) -> tuple[TlvRecord, ...]:
    """Parse a whole TLV payload into records.

    The returned records cover the payload exactly: the sum of
    ``2 + record.length`` equals ``len(payload)``.

    Raises:
        TruncatedPayloadError: If the payload ends inside a record.
    """
    return tuple(
        TlvRecord(
            type=tlv_type,
            type_name=tlv_type_name(tlv_type),
            length=len(value),
            value_hex=bytes_to_hex(value),
        )
        for tlv_type, value in iter_tlv(payload)
    )


def encode_tlv(records: Iterable[tuple[int, bytes]]) -> bytes:
    """Concatenate ``(type, value)`` pairs into a TLV payload.

    Raises:
        InvalidEncodingError: If a type does not fit in one byte or a value
            is longer than 255 bytes.
    """
    out = bytearray()
    for tlv_type, value in records:
        if not 0 <= tlv_type <= 0xFF:
            raise InvalidEncodingError(f"TLV type {tlv_type} does not fit in one byte")
        if len(value) > _MAX_VALUE_LENGTH:
            raise InvalidEncodingError(f"TLV value of {len(value)} bytes exceeds 255")
        out.append(tlv_type)
        out.append(len(value))
        out.extend(value)
    return bytes(out)


def decode_uint_be(value: bytes) -> int:
    """Decode an unsigned big-endian integer of any byte length (empty is 0)."""
    result = 0
    for byte in value:
        result = result * 256 + byte
    return result
