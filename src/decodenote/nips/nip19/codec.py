"""
NIP-19 identifier decoding and encoding.

[decode_identifier()][decodenote.nips.nip19.codec.decode_identifier] turns
bech32 text into one of the
[DecodedIdentifier][decodenote.models.identifier.DecodedIdentifier]
variants:

```text
npub / nsec / note       payload is a bare 32-byte value
nprofile / nevent / naddr payload is a TLV stream
```

TLV semantics per prefix:

| type | name    | nprofile | nevent | naddr  |
|------|---------|----------|--------|--------|
| 0    | special | pubkey   | id     | pubkey |
| 1    | relay   | relays   | relays | relays |
| 2    | author  | --       | author | author |
| 3    | kind    | --       | kind   | kind   |
| 4    | d-tag   | --       | --     | d_tag  |

Records marked ``--`` and unknown types are kept in ``tlv_records`` only.
Repeated single-valued records overwrite earlier ones; relay records
accumulate in encounter order.

Note:
    Every failure raises a
    [DecodeError][decodenote.core.exceptions.DecodeError] subclass before
    any value is built, so a partially decoded identifier is never returned.

The encoders exist so hosts and tests can produce identifiers from known
values. They format existing keys and ids; they never generate keys or sign.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from decodenote.core.config import DEFAULT_MAX_IDENTIFIER_LENGTH
from decodenote.core.exceptions import (
    InvalidEncodingError,
    UnknownPrefixError,
)
from decodenote.core.logger import Logger
from decodenote.models.constants import IdentifierPrefix, TlvType
from decodenote.models.identifier import (
    DecodedIdentifier,
    Naddr,
    Nevent,
    Note,
    Nprofile,
    Npub,
    Nsec,
    TlvRecord,
)
from decodenote.utils.hex import bytes_to_hex, hex_to_bytes

from .encoding import decode_bech32, encode_bech32
from .tlv import decode_uint_be, encode_tlv, iter_tlv, tlv_type_name


_KEY_LENGTH = 32

# Which TLV types map onto which attribute, per composite prefix
_TLV_FIELDS: dict[IdentifierPrefix, dict[int, str]] = {
    IdentifierPrefix.NPROFILE: {
        TlvType.SPECIAL: "pubkey",
    },
    IdentifierPrefix.NEVENT: {
        TlvType.SPECIAL: "id",
        TlvType.AUTHOR: "author",
        TlvType.KIND: "kind",
    },
    IdentifierPrefix.NADDR: {
        TlvType.SPECIAL: "pubkey",
        TlvType.AUTHOR: "author",
        TlvType.KIND: "kind",
        TlvType.D_TAG: "d_tag",
    },
}

_TLV_CLASSES: dict[IdentifierPrefix, type[Nprofile | Nevent | Naddr]] = {
    IdentifierPrefix.NPROFILE: Nprofile,
    IdentifierPrefix.NEVENT: Nevent,
    IdentifierPrefix.NADDR: Naddr,
}

logger = Logger("codec")


def _decode_utf8(value: bytes, what: str) -> str:
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(f"{what} is not valid UTF-8: {e.reason}") from e


def _field_value(tlv_type: int, value: bytes) -> Any:
    if tlv_type == TlvType.KIND:
        return decode_uint_be(value)
    if tlv_type == TlvType.D_TAG:
        return _decode_utf8(value, "d-tag")
    return bytes_to_hex(value)


def _decode_tlv_identifier(prefix: IdentifierPrefix, payload: bytes) -> Nprofile | Nevent | Naddr:
    field_map = _TLV_FIELDS[prefix]
    fields: dict[str, Any] = {}
    relays: list[str] = []
    records: list[TlvRecord] = []

    for tlv_type, value in iter_tlv(payload):
        records.append(
            TlvRecord(
                type=tlv_type,
                type_name=tlv_type_name(tlv_type),
                length=len(value),
                value_hex=bytes_to_hex(value),
            )
        )
        if tlv_type == TlvType.RELAY:
            relays.append(_decode_utf8(value, "relay"))
        elif tlv_type in field_map:
            fields[field_map[tlv_type]] = _field_value(tlv_type, value)

    return _TLV_CLASSES[prefix](relays=tuple(relays), tlv_records=tuple(records), **fields)


def _require_key_length(prefix: IdentifierPrefix, payload: bytes) -> str:
    if len(payload) != _KEY_LENGTH:
        raise InvalidEncodingError(
            f"{prefix} payload must be {_KEY_LENGTH} bytes, got {len(payload)}"
        )
    return bytes_to_hex(payload)


def decode_identifier(
    text: str, *, max_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH
) -> DecodedIdentifier:
    """Decode a NIP-19 bech32 identifier.

    Args:
        text: Bech32 text such as ``npub1...`` or ``nevent1...``. No
            ``nostr:`` prefix and no surrounding whitespace.
        max_length: Longest accepted input, in characters.

    Returns:
        The identifier variant matching the prefix.

    Raises:
        InvalidEncodingError: Malformed bech32, a bare key that is not 32
            bytes, or a relay/d-tag value that is not UTF-8.
        TruncatedPayloadError: A TLV record runs past the end of the payload.
        UnknownPrefixError: The prefix is not a NIP-19 identifier prefix.

    Examples:
        ```python
        ident = decode_identifier("nevent1qqs...")
        ident.id, ident.relays, ident.tlv_records
        ```
    """
    hrp, payload = decode_bech32(text, max_length=max_length)

    try:
        prefix = IdentifierPrefix(hrp)
    except ValueError:
        raise UnknownPrefixError(hrp) from None

    identifier: DecodedIdentifier
    if prefix == IdentifierPrefix.NPUB:
        identifier = Npub(pubkey=_require_key_length(prefix, payload))
    elif prefix == IdentifierPrefix.NSEC:
        identifier = Nsec(secret_key=_require_key_length(prefix, payload))
    elif prefix == IdentifierPrefix.NOTE:
        identifier = Note(id=_require_key_length(prefix, payload))
    else:
        identifier = _decode_tlv_identifier(prefix, payload)

    logger.debug(
        "identifier_decoded",
        prefix=prefix,
        payload_bytes=len(payload),
        tlv_records=len(identifier.tlv_records),
    )
    return identifier


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _encode_key(prefix: IdentifierPrefix, value_hex: str, name: str) -> str:
    return encode_bech32(prefix, hex_to_bytes(value_hex, expected_length=_KEY_LENGTH, name=name))


def encode_npub(pubkey: str) -> str:
    """Encode a 64-hex public key as ``npub1...``."""
    return _encode_key(IdentifierPrefix.NPUB, pubkey, "pubkey")


def encode_nsec(secret_key: str) -> str:
    """Encode a 64-hex private key as ``nsec1...``."""
    return _encode_key(IdentifierPrefix.NSEC, secret_key, "secret_key")


def encode_note(event_id: str) -> str:
    """Encode a 64-hex event id as ``note1...``."""
    return _encode_key(IdentifierPrefix.NOTE, event_id, "id")


def _relay_records(relays: Iterable[str]) -> list[tuple[int, bytes]]:
    return [(TlvType.RELAY, relay.encode("utf-8")) for relay in relays]


def _kind_bytes(kind: int) -> bytes:
    if not 0 <= kind <= 0xFFFFFFFF:
        raise InvalidEncodingError(f"kind {kind} does not fit in 4 bytes")
    return kind.to_bytes(4, "big")


def encode_nprofile(pubkey: str, relays: Sequence[str] = ()) -> str:
    """Encode a profile pointer as ``nprofile1...``."""
    records = [(TlvType.SPECIAL, hex_to_bytes(pubkey, expected_length=_KEY_LENGTH, name="pubkey"))]
    records += _relay_records(relays)
    return encode_bech32(IdentifierPrefix.NPROFILE, encode_tlv(records))


def encode_nevent(
    event_id: str,
    relays: Sequence[str] = (),
    author: str | None = None,
    kind: int | None = None,
) -> str:
    """Encode an event pointer as ``nevent1...``.

    The kind, when given, is written as a 4-byte big-endian integer.
    """
    records = [(TlvType.SPECIAL, hex_to_bytes(event_id, expected_length=_KEY_LENGTH, name="id"))]
    records += _relay_records(relays)
    if author is not None:
        records.append(
            (TlvType.AUTHOR, hex_to_bytes(author, expected_length=_KEY_LENGTH, name="author"))
        )
    if kind is not None:
        records.append((TlvType.KIND, _kind_bytes(kind)))
    return encode_bech32(IdentifierPrefix.NEVENT, encode_tlv(records))


def encode_naddr(
    pubkey: str,
    kind: int,
    d_tag: str,
    relays: Sequence[str] = (),
    author: str | None = None,
) -> str:
    """Encode an addressable event coordinate as ``naddr1...``.

    Records are written in the layout ``decode_identifier`` reads back:
    special (pubkey), relays, author, kind, d-tag.
    """
    records = [(TlvType.SPECIAL, hex_to_bytes(pubkey, expected_length=_KEY_LENGTH, name="pubkey"))]
    records += _relay_records(relays)
    if author is not None:
        records.append(
            (TlvType.AUTHOR, hex_to_bytes(author, expected_length=_KEY_LENGTH, name="author"))
        )
    records.append((TlvType.KIND, _kind_bytes(kind)))
    records.append((TlvType.D_TAG, d_tag.encode("utf-8")))
    return encode_bech32(IdentifierPrefix.NADDR, encode_tlv(records))
