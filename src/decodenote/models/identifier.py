"""
Decoded NIP-19 identifiers as a closed set of frozen dataclasses.

Each bech32 prefix has its own type, so a field that makes no sense for a
prefix (a ``d_tag`` on an ``npub``, a relay list on an ``nsec``) cannot be
represented at all. The union alias
[DecodedIdentifier][decodenote.models.identifier.DecodedIdentifier] names
the full set.

Every variant exposes:

* ``prefix``: the [IdentifierPrefix][decodenote.models.constants.IdentifierPrefix]
  it was decoded from;
* ``relays``: relay hints in encounter order (always empty for bare keys);
* ``tlv_records``: every TLV record verbatim, in payload order (always empty
  for bare keys);
* ``to_dict()``: a JSON-ready rendering for reports.

Warning:
    [Nsec][decodenote.models.identifier.Nsec] holds private key material. It
    is excluded from ``repr()`` and masked by ``to_dict()`` unless the
    caller asks for it explicitly.

See Also:
    [decodenote.nips.nip19][]: The codec that produces these values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from ._validation import validate_instance, validate_int, validate_str_tuple
from .constants import IdentifierPrefix


SECRET_MASK = "[redacted]"


@dataclass(frozen=True, slots=True)
class TlvRecord:
    """One ``[type][length][value]`` record of a TLV payload.

    Attributes:
        type: Raw type byte (0-255).
        type_name: ``special``, ``relay``, ``author``, ``kind``, ``d-tag``
            or ``unknown(<type>)``.
        length: Raw length byte (0-255).
        value_hex: The value bytes as lowercase hex.

    Raises:
        ValueError: If ``length`` does not match ``value_hex``.
    """

    type: int
    type_name: str
    length: int
    value_hex: str

    def __post_init__(self) -> None:
        validate_int(self.type, "type")
        validate_int(self.length, "length")
        validate_instance(self.type_name, str, "type_name")
        validate_instance(self.value_hex, str, "value_hex")
        if not 0 <= self.type <= 0xFF:
            raise ValueError(f"type must fit in one byte, got {self.type}")
        if len(self.value_hex) != self.length * 2:
            raise ValueError(
                f"length {self.length} does not match value of {len(self.value_hex) // 2} bytes"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "type_name": self.type_name,
            "length": self.length,
            "value_hex": self.value_hex,
        }


@dataclass(frozen=True, slots=True)
class Npub:
    """Bare public key (``npub1...``)."""

    prefix: ClassVar[IdentifierPrefix] = IdentifierPrefix.NPUB

    pubkey: str

    @property
    def relays(self) -> tuple[str, ...]:
        return ()

    @property
    def tlv_records(self) -> tuple[TlvRecord, ...]:
        return ()

    def to_dict(self, *, reveal_secrets: bool = False) -> dict[str, Any]:
        return {"type": str(self.prefix), "pubkey": self.pubkey}


@dataclass(frozen=True, slots=True)
class Nsec:
    """Bare private key (``nsec1...``).

    The key is stored under ``secret_key`` rather than ``pubkey`` so code
    written for public keys can never pick it up by accident.
    """

    prefix: ClassVar[IdentifierPrefix] = IdentifierPrefix.NSEC

    secret_key: str = field(repr=False)

    @property
    def relays(self) -> tuple[str, ...]:
        return ()

    @property
    def tlv_records(self) -> tuple[TlvRecord, ...]:
        return ()

    def to_dict(self, *, reveal_secrets: bool = False) -> dict[str, Any]:
        """Render as a dict, masking the key unless *reveal_secrets* is set."""
        return {
            "type": str(self.prefix),
            "secret_key": self.secret_key if reveal_secrets else SECRET_MASK,
        }


@dataclass(frozen=True, slots=True)
class Note:
    """Bare event id (``note1...`` or a raw 64-hex id)."""

    prefix: ClassVar[IdentifierPrefix] = IdentifierPrefix.NOTE

    id: str

    @property
    def relays(self) -> tuple[str, ...]:
        return ()

    @property
    def tlv_records(self) -> tuple[TlvRecord, ...]:
        return ()

    def to_dict(self, *, reveal_secrets: bool = False) -> dict[str, Any]:
        return {"type": str(self.prefix), "id": self.id}


def _records_to_list(records: tuple[TlvRecord, ...]) -> list[dict[str, Any]]:
    return [record.to_dict() for record in records]


@dataclass(frozen=True, slots=True)
class Nprofile:
    """Profile pointer (``nprofile1...``): public key plus relay hints."""

    prefix: ClassVar[IdentifierPrefix] = IdentifierPrefix.NPROFILE

    pubkey: str | None = None
    relays: tuple[str, ...] = ()
    tlv_records: tuple[TlvRecord, ...] = ()

    def __post_init__(self) -> None:
        validate_str_tuple(self.relays, "relays")

    def to_dict(self, *, reveal_secrets: bool = False) -> dict[str, Any]:
        return {
            "type": str(self.prefix),
            "pubkey": self.pubkey,
            "relays": list(self.relays),
            "tlv": _records_to_list(self.tlv_records),
        }


@dataclass(frozen=True, slots=True)
class Nevent:
    """Event pointer (``nevent1...``): id, optional author and kind, relay hints."""

    prefix: ClassVar[IdentifierPrefix] = IdentifierPrefix.NEVENT

    id: str | None = None
    author: str | None = None
    kind: int | None = None
    relays: tuple[str, ...] = ()
    tlv_records: tuple[TlvRecord, ...] = ()

    def __post_init__(self) -> None:
        validate_str_tuple(self.relays, "relays")

    def to_dict(self, *, reveal_secrets: bool = False) -> dict[str, Any]:
        return {
            "type": str(self.prefix),
            "id": self.id,
            "author": self.author,
            "kind": self.kind,
            "relays": list(self.relays),
            "tlv": _records_to_list(self.tlv_records),
        }


@dataclass(frozen=True, slots=True)
class Naddr:
    """Addressable event coordinate (``naddr1...``)."""

    prefix: ClassVar[IdentifierPrefix] = IdentifierPrefix.NADDR

    pubkey: str | None = None
    author: str | None = None
    kind: int | None = None
    d_tag: str | None = None
    relays: tuple[str, ...] = ()
    tlv_records: tuple[TlvRecord, ...] = ()

    def __post_init__(self) -> None:
        validate_str_tuple(self.relays, "relays")

    def to_dict(self, *, reveal_secrets: bool = False) -> dict[str, Any]:
        return {
            "type": str(self.prefix),
            "pubkey": self.pubkey,
            "author": self.author,
            "kind": self.kind,
            "d_tag": self.d_tag,
            "relays": list(self.relays),
            "tlv": _records_to_list(self.tlv_records),
        }


DecodedIdentifier = Npub | Nsec | Note | Nprofile | Nevent | Naddr
