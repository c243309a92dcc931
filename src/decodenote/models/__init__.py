"""Pure frozen dataclasses with zero I/O for Nostr events and identifiers.

The models layer is the foundation of the package. It has **no dependencies**
on any other DecodeNote package -- only the Python standard library. Every
model is a ``@dataclass(frozen=True, slots=True)``, so values are safe to
share between concurrent calls. Models holding untrusted data check their
field types in ``__post_init__``.

Attributes:
    RawEvent: Untrusted NIP-01 event container with tag lookup helpers.
    TlvRecord: One verbatim TLV record from a NIP-19 payload.
    Npub, Nsec, Note, Nprofile, Nevent, Naddr: One type per NIP-19 prefix;
        together they form the
        [DecodedIdentifier][decodenote.models.identifier.DecodedIdentifier]
        union.
    ValidationResult: Id and signature check outcome for one event.
    ParsedEvent, ParsedIdentifier: Input classifier results.
    IdentifierPrefix, TlvType, EventKind: Protocol constants.

See Also:
    [decodenote.nips][]: Protocol logic that produces and consumes these models.
"""

from .constants import (
    DEPRECATED_KINDS,
    KIND_NAMES,
    TLV_PREFIXES,
    TLV_TYPE_NAMES,
    EventKind,
    IdentifierPrefix,
    TlvType,
)
from .event import RawEvent
from .identifier import (
    SECRET_MASK,
    DecodedIdentifier,
    Naddr,
    Nevent,
    Note,
    Nprofile,
    Npub,
    Nsec,
    TlvRecord,
)
from .parsed import ParsedEvent, ParsedIdentifier, ParsedResult
from .validation import ID_MISMATCH_ERROR, INVALID_SIGNATURE_ERROR, ValidationResult


__all__ = [
    "DEPRECATED_KINDS",
    "ID_MISMATCH_ERROR",
    "INVALID_SIGNATURE_ERROR",
    "KIND_NAMES",
    "SECRET_MASK",
    "TLV_PREFIXES",
    "TLV_TYPE_NAMES",
    "DecodedIdentifier",
    "EventKind",
    "IdentifierPrefix",
    "Naddr",
    "Nevent",
    "Note",
    "Nprofile",
    "Npub",
    "Nsec",
    "ParsedEvent",
    "ParsedIdentifier",
    "ParsedResult",
    "RawEvent",
    "TlvRecord",
    "TlvType",
    "ValidationResult",
]
