"""Nostr protocol logic: NIP-01 integrity, NIP-19 identifiers, NIP-23 articles.

Attributes:
    nip01: Canonical event serialization, id recomputation and Schnorr
        signature verification. See [decodenote.nips.nip01][].
    nip19: Bech32/TLV identifier codec. See [decodenote.nips.nip19][].
    nip23: Long-form article metadata. See [decodenote.nips.nip23][].
    kinds: Kind display names and NIP-01 kind ranges.
    tags: Follow list, reaction and file metadata tag readers.

Note:
    ``nip01`` and ``nip19`` are independent: neither imports the other.
"""

from .kinds import EventKindCategory, is_deprecated_kind, kind_category, kind_name
from .nip01 import (
    compute_event_id,
    serialize_event,
    validate_event,
    validate_event_sync,
    verify_signature,
)
from .nip19 import decode_identifier
from .nip23 import ArticleMetadata, is_article


__all__ = [
    "ArticleMetadata",
    "EventKindCategory",
    "compute_event_id",
    "decode_identifier",
    "is_article",
    "is_deprecated_kind",
    "kind_category",
    "kind_name",
    "serialize_event",
    "validate_event",
    "validate_event_sync",
    "verify_signature",
]
