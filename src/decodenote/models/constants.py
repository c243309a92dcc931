"""Shared constants for the models layer.

Defines the fixed NIP-19 wire codes (bech32 prefixes and TLV types) and the
well-known event kinds used when labelling inspected events. Placing them
here avoids circular dependencies between the models and nips layers.

See Also:
    [decodenote.models.identifier][]: Uses
        [IdentifierPrefix][decodenote.models.constants.IdentifierPrefix] and
        [TlvType][decodenote.models.constants.TlvType] to tag decoded values.
    [decodenote.nips.kinds][]: Human-readable names built on
        [EventKind][decodenote.models.constants.EventKind].
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class IdentifierPrefix(StrEnum):
    """Bech32 human-readable prefixes defined by NIP-19.

    Attributes:
        NPUB: Bare 32-byte public key.
        NSEC: Bare 32-byte private key (sensitive).
        NOTE: Bare 32-byte event id.
        NPROFILE: TLV payload describing a profile with relay hints.
        NEVENT: TLV payload describing an event with relay hints.
        NADDR: TLV payload describing an addressable event coordinate.

    Warning:
        The string values are a fixed external wire contract and must never
        be renamed.
    """

    NPUB = "npub"
    NSEC = "nsec"
    NOTE = "note"
    NPROFILE = "nprofile"
    NEVENT = "nevent"
    NADDR = "naddr"


# Prefixes whose payload is a TLV stream rather than a bare 32-byte value
TLV_PREFIXES: frozenset[IdentifierPrefix] = frozenset(
    {IdentifierPrefix.NPROFILE, IdentifierPrefix.NEVENT, IdentifierPrefix.NADDR}
)


class TlvType(IntEnum):
    """TLV record type codes used inside ``nprofile``/``nevent``/``naddr``.

    Attributes:
        SPECIAL: Type 0 -- event id for ``nevent``, public key for
            ``nprofile`` and ``naddr``.
        RELAY: Type 1 -- UTF-8 relay URL, may repeat.
        AUTHOR: Type 2 -- 32-byte author public key.
        KIND: Type 3 -- big-endian unsigned event kind.
        D_TAG: Type 4 -- UTF-8 ``d`` tag identifier.
    """

    SPECIAL = 0
    RELAY = 1
    AUTHOR = 2
    KIND = 3
    D_TAG = 4


TLV_TYPE_NAMES: dict[int, str] = {
    TlvType.SPECIAL: "special",
    TlvType.RELAY: "relay",
    TlvType.AUTHOR: "author",
    TlvType.KIND: "kind",
    TlvType.D_TAG: "d-tag",
}


class EventKind(IntEnum):
    """Well-known Nostr event kinds given special treatment by the inspector.

    Attributes:
        SET_METADATA: Kind 0 -- user profile metadata (NIP-01).
        TEXT_NOTE: Kind 1 -- short text note (NIP-01).
        CONTACTS: Kind 3 -- follow list (NIP-02).
        REACTION: Kind 7 -- reaction to another event (NIP-25).
        FILE_METADATA: Kind 1063 -- file metadata (NIP-94).
        LONG_FORM: Kind 30023 -- long-form article (NIP-23).
        LONG_FORM_DRAFT: Kind 30024 -- draft long-form article (NIP-23).

    See Also:
        [KIND_NAMES][decodenote.models.constants.KIND_NAMES]: The full
            display-name table, which covers many more kinds.
    """

    SET_METADATA = 0
    TEXT_NOTE = 1
    CONTACTS = 3
    REACTION = 7
    FILE_METADATA = 1_063
    LONG_FORM = 30_023
    LONG_FORM_DRAFT = 30_024


KIND_NAMES: dict[int, str] = {
    0: "User Metadata",
    1: "Short Text Note",
    2: "Recommend Relay",
    3: "Follows",
    4: "Encrypted Direct Messages",
    5: "Event Deletion Request",
    6: "Repost",
    7: "Reaction",
    8: "Badge Award",
    9: "Chat Message",
    10: "Group Chat Threaded Reply",
    11: "Thread",
    12: "Group Thread Reply",
    13: "Seal",
    14: "Direct Message",
    15: "File Message",
    16: "Generic Repost",
    20: "Picture",
    21: "Video Event",
    22: "Short-form Portrait Video Event",
    40: "Channel Creation",
    41: "Channel Metadata",
    42: "Channel Message",
    43: "Channel Hide Message",
    44: "Channel Mute User",
    1063: "File Metadata",
    1311: "Live Chat Message",
    1617: "Patches",
    1621: "Issues",
    1622: "Replies",
    1984: "Reporting",
    1985: "Label",
    9734: "Zap Request",
    9735: "Zap",
    10000: "Mute List",
    10001: "Pin List",
    10002: "Relay List Metadata",
    10003: "Bookmark List",
    10004: "Communities List",
    10005: "Public Chats List",
    10006: "Blocked Relays List",
    10007: "Search Relays List",
    10009: "User Groups",
    10015: "Interests List",
    10030: "User Emoji List",
    22242: "Client Authentication",
    24133: "Nostr Connect",
    30000: "Follow Sets",
    30001: "Generic Lists",
    30002: "Relay Sets",
    30003: "Bookmark Sets",
    30008: "Profile Badges",
    30009: "Badge Definition",
    30023: "Long-form Content",
    30024: "Draft Long-form Content",
    30078: "Application-specific Data",
    30311: "Live Event",
    30402: "Classified Listing",
    30403: "Draft Classified Listing",
    30818: "Wiki Article",
    31922: "Date-Based Calendar Event",
    31923: "Time-Based Calendar Event",
    31924: "Calendar",
    31925: "Calendar Event RSVP",
    30617: "Repository Announcement",
    34550: "Community Definition",
    39000: "Group Metadata",
    39001: "Group Admins",
    39002: "Group Members",
}

DEPRECATED_KINDS: frozenset[int] = frozenset({2, 4, 10, 12})
