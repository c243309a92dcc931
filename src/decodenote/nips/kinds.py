"""Event kind naming and NIP-01 kind ranges."""

from __future__ import annotations

from enum import StrEnum

from decodenote.models.constants import DEPRECATED_KINDS, KIND_NAMES


class EventKindCategory(StrEnum):
    """Storage behaviour of a kind, as defined by the NIP-01 kind ranges.

    Attributes:
        REGULAR: Stored by relays as-is.
        REPLACEABLE: Only the latest event per pubkey and kind is kept.
        EPHEMERAL: Not stored by relays.
        ADDRESSABLE: Only the latest event per pubkey, kind and ``d`` tag
            is kept.
    """

    REGULAR = "regular"
    REPLACEABLE = "replaceable"
    EPHEMERAL = "ephemeral"
    ADDRESSABLE = "addressable"


def kind_name(kind: int) -> str:
    """Return the display name of *kind*, or ``Kind <n>`` if it is not known."""
    return KIND_NAMES.get(kind, f"Kind {kind}")


def is_deprecated_kind(kind: int) -> bool:
    return kind in DEPRECATED_KINDS


def kind_category(kind: int) -> EventKindCategory:
    """Classify *kind* into its NIP-01 range."""
    if kind in (0, 3) or 10_000 <= kind < 20_000:
        return EventKindCategory.REPLACEABLE
    if 20_000 <= kind < 30_000:
        return EventKindCategory.EPHEMERAL
    if 30_000 <= kind < 40_000:
        return EventKindCategory.ADDRESSABLE
    return EventKindCategory.REGULAR
