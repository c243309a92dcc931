"""Classifier output: either an event or a decoded identifier.

"No match" is represented by ``None`` rather than a third variant, so
callers write ``if result is None`` for the unparseable case.
"""

from __future__ import annotations

from dataclasses import dataclass

from .event import RawEvent  # noqa: TC001
from .identifier import DecodedIdentifier  # noqa: TC001


@dataclass(frozen=True, slots=True)
class ParsedEvent:
    """Input recognised as a JSON event."""

    event: RawEvent


@dataclass(frozen=True, slots=True)
class ParsedIdentifier:
    """Input recognised as a bech32 identifier, ``nostr:`` URI or raw hex id."""

    identifier: DecodedIdentifier


ParsedResult = ParsedEvent | ParsedIdentifier
