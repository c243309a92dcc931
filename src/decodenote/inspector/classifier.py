"""
Input classification: decide what a pasted string is.

[classify()][decodenote.inspector.classifier.classify] tries, in a fixed
order, and returns the first success:

1. A JSON object shaped like a NIP-01 event.
2. A NIP-19 bech32 identifier.
3. A NIP-21 ``nostr:`` URI wrapping a bech32 identifier.
4. A raw 64-character hex event id, reported as a ``note``.

Anything else yields ``None``. No step raises: malformed JSON and malformed
bech32 simply fail their own step. A string that looks like bech32 but
fails to decode yields ``None`` without trying the later steps.
"""

from __future__ import annotations

import json
import re
from typing import Any

from decodenote.core.config import DEFAULT_MAX_IDENTIFIER_LENGTH
from decodenote.core.exceptions import DecodeError
from decodenote.core.logger import Logger
from decodenote.models.event import RawEvent
from decodenote.models.identifier import Note
from decodenote.models.parsed import ParsedEvent, ParsedIdentifier, ParsedResult
from decodenote.nips.nip19 import decode_identifier
from decodenote.utils.hex import is_hex


NOSTR_URI_PREFIX = "nostr:"
HEX_ID_LENGTH = 64

BECH32_IDENTIFIER_RE = re.compile(r"^(npub|nsec|note|nevent|nprofile|naddr)1[02-9ac-hj-np-z]+$")

logger = Logger("classifier")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _parse_event_json(text: str) -> RawEvent | None:
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return None
    if not RawEvent.is_event_structure(data):
        return None
    return RawEvent.from_dict(data)


def _decode_bech32_identifier(text: str, max_length: int) -> ParsedIdentifier | None:
    try:
        identifier = decode_identifier(text, max_length=max_length)
    except DecodeError as e:
        logger.debug("identifier_rejected", reason=str(e))
        return None
    return ParsedIdentifier(identifier)


def classify(
    text: str, *, max_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH
) -> ParsedResult | None:
    """Classify raw user input.

    Args:
        text: Anything the user pasted. Surrounding whitespace is ignored.
        max_length: Longest bech32 identifier accepted, in characters.

    Returns:
        [ParsedEvent][decodenote.models.parsed.ParsedEvent],
        [ParsedIdentifier][decodenote.models.parsed.ParsedIdentifier], or
        ``None`` when the input matches no known shape.

    Examples:
        ```python
        classify("a" * 64)
        # ParsedIdentifier(identifier=Note(id="aaaa..."))
        classify("nostr:npub1...")
        # ParsedIdentifier(identifier=Npub(pubkey="..."))
        classify("hello")
        # None
        ```
    """
    trimmed = text.strip()

    event = _parse_event_json(trimmed)
    if event is not None:
        logger.debug("classified", result="event", kind=event.kind)
        return ParsedEvent(event)

    if BECH32_IDENTIFIER_RE.match(trimmed):
        return _decode_bech32_identifier(trimmed, max_length)

    if trimmed.startswith(NOSTR_URI_PREFIX):
        remainder = trimmed[len(NOSTR_URI_PREFIX) :]
        if BECH32_IDENTIFIER_RE.match(remainder):
            return _decode_bech32_identifier(remainder, max_length)
        logger.debug("classified", result="none", reason="invalid_nostr_uri")
        return None

    if is_hex(trimmed, HEX_ID_LENGTH):
        logger.debug("classified", result="hex_id")
        return ParsedIdentifier(Note(id=trimmed.lower()))

    logger.debug("classified", result="none", length=len(trimmed))
    return None
