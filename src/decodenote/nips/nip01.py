"""
NIP-01 event integrity: canonical id and Schnorr signature checks.

An event id is the SHA-256 of the UTF-8 bytes of the compact JSON array

```text
[0,<pubkey>,<created_at>,<kind>,<tags>,<content>]
```

with no whitespace and non-ASCII characters left unescaped. The signature
is a BIP-340 Schnorr signature of the 32 id bytes under the x-only public
key. Signature verification is delegated to ``nostr_sdk`` (libsecp256k1).

[validate_event()][decodenote.nips.nip01.validate_event] runs both checks,
always both, and reports every problem inside a
[ValidationResult][decodenote.models.validation.ValidationResult]. It never
raises for a malformed event.

Note:
    The digest and the verification each run in a worker thread behind an
    ``await``. Those two awaits are the only suspension points, so the id
    comparison always sees a finished digest and ``signature_valid`` always
    sees a finished verification. Calls are independent and may run
    concurrently.

See Also:
    [RawEvent][decodenote.models.event.RawEvent]: The untrusted input.
"""

from __future__ import annotations

import asyncio
import hashlib
import json

from nostr_sdk import Event as NostrEvent
from nostr_sdk import NostrSdkError

from decodenote.core.logger import Logger
from decodenote.models.event import RawEvent  # noqa: TC001
from decodenote.models.validation import (
    ID_MISMATCH_ERROR,
    INVALID_SIGNATURE_ERROR,
    ValidationResult,
)
from decodenote.utils.formatting import truncate_id
from decodenote.utils.hex import hex_to_bytes


_ID_LENGTH = 32
_PUBKEY_LENGTH = 32
_SIG_LENGTH = 64

logger = Logger("validator")


def serialize_event(event: RawEvent) -> str:
    """Return the canonical NIP-01 serialization used to compute the id.

    Field order and the leading ``0`` are fixed by the protocol.
    """
    tags = [list(tag) for tag in event.tags]
    return json.dumps(
        [0, event.pubkey, event.created_at, event.kind, tags, event.content],
        separators=(",", ":"),
        ensure_ascii=False,
    )


def compute_event_id(event: RawEvent) -> str:
    """Return the lowercase hex SHA-256 of the canonical serialization.

    Raises:
        UnicodeEncodeError: If the content or a tag holds a lone surrogate,
            which has no UTF-8 encoding.
    """
    return hashlib.sha256(serialize_event(event).encode("utf-8")).hexdigest()


def verify_signature(event: RawEvent) -> bool:
    """Verify ``event.sig`` over the claimed ``event.id`` bytes.

    The claimed id is used as the message even when it does not match the
    content, so the signature check is independent of the id check.

    Only id, sig and pubkey reach ``nostr_sdk``; the other fields are
    replaced by neutral values so that tags, kind or timestamps it would
    refuse to parse cannot affect the result.

    Raises:
        InvalidHexError: If id, sig or pubkey is not hex of the right length.
        NostrSdkError: If ``nostr_sdk`` rejects the key or signature, e.g. a
            public key that is not a valid curve point.
    """
    hex_to_bytes(event.id, expected_length=_ID_LENGTH, name="id")
    hex_to_bytes(event.sig, expected_length=_SIG_LENGTH, name="sig")
    hex_to_bytes(event.pubkey, expected_length=_PUBKEY_LENGTH, name="pubkey")

    payload = {
        "id": event.id.lower(),
        "pubkey": event.pubkey.lower(),
        "created_at": 0,
        "kind": 1,
        "tags": [],
        "content": "",
        "sig": event.sig.lower(),
    }
    return bool(NostrEvent.from_json(json.dumps(payload)).verify_signature())


def _check_id(event: RawEvent) -> tuple[str | None, bool, str | None]:
    try:
        computed_id = compute_event_id(event)
    except (TypeError, ValueError) as e:
        return None, False, f"Validation error: {e}"
    if computed_id == event.id.lower():
        return computed_id, True, None
    return computed_id, False, ID_MISMATCH_ERROR


def _check_signature(event: RawEvent) -> tuple[bool, str | None]:
    try:
        valid = verify_signature(event)
    except (ValueError, NostrSdkError) as e:
        return False, f"Signature validation failed: {e}"
    return valid, None if valid else INVALID_SIGNATURE_ERROR


def _build_result(
    event: RawEvent,
    id_check: tuple[str | None, bool, str | None],
    sig_check: tuple[bool, str | None],
) -> ValidationResult:
    computed_id, id_matches, id_error = id_check
    signature_valid, sig_error = sig_check
    errors = [e for e in (id_error, sig_error) if e is not None]
    result = ValidationResult.build(
        id_matches=id_matches,
        signature_valid=signature_valid,
        errors=errors,
        computed_id=computed_id,
    )
    logger.debug(
        "event_validated",
        id=truncate_id(event.id),
        id_matches=id_matches,
        signature_valid=signature_valid,
        errors=len(errors),
    )
    return result


async def validate_event(event: RawEvent) -> ValidationResult:
    """Recompute the id and verify the signature of *event*.

    Returns:
        A fresh [ValidationResult][decodenote.models.validation.ValidationResult].
        ``is_valid`` is True only when both checks pass.

    Examples:
        ```python
        result = await validate_event(RawEvent.from_dict(data))
        if not result.is_valid:
            print(result.errors)
        ```
    """
    id_check = await asyncio.to_thread(_check_id, event)
    sig_check = await asyncio.to_thread(_check_signature, event)
    return _build_result(event, id_check, sig_check)


def validate_event_sync(event: RawEvent) -> ValidationResult:
    """Blocking variant of [validate_event()][decodenote.nips.nip01.validate_event]."""
    return _build_result(event, _check_id(event), _check_signature(event))
