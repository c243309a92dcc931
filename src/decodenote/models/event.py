"""
Immutable container for an untrusted Nostr event.

[RawEvent][decodenote.models.event.RawEvent] is a pure syntactic container:
construction checks the Python types of the seven NIP-01 fields and nothing
else. Whether the id matches the content or the signature matches the
author is the job of [decodenote.nips.nip01][].

See Also:
    [decodenote.nips.nip01.validate_event][decodenote.nips.nip01.validate_event]:
        Recomputes the id and verifies the signature of a ``RawEvent``.
    [decodenote.inspector.classifier][]: Builds a ``RawEvent`` from JSON
        input after a structural check.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ._validation import (
    is_integral_number,
    is_tag_list,
    validate_instance,
    validate_int,
    validate_str_tuple,
)


EVENT_FIELDS: tuple[str, ...] = ("id", "pubkey", "created_at", "kind", "tags", "content", "sig")


@dataclass(frozen=True, slots=True)
class RawEvent:
    """Untrusted Nostr event as received from the user.

    Args:
        id: Claimed event id, expected to be 64 hex characters.
        pubkey: Claimed author public key, expected to be 64 hex characters.
        created_at: Unix timestamp in seconds.
        kind: Event kind.
        tags: Ordered tags, each an ordered tuple of strings.
        content: Event content.
        sig: Claimed Schnorr signature, expected to be 128 hex characters.

    Raises:
        TypeError: If any field has the wrong Python type.

    Note:
        No hex length or kind range checks happen here. A malformed
        ``RawEvent`` is still representable so that validation can report
        precisely what is wrong with it.

    Examples:
        ```python
        event = RawEvent.from_dict(json.loads(text))
        event.get_tag_value("title")
        ```
    """

    id: str
    pubkey: str
    created_at: int
    kind: int
    tags: tuple[tuple[str, ...], ...] = field(default=())
    content: str = ""
    sig: str = ""

    def __post_init__(self) -> None:
        validate_instance(self.id, str, "id")
        validate_instance(self.pubkey, str, "pubkey")
        validate_int(self.created_at, "created_at")
        validate_int(self.kind, "kind")
        validate_instance(self.tags, tuple, "tags")
        for index, tag in enumerate(self.tags):
            validate_str_tuple(tag, f"tags[{index}]")
        validate_instance(self.content, str, "content")
        validate_instance(self.sig, str, "sig")

    @staticmethod
    def is_event_structure(data: Any) -> bool:
        """Return True if *data* is a dict shaped like a NIP-01 event.

        Mirrors the check applied to pasted JSON: every field present with
        the right JSON type. Extra keys are ignored.
        """
        if not isinstance(data, dict):
            return False
        return (
            isinstance(data.get("id"), str)
            and isinstance(data.get("pubkey"), str)
            and is_integral_number(data.get("created_at"))
            and is_integral_number(data.get("kind"))
            and is_tag_list(data.get("tags"))
            and isinstance(data.get("content"), str)
            and isinstance(data.get("sig"), str)
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawEvent:
        """Build a ``RawEvent`` from a decoded JSON object.

        Integral float timestamps and kinds are converted to ``int`` so that
        the canonical serialization renders them without a decimal point.

        Raises:
            KeyError: If a field is missing.
            TypeError: If a field has the wrong type.
        """
        created_at = data["created_at"]
        kind = data["kind"]
        return cls(
            id=data["id"],
            pubkey=data["pubkey"],
            created_at=int(created_at) if is_integral_number(created_at) else created_at,
            kind=int(kind) if is_integral_number(kind) else kind,
            tags=tuple(tuple(tag) for tag in data["tags"]),
            content=data["content"],
            sig=data["sig"],
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the NIP-01 JSON object form of this event."""
        return {
            "id": self.id,
            "pubkey": self.pubkey,
            "created_at": self.created_at,
            "kind": self.kind,
            "tags": [list(tag) for tag in self.tags],
            "content": self.content,
            "sig": self.sig,
        }

    def get_tag_value(self, name: str) -> str | None:
        """Return the first value of the first tag called *name*, if any."""
        for tag in self.tags:
            if len(tag) > 1 and tag[0] == name:
                return tag[1]
        return None

    def get_tag_values(self, name: str) -> list[str]:
        """Return the first value of every tag called *name*, in order."""
        return [tag[1] for tag in self.tags if len(tag) > 1 and tag[0] == name]
