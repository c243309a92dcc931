"""
Kind-specific tag readers used in inspection reports.

Each reader takes a [RawEvent][decodenote.models.event.RawEvent] and pulls
out the tags a given NIP assigns meaning to:

* NIP-02 follow lists (kind 3): every ``p`` tag.
* NIP-25 reactions (kind 7): the ``e``/``p``/``k`` target tags.
* NIP-94 file metadata (kind 1063): ``url``, ``x``, ``size``, ``m``,
  ``alt``, ``dim``.

Readers never fail on odd tags: a missing value is ``None``, a tag with no
value is skipped.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from decodenote.models.event import RawEvent  # noqa: TC001


@dataclass(frozen=True, slots=True)
class Follow:
    """One ``p`` tag of a follow list: pubkey, relay hint and petname."""

    pubkey: str
    relay: str | None = None
    petname: str | None = None


def _optional(tag: tuple[str, ...], index: int) -> str | None:
    return tag[index] or None if len(tag) > index else None


def follow_list(event: RawEvent) -> list[Follow]:
    """Return the follows of a kind 3 event in tag order."""
    follows = []
    for tag in event.tags:
        if len(tag) > 1 and tag[0] == "p":
            follows.append(
                Follow(
                    pubkey=tag[1],
                    relay=_optional(tag, 2),
                    petname=_optional(tag, 3),
                )
            )
    return follows


@dataclass(frozen=True, slots=True)
class ReactionTarget:
    """What a kind 7 reaction points at, and the reaction itself.

    ``content`` is ``+`` for a like, ``-`` for a dislike, otherwise an emoji.
    """

    content: str
    event_id: str | None = None
    author: str | None = None
    kind: str | None = None

    @property
    def is_like(self) -> bool:
        return self.content in ("+", "")


def reaction_target(event: RawEvent) -> ReactionTarget:
    return ReactionTarget(
        content=event.content,
        event_id=event.get_tag_value("e"),
        author=event.get_tag_value("p"),
        kind=event.get_tag_value("k"),
    )


@dataclass(frozen=True, slots=True)
class FileMetadata:
    """NIP-94 file description carried by a kind 1063 event."""

    url: str | None = None
    sha256: str | None = None
    size: int | None = None
    mime_type: str | None = None
    alt: str | None = None
    dimensions: str | None = None
    description: str = ""


def file_metadata(event: RawEvent) -> FileMetadata:
    size = event.get_tag_value("size")
    size_bytes = int(size) if size is not None and size.isascii() and size.isdigit() else None
    return FileMetadata(
        url=event.get_tag_value("url"),
        sha256=event.get_tag_value("x"),
        size=size_bytes,
        mime_type=event.get_tag_value("m"),
        alt=event.get_tag_value("alt"),
        dimensions=event.get_tag_value("dim"),
        description=event.content,
    )


def to_dict(value: Follow | ReactionTarget | FileMetadata) -> dict[str, Any]:
    """Render any reader result as a plain dict."""
    return asdict(value)
