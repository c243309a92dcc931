"""
NIP-23 long-form article metadata.

Long-form articles (kind 30023, drafts 30024) carry their presentation
metadata in tags. [ArticleMetadata][decodenote.nips.nip23.ArticleMetadata]
collects those tags into one object; rendering the Markdown content itself
is left to the host.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from decodenote.models.constants import EventKind
from decodenote.models.event import RawEvent  # noqa: TC001


DEFAULT_TITLE = "Untitled Article"

ARTICLE_KINDS: frozenset[int] = frozenset({EventKind.LONG_FORM, EventKind.LONG_FORM_DRAFT})


def is_article(event: RawEvent) -> bool:
    return event.kind in ARTICLE_KINDS


def _parse_timestamp(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


@dataclass(frozen=True, slots=True)
class ArticleMetadata:
    """Tag-derived metadata of a long-form article.

    Attributes:
        title: ``title`` tag, or ``"Untitled Article"``.
        summary: ``summary`` tag.
        image: ``image`` tag (URL).
        published_at: ``published_at`` tag as Unix seconds; ``None`` when
            missing or not an integer.
        lang: ``lang`` tag.
        content_warning: ``content-warning`` tag.
        location: ``location`` tag.
        topics: Every ``t`` tag value, in order.
        hashtags: Every ``hashtags`` tag value, in order.
        identifier: ``d`` tag, the article's address within its author.
        is_draft: True for kind 30024.
    """

    title: str = DEFAULT_TITLE
    summary: str | None = None
    image: str | None = None
    published_at: int | None = None
    lang: str | None = None
    content_warning: str | None = None
    location: str | None = None
    topics: tuple[str, ...] = ()
    hashtags: tuple[str, ...] = ()
    identifier: str | None = None
    is_draft: bool = False

    @classmethod
    def from_event(cls, event: RawEvent) -> ArticleMetadata:
        """Extract article metadata from *event*'s tags.

        Works on any kind; callers usually check
        [is_article()][decodenote.nips.nip23.is_article] first.
        """
        return cls(
            title=event.get_tag_value("title") or DEFAULT_TITLE,
            summary=event.get_tag_value("summary"),
            image=event.get_tag_value("image"),
            published_at=_parse_timestamp(event.get_tag_value("published_at")),
            lang=event.get_tag_value("lang"),
            content_warning=event.get_tag_value("content-warning"),
            location=event.get_tag_value("location"),
            topics=tuple(event.get_tag_values("t")),
            hashtags=tuple(event.get_tag_values("hashtags")),
            identifier=event.get_tag_value("d"),
            is_draft=event.kind == EventKind.LONG_FORM_DRAFT,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "summary": self.summary,
            "image": self.image,
            "published_at": self.published_at,
            "lang": self.lang,
            "content_warning": self.content_warning,
            "location": self.location,
            "topics": list(self.topics),
            "hashtags": list(self.hashtags),
            "identifier": self.identifier,
            "is_draft": self.is_draft,
        }
