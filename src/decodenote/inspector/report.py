"""
Inspector facade: classify input and assemble a JSON-ready report.

[Inspector][decodenote.inspector.report.Inspector] is what a host (the CLI,
a web handler, a notebook) talks to. It binds an
[InspectorConfig][decodenote.core.config.InspectorConfig] to the three core
operations and adds the presentation data a viewer needs: kind names,
human-readable timestamps, NIP-23 article metadata, and kind-specific tag
readings.

Report shapes:

```text
{"type": "event", "event": {...}, "validation": {...}, "kind": {...},
 "created_at": {...}, "author_npub": "...", "tags": [...], ...}
{"type": "identifier", "identifier": {...}, "sensitive": false}
```
"""

from __future__ import annotations

import datetime
from typing import Any

from decodenote.core.config import InspectorConfig
from decodenote.core.exceptions import InvalidHexError
from decodenote.core.logger import Logger
from decodenote.models.constants import EventKind
from decodenote.models.event import RawEvent  # noqa: TC001
from decodenote.models.identifier import DecodedIdentifier, Nsec
from decodenote.models.parsed import ParsedEvent, ParsedResult
from decodenote.models.validation import ValidationResult  # noqa: TC001
from decodenote.nips import tags
from decodenote.nips.kinds import is_deprecated_kind, kind_category, kind_name
from decodenote.nips.nip01 import validate_event
from decodenote.nips.nip19 import decode_identifier, encode_npub
from decodenote.nips.nip23 import ArticleMetadata, is_article
from decodenote.utils.formatting import format_timestamp, truncate_id

from .classifier import classify


class Inspector:
    """Configured entry point for classification, decoding and validation.

    Args:
        config: Settings; defaults apply when omitted.

    Examples:
        ```python
        inspector = Inspector(InspectorConfig.from_yaml("decodenote.yaml"))
        report = await inspector.inspect(user_text)
        if report is None:
            print("Unrecognised input")
        ```
    """

    def __init__(self, config: InspectorConfig | None = None) -> None:
        self._config = config if config is not None else InspectorConfig()
        self._logger = Logger("inspector")

    @property
    def config(self) -> InspectorConfig:
        return self._config

    def classify(self, text: str) -> ParsedResult | None:
        return classify(text, max_length=self._config.codec.max_length)

    def decode(self, text: str) -> DecodedIdentifier:
        """Decode a bech32 identifier; raises ``DecodeError`` on failure."""
        return decode_identifier(text, max_length=self._config.codec.max_length)

    async def validate(self, event: RawEvent) -> ValidationResult:
        return await validate_event(event)

    async def inspect(
        self, text: str, *, now: datetime.datetime | None = None
    ) -> dict[str, Any] | None:
        """Classify *text* and build its report, or return ``None`` if unrecognised."""
        parsed = self.classify(text)
        if parsed is None:
            self._logger.info("input_unrecognised", length=len(text.strip()))
            return None
        if isinstance(parsed, ParsedEvent):
            return await self.event_report(parsed.event, now=now)
        return self.identifier_report(parsed.identifier)

    async def event_report(
        self, event: RawEvent, *, now: datetime.datetime | None = None
    ) -> dict[str, Any]:
        """Validate *event* and describe it."""
        validation = await self.validate(event)
        created = format_timestamp(event.created_at, now=now)
        short = self._config.display.truncate_length

        report: dict[str, Any] = {
            "type": "event",
            "event": event.to_dict(),
            "short_id": truncate_id(event.id, short),
            "author_npub": self._author_npub(event.pubkey),
            "kind": {
                "number": event.kind,
                "name": kind_name(event.kind),
                "category": str(kind_category(event.kind)),
                "deprecated": is_deprecated_kind(event.kind),
            },
            "created_at": {"absolute": created.absolute, "relative": created.relative},
            "validation": validation.to_dict(),
            "tags": [list(tag) for tag in event.tags],
        }

        if is_article(event):
            report["article"] = ArticleMetadata.from_event(event).to_dict()
        elif event.kind == EventKind.CONTACTS:
            report["follows"] = [tags.to_dict(f) for f in tags.follow_list(event)]
        elif event.kind == EventKind.REACTION:
            report["reaction"] = tags.to_dict(tags.reaction_target(event))
        elif event.kind == EventKind.FILE_METADATA:
            report["file"] = tags.to_dict(tags.file_metadata(event))

        self._logger.info(
            "event_inspected",
            id=truncate_id(event.id, short),
            kind=event.kind,
            valid=validation.is_valid,
        )
        return report

    def identifier_report(self, identifier: DecodedIdentifier) -> dict[str, Any]:
        """Describe a decoded identifier, masking private keys unless configured not to."""
        sensitive = isinstance(identifier, Nsec)
        reveal = self._config.display.reveal_secrets
        self._logger.info("identifier_inspected", prefix=identifier.prefix, sensitive=sensitive)
        return {
            "type": "identifier",
            "identifier": identifier.to_dict(reveal_secrets=reveal),
            "sensitive": sensitive,
        }

    @staticmethod
    def _author_npub(pubkey: str) -> str | None:
        try:
            return encode_npub(pubkey.lower())
        except InvalidHexError:
            return None
