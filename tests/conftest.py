"""
Pytest configuration and shared fixtures for DecodeNote tests.

Provides:
- Real signed events produced with ``nostr_sdk`` keys
- Known NIP-19 test vectors
- Sample raw event data for tag readers and reports
"""

import json
import logging
from collections.abc import Callable
from typing import Any

import pytest
from nostr_sdk import EventBuilder, Keys, Kind, Tag

from decodenote.models import RawEvent


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# NIP-19 Test Vectors
# ============================================================================


@pytest.fixture
def npub_vector() -> tuple[str, str]:
    """Published NIP-19 npub example and its hex key."""
    return (
        "npub10elfcs4fr0l0r8af98jlmgdh9c8tcxjvz9qkw038js35mp4dma8qzvjptg",
        "7e7e9c42a91bfef19fa929e5fda1b72e0ebc1a4c1141673e2794234d86addf4e",
    )


@pytest.fixture
def nsec_vector() -> tuple[str, str]:
    """Published NIP-19 nsec example (DO NOT USE THIS KEY)."""
    return (
        "nsec1vl029mgpspedva04g90vltkh6fvh240zqtv9k0t9af8935ke9laqsnlfe5",  # pragma: allowlist secret
        "67dea2ed018072d675f5415ecfaed7d2597555e202d85b3d65ea4e58d2d92ffa",  # pragma: allowlist secret
    )


# ============================================================================
# Signed Event Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def keys() -> Keys:
    """Fresh keypair shared by the session."""
    return Keys.generate()


@pytest.fixture(scope="session")
def signed_event_data(keys: Keys) -> dict[str, Any]:
    """A correctly signed kind 1 event as a JSON object."""
    event = (
        EventBuilder(Kind(1), "hello nostr ✨")
        .tags([Tag.parse(["t", "nostr"]), Tag.parse(["client", "decodenote"])])
        .sign_with_keys(keys)
    )
    return json.loads(event.as_json())


@pytest.fixture
def signed_event(signed_event_data: dict[str, Any]) -> RawEvent:
    return RawEvent.from_dict(signed_event_data)


@pytest.fixture
def signed_event_json(signed_event_data: dict[str, Any]) -> str:
    return json.dumps(signed_event_data)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_event_data() -> dict[str, Any]:
    """Structurally valid but unsigned event data."""
    return {
        "id": "a" * 64,
        "pubkey": "b" * 64,
        "created_at": 1_700_000_000,
        "kind": 1,
        "tags": [["e", "c" * 64], ["p", "d" * 64, "wss://relay.example.com"]],
        "content": "Test content",
        "sig": "e" * 128,
    }


@pytest.fixture
def sample_event(sample_event_data: dict[str, Any]) -> RawEvent:
    return RawEvent.from_dict(sample_event_data)


@pytest.fixture
def make_event() -> Callable[..., RawEvent]:
    """Factory for unsigned ``RawEvent`` values used by tag reader tests."""

    def _make(kind: int = 1, tags: list[list[str]] | None = None, content: str = "") -> RawEvent:
        return RawEvent.from_dict(
            {
                "id": "a" * 64,
                "pubkey": "b" * 64,
                "created_at": 1_700_000_000,
                "kind": kind,
                "tags": tags or [],
                "content": content,
                "sig": "e" * 128,
            }
        )

    return _make
