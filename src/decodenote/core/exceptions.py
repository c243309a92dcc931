"""DecodeNote exception hierarchy.

Provides typed exceptions for the failures that can escape the library.
Input that merely fails to match a known shape is not an error: the
classifier returns ``None`` and the validator records strings inside its
result. Exceptions are reserved for terminal decode failures and for
configuration problems.

Exception hierarchy:

```text
DecodeNoteError (base -- never raised directly)
├── ConfigurationError            -- config validation, bad YAML
└── DecodeError (also ValueError) -- identifier codec failures
    ├── InvalidEncodingError      -- bad bech32 charset/checksum/padding
    │   └── InvalidHexError       -- odd-length or non-hex text
    ├── TruncatedPayloadError     -- TLV record runs past the payload
    └── UnknownPrefixError        -- bech32 prefix is not a NIP-19 one
```

See Also:
    [decode_identifier()][decodenote.nips.nip19.codec.decode_identifier]:
        Raises every [DecodeError][decodenote.core.exceptions.DecodeError]
        subclass.
    [InspectorConfig][decodenote.core.config.InspectorConfig]: Raises
        [ConfigurationError][decodenote.core.exceptions.ConfigurationError].
"""

from __future__ import annotations


class DecodeNoteError(Exception):
    """Base exception for all DecodeNote errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(DecodeNoteError):
    """Invalid or missing configuration (YAML file, CLI flags)."""


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class DecodeError(DecodeNoteError, ValueError):
    """Base for identifier decoding failures.

    Always terminal for the call that raised it: no partial identifier is
    ever returned alongside a ``DecodeError``. Subclasses ``ValueError`` so
    callers that only know the standard library still catch it.
    """


class InvalidEncodingError(DecodeError):
    """Bech32 text is malformed: charset, case, checksum, length or padding."""


class InvalidHexError(InvalidEncodingError):
    """Hex text has an odd length, a non-hex digit, or the wrong byte length."""


class TruncatedPayloadError(DecodeError):
    """A TLV header or value would read past the end of the payload."""


class UnknownPrefixError(DecodeError):
    """The bech32 human-readable prefix is not one of the NIP-19 prefixes."""

    def __init__(self, prefix: str) -> None:
        super().__init__(f"unknown identifier prefix: {prefix!r}")
        self.prefix = prefix
