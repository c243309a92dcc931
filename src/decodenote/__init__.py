r"""DecodeNote -- Nostr event and identifier inspector.

Decodes NIP-19 bech32 identifiers (``npub``, ``nsec``, ``note``,
``nprofile``, ``nevent``, ``naddr``) including their TLV payloads, and
validates raw events by recomputing their NIP-01 id and verifying their
Schnorr signature. Pure functions: no network, no persistence.

Layers, with imports flowing strictly downward:

```text
             inspector          Classification and reports (host facing)
            /    |    \
         core   nips   utils    Config/logging/errors, protocol, helpers
            \    |    /
             models             Pure frozen dataclasses (zero I/O)
```

Note:
    Top-level imports (``from decodenote import classify``) use lazy loading
    and resolve on first access, so ``import decodenote`` stays cheap.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("decodenote")

__all__ = [
    "DecodeError",
    "DecodedIdentifier",
    "Inspector",
    "InspectorConfig",
    "ParsedEvent",
    "ParsedIdentifier",
    "RawEvent",
    "ValidationResult",
    "classify",
    "decode_identifier",
    "validate_event",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "DecodeError": ("decodenote.core", "DecodeError"),
    "InspectorConfig": ("decodenote.core", "InspectorConfig"),
    "DecodedIdentifier": ("decodenote.models", "DecodedIdentifier"),
    "ParsedEvent": ("decodenote.models", "ParsedEvent"),
    "ParsedIdentifier": ("decodenote.models", "ParsedIdentifier"),
    "RawEvent": ("decodenote.models", "RawEvent"),
    "ValidationResult": ("decodenote.models", "ValidationResult"),
    "decode_identifier": ("decodenote.nips", "decode_identifier"),
    "validate_event": ("decodenote.nips", "validate_event"),
    "Inspector": ("decodenote.inspector", "Inspector"),
    "classify": ("decodenote.inspector", "classify"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'decodenote' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
