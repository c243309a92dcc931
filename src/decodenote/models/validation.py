"""
Event validation report.

See Also:
    [decodenote.nips.nip01.validate_event][decodenote.nips.nip01.validate_event]:
        The only producer of [ValidationResult][decodenote.models.validation.ValidationResult].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ._validation import validate_instance, validate_str_tuple


ID_MISMATCH_ERROR = "Event ID does not match computed hash"
INVALID_SIGNATURE_ERROR = "Invalid signature"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of checking one event's id and signature.

    Both checks are always attempted, so ``id_matches`` and
    ``signature_valid`` are independent of each other.

    Attributes:
        is_valid: True only when both checks passed and no error was recorded.
        id_matches: The recomputed id equals the claimed one.
        signature_valid: The Schnorr signature verifies against the claimed id
            and public key.
        errors: Human-readable problems, in the order they were found.
        computed_id: The recomputed id, or ``None`` if it could not be
            computed.

    Raises:
        ValueError: If ``is_valid`` contradicts the other fields.
    """

    is_valid: bool
    id_matches: bool
    signature_valid: bool
    errors: tuple[str, ...] = ()
    computed_id: str | None = None

    def __post_init__(self) -> None:
        validate_instance(self.is_valid, bool, "is_valid")
        validate_instance(self.id_matches, bool, "id_matches")
        validate_instance(self.signature_valid, bool, "signature_valid")
        validate_str_tuple(self.errors, "errors")
        expected = self.id_matches and self.signature_valid and not self.errors
        if self.is_valid != expected:
            raise ValueError(
                f"is_valid={self.is_valid} contradicts id_matches={self.id_matches}, "
                f"signature_valid={self.signature_valid}, errors={len(self.errors)}"
            )

    @classmethod
    def build(
        cls,
        *,
        id_matches: bool,
        signature_valid: bool,
        errors: list[str],
        computed_id: str | None = None,
    ) -> ValidationResult:
        """Create a result, deriving ``is_valid`` from the other fields."""
        return cls(
            is_valid=id_matches and signature_valid and not errors,
            id_matches=id_matches,
            signature_valid=signature_valid,
            errors=tuple(errors),
            computed_id=computed_id,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "id_matches": self.id_matches,
            "signature_valid": self.signature_valid,
            "errors": list(self.errors),
            "computed_id": self.computed_id,
        }
