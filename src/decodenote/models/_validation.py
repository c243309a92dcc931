"""Shared validation helpers for frozen dataclass models.

Private module, not part of the public API. Used by ``__post_init__``
methods in sibling model modules to enforce runtime type constraints, and by
the input classifier to check untrusted JSON structurally before a model is
built from it.
"""

from __future__ import annotations

from typing import Any


def validate_instance(value: Any, expected: type, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an instance of *expected*."""
    if not isinstance(value, expected):
        article = "an" if expected.__name__[0] in "AEIOUaeiou" else "a"
        raise TypeError(f"{name} must be {article} {expected.__name__}, got {type(value).__name__}")


def validate_int(value: Any, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an ``int`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_str_tuple(value: Any, name: str) -> None:
    """Raise ``TypeError`` unless *value* is a tuple of ``str``."""
    validate_instance(value, tuple, name)
    for item in value:
        if not isinstance(item, str):
            raise TypeError(f"{name} must contain only str, got {type(item).__name__}")


def is_integral_number(value: Any) -> bool:
    """Return True for an ``int`` or an integral ``float`` (``bool`` excluded).

    JSON numbers such as ``1700000000.0`` are accepted because they are the
    same value as their integer form once parsed.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def is_tag_list(value: Any) -> bool:
    """Return True if *value* is a list of lists of strings."""
    if not isinstance(value, list):
        return False
    return all(isinstance(tag, list) and all(isinstance(v, str) for v in tag) for tag in value)
