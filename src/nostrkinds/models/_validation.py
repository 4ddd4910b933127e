"""Shared validation helpers for frozen dataclass models.

Private module, not part of the public API. Used exclusively by
``__post_init__`` methods in sibling model modules to enforce runtime
type constraints and deep immutability of sequence fields.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .constants import EVENT_KIND_MAX


def validate_instance(value: Any, expected: type, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an instance of *expected*."""
    if not isinstance(value, expected):
        article = "an" if expected.__name__[0] in "AEIOUaeiou" else "a"
        raise TypeError(f"{name} must be {article} {expected.__name__}, got {type(value).__name__}")


def validate_int(value: Any, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an ``int`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_kind(value: Any, name: str = "kind") -> None:
    """Raise if *value* is not an ``int`` in ``0..EVENT_KIND_MAX``."""
    validate_int(value, name)
    if not 0 <= value <= EVENT_KIND_MAX:
        raise ValueError(f"{name} must be between 0 and {EVENT_KIND_MAX}, got {value}")


def validate_str_no_null(value: Any, name: str) -> None:
    """Raise if *value* is not a ``str`` or contains null bytes."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    if "\x00" in value:
        raise ValueError(f"{name} contains null bytes")


def validate_str_not_empty(value: Any, name: str) -> None:
    """Raise if *value* is not a non-empty ``str`` without null bytes."""
    validate_str_no_null(value, name)
    if not value:
        raise ValueError(f"{name} must not be empty")


def freeze_str_sequence(value: Any, name: str) -> tuple[str, ...]:
    """Return *value* as a tuple of strings.

    A bare ``str`` is rejected even though it is a ``Sequence``: a single
    string where a list was expected is almost always a caller mistake.
    """
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise TypeError(f"{name} must be a sequence of str, got {type(value).__name__}")
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise TypeError(f"{name}[{i}] must be a str, got {type(item).__name__}")
    return tuple(value)


def freeze_int_sequence(value: Any, name: str) -> tuple[int, ...]:
    """Return *value* as a tuple of ints (``bool`` excluded)."""
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise TypeError(f"{name} must be a sequence of int, got {type(value).__name__}")
    for i, item in enumerate(value):
        validate_int(item, f"{name}[{i}]")
    return tuple(value)


def freeze_tags(value: Any, name: str = "tags") -> tuple[tuple[str, ...], ...]:
    """Return a tag matrix as a tuple of string tuples.

    Rows are not required to be non-empty; consumers that look at the tag
    name tolerate empty rows by slicing.
    """
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise TypeError(f"{name} must be a sequence of tag rows, got {type(value).__name__}")
    return tuple(freeze_str_sequence(row, f"{name}[{i}]") for i, row in enumerate(value))
