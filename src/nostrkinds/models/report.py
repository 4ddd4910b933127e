"""Validation report returned by the structural validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ._validation import freeze_str_sequence


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Outcome of validating one candidate event.

    Attributes:
        errors: Structural violations, in detection order.
        warnings: Advisory findings, in detection order.
        is_valid: ``True`` iff ``errors`` is empty. Derived, not settable.

    Examples:
        ```python
        report = ValidationReport(errors=(), warnings=("Unknown event kind: 42",))
        report.is_valid     # True
        report.to_dict()    # {'isValid': True, 'errors': [], 'warnings': [...]}
        ```
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    is_valid: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", freeze_str_sequence(self.errors, "errors"))
        object.__setattr__(self, "warnings", freeze_str_sequence(self.warnings, "warnings"))
        object.__setattr__(self, "is_valid", not self.errors)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys used by JSON consumers."""
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
