"""
Structural validation of candidate events against the kind catalog.

[validate_event_structure][nostrkinds.validation.validator.validate_event_structure]
is a pure function: it reads the immutable registry, builds a fresh report
and never raises for content that merely fails validation. Only an input
that breaks the event contract (not a mapping, or ``kind``/``tags``/
``content`` missing) raises
[ContractViolationError][nostrkinds.core.exceptions.ContractViolationError].

Checks run in a fixed order, so reports are deterministic:

1. Unknown kind: a single warning, and the event is valid.
2. Required tags, in the order the spec lists them.
3. Content schema (``json`` must parse, ``empty`` should be blank).
4. Per-kind heuristic rules from [nostrkinds.validation.rules][].

Examples:
    ```python
    from nostrkinds.validation import validate_event_structure

    report = validate_event_structure({"kind": 7, "tags": [["e", "abc"]], "content": "+"})
    report.is_valid   # False
    report.errors     # ('Missing required tag: p',
                      #  'Reaction events must include both e and p tags')
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from nostrkinds.catalog.registry import default_registry
from nostrkinds.core.exceptions import ContractViolationError
from nostrkinds.models.constants import ContentType, Severity
from nostrkinds.models.event import CandidateEvent
from nostrkinds.models.report import ValidationReport

from .rules import INVALID_JSON, parse_json, rules_for_kind


if TYPE_CHECKING:
    from nostrkinds.catalog.registry import Registry
    from nostrkinds.models.kind_spec import ContentSchema


def _append_once(messages: list[str], message: str) -> None:
    if message not in messages:
        messages.append(message)


def _coerce_event(event: CandidateEvent | Mapping[str, Any]) -> CandidateEvent:
    if isinstance(event, CandidateEvent):
        return event
    try:
        return CandidateEvent.from_dict(event)
    except (TypeError, ValueError) as e:
        raise ContractViolationError(f"malformed candidate event: {e}") from e


def _check_content(
    content: str,
    schema: ContentSchema,
    errors: list[str],
    warnings: list[str],
) -> None:
    if schema.type is ContentType.JSON:
        if parse_json(content) is INVALID_JSON:
            _append_once(errors, "Content must be valid JSON")
    elif schema.type is ContentType.EMPTY:
        if content.strip():
            _append_once(warnings, "Content should be empty for this event kind")


def validate_event_structure(
    event: CandidateEvent | Mapping[str, Any],
    registry: Registry | None = None,
) -> ValidationReport:
    """Check *event* against the spec registered for its kind.

    Args:
        event: A [CandidateEvent][nostrkinds.models.event.CandidateEvent] or a
            wire-format mapping.
        registry: Catalog to validate against. Defaults to
            [default_registry][nostrkinds.catalog.registry.default_registry].

    Returns:
        A new [ValidationReport][nostrkinds.models.report.ValidationReport].

    Raises:
        ContractViolationError: If *event* is not a mapping or lacks
            ``kind``, ``tags`` or ``content``.
    """
    candidate = _coerce_event(event)
    if registry is None:
        registry = default_registry()

    spec = registry.lookup(candidate.kind)
    if spec is None:
        return ValidationReport(warnings=(f"Unknown event kind: {candidate.kind}",))

    errors: list[str] = []
    warnings: list[str] = []

    for tag in spec.required_tags:
        if not candidate.has_tag(tag.name):
            _append_once(errors, f"Missing required tag: {tag.name}")

    if spec.content_schema is not None:
        _check_content(candidate.content, spec.content_schema, errors, warnings)

    for rule in rules_for_kind(candidate.kind):
        if rule.predicate(candidate):
            target = errors if rule.severity is Severity.ERROR else warnings
            _append_once(target, rule.message)

    return ValidationReport(errors=tuple(errors), warnings=tuple(warnings))
