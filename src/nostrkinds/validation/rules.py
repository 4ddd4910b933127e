"""
Per-kind heuristic rules layered over the generic schema checks.

Each [HeuristicRule][nostrkinds.validation.rules.HeuristicRule] pairs a kind
number with a predicate that returns ``True`` when the event *violates* the
rule. The validator evaluates [HEURISTIC_RULES][nostrkinds.validation.rules.HEURISTIC_RULES]
in order for every catalogued event, so adding a check is a data change
rather than another branch in the validator.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final

from nostrkinds.models.constants import EventKind, Severity
from nostrkinds.models.event import CandidateEvent


class _InvalidJson:
    __slots__ = ()

    def __repr__(self) -> str:
        return "INVALID_JSON"


INVALID_JSON: Final = _InvalidJson()


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant {token}")


def parse_json(content: str) -> Any:
    """Parse *content* as strict JSON.

    Returns:
        The decoded value, or ``INVALID_JSON`` when *content* is not valid
        JSON. ``NaN``, ``Infinity`` and ``-Infinity`` are rejected.
    """
    try:
        return json.loads(content, parse_constant=_reject_constant)
    except ValueError:
        return INVALID_JSON


@dataclass(frozen=True, slots=True)
class HeuristicRule:
    """Kind-specific check evaluated after the schema checks.

    Attributes:
        kind: Kind number the rule applies to.
        predicate: Returns ``True`` when the event violates the rule.
        severity: Whether a violation is an error or a warning.
        message: Text appended to the report on violation.
    """

    kind: int
    predicate: Callable[[CandidateEvent], bool]
    severity: Severity
    message: str


def _profile_not_object(event: CandidateEvent) -> bool:
    # Malformed JSON is reported by the content schema check.
    parsed = parse_json(event.content)
    return parsed is not INVALID_JSON and not isinstance(parsed, dict)


def _reaction_missing_target(event: CandidateEvent) -> bool:
    return not (event.has_tag("e") and event.has_tag("p"))


HEURISTIC_RULES: Final[tuple[HeuristicRule, ...]] = (
    HeuristicRule(
        kind=EventKind.SET_METADATA,
        predicate=_profile_not_object,
        severity=Severity.WARNING,
        message="Profile content should be a JSON object",
    ),
    HeuristicRule(
        kind=EventKind.REACTION,
        predicate=_reaction_missing_target,
        severity=Severity.ERROR,
        message="Reaction events must include both e and p tags",
    ),
)


def rules_for_kind(kind: int) -> list[HeuristicRule]:
    """Return the heuristic rules registered for *kind*, in evaluation order."""
    return [rule for rule in HEURISTIC_RULES if rule.kind == kind]
