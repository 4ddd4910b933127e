"""Structural validation of candidate events.

Attributes:
    validate_event_structure: Check one event against its catalogued spec.
        See [validate_event_structure][nostrkinds.validation.validator.validate_event_structure].
    HeuristicRule: Data record for a kind-specific check.
    HEURISTIC_RULES: Registered heuristic rules, in evaluation order.
"""

from .rules import HEURISTIC_RULES, HeuristicRule, parse_json, rules_for_kind
from .validator import validate_event_structure


__all__ = [
    "HEURISTIC_RULES",
    "HeuristicRule",
    "parse_json",
    "rules_for_kind",
    "validate_event_structure",
]
