"""Shared constants for the models layer.

Defines enumerations and other constants that are used across multiple
model modules. Placing them here avoids circular dependencies between
the models, catalog and validation layers.

See Also:
    [nostrkinds.models.kind_spec][]: Uses
        [EventCategory][nostrkinds.models.constants.EventCategory] and
        [ContentType][nostrkinds.models.constants.ContentType] on every
        catalog entry.
    [nostrkinds.validation][]: Branches on
        [ContentType][nostrkinds.models.constants.ContentType] and reports
        findings with a [Severity][nostrkinds.models.constants.Severity].
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


EVENT_KIND_MAX = 65_535

_REPLACEABLE_RANGE = range(10_000, 20_000)
_EPHEMERAL_RANGE = range(20_000, 30_000)
_ADDRESSABLE_RANGE = range(30_000, 40_000)


class EventKind(IntEnum):
    """Well-known Nostr event kinds with hard-coded validation rules.

    Attributes:
        SET_METADATA: Kind 0 -- user profile metadata (NIP-01).
        TEXT_NOTE: Kind 1 -- short text note (NIP-01).
        CONTACTS: Kind 3 -- follow list with relay hints (NIP-02).
        REACTION: Kind 7 -- reaction to another event (NIP-25).
        LONG_FORM: Kind 30023 -- long-form Markdown article (NIP-23).

    See Also:
        [nostrkinds.validation.rules][]: Heuristic rules keyed on these kinds.
    """

    SET_METADATA = 0
    TEXT_NOTE = 1
    CONTACTS = 3
    REACTION = 7
    LONG_FORM = 30_023


class EventCategory(StrEnum):
    """Relay retention category of an event kind.

    Attributes:
        REGULAR: Stored and broadcast as-is.
        REPLACEABLE: Only the latest event per pubkey and kind is kept.
        EPHEMERAL: Not stored by relays, forwarded to live subscribers only.
        ADDRESSABLE: Replaceable per pubkey, kind and ``d`` tag value.

    Examples:
        ```python
        EventCategory.for_kind(1)       # EventCategory.REGULAR
        EventCategory.for_kind(10002)   # EventCategory.REPLACEABLE
        EventCategory.for_kind(30023)   # EventCategory.ADDRESSABLE
        ```
    """

    REGULAR = "regular"
    REPLACEABLE = "replaceable"
    EPHEMERAL = "ephemeral"
    ADDRESSABLE = "addressable"

    @classmethod
    def for_kind(cls, kind: int) -> EventCategory:
        """Classify a kind number by the NIP-01 kind ranges."""
        if kind in (EventKind.SET_METADATA, EventKind.CONTACTS) or kind in _REPLACEABLE_RANGE:
            return cls.REPLACEABLE
        if kind in _EPHEMERAL_RANGE:
            return cls.EPHEMERAL
        if kind in _ADDRESSABLE_RANGE:
            return cls.ADDRESSABLE
        return cls.REGULAR

    @property
    def description(self) -> str:
        """One-line human-readable description of the retention semantics."""
        return _CATEGORY_DESCRIPTIONS[self]


_CATEGORY_DESCRIPTIONS: dict[EventCategory, str] = {
    EventCategory.REGULAR: "Normal events that are stored and broadcast",
    EventCategory.REPLACEABLE: "Latest event of this kind replaces older ones",
    EventCategory.ADDRESSABLE: "Replaceable events with unique identifiers (d tag)",
    EventCategory.EPHEMERAL: "Temporary events not stored long-term",
}


class ContentType(StrEnum):
    """Expected shape of an event's ``content`` field.

    Attributes:
        TEXT: Free-form text (plain or Markdown). Not checked.
        JSON: Must parse as JSON.
        EMPTY: Expected to be blank; non-blank content is an advisory.
        ENCRYPTED: Ciphertext. Not checked.
    """

    TEXT = "text"
    JSON = "json"
    EMPTY = "empty"
    ENCRYPTED = "encrypted"


class Severity(StrEnum):
    """Severity of a validation finding.

    ``ERROR`` findings make a report invalid; ``WARNING`` findings are
    advisory and leave ``is_valid`` untouched.
    """

    ERROR = "error"
    WARNING = "warning"


class ExampleLibrary(StrEnum):
    """Client library a code example is written for."""

    NDK = "ndk"
    NOSTR_TOOLS = "nostr-tools"
    GENERIC = "generic"
