"""Pure frozen dataclasses with zero I/O for Nostr event kinds and events.

The models layer is the foundation of the package. It has **no dependencies**
on any other nostrkinds package -- only the Python standard library. Every
model uses ``@dataclass(frozen=True, slots=True)`` and normalizes sequence
fields to tuples in ``__post_init__``, so instances can be shared between
callers without copies. Invalid instances never escape the constructor.

Attributes:
    EventKindSpec: Catalog entry for one event kind (tags, content schema,
        documentation, related kinds).
    TagSchema: Expected shape of one tag name.
    ContentSchema: Expected shape of the ``content`` field.
    CodeExample: Client-library snippet attached to a spec.
    CandidateEvent: Event in NIP-01 wire shape awaiting validation.
    ValidationReport: Errors and warnings produced by the validator.
    EventCategory: Relay retention category (regular, replaceable,
        ephemeral, addressable).
    ContentType: Content shape (text, json, empty, encrypted).
    Severity: Error or warning.

Note:
    All models use ``object.__setattr__`` in ``__post_init__`` to store
    normalized values on frozen dataclasses. This runs during ``__init__``
    before the instance is exposed to external code.

See Also:
    [nostrkinds.catalog][]: Builds specs from the packaged catalog file.
    [nostrkinds.validation][]: Produces reports from candidate events.
"""

from .constants import (
    EVENT_KIND_MAX,
    ContentType,
    EventCategory,
    EventKind,
    ExampleLibrary,
    Severity,
)
from .event import CandidateEvent
from .kind_spec import CodeExample, ContentSchema, EventKindSpec, TagSchema
from .report import ValidationReport


__all__ = [
    "EVENT_KIND_MAX",
    "CandidateEvent",
    "CodeExample",
    "ContentSchema",
    "ContentType",
    "EventCategory",
    "EventKind",
    "EventKindSpec",
    "ExampleLibrary",
    "Severity",
    "TagSchema",
    "ValidationReport",
]
