"""
Immutable event kind catalog entries.

An [EventKindSpec][nostrkinds.models.kind_spec.EventKindSpec] describes one
Nostr event kind: its identity (number, name, NIP), its relay retention
category, the tags it requires or accepts, the shape of its content, and
the documentation that goes with it (summary, use cases, notes, gotchas,
code examples, related kinds).

All classes here are frozen, slotted dataclasses. Sequence fields are
normalized to tuples in ``__post_init__`` so a spec can be shared freely
between callers without defensive copies.

See Also:
    [nostrkinds.catalog.registry][]: Builds and serves these specs.
    [nostrkinds.validation.validator][]: Checks candidate events against
        the tag and content schemas declared here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ._validation import (
    freeze_int_sequence,
    freeze_str_sequence,
    validate_instance,
    validate_kind,
    validate_str_no_null,
    validate_str_not_empty,
)
from .constants import ContentType, EventCategory, ExampleLibrary


@dataclass(frozen=True, slots=True)
class TagSchema:
    """Expected shape of one tag name on an event kind.

    Attributes:
        name: Tag name matched against element 0 of a tag row (``"e"``,
            ``"p"``, ``"d"``, ...).
        description: What the tag carries.
        format: Free-text expectation for the tag value, e.g. ``"hex pubkey"``.
        examples: Example tag rows rendered as JSON strings.

    Examples:
        ```python
        TagSchema("p", "Mention of a pubkey", format="hex pubkey")
        ```
    """

    name: str
    description: str = ""
    format: str | None = None
    examples: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        validate_str_not_empty(self.name, "name")
        validate_str_no_null(self.description, "description")
        if self.format is not None:
            validate_str_no_null(self.format, "format")
        object.__setattr__(self, "examples", freeze_str_sequence(self.examples, "examples"))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary, omitting an unset ``format``."""
        result: dict[str, Any] = {"name": self.name, "description": self.description}
        if self.format is not None:
            result["format"] = self.format
        result["examples"] = list(self.examples)
        return result


@dataclass(frozen=True, slots=True)
class ContentSchema:
    """Expected shape of an event's ``content`` field.

    Attributes:
        type: One of the [ContentType][nostrkinds.models.constants.ContentType]
            values. Strings are coerced.
        description: Human-readable expectation.
        examples: Example content values.
    """

    type: ContentType
    description: str = ""
    examples: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", ContentType(self.type))
        validate_str_no_null(self.description, "description")
        object.__setattr__(self, "examples", freeze_str_sequence(self.examples, "examples"))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "description": self.description,
            "examples": list(self.examples),
        }


@dataclass(frozen=True, slots=True)
class CodeExample:
    """A client-library code snippet showing how to publish a kind."""

    library: ExampleLibrary
    title: str
    description: str
    code: str
    notes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "library", ExampleLibrary(self.library))
        validate_str_not_empty(self.title, "title")
        validate_str_no_null(self.description, "description")
        validate_str_not_empty(self.code, "code")
        object.__setattr__(self, "notes", freeze_str_sequence(self.notes, "notes"))

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "library": self.library.value,
            "title": self.title,
            "description": self.description,
            "code": self.code,
        }
        if self.notes:
            result["notes"] = list(self.notes)
        return result


@dataclass(frozen=True, slots=True)
class EventKindSpec:
    """Immutable catalog entry for one Nostr event kind.

    Constructed once when the catalog is loaded and shared read-only by
    every lookup and validation call.

    Attributes:
        kind: Event kind number, unique within a registry.
        name: Short display name, e.g. ``"Reaction"``.
        description: One or two sentence description.
        nip: Defining NIP, e.g. ``"NIP-25"``.
        category: Relay retention
            [EventCategory][nostrkinds.models.constants.EventCategory].
        required_tags: Tags that must appear at least once, in check order.
        optional_tags: Tags that may appear.
        content_schema: Expected content shape, or ``None`` for no check.
        summary: One-line summary for listings.
        use_cases: Typical reasons to publish this kind.
        implementation_notes: Details implementers must get right.
        common_gotchas: Frequent mistakes.
        basic_example: Minimal publishing snippet.
        advanced_examples: Further snippets.
        related_kinds: Kind numbers worth reading alongside this one.

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If ``kind`` is out of range or ``name`` is empty.

    Examples:
        ```python
        spec = EventKindSpec(
            kind=7,
            name="Reaction",
            category=EventCategory.REGULAR,
            required_tags=(TagSchema("e"), TagSchema("p")),
            content_schema=ContentSchema(ContentType.TEXT),
        )
        spec.required_tag_names  # ('e', 'p')
        ```
    """

    kind: int
    name: str
    category: EventCategory
    description: str = ""
    nip: str = ""
    required_tags: tuple[TagSchema, ...] = ()
    optional_tags: tuple[TagSchema, ...] = ()
    content_schema: ContentSchema | None = None
    summary: str = ""
    use_cases: tuple[str, ...] = ()
    implementation_notes: tuple[str, ...] = ()
    common_gotchas: tuple[str, ...] = ()
    basic_example: CodeExample | None = None
    advanced_examples: tuple[CodeExample, ...] = ()
    related_kinds: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        validate_kind(self.kind)
        validate_str_not_empty(self.name, "name")
        validate_str_no_null(self.description, "description")
        validate_str_no_null(self.nip, "nip")
        validate_str_no_null(self.summary, "summary")
        object.__setattr__(self, "category", EventCategory(self.category))

        for attr in ("required_tags", "optional_tags"):
            tags = tuple(getattr(self, attr))
            for i, tag in enumerate(tags):
                validate_instance(tag, TagSchema, f"{attr}[{i}]")
            object.__setattr__(self, attr, tags)

        if self.content_schema is not None:
            validate_instance(self.content_schema, ContentSchema, "content_schema")
        if self.basic_example is not None:
            validate_instance(self.basic_example, CodeExample, "basic_example")

        examples = tuple(self.advanced_examples)
        for i, example in enumerate(examples):
            validate_instance(example, CodeExample, f"advanced_examples[{i}]")
        object.__setattr__(self, "advanced_examples", examples)

        for attr in ("use_cases", "implementation_notes", "common_gotchas"):
            object.__setattr__(self, attr, freeze_str_sequence(getattr(self, attr), attr))
        object.__setattr__(
            self, "related_kinds", freeze_int_sequence(self.related_kinds, "related_kinds")
        )

    @property
    def required_tag_names(self) -> tuple[str, ...]:
        """Names of the required tags, in declaration order."""
        return tuple(tag.name for tag in self.required_tags)

    @property
    def optional_tag_names(self) -> tuple[str, ...]:
        """Names of the optional tags, in declaration order."""
        return tuple(tag.name for tag in self.optional_tags)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary.

        ``None`` values for the optional nested objects are kept as
        ``None`` so every entry in a generated reference has the same keys.
        """
        return {
            "kind": self.kind,
            "name": self.name,
            "description": self.description,
            "summary": self.summary,
            "nip": self.nip,
            "category": self.category.value,
            "use_cases": list(self.use_cases),
            "implementation_notes": list(self.implementation_notes),
            "common_gotchas": list(self.common_gotchas),
            "required_tags": [tag.to_dict() for tag in self.required_tags],
            "optional_tags": [tag.to_dict() for tag in self.optional_tags],
            "content_schema": self.content_schema.to_dict() if self.content_schema else None,
            "basic_example": self.basic_example.to_dict() if self.basic_example else None,
            "advanced_examples": [example.to_dict() for example in self.advanced_examples],
            "related_kinds": list(self.related_kinds),
        }
