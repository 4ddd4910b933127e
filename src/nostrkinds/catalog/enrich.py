"""
Derive full event kind specs from catalog entries.

Most catalogued kinds only have a base table entry: name, description,
NIP, category and a flat tag list. [build_spec][nostrkinds.catalog.enrich.build_spec]
turns such an entry into a complete
[EventKindSpec][nostrkinds.models.kind_spec.EventKindSpec] by deriving
every missing field from the entry itself:

* tag schemas split on the ``required`` flag, with a format and example
  rows taken from a per-tag-name table;
* a content schema chosen by keywords in the name and description;
* summary, use cases, implementation notes, gotchas and related kinds from
  ordered keyword rules (first match wins);
* a minimal NDK publishing snippet.

When a curated [ReferenceEntry][nostrkinds.catalog.schema.ReferenceEntry]
exists for the kind, each of its non-``None`` fields replaces the derived
value.

Keyword matching is case-insensitive throughout.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from nostrkinds.models.constants import ContentType, EventCategory, ExampleLibrary
from nostrkinds.models.kind_spec import CodeExample, ContentSchema, EventKindSpec, TagSchema


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from .schema import (
        BaseTagEntry,
        CodeExampleEntry,
        ContentSchemaEntry,
        KindEntry,
        ReferenceEntry,
        TagSchemaEntry,
    )


MAX_USE_CASES = 4
MAX_GOTCHAS = 4
MAX_RELATED_KINDS = 5
SUMMARY_MAX_LENGTH = 60

_LIST_WORD = re.compile(r"\blist\b")


# =============================================================================
# Tag tables
# =============================================================================

TAG_FORMATS: dict[str, str] = {
    "e": "hex event id",
    "p": "hex pubkey",
    "d": "unique identifier string",
    "t": "lowercase hashtag",
    "r": "URL string",
    "k": "event kind number as string",
    "title": "title text",
    "summary": "description text",
    "published_at": "unix timestamp as string",
    "image": "image URL",
    "url": "URL string",
    "name": "name string",
    "description": "description text",
}

TAG_EXAMPLES: dict[str, tuple[str, ...]] = {
    "e": ('["e", "abc123..."]', '["e", "def456...", "wss://relay.example.com"]'),
    "p": ('["p", "pubkey123..."]',),
    "d": ('["d", "unique-identifier"]', '["d", "my-post-2024"]'),
    "t": ('["t", "bitcoin"]', '["t", "nostr"]'),
    "r": ('["r", "https://example.com"]',),
    "k": ('["k", "1"]', '["k", "30023"]'),
    "title": ('["title", "My Article Title"]',),
    "summary": ('["summary", "Brief description"]',),
    "published_at": ('["published_at", "1703980800"]',),
    "image": ('["image", "https://example.com/image.jpg"]',),
}


def tag_format(name: str) -> str:
    """Return the expected value format for a tag name."""
    return TAG_FORMATS.get(name, "string value")


def tag_examples(name: str) -> tuple[str, ...]:
    """Return example rows for a tag name."""
    return TAG_EXAMPLES.get(name, (f'["{name}", "example-value"]',))


def derive_tag_schemas(tags: Iterable[BaseTagEntry], *, required: bool) -> tuple[TagSchema, ...]:
    """Build tag schemas for the base tags whose ``required`` flag matches."""
    return tuple(
        TagSchema(
            name=tag.name,
            description=tag.description,
            format=tag_format(tag.name),
            examples=tag_examples(tag.name),
        )
        for tag in tags
        if tag.required is required
    )


# =============================================================================
# Keyword rules
# =============================================================================


@dataclass(frozen=True, slots=True)
class _KeywordRule:
    """Matches when any keyword occurs in the selected text fields."""

    keywords: tuple[str, ...]
    values: tuple[str, ...] | tuple[int, ...]
    in_name: bool = True
    in_description: bool = False

    def matches(self, name: str, description: str) -> bool:
        haystacks = []
        if self.in_name:
            haystacks.append(name.lower())
        if self.in_description:
            haystacks.append(description.lower())
        return any(keyword in text for keyword in self.keywords for text in haystacks)


def _first_match(rules: Sequence[_KeywordRule], name: str, description: str) -> tuple | None:
    for rule in rules:
        if rule.matches(name, description):
            return rule.values
    return None


_USE_CASE_RULES: tuple[_KeywordRule, ...] = (
    _KeywordRule(
        ("metadata", "profile"),
        ("User profile management", "Identity verification", "Social discovery"),
    ),
    _KeywordRule(
        ("message", "chat"),
        ("Private communication", "Group discussions", "Real-time messaging"),
    ),
    _KeywordRule(
        ("list",),
        ("Data organization", "User preferences", "Content curation"),
        in_description=True,
    ),
    _KeywordRule(
        ("reaction", "like"),
        ("Social engagement", "Content feedback", "User interaction"),
    ),
    _KeywordRule(
        ("calendar",),
        ("Event planning", "Schedule management", "Social coordination"),
        in_name=False,
        in_description=True,
    ),
    _KeywordRule(
        ("delet", "removal"),
        ("Content moderation", "Privacy protection", "Error correction"),
        in_name=False,
        in_description=True,
    ),
    _KeywordRule(
        ("badge", "award"),
        ("Recognition systems", "Achievements", "Community rewards"),
        in_name=False,
        in_description=True,
    ),
    _KeywordRule(
        ("file", "media"),
        ("Media sharing", "File distribution", "Content storage"),
        in_name=False,
        in_description=True,
    ),
    _KeywordRule(
        ("report",),
        ("Content moderation", "Community safety", "Abuse reporting"),
        in_name=False,
        in_description=True,
    ),
    _KeywordRule(
        ("payment", "zap"),
        ("Micropayments", "Content monetization", "Value for value"),
        in_name=False,
        in_description=True,
    ),
)

_RELATED_KIND_RULES: tuple[_KeywordRule, ...] = (
    _KeywordRule(("metadata", "profile"), (3,)),
    _KeywordRule(("note", "text"), (6, 7, 16)),
    _KeywordRule(("message",), (4, 14)),
    _KeywordRule(("list",), (10000, 10001, 10002)),
    _KeywordRule(("calendar",), (31922, 31923, 31924), in_name=False, in_description=True),
)

_SUMMARY_RULES: tuple[tuple[str, str], ...] = (
    ("replaceable", "Replaceable {lname} event"),
    ("addressable", "Addressable {lname} event"),
    ("deprecated", "Deprecated {lname} event"),
    ("message", "{name} for messaging"),
    ("list", "{name} for list management"),
)

_CATEGORY_NOTES: dict[EventCategory, tuple[str, ...]] = {
    EventCategory.REPLACEABLE: (
        "This is a replaceable event - newer events override older ones",
        "Only the most recent event of this kind per pubkey is kept",
    ),
    EventCategory.ADDRESSABLE: (
        "This is an addressable event - use a unique d tag identifier",
        "Addressable via coordinate: kind:pubkey:d_tag_value",
    ),
    EventCategory.EPHEMERAL: (
        "This is an ephemeral event - not stored long-term by relays",
        "Intended for real-time communication only",
    ),
}

_CATEGORY_GOTCHAS: dict[EventCategory, tuple[str, ...]] = {
    EventCategory.REPLACEABLE: (
        "Not understanding that newer events replace older ones",
        "Publishing multiple events without intending replacement",
    ),
    EventCategory.ADDRESSABLE: (
        "Missing or duplicate d tag identifiers",
        "Not understanding coordinate-based addressing",
    ),
}

_GENERAL_GOTCHAS = (
    "Not validating event structure before publishing",
    "Ignoring relay-specific requirements or limits",
)


# =============================================================================
# Derivations
# =============================================================================


def derive_content_schema(name: str, description: str) -> ContentSchema:
    """Pick a content schema from keywords in the kind's name and description."""
    desc = description.lower()
    if "json" in desc:
        return ContentSchema(
            ContentType.JSON,
            "JSON object with structured data",
            ('{"key": "value"}', '{"name": "Alice", "about": "Developer"}'),
        )
    if "markdown" in desc:
        return ContentSchema(
            ContentType.TEXT,
            "Markdown formatted text content",
            ("# Heading\n\nParagraph with **bold** text",),
        )
    if "empty" in desc or _LIST_WORD.search(name.lower()):
        return ContentSchema(ContentType.EMPTY, "Usually empty, metadata is in tags", ("",))
    if "encrypted" in desc:
        return ContentSchema(
            ContentType.ENCRYPTED, "Encrypted content for privacy", ("<encrypted-data>",)
        )
    return ContentSchema(ContentType.TEXT, "Plain text content", (f"{name} content",))


def derive_summary(name: str, description: str) -> str:
    """Shorten a description into a one-line summary."""
    if len(description) <= SUMMARY_MAX_LENGTH:
        return description
    desc = description.lower()
    for keyword, template in _SUMMARY_RULES:
        if keyword in desc:
            return template.format(name=name, lname=name.lower())
    first_sentence = description.split(".")[0]
    if len(first_sentence) <= SUMMARY_MAX_LENGTH:
        return first_sentence
    return description[: SUMMARY_MAX_LENGTH - 3] + "..."


def derive_use_cases(name: str, description: str) -> tuple[str, ...]:
    values = _first_match(_USE_CASE_RULES, name, description)
    if values is None:
        values = (f"{name} functionality", "Protocol compliance", "Client integration")
    return tuple(values)[:MAX_USE_CASES]


def derive_implementation_notes(entry: KindEntry) -> tuple[str, ...]:
    notes: list[str] = list(_CATEGORY_NOTES.get(entry.category, ()))
    desc = entry.description.lower()

    if "json" in desc:
        notes += ["Content must be valid JSON", "Validate JSON before publishing"]
    elif "markdown" in desc:
        notes += [
            "Content supports Markdown formatting",
            "Ensure proper Markdown rendering in clients",
        ]
    elif "encrypted" in desc:
        notes += ["Content is encrypted for privacy", "Requires proper key management"]

    required = [tag.name for tag in entry.tags if tag.required]
    optional = [tag.name for tag in entry.tags if not tag.required]
    if required:
        notes.append(f"Required tags: {', '.join(required)}")
    if optional:
        notes.append(f"Optional tags: {', '.join(optional)}")

    if "deprecated" in desc:
        notes.append("This event type is deprecated - avoid using in new applications")

    if not notes:
        return (
            f"Implement according to {entry.nip or 'the defining NIP'} specification",
            "Follow standard Nostr event structure",
        )
    return tuple(notes)


def derive_common_gotchas(entry: KindEntry) -> tuple[str, ...]:
    gotchas: list[str] = list(_CATEGORY_GOTCHAS.get(entry.category, ()))
    desc = entry.description.lower()

    if "json" in desc:
        gotchas += [
            "Invalid JSON syntax causing parsing errors",
            "Not properly escaping JSON content",
        ]
    elif "tag" in desc:
        gotchas += [
            "Malformed tag structure or missing required tags",
            "Incorrect tag ordering or format",
        ]
    if "deprecated" in desc:
        gotchas.append("Using deprecated event types in new applications")

    gotchas += _GENERAL_GOTCHAS
    return tuple(gotchas[:MAX_GOTCHAS])


def derive_related_kinds(kind: int, name: str, description: str) -> tuple[int, ...]:
    values = _first_match(_RELATED_KIND_RULES, name, description) or ()
    return tuple(k for k in values if k != kind)[:MAX_RELATED_KINDS]


def derive_basic_example(entry: KindEntry) -> CodeExample:
    """Build a minimal NDK publishing snippet for the kind."""
    desc = entry.description
    if "json" in desc.lower():
        content = 'JSON.stringify({name: "Alice", about: "Nostr user"})'
    elif "Note" in entry.name or "Message" in entry.name:
        content = f'"Hello from {entry.name}!"'
    elif "markdown" in desc.lower():
        content = '"# Article Title\\n\\nContent here..."'
    else:
        content = '""'

    tag_rows: list[str] = []
    if entry.category is EventCategory.ADDRESSABLE:
        tag_rows.append("['d', 'unique-identifier']")
    for tag in entry.tags:
        if not tag.required or tag.name == "d":
            continue
        if tag.name == "p":
            tag_rows.append("['p', 'target-pubkey']")
        elif tag.name == "e":
            tag_rows.append("['e', 'target-event-id']")
        else:
            tag_rows.append(f"['{tag.name}', 'value']")

    tags = "[\n    " + ",\n    ".join(tag_rows) + "\n  ]" if tag_rows else "[]"

    code = (
        "import NDK, { NDKEvent, NDKNip07Signer } from '@nostr-dev-kit/ndk'\n"
        "\n"
        "const ndk = new NDK({\n"
        "  explicitRelayUrls: ['wss://relay.damus.io'],\n"
        "  signer: new NDKNip07Signer()\n"
        "})\n"
        "\n"
        "await ndk.connect()\n"
        "\n"
        "const event = new NDKEvent(ndk, {\n"
        f"  kind: {entry.kind},\n"
        f"  content: {content},\n"
        f"  tags: {tags}\n"
        "})\n"
        "\n"
        "await event.publish()"
    )
    return CodeExample(
        library=ExampleLibrary.NDK,
        title=f"Create {entry.name}",
        description=f"Example of creating a {entry.name} event",
        code=code,
    )


# =============================================================================
# Curated entry conversion
# =============================================================================


def _tag_schemas(entries: Sequence[TagSchemaEntry]) -> tuple[TagSchema, ...]:
    return tuple(
        TagSchema(
            name=e.name,
            description=e.description,
            format=e.format,
            examples=tuple(e.examples),
        )
        for e in entries
    )


def _content_schema(entry: ContentSchemaEntry) -> ContentSchema:
    return ContentSchema(entry.type, entry.description, tuple(entry.examples))


def _code_example(entry: CodeExampleEntry) -> CodeExample:
    return CodeExample(
        library=entry.library,
        title=entry.title,
        description=entry.description,
        code=entry.code,
        notes=tuple(entry.notes),
    )


def build_spec(entry: KindEntry, reference: ReferenceEntry | None = None) -> EventKindSpec:
    """Merge a base entry and its optional curated reference into a spec.

    Args:
        entry: Base table entry.
        reference: Curated detail for the same kind, if any. Every field
            that is not ``None`` wins over the derived value.

    Returns:
        A fully populated [EventKindSpec][nostrkinds.models.kind_spec.EventKindSpec].
    """
    ref = reference
    name, description = entry.name, entry.description

    if ref is not None and ref.required_tags is not None:
        required_tags = _tag_schemas(ref.required_tags)
    else:
        required_tags = derive_tag_schemas(entry.tags, required=True)

    if ref is not None and ref.optional_tags is not None:
        optional_tags = _tag_schemas(ref.optional_tags)
    else:
        optional_tags = derive_tag_schemas(entry.tags, required=False)

    if ref is not None and ref.content_schema is not None:
        content_schema = _content_schema(ref.content_schema)
    else:
        content_schema = derive_content_schema(name, description)

    if ref is not None and ref.basic_example is not None:
        basic_example = _code_example(ref.basic_example)
    else:
        basic_example = derive_basic_example(entry)

    def pick(field_name: str, derived: Callable[[], Any]) -> Any:
        value = getattr(ref, field_name) if ref is not None else None
        return derived() if value is None else value

    return EventKindSpec(
        kind=entry.kind,
        name=name,
        description=description,
        nip=entry.nip,
        category=entry.category,
        required_tags=required_tags,
        optional_tags=optional_tags,
        content_schema=content_schema,
        summary=pick("summary", lambda: derive_summary(name, description)),
        use_cases=tuple(pick("use_cases", lambda: derive_use_cases(name, description))),
        implementation_notes=tuple(
            pick("implementation_notes", lambda: derive_implementation_notes(entry))
        ),
        common_gotchas=tuple(pick("common_gotchas", lambda: derive_common_gotchas(entry))),
        basic_example=basic_example,
        advanced_examples=tuple(
            _code_example(e) for e in (ref.advanced_examples if ref is not None else ())
        ),
        related_kinds=tuple(
            pick("related_kinds", lambda: derive_related_kinds(entry.kind, name, description))
        ),
    )
