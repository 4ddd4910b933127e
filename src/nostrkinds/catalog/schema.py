"""
Pydantic models for the catalog YAML file.

The catalog file has two sections:

``kinds``
    The ordered base table. One [KindEntry][nostrkinds.catalog.schema.KindEntry]
    per catalogued kind with name, NIP, retention category and a flat tag
    list where each tag is flagged ``required`` or not.
``references``
    Hand-curated detail for selected kinds
    ([ReferenceEntry][nostrkinds.catalog.schema.ReferenceEntry]). Merged over
    the base entry with the same kind number.

In a reference entry, a field left out (``None``) means "derive it from the
base entry", while an explicit empty list means "there are none". This is
what lets kind 0 declare ``required_tags: []`` without picking up derived
tags.

These models only check the file's structure. Turning entries into
[EventKindSpec][nostrkinds.models.kind_spec.EventKindSpec] values is the job
of [nostrkinds.catalog.enrich][].
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, model_validator

from nostrkinds.models.constants import (
    EVENT_KIND_MAX,
    ContentType,
    EventCategory,
    ExampleLibrary,
)


class _Entry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class BaseTagEntry(_Entry):
    """Tag row of the base table."""

    name: str = Field(min_length=1)
    description: str = ""
    required: StrictBool = False


class KindEntry(_Entry):
    """Base table entry for one kind."""

    kind: StrictInt = Field(ge=0, le=EVENT_KIND_MAX)
    name: str = Field(min_length=1)
    description: str = ""
    nip: str = ""
    category: EventCategory
    tags: list[BaseTagEntry] = Field(default_factory=list)


class TagSchemaEntry(_Entry):
    """Curated tag schema."""

    name: str = Field(min_length=1)
    description: str = ""
    format: str | None = None
    examples: list[str] = Field(default_factory=list)


class ContentSchemaEntry(_Entry):
    """Curated content schema."""

    type: ContentType
    description: str = ""
    examples: list[str] = Field(default_factory=list)


class CodeExampleEntry(_Entry):
    """Curated code example."""

    library: ExampleLibrary = ExampleLibrary.NDK
    title: str = Field(min_length=1)
    description: str = ""
    code: str = Field(min_length=1)
    notes: list[str] = Field(default_factory=list)


class ReferenceEntry(_Entry):
    """Curated detail merged over the base entry with the same ``kind``."""

    kind: StrictInt = Field(ge=0, le=EVENT_KIND_MAX)
    summary: str | None = None
    use_cases: list[str] | None = None
    implementation_notes: list[str] | None = None
    common_gotchas: list[str] | None = None
    required_tags: list[TagSchemaEntry] | None = None
    optional_tags: list[TagSchemaEntry] | None = None
    content_schema: ContentSchemaEntry | None = None
    basic_example: CodeExampleEntry | None = None
    advanced_examples: list[CodeExampleEntry] = Field(default_factory=list)
    related_kinds: list[StrictInt] | None = None


class CatalogFile(_Entry):
    """Whole catalog file.

    Cross-entry checks run after field validation: kind numbers must be
    unique in each section, and every reference must point at a base entry.
    """

    kinds: list[KindEntry] = Field(min_length=1)
    references: list[ReferenceEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_consistency(self) -> Self:
        """Reject duplicate kinds and orphan references."""
        seen: set[int] = set()
        for entry in self.kinds:
            if entry.kind in seen:
                raise ValueError(f"duplicate kind {entry.kind} in kinds")
            seen.add(entry.kind)

        referenced: set[int] = set()
        for ref in self.references:
            if ref.kind in referenced:
                raise ValueError(f"duplicate kind {ref.kind} in references")
            if ref.kind not in seen:
                raise ValueError(f"reference for kind {ref.kind} has no base entry")
            referenced.add(ref.kind)
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create an instance from a dictionary with strict validation."""
        return cls.model_validate(data)

    def references_by_kind(self) -> dict[int, ReferenceEntry]:
        return {ref.kind: ref for ref in self.references}
