"""
Machine-readable reference documents built from a registry.

[build_reference_document][nostrkinds.catalog.reference.build_reference_document]
renders the whole catalog as one JSON-compatible dictionary, suitable for
feeding documentation sites or code assistants.
[implementation_guide][nostrkinds.catalog.reference.implementation_guide]
collects everything needed to implement a single kind: its spec, sample
events and related kinds.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any

from nostrkinds.models.constants import EventCategory, EventKind


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .registry import Registry


REFERENCE_TITLE = "Nostr Event Kind Reference"
REFERENCE_DESCRIPTION = (
    "Machine-readable reference for understanding and implementing Nostr event kinds"
)
REFERENCE_VERSION = "1.0.0"

QUICK_REFERENCE_KINDS: tuple[int, ...] = (0, 1, 3, 4, 5, 6, 7, EventKind.LONG_FORM)

COMMON_TAGS: dict[str, str] = {
    "e": "Reference to another event (hex event ID)",
    "p": "Reference to a pubkey (hex public key)",
    "d": "Unique identifier for addressable events",
    "t": "Hashtag or topic",
    "r": "URL reference",
    "k": "Event kind being referenced",
}


def build_reference_document(
    registry: Registry,
    generated_at: datetime.datetime | None = None,
) -> dict[str, Any]:
    """Render the catalog as a reference document.

    Args:
        registry: Catalog to render.
        generated_at: Timestamp recorded in the metadata block. Defaults to
            the current UTC time.

    Returns:
        A dictionary with ``metadata``, ``event_reference`` and
        ``quick_reference`` sections.
    """
    if generated_at is None:
        generated_at = datetime.datetime.now(datetime.UTC)

    basic_events: dict[str, str] = {}
    for kind in QUICK_REFERENCE_KINDS:
        spec = registry.lookup(kind)
        if spec is not None:
            basic_events[str(kind)] = spec.summary or spec.description

    return {
        "metadata": {
            "title": REFERENCE_TITLE,
            "description": REFERENCE_DESCRIPTION,
            "version": REFERENCE_VERSION,
            "generated": generated_at.isoformat(),
            "total_event_kinds": len(registry),
            "category_breakdown": registry.category_breakdown(),
        },
        "event_reference": [spec.to_dict() for spec in registry],
        "quick_reference": {
            "basic_events": basic_events,
            "categories": {category.value: category.description for category in EventCategory},
            "common_tags": dict(COMMON_TAGS),
        },
    }


def implementation_guide(
    kind: int,
    registry: Registry,
    samples: Mapping[int, Sequence[Mapping[str, Any]]] | None = None,
) -> dict[str, Any]:
    """Collect the spec, sample events and related specs for one kind.

    An uncatalogued kind yields ``spec: None`` and no related kinds, but
    still lists any sample events recorded for it.
    """
    spec = registry.lookup(kind)
    examples = list(samples.get(kind, ())) if samples else []
    return {
        "kind": kind,
        "spec": spec.to_dict() if spec is not None else None,
        "examples": [dict(event) for event in examples],
        "related": [related.to_dict() for related in registry.related(kind)],
    }
