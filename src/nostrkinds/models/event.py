"""
Candidate Nostr event awaiting structural validation.

[CandidateEvent][nostrkinds.models.event.CandidateEvent] mirrors the NIP-01
wire format (``id``, ``pubkey``, ``created_at``, ``kind``, ``tags``,
``content``, ``sig``) without any cryptographic checks: ids and signatures
are carried as opaque strings. Signature verification lives in
[nostrkinds.utils.verify][].

See Also:
    [nostrkinds.validation.validator][]: Consumes candidate events.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ._validation import freeze_tags, validate_instance, validate_int


_CONTRACT_FIELDS = ("kind", "tags", "content")


@dataclass(frozen=True, slots=True)
class CandidateEvent:
    """Immutable candidate event in wire shape.

    Attributes:
        kind: Event kind number. Kinds absent from the catalog are allowed.
        tags: Tag rows; element 0 of each row is the tag name. Stored as
            a tuple of tuples.
        content: Arbitrary string payload.
        id: Hex event id.
        pubkey: Hex author public key.
        created_at: Unix timestamp in seconds.
        sig: Hex Schnorr signature.

    Only ``kind``, ``tags`` and ``content`` are checked. The envelope
    fields (``id``, ``pubkey``, ``created_at``, ``sig``) are carried as
    given, whatever their value.

    Raises:
        TypeError: If ``kind``, ``tags`` or ``content`` has the wrong type.

    Examples:
        ```python
        event = CandidateEvent.from_dict({
            "kind": 7,
            "tags": [["e", "abc"], ["p", "def"]],
            "content": "+",
        })
        event.has_tag("e")   # True
        ```
    """

    kind: int
    tags: tuple[tuple[str, ...], ...]
    content: str
    id: str = ""
    pubkey: str = ""
    created_at: int = 0
    sig: str = ""

    def __post_init__(self) -> None:
        validate_int(self.kind, "kind")
        object.__setattr__(self, "tags", freeze_tags(self.tags))
        validate_instance(self.content, str, "content")

    def has_tag(self, name: str) -> bool:
        """Return True if at least one tag row is named *name*."""
        return any(row[:1] == (name,) for row in self.tags)

    def tag_values(self, name: str) -> list[str]:
        """Return element 1 of every row named *name* that has one."""
        return [row[1] for row in self.tags if row[:1] == (name,) and len(row) > 1]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CandidateEvent:
        """Build a candidate event from a wire-format JSON object.

        ``kind``, ``tags`` and ``content`` must be present and not ``None``.
        The remaining fields default to empty values when absent, so
        unsigned drafts can be validated too.

        Raises:
            TypeError: If *data* is not a mapping or a contract field is
                missing or ``None``.
        """
        validate_instance(data, Mapping, "event")
        for name in _CONTRACT_FIELDS:
            if data.get(name) is None:
                raise TypeError(f"event is missing required field {name!r}")
        return cls(
            kind=data["kind"],
            tags=data["tags"],
            content=data["content"],
            id=data.get("id") or "",
            pubkey=data.get("pubkey") or "",
            created_at=data.get("created_at") or 0,
            sig=data.get("sig") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the NIP-01 wire object."""
        return {
            "id": self.id,
            "pubkey": self.pubkey,
            "created_at": self.created_at,
            "kind": self.kind,
            "tags": [list(row) for row in self.tags],
            "content": self.content,
            "sig": self.sig,
        }
