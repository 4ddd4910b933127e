"""
Event kind registry: immutable, ordered lookup from kind number to spec.

A [Registry][nostrkinds.catalog.registry.Registry] is built once from the
catalog file and never mutated. Lookups of uncatalogued kinds return
``None`` rather than raising: many valid protocol kinds are simply not
documented here.

Examples:
    ```python
    from nostrkinds.catalog import default_registry

    registry = default_registry()
    registry.lookup(7).name          # 'Reaction'
    registry.lookup(42_424)          # None
    [s.kind for s in registry.search("zap")]   # [9734, 9735]
    ```

See Also:
    [nostrkinds.catalog.schema][]: Structure of the catalog file.
    [nostrkinds.catalog.enrich][]: How base entries become full specs.
"""

from __future__ import annotations

import logging
from collections import Counter
from functools import cache
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from nostrkinds.core.exceptions import CatalogError
from nostrkinds.core.yaml import load_yaml
from nostrkinds.models.constants import EventCategory

from .enrich import build_spec
from .schema import CatalogFile


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from nostrkinds.models.kind_spec import EventKindSpec


logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "kinds.yaml"


class Registry:
    """Read-only catalog of event kind specs in catalog order.

    Args:
        specs: Specs to register. Kind numbers must be unique.

    Raises:
        ValueError: If two specs share a kind number.
    """

    __slots__ = ("_specs",)

    def __init__(self, specs: Iterable[EventKindSpec]) -> None:
        by_kind: dict[int, EventKindSpec] = {}
        for spec in specs:
            if spec.kind in by_kind:
                raise ValueError(f"duplicate kind {spec.kind} in registry")
            by_kind[spec.kind] = spec
        self._specs = MappingProxyType(by_kind)

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[EventKindSpec]:
        return iter(self._specs.values())

    def __contains__(self, kind: object) -> bool:
        return kind in self._specs

    def __repr__(self) -> str:
        return f"Registry(kinds={len(self._specs)})"

    def lookup(self, kind: int) -> EventKindSpec | None:
        """Return the spec for *kind*, or ``None`` if it is not catalogued."""
        return self._specs.get(kind)

    def kinds(self) -> tuple[int, ...]:
        """Catalogued kind numbers in catalog order."""
        return tuple(self._specs)

    def search(self, query: str) -> list[EventKindSpec]:
        """Case-insensitive substring search over name, description, kind and NIP.

        A blank query returns every spec.
        """
        if not query.strip():
            return list(self)
        term = query.lower()
        return [
            spec
            for spec in self
            if term in spec.name.lower()
            or term in spec.description.lower()
            or term in str(spec.kind)
            or term in spec.nip.lower()
        ]

    def search_by_usage(self, query: str) -> list[EventKindSpec]:
        """Case-insensitive search over use cases, summary and name."""
        term = query.lower()
        return [
            spec
            for spec in self
            if any(term in use_case.lower() for use_case in spec.use_cases)
            or term in spec.summary.lower()
            or term in spec.name.lower()
        ]

    def by_category(self, category: EventCategory | str) -> list[EventKindSpec]:
        """Specs in the given retention category.

        Raises:
            ValueError: If *category* is not a valid category name.
        """
        wanted = EventCategory(category)
        return [spec for spec in self if spec.category is wanted]

    def related(self, kind: int) -> list[EventKindSpec]:
        """Catalogued specs listed in *kind*'s ``related_kinds``, in catalog order.

        Returns an empty list for an unknown kind.
        """
        spec = self.lookup(kind)
        if spec is None or not spec.related_kinds:
            return []
        wanted = set(spec.related_kinds)
        return [other for other in self if other.kind in wanted]

    def implementation_notes(self) -> list[dict[str, object]]:
        """Implementation notes of every spec, keyed by kind and name."""
        return [
            {"kind": s.kind, "name": s.name, "notes": list(s.implementation_notes)} for s in self
        ]

    def common_gotchas(self) -> list[dict[str, object]]:
        """Common gotchas of every spec, keyed by kind and name."""
        return [{"kind": s.kind, "name": s.name, "gotchas": list(s.common_gotchas)} for s in self]

    def category_breakdown(self) -> dict[str, int]:
        """Number of specs per category, including empty categories."""
        counts = Counter(spec.category for spec in self)
        return {category.value: counts.get(category, 0) for category in EventCategory}


def load_registry(path: str | Path | None = None) -> Registry:
    """Build a registry from a catalog YAML file.

    Args:
        path: Catalog file to load. Defaults to the packaged catalog.

    Returns:
        A new [Registry][nostrkinds.catalog.registry.Registry].

    Raises:
        CatalogError: If the file cannot be read or parsed, violates the
            catalog schema, or contains duplicate or orphan entries.
    """
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH

    try:
        raw = load_yaml(catalog_path)
    except (OSError, TypeError, yaml.YAMLError) as e:
        raise CatalogError(f"cannot read catalog {catalog_path}: {e}") from e

    try:
        catalog = CatalogFile.from_dict(raw)
    except ValidationError as e:
        raise CatalogError(f"invalid catalog {catalog_path}: {e}") from e

    references = catalog.references_by_kind()
    specs = []
    for entry in catalog.kinds:
        expected = EventCategory.for_kind(entry.kind)
        if entry.category is not expected:
            logger.warning(
                "catalog_category_mismatch kind=%d declared=%s expected=%s",
                entry.kind,
                entry.category.value,
                expected.value,
            )
        try:
            specs.append(build_spec(entry, references.get(entry.kind)))
        except (TypeError, ValueError) as e:
            raise CatalogError(f"invalid catalog entry for kind {entry.kind}: {e}") from e

    registry = Registry(specs)
    logger.debug(
        "catalog_loaded path=%s kinds=%d references=%d",
        catalog_path,
        len(registry),
        len(references),
    )
    return registry


@cache
def default_registry() -> Registry:
    """Return the process-wide registry built from the packaged catalog.

    Built on first call and shared afterwards; a registry is immutable, so
    sharing it needs no synchronization.
    """
    return load_registry()
