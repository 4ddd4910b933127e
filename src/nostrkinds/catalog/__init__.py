"""Event kind catalog: file schema, enrichment, registry and reference output.

Attributes:
    Registry: Immutable kind -> spec mapping with search helpers.
        See [Registry][nostrkinds.catalog.registry.Registry].
    load_registry: Build a registry from a catalog YAML file.
    default_registry: Process-wide registry built from the packaged catalog.
    build_spec: Merge a base entry and its curated reference into a spec.
    build_reference_document: Render a registry as a JSON-compatible dict.
    implementation_guide: Spec, samples and related kinds for one kind.

See Also:
    [nostrkinds.models.kind_spec][]: The spec dataclasses served here.
"""

from .enrich import build_spec
from .reference import build_reference_document, implementation_guide
from .registry import DEFAULT_CATALOG_PATH, Registry, default_registry, load_registry
from .schema import CatalogFile, KindEntry, ReferenceEntry


__all__ = [
    "DEFAULT_CATALOG_PATH",
    "CatalogFile",
    "KindEntry",
    "ReferenceEntry",
    "Registry",
    "build_reference_document",
    "build_spec",
    "default_registry",
    "implementation_guide",
    "load_registry",
]
