r"""nostrkinds -- Nostr event kind catalog and structural validator.

A read-only catalog of Nostr event kinds (name, NIP, retention category,
tag and content schemas, usage guidance, code examples) and a pure
validator that checks candidate events against it.

Imports flow strictly downward:

```text
          validation        Structural checks over candidate events
              |
           catalog          Catalog file schema, enrichment, registry
          /       \
       core      utils      Config, logging, errors | samples, signatures
          \       /
           models           Frozen dataclasses (stdlib only)
```

Attributes:
    models: Frozen dataclasses for specs, candidate events and reports.
    core: Configuration, structured logging, exceptions, YAML loading.
    catalog: Registry built from the packaged catalog and reference export.
    validation: ``validate_event_structure`` and its heuristic rules.
    utils: Sample event files and ``nostr_sdk`` signature verification.

Note:
    Top-level imports (``from nostrkinds import validate_event_structure``)
    use lazy loading and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("nostrkinds")

__all__ = [
    "AppConfig",
    "CandidateEvent",
    "CatalogError",
    "ContractViolationError",
    "EventCategory",
    "EventKindSpec",
    "Logger",
    "NostrKindsError",
    "Registry",
    "ValidationReport",
    "build_reference_document",
    "default_registry",
    "load_registry",
    "validate_event_structure",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "AppConfig": ("nostrkinds.core", "AppConfig"),
    "CatalogError": ("nostrkinds.core", "CatalogError"),
    "ContractViolationError": ("nostrkinds.core", "ContractViolationError"),
    "Logger": ("nostrkinds.core", "Logger"),
    "NostrKindsError": ("nostrkinds.core", "NostrKindsError"),
    "CandidateEvent": ("nostrkinds.models", "CandidateEvent"),
    "EventCategory": ("nostrkinds.models", "EventCategory"),
    "EventKindSpec": ("nostrkinds.models", "EventKindSpec"),
    "ValidationReport": ("nostrkinds.models", "ValidationReport"),
    "Registry": ("nostrkinds.catalog", "Registry"),
    "build_reference_document": ("nostrkinds.catalog", "build_reference_document"),
    "default_registry": ("nostrkinds.catalog", "default_registry"),
    "load_registry": ("nostrkinds.catalog", "load_registry"),
    "validate_event_structure": ("nostrkinds.validation", "validate_event_structure"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'nostrkinds' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
