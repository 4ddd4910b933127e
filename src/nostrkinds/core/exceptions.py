"""nostrkinds exception hierarchy.

Validation findings are never raised -- they are returned inside a
[ValidationReport][nostrkinds.models.report.ValidationReport]. The
exceptions below cover everything else: broken configuration, a broken
catalog file, unreadable sample files, and callers that hand the validator
something that is not an event at all.

Exception hierarchy:

```text
NostrKindsError (base -- never raised directly)
├── ConfigurationError      -- config validation, missing keys, bad YAML
├── CatalogError            -- malformed or inconsistent catalog file
├── ContractViolationError  -- input is not a well-formed event (also TypeError)
└── SampleError             -- unreadable or malformed sample event file
```

See Also:
    [load_registry()][nostrkinds.catalog.registry.load_registry]: Raises
        [CatalogError][nostrkinds.core.exceptions.CatalogError].
    [validate_event_structure()][nostrkinds.validation.validator.validate_event_structure]:
        Raises [ContractViolationError][nostrkinds.core.exceptions.ContractViolationError].
"""

from __future__ import annotations


class NostrKindsError(Exception):
    """Base exception for all nostrkinds errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(NostrKindsError):
    """Invalid or missing configuration (YAML file, CLI flags).

    See Also:
        [AppConfig.from_yaml()][nostrkinds.core.config.AppConfig.from_yaml]:
            Wraps YAML and schema failures in this exception.
    """


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class CatalogError(NostrKindsError):
    """Catalog file is malformed or internally inconsistent.

    Raised for schema violations, duplicate kind numbers, and reference
    entries that point at kinds missing from the base table.
    """


# ---------------------------------------------------------------------------
# Validation input
# ---------------------------------------------------------------------------


class ContractViolationError(NostrKindsError, TypeError):
    """Validator input is not a well-formed candidate event.

    Distinct from a failed validation: an event whose tags are incomplete
    yields an invalid report, while an object with no ``tags`` or
    ``content`` field at all raises this error. Subclasses ``TypeError``
    so generic type-error handlers still catch it.
    """


# ---------------------------------------------------------------------------
# Samples
# ---------------------------------------------------------------------------


class SampleError(NostrKindsError):
    """Sample event file is missing, not JSON, or not keyed by kind."""
