"""Sample event files and signature verification.

Attributes:
    samples: Loading of kind-keyed sample event JSON files.
    verify: BIP-340 signature verification through ``nostr_sdk``.

Note:
    Structural checks live in [nostrkinds.validation][]; nothing here
    consults the kind catalog.
"""

from .samples import load_samples
from .verify import VerificationSummary, verify_event, verify_samples


__all__ = [
    "VerificationSummary",
    "load_samples",
    "verify_event",
    "verify_samples",
]
