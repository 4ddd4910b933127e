"""
Schnorr signature verification of sample events via ``nostr_sdk``.

Unlike [nostrkinds.validation][], which only checks structure, these
helpers recompute the event id and verify the BIP-340 signature. Any event
``nostr_sdk`` refuses to parse counts as invalid.

Examples:
    ```python
    from nostrkinds.utils import load_samples, verify_samples

    summary = verify_samples(load_samples("events.json"))
    print(summary.valid, summary.invalid, summary.success_rate)
    ```
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from nostr_sdk import Event as NostrEvent
from nostr_sdk import NostrSdkError


if TYPE_CHECKING:
    from collections.abc import Sequence


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VerificationSummary:
    """Signature verification totals for a batch of events.

    Attributes:
        total: Events checked.
        valid: Events whose id and signature verified.
        invalid: ``total - valid``.
    """

    total: int
    valid: int

    @property
    def invalid(self) -> int:
        return self.total - self.valid

    @property
    def success_rate(self) -> int:
        """Percentage of valid events, rounded half up. ``0`` when empty."""
        if self.total == 0:
            return 0
        return (self.valid * 200 + self.total) // (self.total * 2)

    @property
    def all_valid(self) -> bool:
        return self.valid == self.total

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "valid": self.valid,
            "invalid": self.invalid,
            "success_rate": self.success_rate,
        }


def verify_event(data: Mapping[str, Any] | str) -> bool:
    """Return True if *data* is a well-formed event with a valid signature.

    Args:
        data: A wire-format event object or its JSON text.
    """
    try:
        payload = data if isinstance(data, str) else json.dumps(dict(data))
        return bool(NostrEvent.from_json(payload).verify())
    except (NostrSdkError, TypeError, ValueError) as e:
        event_id = data.get("id") if isinstance(data, Mapping) else None
        logger.warning("event_unparseable id=%s error=%s", event_id, e)
        return False


def verify_samples(samples: Mapping[int, Sequence[Mapping[str, Any]]]) -> VerificationSummary:
    """Verify every event in a kind-keyed sample collection."""
    total = 0
    valid = 0
    for kind, events in samples.items():
        for event in events:
            total += 1
            if verify_event(event):
                valid += 1
            else:
                logger.info("event_invalid kind=%d id=%s", kind, event.get("id"))
    summary = VerificationSummary(total=total, valid=valid)
    logger.debug(
        "samples_verified total=%d valid=%d invalid=%d", total, valid, summary.invalid
    )
    return summary
