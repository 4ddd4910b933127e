"""Loading of sample event files.

Sample files are JSON objects keyed by kind number (as a string), each
value a list of wire-format events, as written by relay fetch scripts:

```json
{"1": [{"id": "...", "kind": 1, "tags": [], "content": "hi", ...}]}
```
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from nostrkinds.core.exceptions import SampleError


def load_samples(path: str | Path) -> dict[int, list[dict[str, Any]]]:
    """Read a sample events file.

    Args:
        path: JSON file to read.

    Returns:
        Events grouped by kind number, in file order.

    Raises:
        SampleError: If the file cannot be read, is not valid JSON, or does
            not map kind numbers to lists of event objects.
    """
    sample_path = Path(path)
    try:
        with sample_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise SampleError(f"cannot read samples {sample_path}: {e}") from e
    except ValueError as e:
        raise SampleError(f"samples {sample_path} are not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise SampleError(f"samples {sample_path} must be a JSON object keyed by kind")

    samples: dict[int, list[dict[str, Any]]] = {}
    for key, events in raw.items():
        try:
            kind = int(key)
        except ValueError:
            raise SampleError(f"sample key {key!r} is not a kind number") from None
        if not isinstance(events, list) or not all(isinstance(e, dict) for e in events):
            raise SampleError(f"samples for kind {kind} must be a list of event objects")
        samples[kind] = events
    return samples
