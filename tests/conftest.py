"""
Pytest configuration and shared fixtures for nostrkinds tests.

Provides:
- The packaged registry and a small hand-written catalog file
- Candidate event factories for the validator
- Signed events for signature verification tests
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from nostrkinds.catalog import Registry, default_registry, load_registry


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Catalog Fixtures
# ============================================================================


MINI_CATALOG = """\
kinds:
- kind: 1
  name: 'Short Text Note'
  description: 'Plain text note.'
  nip: 'NIP-01'
  category: 'regular'
  tags: []
- kind: 7
  name: 'Reaction'
  description: 'Reaction to another event.'
  nip: 'NIP-25'
  category: 'regular'
  tags:
    - {name: e, description: 'event being reacted to', required: true}
    - {name: p, description: 'author of that event', required: true}
    - {name: k, description: 'kind of that event', required: false}
- kind: 10000
  name: 'Mute List'
  description: 'Replaceable list of muted pubkeys.'
  nip: 'NIP-51'
  category: 'replaceable'
  tags: []

references:
- kind: 1
  summary: 'Basic text post'
  use_cases: ['Social media posts']
  related_kinds: [7]
"""


@pytest.fixture(scope="session")
def registry() -> Registry:
    """The registry built from the packaged catalog."""
    return default_registry()


@pytest.fixture
def mini_catalog_path(tmp_path: Path) -> Path:
    """A three-kind catalog file with one curated reference."""
    path = tmp_path / "kinds.yaml"
    path.write_text(MINI_CATALOG, encoding="utf-8")
    return path


@pytest.fixture
def mini_registry(mini_catalog_path: Path) -> Registry:
    return load_registry(mini_catalog_path)


# ============================================================================
# Event Fixtures
# ============================================================================


def make_event(kind: int, tags: list[list[str]] | None = None, content: str = "") -> dict[str, Any]:
    """Build a wire-format candidate event with placeholder id fields."""
    return {
        "id": "a" * 64,
        "pubkey": "b" * 64,
        "created_at": 1_700_000_000,
        "kind": kind,
        "tags": tags if tags is not None else [],
        "content": content,
        "sig": "c" * 128,
    }


@pytest.fixture
def reaction_event() -> dict[str, Any]:
    """A kind 7 reaction with both target tags."""
    return make_event(7, [["e", "d" * 64], ["p", "e" * 64], ["k", "1"]], "+")


@pytest.fixture
def profile_event() -> dict[str, Any]:
    """A kind 0 profile with a JSON object body."""
    return make_event(0, [], json.dumps({"name": "Alice", "about": "Nostr user"}))


# ============================================================================
# Signed Events
# ============================================================================


@pytest.fixture
def signed_event() -> dict[str, Any]:
    """A freshly signed kind 1 note as a wire-format dict."""
    from nostr_sdk import EventBuilder, Keys, Kind

    keys = Keys.generate()
    event = EventBuilder(Kind(1), "hello nostr").finalize(keys)
    return json.loads(event.as_json())
