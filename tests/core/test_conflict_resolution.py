"""Conflict Resolution — tests for the pure 200-vs-409 decision.

Tests cover:
    - Duplicate create (same content, different server timestamps) → OK with stored
    - Create with different content or different caller revision → CONFLICT with stored
    - Duplicate update (candidate at old + 1, same content) → OK with stored
    - Update with different content → CONFLICT with stored
    - Nothing stored → CONFLICT with no entity
"""

from docstore.core.conflict_resolution import (
    is_duplicate_create, is_duplicate_update, reconcile_create, reconcile_update,
)
from docstore.core.domain_types import StatusCode

from tests.builders import make_document

STORED = make_document(
    revision=1, creation_timestamp=100, update_timestamp=100,
)


# ─── create ──────────────────────────────────────────────────────

def test_create_retry_with_new_timestamps_is_duplicate():
    candidate = make_document(revision=1, creation_timestamp=105, update_timestamp=105)
    assert is_duplicate_create(candidate, STORED)

    result = reconcile_create(candidate, STORED)
    assert result.status_code == StatusCode.OK
    assert result.entity is STORED


def test_create_with_different_title_conflicts_with_stored_entity():
    candidate = make_document(title="Another", creation_timestamp=105, update_timestamp=105)
    result = reconcile_create(candidate, STORED)
    assert result.status_code == StatusCode.CONFLICT
    assert result.entity == STORED


def test_create_with_different_caller_revision_conflicts():
    candidate = make_document(revision=2, creation_timestamp=105, update_timestamp=105)
    assert not is_duplicate_create(candidate, STORED)
    assert reconcile_create(candidate, STORED).status_code == StatusCode.CONFLICT


def test_create_against_missing_document_conflicts_without_entity():
    result = reconcile_create(make_document(), None)
    assert result.status_code == StatusCode.CONFLICT
    assert result.entity is None


# ─── update ──────────────────────────────────────────────────────

def test_update_already_applied_is_duplicate():
    stored = make_document(
        title="Edited", revision=2, creation_timestamp=100, update_timestamp=110,
    )
    candidate = make_document(title="Edited", revision=2, update_timestamp=120)
    assert is_duplicate_update(candidate, stored)

    result = reconcile_update(candidate, stored)
    assert result.status_code == StatusCode.OK
    assert result.entity is stored


def test_update_duplicate_ignores_revision_drift():
    stored = make_document(title="Edited", revision=5, creation_timestamp=100)
    candidate = make_document(title="Edited", revision=2)
    assert is_duplicate_update(candidate, stored)


def test_update_with_different_body_conflicts():
    stored = make_document(body="Theirs", revision=2, creation_timestamp=100)
    candidate = make_document(body="Mine", revision=2)
    result = reconcile_update(candidate, stored)
    assert result.status_code == StatusCode.CONFLICT
    assert result.entity == stored


def test_update_against_missing_document_conflicts_without_entity():
    result = reconcile_update(make_document(revision=2), None)
    assert result.status_code == StatusCode.CONFLICT
    assert result.entity is None
