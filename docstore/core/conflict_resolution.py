"""Conflict Resolution — turns a failed conditional write into 200 or 409.

A conditional-write failure is ambiguous: either someone else stored a different
value, or this caller's own earlier attempt already landed (a client retry after a
timeout). Copying the server-assigned fields of the stored document onto the
candidate and comparing what remains tells the two apart.

Invariants:
    - Both reconcile functions are PURE: they receive the re-read result, they do not fetch it
    - Found and equal after normalization → OK with the STORED document
    - Anything else → CONFLICT with the stored document, never the caller's candidate
    - Create normalizes timestamps only: a different caller revision is a conflict
    - Update also normalizes revision (the candidate already carries old + 1)
"""

from docstore.core.domain_types import Document
from docstore.core.operation_result import OperationResult, conflict, ok


def is_duplicate_create(candidate: Document, stored: Document | None) -> bool:
    """True when the stored document is exactly this create, already applied."""
    if stored is None:
        return False
    return candidate.with_server_fields_of(stored) == stored


def is_duplicate_update(candidate: Document, stored: Document | None) -> bool:
    """True when the stored document already holds this update's content."""
    if stored is None:
        return False
    return candidate.with_server_fields_of(stored, include_revision=True) == stored


def reconcile_create(
    candidate: Document, stored: Document | None,
) -> OperationResult:
    if is_duplicate_create(candidate, stored):
        return ok(stored)
    return conflict(stored)


def reconcile_update(
    candidate: Document, stored: Document | None,
) -> OperationResult:
    if is_duplicate_update(candidate, stored):
        return ok(stored)
    return conflict(stored)
