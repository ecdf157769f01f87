"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - DocumentId wraps str, Revision and UnixTimestamp wrap int
    - StatusCode is the closed set of outcomes an operation may report
    - Document, Cursor and Page are frozen: equality is structural over every field

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - IntEnum for StatusCode: compares equal to the raw HTTP status the adapter emits
    - camelCase wire keys live next to the types (to_dict) so every outer layer renders
      documents the same way
"""

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import NewType


# ─── Identity & Value Types ──────────────────────────────────────

DocumentId = NewType("DocumentId", str)
Revision = NewType("Revision", int)
UnixTimestamp = NewType("UnixTimestamp", int)   # seconds since epoch, UTC

# revisions and timestamps are persisted as signed 64-bit integers
MAX_INT64: int = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class StatusCode(IntEnum):
    """Outcome of an orchestrator operation — maps 1:1 onto an HTTP status."""
    OK = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409
    INTERNAL_ERROR = 500


class Operation(str, Enum):
    """Orchestrator operations — used as the `operation` log field."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    GET = "get"
    LIST_FIRST = "list_first"
    LIST_AFTER = "list_after"


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Document:
    """A versioned document. `revision` is the optimistic-concurrency token."""
    id: DocumentId
    title: str = ""
    description: str = ""
    body: str = ""
    revision: Revision = Revision(0)
    creation_timestamp: UnixTimestamp = UnixTimestamp(0)
    update_timestamp: UnixTimestamp = UnixTimestamp(0)

    def with_server_fields_of(
        self, stored: "Document", *, include_revision: bool = False,
    ) -> "Document":
        """Copy server-assigned fields from `stored` so only caller intent is compared."""
        if include_revision:
            return replace(
                self,
                creation_timestamp=stored.creation_timestamp,
                update_timestamp=stored.update_timestamp,
                revision=stored.revision,
            )
        return replace(
            self,
            creation_timestamp=stored.creation_timestamp,
            update_timestamp=stored.update_timestamp,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "body": self.body,
            "revision": self.revision,
            "creationTimestamp": self.creation_timestamp,
            "updateTimestamp": self.update_timestamp,
        }


@dataclass(frozen=True)
class Cursor:
    """Forward-pagination boundary: the last item of the previous page."""
    id: DocumentId = DocumentId("")
    creation_timestamp: UnixTimestamp = UnixTimestamp(0)

    def is_zero(self) -> bool:
        """Zero cursor means there are no more pages."""
        return not self.id and self.creation_timestamp == 0

    def to_dict(self) -> dict:
        return {"id": self.id, "creationTimestamp": self.creation_timestamp}


ZERO_CURSOR = Cursor()


@dataclass(frozen=True)
class Page:
    """A bounded slice of documents plus the cursor for the next slice."""
    documents: tuple[Document, ...] = ()
    cursor: Cursor = field(default=ZERO_CURSOR)

    def to_dict(self) -> dict:
        return {
            "documents": [d.to_dict() for d in self.documents],
            "cursor": self.cursor.to_dict(),
        }
