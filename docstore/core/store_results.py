"""Store Results — tagged outcomes returned by every DocumentStore call.

Invariants:
    - A store call returns exactly one of Ok, ConditionFailed or StoreFailure; it never raises
    - ConditionFailed is produced only by conditional writes (create, update)
    - StoreFailure.cause is for logs only and is never rendered to a caller

Design Decisions:
    - Variants as frozen dataclasses dispatched with `match`: call sites branch on the
      variant instead of inspecting driver-specific error codes
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from docstore.core.domain_types import Document

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """The store call succeeded."""
    value: T


@dataclass(frozen=True)
class ConditionFailed:
    """A conditional write's precondition (absence or revision match) did not hold."""


@dataclass(frozen=True)
class StoreFailure:
    """Any other store error — transient or unexpected."""
    cause: BaseException | None = None

    def describe(self) -> str:
        if self.cause is None:
            return "unknown store failure"
        return f"{type(self.cause).__name__}: {self.cause}"


WriteResult = Ok[Document] | ConditionFailed | StoreFailure
LookupResult = Ok[Document | None] | StoreFailure
DeleteResult = Ok[bool] | StoreFailure
ScanResult = Ok[list[Document]] | StoreFailure
