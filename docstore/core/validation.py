"""Document Validation — declarative per-field rules, pure and stateless.

Invariants:
    - validate() is PURE: same document in, same messages out, no IO
    - Empty result means valid; messages follow DOCUMENT_RULES declaration order
    - A missing required field reports only "required", never its length rule too
    - Integer fields are range-checked so every value the store writes fits int64
    - No persisted-state checks (duplicate ids are the store's conditional write)

Design Decisions:
    - Rules as data (FieldRule tuples) rather than per-field functions: adding a field
      is one line and message wording stays uniform
"""

from dataclasses import dataclass

from docstore.core.domain_types import MAX_INT64, Document


MAX_SHORT_TEXT: int = 250
# an update writes revision + 1, which must still fit the int64 column
MAX_REVISION: int = MAX_INT64 - 1
MIN_REVISION: int = -(2**63)


@dataclass(frozen=True)
class FieldRule:
    field: str
    label: str
    required: bool = True
    max_length: int | None = None
    min_value: int | None = None
    max_value: int | None = None


DOCUMENT_RULES: tuple[FieldRule, ...] = (
    FieldRule("id", "The id", max_length=MAX_SHORT_TEXT),
    FieldRule("title", "The title", max_length=MAX_SHORT_TEXT),
    FieldRule("description", "The description", max_length=MAX_SHORT_TEXT),
    FieldRule("body", "The body"),
    FieldRule(
        "revision", "The revision",
        min_value=MIN_REVISION, max_value=MAX_REVISION,
    ),
)


def _is_missing(value: object) -> bool:
    match value:
        case None:
            return True
        case str():
            return not value.strip()
        case int():
            return value == 0
    return False


def check_field(rule: FieldRule, value: object) -> str | None:
    """Return the first violated message for one field, or None."""
    if rule.required and _is_missing(value):
        return f"{rule.label} is required."
    if (
        rule.max_length is not None
        and isinstance(value, str)
        and len(value) > rule.max_length
    ):
        return f"{rule.label} may have up to {rule.max_length} characters."
    if isinstance(value, int) and not isinstance(value, bool):
        if rule.min_value is not None and value < rule.min_value:
            return f"{rule.label} must be at least {rule.min_value}."
        if rule.max_value is not None and value > rule.max_value:
            return f"{rule.label} may be at most {rule.max_value}."
    return None


def validate(
    document: Document, rules: tuple[FieldRule, ...] = DOCUMENT_RULES,
) -> list[str]:
    """Check a document against field rules. Returns violated messages."""
    messages = []
    for rule in rules:
        message = check_field(rule, getattr(document, rule.field, None))
        if message:
            messages.append(message)
    return messages
