"""Document Validation — tests for declarative per-field rules.

Tests cover:
    - A complete document is valid
    - An empty document reports every required field, in declaration order
    - Whitespace-only strings count as missing
    - Length limits apply to id/title/description, not body
    - A missing field never reports its length rule as well
    - Revisions outside int64 (or whose successor is) are rejected
"""

from docstore.core.domain_types import Document, DocumentId
from docstore.core.validation import (
    DOCUMENT_RULES, MAX_REVISION, MAX_SHORT_TEXT, MIN_REVISION, FieldRule,
    check_field, validate,
)

from tests.builders import make_document


def test_valid_document_has_no_messages():
    assert validate(make_document()) == []


def test_empty_document_reports_every_required_field():
    messages = validate(Document(id=DocumentId("")))
    assert messages == [
        "The id is required.",
        "The title is required.",
        "The description is required.",
        "The body is required.",
        "The revision is required.",
    ]


def test_whitespace_only_title_is_missing():
    messages = validate(make_document(title="   \t"))
    assert messages == ["The title is required."]


def test_zero_revision_is_missing():
    assert validate(make_document(revision=0)) == ["The revision is required."]


def test_title_at_limit_is_valid():
    assert validate(make_document(title="t" * MAX_SHORT_TEXT)) == []


def test_title_over_limit_is_rejected():
    messages = validate(make_document(title="t" * (MAX_SHORT_TEXT + 1)))
    assert messages == ["The title may have up to 250 characters."]


def test_id_and_description_over_limit_both_reported():
    messages = validate(make_document(
        doc_id="i" * 251, description="d" * 251,
    ))
    assert messages == [
        "The id may have up to 250 characters.",
        "The description may have up to 250 characters.",
    ]


def test_body_has_no_length_limit():
    assert validate(make_document(body="b" * 100_000)) == []


def test_check_field_optional_rule_allows_missing():
    rule = FieldRule("title", "The title", required=False, max_length=3)
    assert check_field(rule, "") is None
    assert check_field(rule, "abcd") == "The title may have up to 3 characters."


def test_rules_cover_every_caller_supplied_field():
    assert [r.field for r in DOCUMENT_RULES] == [
        "id", "title", "description", "body", "revision",
    ]


def test_largest_updatable_revision_is_valid():
    assert validate(make_document(revision=MAX_REVISION)) == []


def test_revision_whose_successor_overflows_int64_is_rejected():
    assert validate(make_document(revision=2**63 - 1)) == [
        f"The revision may be at most {MAX_REVISION}.",
    ]
    assert validate(make_document(revision=2**63)) == [
        f"The revision may be at most {MAX_REVISION}.",
    ]


def test_revision_below_int64_is_rejected():
    assert validate(make_document(revision=MIN_REVISION - 1)) == [
        f"The revision must be at least {MIN_REVISION}.",
    ]
