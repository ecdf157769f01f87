"""Test builders — valid domain objects with overridable fields."""

from docstore.core.domain_types import Document, DocumentId, Revision


def make_document(
    doc_id: str = "first-post",
    title: str = "First post",
    description: str = "An introduction",
    body: str = "Hello, world.",
    revision: int = 1,
    **fields,
) -> Document:
    return Document(
        id=DocumentId(doc_id),
        title=title,
        description=description,
        body=body,
        revision=Revision(revision),
        **fields,
    )
