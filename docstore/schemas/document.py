"""Document Schemas — camelCase wire shape of a document.

Invariants:
    - Every field is optional on the wire: missing values default to empty/zero so
      core validation reports them with its own messages
    - Wrong JSON types fail here and surface as 400; revision is strict, so even a
      numeric string such as "5" is rejected rather than coerced
    - creationTimestamp / updateTimestamp are accepted but discarded: the server assigns them
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from docstore.core.domain_types import Document, DocumentId, Revision


class DocumentPayload(BaseModel):
    """Inbound document for create and update."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )

    id: str = ""
    title: str = ""
    description: str = ""
    body: str = ""
    revision: int = Field(0, strict=True)
    creation_timestamp: int = 0
    update_timestamp: int = 0

    def to_document(self) -> Document:
        return Document(
            id=DocumentId(self.id),
            title=self.title,
            description=self.description,
            body=self.body,
            revision=Revision(self.revision),
        )
