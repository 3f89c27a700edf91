"""Document data models shared by the parser, the collection builder and the renderers"""

import datetime
from typing import NewType, Optional

from pydantic import BaseModel, ConfigDict


Tag = NewType("Tag", str)


class DocumentMetadata(BaseModel):
    """Parsed header of one content file.

    newer_id / older_id are positions in Collection.all_documents and are only
    ever set by the collection builder.
    """
    model_config = ConfigDict(frozen=True)

    source_path:   str
    slug:          str
    author:        str
    title:         str
    blurb:         Optional[str] = None
    created_date:  datetime.date
    modified_date: Optional[datetime.date] = None
    is_draft:      bool = False
    tags:          tuple[Tag, ...] = ()
    newer_id:      Optional[int] = None
    older_id:      Optional[int] = None


class Document(BaseModel):
    """Metadata plus the rendered HTML body."""
    model_config = ConfigDict(frozen=True)

    metadata:  DocumentMetadata
    body_html: str

    def with_links(self, newer_id: Optional[int], older_id: Optional[int]) -> "Document":
        """Return a copy whose metadata points at its chronological neighbours."""
        meta = self.metadata.model_copy(update={"newer_id": newer_id, "older_id": older_id})
        return self.model_copy(update={"metadata": meta})
