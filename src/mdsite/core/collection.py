"""Collection building: chronological ordering, neighbour links, slug and tag indices"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence

from mdsite.core.models import Document, Tag
from mdsite.errors import DuplicateSlug


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Collection:
    """Read-only document index, newest first.

    by_slug maps a slug to its position in all_documents; by_tag maps a tag to
    the positions of its documents, in all_documents order. Tags with no
    documents never appear in by_tag.
    """
    all_documents: tuple[Document, ...]
    by_slug:       Mapping[str, int]
    by_tag:        Mapping[Tag, tuple[int, ...]]

    def __len__(self) -> int:
        return len(self.all_documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.all_documents)

    def get(self, position: Optional[int]) -> Optional[Document]:
        """Bounds-checked lookup; None for a missing or out-of-range position."""
        if position is None or not 0 <= position < len(self.all_documents):
            return None
        return self.all_documents[position]

    def get_by_slug(self, slug: str) -> Optional[Document]:
        return self.get(self.by_slug.get(slug))

    def newer(self, document: Document) -> Optional[Document]:
        return self.get(document.metadata.newer_id)

    def older(self, document: Document) -> Optional[Document]:
        return self.get(document.metadata.older_id)

    def tags(self) -> frozenset[Tag]:
        return frozenset(self.by_tag)

    def documents_for_tag(self, tag: Tag) -> list[Document]:
        """Documents carrying tag, newest first; empty when the tag is unknown."""
        return [self.all_documents[i] for i in self.by_tag.get(tag, ())]

    def published(self, limit: Optional[int] = None) -> list[Document]:
        """Non-draft documents, newest first, optionally capped at limit."""
        docs = [d for d in self.all_documents if not d.metadata.is_draft]
        return docs if limit is None else docs[:limit]


def _link(documents: Sequence[Document]) -> list[Document]:
    """Set newer_id / older_id on each document from its position in the sorted sequence."""
    last = len(documents) - 1
    return [
        doc.with_links(
            newer_id=i - 1 if i > 0 else None,
            older_id=i + 1 if i < last else None,
        )
        for i, doc in enumerate(documents)
    ]


def build_collection(documents: Sequence[Document]) -> Collection:
    """Sort newest first (stable), link neighbours, and index by slug and tag.

    Raises DuplicateSlug if two documents share a slug; no collection is returned.
    """
    logger.info("Building post database from %d document(s)", len(documents))
    ordered = sorted(documents, key=lambda d: d.metadata.created_date, reverse=True)
    linked = _link(ordered)

    by_slug: dict[str, int] = {}
    by_tag: dict[Tag, list[int]] = {}
    for position, doc in enumerate(linked):
        meta = doc.metadata
        if meta.slug in by_slug:
            first = linked[by_slug[meta.slug]].metadata.source_path
            raise DuplicateSlug(meta.slug, first, meta.source_path)
        by_slug[meta.slug] = position
        for tag in meta.tags:
            by_tag.setdefault(tag, []).append(position)

    return Collection(
        all_documents=tuple(linked),
        by_slug=MappingProxyType(by_slug),
        by_tag=MappingProxyType({tag: tuple(ids) for tag, ids in by_tag.items()}),
    )
