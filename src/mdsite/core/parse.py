"""File discovery and key=value header parsing for content files"""

import io
import logging
from pathlib import Path
from typing import Optional, TextIO

from mdsite.core.models import DocumentMetadata, Tag
from mdsite.core.utils.dates import parse_date
from mdsite.errors import (
    DateFormatError,
    InvalidCreatedDate,
    InvalidModifiedDate,
    MalformedLineError,
    MissingFieldError,
)


logger = logging.getLogger(__name__)

HEADER_END = '---'
REQUIRED_FIELDS = ('slug', 'author', 'title', 'created_date')
BOOL_TOKENS = {'true': True, 'false': False}


def discover_files(path: Path) -> list[Path]:
    """Return sorted regular files under path (dot-files skipped), or [path] if a single file."""
    if path.is_file():
        return [path]
    if not path.is_dir():
        return []
    return sorted(
        p for p in path.rglob('*')
        if p.is_file() and not any(part.startswith('.') for part in p.relative_to(path).parts)
    )


def parse_bool(value: str) -> Optional[bool]:
    """Return True/False for a recognised boolean token, else None."""
    return BOOL_TOKENS.get(value)


def split_tags(raw: str) -> tuple[Tag, ...]:
    """Split a comma-separated tag string, trimming each piece. Empty pieces are kept."""
    return tuple(Tag(piece.strip()) for piece in raw.split(','))


def read_header(stream: TextIO, source_path: str) -> dict[str, str]:
    """Consume header lines up to and including '---'; return the key/value mapping.

    Blank lines and lines starting with '#' are skipped. Keys are used verbatim,
    values are trimmed, and a repeated key overwrites the earlier value.
    """
    fields: dict[str, str] = {}
    for raw in iter(stream.readline, ''):
        line = raw.rstrip('\r\n')
        if line == HEADER_END:
            break
        if not line.strip() or line.startswith('#'):
            continue
        key, sep, value = line.partition('=')
        if not sep:
            raise MalformedLineError(line, source_path)
        if key in fields:
            logger.debug("%s: header key %r repeated, keeping last value", source_path, key)
        fields[key] = value.strip()
    return fields


def _require(fields: dict[str, str], key: str, source_path: str) -> str:
    try:
        return fields[key]
    except KeyError:
        raise MissingFieldError(key, source_path) from None


def metadata_from_fields(fields: dict[str, str], source_path: str) -> DocumentMetadata:
    """Validate a raw header mapping and convert it to DocumentMetadata."""
    slug, author, title, created = (_require(fields, k, source_path) for k in REQUIRED_FIELDS)

    try:
        created_date = parse_date(created)
    except DateFormatError as e:
        raise InvalidCreatedDate(created, source_path) from e

    modified_date = None
    if 'modified_date' in fields:
        try:
            modified_date = parse_date(fields['modified_date'])
        except DateFormatError as e:
            raise InvalidModifiedDate(fields['modified_date'], source_path) from e

    is_draft = False
    if 'draft' in fields:
        draft = parse_bool(fields['draft'])
        if draft is None:
            logger.debug("%s: unrecognised draft value %r, treating as false", source_path, fields['draft'])
        is_draft = bool(draft)

    return DocumentMetadata(
        source_path=source_path,
        slug=slug,
        author=author,
        title=title,
        blurb=fields.get('description'),
        created_date=created_date,
        modified_date=modified_date,
        is_draft=is_draft,
        tags=split_tags(fields.get('tags', '')),
    )


def parse_metadata(stream: TextIO, source_path: str) -> tuple[DocumentMetadata, str]:
    """Parse the header of an open content stream. Returns (metadata, unconsumed body text)."""
    fields = read_header(stream, source_path)
    return metadata_from_fields(fields, source_path), stream.read()


def parse_text(text: str, source_path: str) -> tuple[DocumentMetadata, str]:
    """parse_metadata over an in-memory string."""
    return parse_metadata(io.StringIO(text), source_path)
