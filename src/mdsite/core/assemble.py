"""Combine parsed metadata with a rendered body into a Document"""

from mdsite.core.markdown import Renderer, render_markdown
from mdsite.core.models import Document, DocumentMetadata
from mdsite.core.parse import parse_text
from mdsite.errors import DocumentError


def assemble_document(metadata: DocumentMetadata, body: str, render: Renderer = render_markdown) -> Document:
    """Render body once and pair it with metadata."""
    return Document(metadata=metadata, body_html=render(body))


def read_document(source_path: str, text: str, render: Renderer = render_markdown) -> Document:
    """Parse and render one content file; any failure is wrapped in DocumentError naming source_path."""
    try:
        metadata, body = parse_text(text, source_path)
        return assemble_document(metadata, body, render)
    except Exception as e:
        raise DocumentError(source_path, e) from e
