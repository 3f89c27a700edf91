"""Pipeline step functions: read content, build the collection, write the site"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from mdsite.config import Settings
from mdsite.core.assemble import read_document
from mdsite.core.collection import Collection, build_collection
from mdsite.core.export import copy_static, render_site
from mdsite.core.markdown import Renderer, make_renderer, render_markdown
from mdsite.core.models import Document
from mdsite.core.parse import discover_files
from mdsite.errors import DocumentError


logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    collection: Collection
    written: list[Path] = field(default_factory=list)


def read_inputs(posts_dir: Path) -> list[tuple[str, str]]:
    """Return (path, text) pairs for every content file under posts_dir, in discovery order."""
    inputs = []
    for p in discover_files(posts_dir):
        try:
            inputs.append((str(p), p.read_text(encoding='utf-8')))
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentError(str(p), e) from e
    return inputs


def load_documents(inputs: Iterable[tuple[str, str]], render: Renderer = render_markdown) -> list[Document]:
    """Parse every (path, text) pair; the first failure aborts with DocumentError."""
    documents = []
    for path, text in inputs:
        logger.info("Parsing post at %s", path)
        documents.append(read_document(path, text, render))
    return documents


def load_collection(settings: Settings) -> Collection:
    """Read, parse and index every content file named by settings."""
    render = make_renderer(settings.parser_config)
    return build_collection(load_documents(read_inputs(settings.posts_dir), render))


def run_build(settings: Settings) -> BuildResult:
    """Full build: copy static assets, build the collection, render pages."""
    output_dir = Path(settings.output_dir)
    logger.info("In: %s  Out: %s", settings.input_dir, output_dir)

    written = copy_static(settings.static_dir, output_dir / settings.static_subdir)
    collection = load_collection(settings)
    written += render_site(collection, settings.templates_dir, output_dir, settings.landing_size)
    return BuildResult(collection=collection, written=written)
