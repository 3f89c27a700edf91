"""Site output: static asset copying and Jinja2 page rendering"""

import logging
import shutil
from pathlib import Path
from typing import Callable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from mdsite.core.collection import Collection
from mdsite.core.models import Document
from mdsite.core.parse import discover_files
from mdsite.core.utils.dates import format_date
from mdsite.errors import TemplateMissing, UnsafeOutputPath


logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = '.template.html'
INDEX_TEMPLATE = 'index' + TEMPLATE_SUFFIX
POST_TEMPLATE = 'post' + TEMPLATE_SUFFIX
TAG_TEMPLATE = 'tag' + TEMPLATE_SUFFIX


def copy_static(src: Path, dest: Path) -> list[Path]:
    """Mirror every file under src into dest. A missing src is skipped."""
    if not src.is_dir():
        logger.info("Not copying static files - %s does not exist.", src)
        return []

    copied = []
    for path in discover_files(src):
        target = dest / path.relative_to(src)
        target.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Copying %s to %s", path, target)
        shutil.copy2(path, target)
        copied.append(target)
    return copied


def make_environment(templates_dir: Path) -> Environment:
    """Jinja2 environment over templates_dir with HTML autoescaping and date formatting."""
    env = Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(['html']),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters['format_date'] = format_date
    return env


def _write(env: Environment, name: str, out_file: Path, **context) -> Path:
    """Render template name with context into out_file."""
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(env.get_template(name).render(**context), encoding='utf-8')
    return out_file


def _nearest_published(doc: Document, step: Callable[[Document], Optional[Document]]) -> Optional[Document]:
    """Follow step from doc until a non-draft document or the end of the collection."""
    nxt = step(doc)
    while nxt is not None and nxt.metadata.is_draft:
        nxt = step(nxt)
    return nxt


def _page_dir(base: Path, name: str, kind: str, source_path: str) -> Path:
    """Return base / name, refusing any name that is not exactly one segment below base."""
    target = base / name
    if target.resolve().parent != base.resolve():
        raise UnsafeOutputPath(kind, name, source_path)
    return target


def render_site(collection: Collection, templates_dir: Path, out_dir: Path, landing_size: int = 5) -> list[Path]:
    """Render the landing page, optional post and tag pages, and any stand-alone pages.

    Returns the written paths.
    """
    if not (templates_dir / INDEX_TEMPLATE).is_file():
        raise TemplateMissing(INDEX_TEMPLATE, str(templates_dir))

    env = make_environment(templates_dir)
    names = sorted(p.name for p in templates_dir.glob('*' + TEMPLATE_SUFFIX))

    # Resolve every page directory before writing so a bad slug or tag leaves out_dir untouched.
    post_pages = []
    if POST_TEMPLATE in names:
        for doc in collection.published():
            meta = doc.metadata
            post_pages.append((doc, _page_dir(out_dir / 'posts', meta.slug, 'slug', meta.source_path)))
    tag_pages = []
    if TAG_TEMPLATE in names:
        for tag in sorted(collection.tags()):
            posts = [d for d in collection.documents_for_tag(tag) if not d.metadata.is_draft]
            if not tag or not posts:
                continue
            tag_pages.append((tag, posts, _page_dir(out_dir / 'tags', tag, 'tag', posts[0].metadata.source_path)))

    written = []
    logger.info("Writing landing page")
    written.append(_write(env, INDEX_TEMPLATE, out_dir / 'index.html',
                          posts=collection.published(landing_size)))

    for doc, page_dir in post_pages:
        logger.info("Writing post page for %s", doc.metadata.slug)
        written.append(_write(
            env, POST_TEMPLATE, page_dir / 'index.html',
            post=doc,
            newer=_nearest_published(doc, collection.newer),
            older=_nearest_published(doc, collection.older),
        ))

    for tag, posts, page_dir in tag_pages:
        logger.info("Writing tag page for %s", tag)
        written.append(_write(env, TAG_TEMPLATE, page_dir / 'index.html', tag=tag, posts=posts))

    for name in names:
        if name in (INDEX_TEMPLATE, POST_TEMPLATE, TAG_TEMPLATE):
            continue
        page = name[:-len(TEMPLATE_SUFFIX)] + '.html'
        logger.info("Writing %s", page)
        written.append(_write(env, name, out_dir / page))

    return written
