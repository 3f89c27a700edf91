"""CLI command implementations"""

import logging
from typing import Annotated, Optional

import typer
from jinja2 import TemplateError

from mdsite.config import Settings, load_config
from mdsite.core.collection import Collection
from mdsite.core.pipeline import load_collection, run_build
from mdsite.core.utils.dates import format_date
from mdsite.errors import SiteError


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _collection(settings: Settings) -> Collection:
    try:
        return load_collection(settings)
    except SiteError as e:
        _fail("Building post database failed", e)


Verbose = Annotated[bool, typer.Option("--verbose", "-v", help="Log per-document detail")]
InDir = Annotated[Optional[str], typer.Option("--in-dir", help="Input directory (posts/, static/, templates/)")]


def build_cmd(
    in_dir: InDir = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    landing: Annotated[Optional[int], typer.Option("--landing-size", help="Posts shown on the landing page")] = None,
    verbose: Verbose = False,
    ):
    """Copy static assets, index every post, and render the site."""
    _setup_logging(verbose)
    settings = _settings(overrides={
        "input_dir": in_dir, "output_dir": out, "parser_config": parser, "landing_size": landing,
    })
    try:
        result = run_build(settings)
    except (SiteError, TemplateError, OSError) as e:
        _fail("Build failed", e)

    for path in result.written:
        typer.echo(f"  {path}")
    typer.echo(
        f"Built {len(result.collection)} post(s), "
        f"wrote {len(result.written)} file(s) to {settings.output_dir}/"
    )


def list_cmd(
    in_dir: InDir = None,
    drafts: Annotated[bool, typer.Option("--drafts", help="Include draft posts")] = False,
    verbose: Verbose = False,
    ):
    """List posts newest first with their dates and tags."""
    _setup_logging(verbose)
    collection = _collection(_settings(overrides={"input_dir": in_dir}))
    docs = collection.all_documents if drafts else collection.published()
    if not docs:
        typer.echo("No posts found.")
        raise typer.Exit(1)
    for doc in docs:
        meta = doc.metadata
        flag = " [draft]" if meta.is_draft else ""
        tags = ", ".join(t for t in meta.tags if t)
        typer.echo(f"{format_date(meta.created_date)}  {meta.slug}{flag}  ({tags})")


def tags_cmd(
    in_dir: InDir = None,
    verbose: Verbose = False,
    ):
    """List every tag with the number of posts carrying it."""
    _setup_logging(verbose)
    collection = _collection(_settings(overrides={"input_dir": in_dir}))
    tags = sorted(t for t in collection.tags() if t)
    if not tags:
        typer.echo("No tags found.")
        raise typer.Exit(1)
    for tag in tags:
        typer.echo(f"{tag}\t{len(collection.documents_for_tag(tag))}")
