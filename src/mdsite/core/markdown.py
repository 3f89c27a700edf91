"""Markdown-to-HTML rendering via markdown-it"""

from functools import lru_cache
from typing import Callable

from markdown_it import MarkdownIt


Renderer = Callable[[str], str]

DEFAULT_PRESET = 'commonmark'


@lru_cache(maxsize=None)
def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    try:
        return MarkdownIt(preset, options_update={"linkify": False})
    except KeyError as e:
        raise ValueError(f"Unknown markdown-it preset {preset!r}") from e


def make_renderer(preset: str = DEFAULT_PRESET) -> Renderer:
    """Return a pure text -> HTML function for the given preset."""
    parser = _make_parser(preset)
    return parser.render


def render_markdown(text: str) -> str:
    """Render markdown text to HTML with the default preset."""
    return _make_parser(DEFAULT_PRESET).render(text)
