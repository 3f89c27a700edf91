"""Shared fixtures for core unit tests"""

import pytest

from mdsite.core.assemble import read_document


HELLO_WORLD = """\
slug=hello-world
author=Ada
title=Hello World
created_date=Jan 02, 2024
tags=intro
---
# Hi
"""


def stub_render(text: str) -> str:
    """Stand-in markdown renderer: wraps the stripped text so tests can see it was called."""
    return f"<rendered>{text.strip()}</rendered>"


@pytest.fixture(name="render")
def render_fixture():
    return stub_render


@pytest.fixture(name="make_doc")
def make_doc_fixture(post_text):
    """Build a Document from header fields using the stub renderer."""
    def _make(slug, created="Jan 02, 2024", tags=None, path=None, **extra):
        text = post_text(slug, created=created, tags=tags, **extra)
        return read_document(path or f"posts/{slug}.md", text, stub_render)
    return _make


@pytest.fixture(name="hello_world")
def hello_world_fixture():
    return HELLO_WORLD
