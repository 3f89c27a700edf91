"""Fixtures for integration tests: an on-disk input tree"""

import pytest


INDEX_TEMPLATE = "{% for p in posts %}{{ p.metadata.slug }}\n{% endfor %}"
POST_TEMPLATE = "<h1>{{ post.metadata.title }}</h1>{{ post.body_html | safe }}"


@pytest.fixture(name="site")
def site_fixture(tmp_path, post_text):
    """in/ with two posts, one draft, a stylesheet and index/post templates."""
    root = tmp_path / "in"
    posts = root / "posts"
    (posts / "2024").mkdir(parents=True)
    (posts / "first.md").write_text(post_text("first", created="Jan 02, 2024", tags="intro", body="# Hi\n"))
    (posts / "2024" / "second.md").write_text(post_text("second", created="Mar 10, 2024", tags="intro, rust"))
    (posts / "wip.md").write_text(post_text("wip", created="Apr 01, 2024", draft="true"))
    (root / "static").mkdir()
    (root / "static" / "site.css").write_text("body {}")
    (root / "templates").mkdir()
    (root / "templates" / "index.template.html").write_text(INDEX_TEMPLATE)
    (root / "templates" / "post.template.html").write_text(POST_TEMPLATE)
    return root
