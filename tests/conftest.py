"""Root test configuration: content file builders shared by unit and integration tests"""

import pytest


def make_post(
    slug: str,
    created: str = "Jan 02, 2024",
    tags: str = None,
    body: str = "Body.\n",
    **extra: str,
    ) -> str:
    """Return the text of a content file with the required header fields."""
    lines = [f"slug={slug}", "author=Ada", f"title=Title of {slug}", f"created_date={created}"]
    if tags is not None:
        lines.append(f"tags={tags}")
    lines += [f"{k}={v}" for k, v in extra.items()]
    return "\n".join(lines) + "\n---\n" + body


@pytest.fixture(name="post_text")
def post_text_fixture():
    return make_post
