"""Unit tests for core/collection.py"""

import pytest

from mdsite.core.collection import Collection, build_collection
from mdsite.errors import DuplicateSlug


def _slugs(docs):
    return [d.metadata.slug for d in docs]


@pytest.fixture(name="collection")
def collection_fixture(make_doc):
    """Four posts given out of order, two sharing the 'python' tag, one draft."""
    return build_collection([
        make_doc("middle", created="Mar 01, 2024", tags="python, web"),
        make_doc("oldest", created="Jan 01, 2023", tags="python"),
        make_doc("newest", created="Dec 25, 2024", tags="misc"),
        make_doc("draft", created="Jun 15, 2024", tags="web", draft="true"),
    ])


def test_sorted_newest_first(collection):
    """all_documents is ordered by created_date, descending."""
    assert _slugs(collection.all_documents) == ["newest", "draft", "middle", "oldest"]
    dates = [d.metadata.created_date for d in collection.all_documents]
    assert all(a > b for a, b in zip(dates, dates[1:]))


def test_neighbour_links_are_symmetric(collection):
    """Adjacent documents point at each other; the ends have no outer neighbour."""
    docs = collection.all_documents
    assert docs[0].metadata.newer_id is None
    assert docs[-1].metadata.older_id is None
    for i in range(len(docs) - 1):
        assert docs[i].metadata.older_id == i + 1
        assert docs[i + 1].metadata.newer_id == i


def test_newer_and_older_resolve_through_get(collection):
    middle = collection.get_by_slug("middle")
    assert collection.newer(middle).metadata.slug == "draft"
    assert collection.older(middle).metadata.slug == "oldest"
    assert collection.newer(collection.get(0)) is None
    assert collection.older(collection.get(3)) is None


def test_equal_dates_keep_input_order(make_doc):
    """Documents with the same created_date stay in discovery order."""
    docs = [make_doc(s, created="May 05, 2024") for s in ("first", "second", "third")]
    docs.insert(1, make_doc("later", created="May 06, 2024"))
    collection = build_collection(docs)
    assert _slugs(collection.all_documents) == ["later", "first", "second", "third"]


def test_by_slug_positions(collection):
    """by_slug maps every slug to its position in all_documents."""
    assert dict(collection.by_slug) == {"newest": 0, "draft": 1, "middle": 2, "oldest": 3}
    for slug, pos in collection.by_slug.items():
        assert collection.all_documents[pos].metadata.slug == slug


def test_by_tag_positions_in_document_order(collection):
    """by_tag lists positions in all_documents order."""
    assert collection.by_tag["python"] == (2, 3)
    assert collection.by_tag["web"] == (1, 2)
    assert collection.by_tag["misc"] == (0,)


def test_duplicate_slug_aborts_build(make_doc):
    """Two documents with the same slug fail the whole build, naming both paths."""
    docs = [
        make_doc("same", created="Jan 01, 2024", path="posts/a.md"),
        make_doc("same", created="Feb 01, 2024", path="posts/b.md"),
    ]
    with pytest.raises(DuplicateSlug) as exc:
        build_collection(docs)
    assert exc.value.slug == "same"
    # b.md is newer, so it is indexed first and a.md is the conflict
    assert exc.value.first_path == "posts/b.md"
    assert exc.value.second_path == "posts/a.md"
    assert "same" in str(exc.value)


@pytest.mark.parametrize("count", [0, 1])
def test_small_collections_have_no_links(make_doc, count):
    """Zero or one document builds without linking or error."""
    docs = [make_doc(f"p{i}") for i in range(count)]
    collection = build_collection(docs)
    assert len(collection) == count
    for doc in collection:
        assert doc.metadata.newer_id is None
        assert doc.metadata.older_id is None


def test_build_does_not_mutate_inputs(make_doc):
    """Linking produces new documents; the inputs keep empty links."""
    docs = [make_doc("a", created="Jan 01, 2024"), make_doc("b", created="Jan 02, 2024")]
    build_collection(docs)
    assert all(d.metadata.newer_id is None and d.metadata.older_id is None for d in docs)


def test_get_bounds_checked(collection):
    """get returns None for out-of-range or missing positions instead of raising."""
    assert collection.get(0).metadata.slug == "newest"
    assert collection.get(4) is None
    assert collection.get(-1) is None
    assert collection.get(None) is None


def test_get_by_slug_unknown(collection):
    assert collection.get_by_slug("missing") is None


def test_tags(collection):
    """tags() returns every tag that has at least one document."""
    assert collection.tags() == {"python", "web", "misc"}


def test_documents_for_tag(collection):
    assert _slugs(collection.documents_for_tag("python")) == ["middle", "oldest"]


def test_documents_for_unknown_tag_is_empty(collection):
    """An unknown tag yields an empty list, not an error."""
    assert collection.documents_for_tag("nope") == []


def test_empty_tag_is_indexed(make_doc):
    """A post without tags is indexed under the empty-string tag."""
    collection = build_collection([make_doc("untagged")])
    assert collection.tags() == {""}
    assert _slugs(collection.documents_for_tag("")) == ["untagged"]


def test_published_skips_drafts(collection):
    """published() drops drafts and honours the limit."""
    assert _slugs(collection.published()) == ["newest", "middle", "oldest"]
    assert _slugs(collection.published(2)) == ["newest", "middle"]
    assert collection.published(0) == []


def test_indices_are_read_only(collection):
    """The slug and tag indices cannot be modified after the build."""
    with pytest.raises(TypeError):
        collection.by_slug["x"] = 0
    with pytest.raises(TypeError):
        collection.by_tag["x"] = (0,)


def test_collection_is_frozen(collection):
    with pytest.raises(AttributeError):
        collection.all_documents = ()
    assert isinstance(collection, Collection)
