"""Tests for document models and their parsing."""

import pytest

from outline_site.errors import MalformedDocumentError
from outline_site.models.document import DocumentContent, DocumentNode, PathIndexEntry


def test_document_node_parses_nested_children() -> None:
    node = DocumentNode.from_api(
        {
            "id": "1",
            "url": "/doc/a",
            "title": "A",
            "icon": "📚",
            "children": [{"id": "2", "url": "/doc/b", "title": "B", "children": []}],
        }
    )

    assert node.title == "A"
    assert node.icon == "📚"
    assert node.children == (DocumentNode(id="2", url="/doc/b", title="B"),)


def test_document_node_children_default_to_empty() -> None:
    node = DocumentNode.from_api({"id": "1", "url": "/doc/a", "title": "A"})

    assert node.children == ()
    assert node.icon is None


def test_document_node_reads_legacy_emoji_field() -> None:
    node = DocumentNode.from_api({"id": "1", "url": "/doc/a", "title": "A", "emoji": "🌱"})

    assert node.icon == "🌱"


@pytest.mark.parametrize("missing", ["id", "url", "title"])
def test_document_node_missing_field_raises(missing: str) -> None:
    data = {"id": "1", "url": "/doc/a", "title": "A", "children": []}
    del data[missing]

    with pytest.raises(MalformedDocumentError, match=repr(missing)):
        DocumentNode.from_api(data)


def test_document_node_malformed_child_raises() -> None:
    """A bad node deep in the tree is reported, not skipped."""
    data = {
        "id": "1",
        "url": "/doc/a",
        "title": "A",
        "children": [{"id": "2", "url": "/doc/b"}],
    }

    with pytest.raises(MalformedDocumentError, match="'title'"):
        DocumentNode.from_api(data)


def test_document_node_rejects_non_list_children() -> None:
    with pytest.raises(MalformedDocumentError, match="non-list children"):
        DocumentNode.from_api({"id": "1", "url": "/doc/a", "title": "A", "children": "x"})


def test_path_index_entry_drops_children() -> None:
    node = DocumentNode(
        id="1", url="/doc/a", title="A", icon="🔥", children=(DocumentNode("2", "/doc/b", "B"),)
    )

    assert PathIndexEntry.from_node(node) == PathIndexEntry(
        id="1", title="A", url="/doc/a", icon="🔥"
    )


def test_document_content_parses_fields() -> None:
    content = DocumentContent.from_api(
        {"title": "T", "text": "# hi", "icon": "🔥", "updatedAt": "2024-01-01T00:00:00Z"}
    )

    assert content == DocumentContent(
        title="T", text="# hi", icon="🔥", updated_at="2024-01-01T00:00:00Z"
    )


def test_document_content_requires_text() -> None:
    with pytest.raises(MalformedDocumentError, match="'text'"):
        DocumentContent.from_api({"title": "T"})
