"""Flatten a document tree into a path-keyed index."""

from collections.abc import Sequence

from outline_site.models.document import DocumentNode, PathIndex, PathIndexEntry


def build_path_index(
    roots: Sequence[DocumentNode],
    *,
    visit_all_siblings: bool = False,
) -> PathIndex:
    """Map public paths (``/Parent/Child``) to their documents.

    Paths are the ``/``-joined chain of titles from the collection root. When a
    path repeats, the later node wins. Insertion order is traversal order.

    By default the walk stops at the first node of a level that has children:
    it registers the siblings before it and the node itself, descends, and then
    returns all the way up without visiting anything further. Pages published
    this way are the reachable set of the live site. Pass
    ``visit_all_siblings=True`` for a full depth-first walk.
    """
    index: PathIndex = {}
    _walk(roots, "/", index, visit_all_siblings=visit_all_siblings)
    return index


def _walk(
    nodes: Sequence[DocumentNode],
    prefix: str,
    index: PathIndex,
    *,
    visit_all_siblings: bool,
) -> None:
    for node in nodes:
        index[f"{prefix}{node.title}"] = PathIndexEntry.from_node(node)

        if node.children:
            _walk(node.children, f"{prefix}{node.title}/", index, visit_all_siblings=visit_all_siblings)
            if not visit_all_siblings:
                return
