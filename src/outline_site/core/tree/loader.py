"""Fetch a collection's document tree from Outline."""

from typing import Any

from loguru import logger

from outline_site.errors import UpstreamFetchError
from outline_site.models.document import DocumentNode
from outline_site.protocols import ApiProtocol

COLLECTION_DOCUMENTS_PATH = "collections.documents"


def _extract_data(response: dict[str, Any], path: str) -> Any:
    data = response.get("data")
    if data is None:
        msg = f"No data in response from {path!r}"
        raise UpstreamFetchError(msg, path=path)
    return data


def fetch_document_tree(api: ApiProtocol, collection_id: str) -> tuple[DocumentNode, ...]:
    """Fetch the nested document tree of one collection.

    Raises:
        UpstreamFetchError: If the call fails or the body has no tree.
        MalformedDocumentError: If a node lacks id, url or title.
    """
    path = COLLECTION_DOCUMENTS_PATH
    data = _extract_data(api.call(path, {"id": collection_id}), path)
    if not isinstance(data, list):
        msg = f"Expected a list of documents from {path!r}, got {type(data).__name__}"
        raise UpstreamFetchError(msg, path=path)

    roots = tuple(DocumentNode.from_api(node) for node in data)
    logger.debug("Fetched {} top-level documents for collection {}", len(roots), collection_id)
    return roots
