"""Fetch the full content of a single document."""

from outline_site.errors import UpstreamFetchError
from outline_site.models.document import DocumentContent
from outline_site.protocols import ApiProtocol

DOCUMENT_INFO_PATH = "documents.info"


def fetch_content(api: ApiProtocol, document_id: str) -> DocumentContent:
    """Fetch title, Markdown text, icon and update time for one document.

    Raises:
        UpstreamFetchError: If the call fails or the body has no data.
        MalformedDocumentError: If the document has no text.
    """
    path = DOCUMENT_INFO_PATH
    response = api.call(path, {"id": document_id})
    data = response.get("data")
    if data is None:
        msg = f"No data in response from {path!r} for document {document_id!r}"
        raise UpstreamFetchError(msg, path=path)
    return DocumentContent.from_api(data)
