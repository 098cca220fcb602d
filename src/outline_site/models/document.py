"""Domain models for Outline documents."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from outline_site.errors import MalformedDocumentError


def _require_str(data: Mapping[str, Any], key: str, kind: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        msg = f"{kind} is missing string field {key!r}: {dict(data)!r:.120}"
        raise MalformedDocumentError(msg)
    return value


def _optional_icon(data: Mapping[str, Any]) -> str | None:
    # Older Outline versions call the field "emoji".
    icon = data.get("icon", data.get("emoji"))
    return icon if isinstance(icon, str) else None


@dataclass(frozen=True)
class DocumentNode:
    """One node of a collection's document tree."""

    id: str
    url: str
    title: str
    icon: str | None = None
    children: tuple["DocumentNode", ...] = ()

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "DocumentNode":
        """Parse a node (and its subtree) from collections.documents JSON."""
        if not isinstance(data, Mapping):
            msg = f"Document node must be an object, got {type(data).__name__}"
            raise MalformedDocumentError(msg)

        raw_children = data.get("children", [])
        if not isinstance(raw_children, list):
            msg = f"Document node {data.get('id')!r} has non-list children"
            raise MalformedDocumentError(msg)

        return cls(
            id=_require_str(data, "id", "Document node"),
            url=_require_str(data, "url", "Document node"),
            title=_require_str(data, "title", "Document node"),
            icon=_optional_icon(data),
            children=tuple(cls.from_api(child) for child in raw_children),
        )


@dataclass(frozen=True)
class PathIndexEntry:
    """A tree node flattened for path lookup, without its children."""

    id: str
    title: str
    url: str
    icon: str | None = None

    @classmethod
    def from_node(cls, node: DocumentNode) -> "PathIndexEntry":
        return cls(id=node.id, title=node.title, url=node.url, icon=node.icon)


@dataclass(frozen=True)
class DocumentContent:
    """Full content of one document, fetched per page render."""

    title: str
    text: str
    icon: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "DocumentContent":
        """Parse documents.info JSON."""
        if not isinstance(data, Mapping):
            msg = f"Document content must be an object, got {type(data).__name__}"
            raise MalformedDocumentError(msg)

        updated_at = data.get("updatedAt")
        return cls(
            title=data.get("title") or "",
            text=_require_str(data, "text", "Document content"),
            icon=_optional_icon(data),
            updated_at=updated_at if isinstance(updated_at, str) else None,
        )


PathIndex = dict[str, PathIndexEntry]
