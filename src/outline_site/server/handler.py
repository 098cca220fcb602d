"""Per-request pipeline: tree fetch, path lookup, content fetch, render."""

import asyncio
import time
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

from loguru import logger

from outline_site.config import Settings
from outline_site.core.content import fetch_content
from outline_site.core.links import rewrite_links
from outline_site.core.tree.loader import fetch_document_tree
from outline_site.core.tree.path_index import build_path_index
from outline_site.models.document import DocumentContent, PathIndex
from outline_site.protocols import ApiProtocol
from outline_site.render import PageTemplate, markdown_to_html
from outline_site.server.pages import (
    Page,
    PageResponse,
    document_page,
    error_page,
    not_found_page,
    to_response,
)

INDEX_PATH = "/index"
NOT_FOUND_PATH = "/404"


@dataclass(frozen=True)
class SiteContext:
    """Collaborators shared by all requests. Holds no per-request state."""

    settings: Settings
    api: ApiProtocol
    template: PageTemplate


def resolve_request_path(target: str) -> str:
    """Turn a request target into an index key.

    The query string and fragment are dropped and percent-escapes decoded.
    The site root maps to ``/index``.
    """
    path = unquote(urlsplit(target).path)
    if path in ("", "/"):
        return INDEX_PATH
    return path


def render_document_html(ctx: SiteContext, index: PathIndex, content: DocumentContent) -> str:
    html = markdown_to_html(content.text)
    return rewrite_links(
        index,
        html,
        source_base=ctx.settings.api_host,
        site_base=ctx.settings.website_url,
    )


async def build_page(ctx: SiteContext, path: str) -> Page:
    """Decide what to show for ``path``. Upstream failures propagate."""
    site_title = ctx.settings.site_title

    roots = await asyncio.to_thread(fetch_document_tree, ctx.api, ctx.settings.collection_id)
    index = build_path_index(roots)

    entry = index.get(path)
    if entry is not None:
        content = await asyncio.to_thread(fetch_content, ctx.api, entry.id)
        return document_page(site_title, path, content, render_document_html(ctx, index, content))

    not_found_entry = index.get(NOT_FOUND_PATH)
    if not_found_entry is None:
        return not_found_page(site_title, path)

    content = await asyncio.to_thread(fetch_content, ctx.api, not_found_entry.id)
    return not_found_page(site_title, path, content, render_document_html(ctx, index, content))


async def handle_request(ctx: SiteContext, target: str) -> PageResponse:
    """Run the whole pipeline for one request. Never raises."""
    start = time.monotonic()

    try:
        path = resolve_request_path(target)
        page = await build_page(ctx, path)
    except Exception:
        logger.exception("Failed to render {!r}", target)
        page = error_page(ctx.settings.site_title)

    render_time_ms = round((time.monotonic() - start) * 1000)
    response = to_response(ctx.template, page, render_time_ms=render_time_ms)
    logger.info("{} -> {} ({} ms)", target, response.status, render_time_ms)
    return response
