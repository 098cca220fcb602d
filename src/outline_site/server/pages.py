"""Page outcomes and their conversion into HTTP responses.

Everything here is pure: the request pipeline decides which page to show, and
these helpers turn that decision into an immutable response.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from loguru import logger

from outline_site.core.icons import ERROR_ICON, NOT_FOUND_ICON, Icons, classify_icon
from outline_site.models.document import DocumentContent
from outline_site.render import PageTemplate

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

NOT_FOUND_HTML = "<p>Page not found.</p>"
ERROR_HTML = (
    "<p>Something went wrong, and the server failed to render the page.</p><p>Womp womp.</p>"
)
# Served when even the error page cannot be rendered.
ERROR_TEXT = "Something went wrong, and the server failed to render the page."


@dataclass(frozen=True)
class Page:
    """What to show for a request, before templating."""

    status: int
    title: str
    html: str
    icons: Icons
    updated_at: str | None = None


@dataclass(frozen=True)
class PageResponse:
    status: int
    body: str
    content_type: str = HTML_CONTENT_TYPE

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": self.content_type}


def document_page(site_title: str, path: str, content: DocumentContent, html: str) -> Page:
    return Page(
        status=200,
        title=f"{site_title}{path}",
        html=html,
        icons=classify_icon(content.icon),
        updated_at=content.updated_at,
    )


def not_found_page(
    site_title: str,
    path: str,
    content: DocumentContent | None = None,
    html: str | None = None,
) -> Page:
    """404 page, from the collection's ``/404`` document when there is one."""
    icons = classify_icon(NOT_FOUND_ICON)
    if content is None or html is None:
        return Page(status=404, title=f"{site_title}/404", html=NOT_FOUND_HTML, icons=icons)
    return Page(
        status=404,
        title=f"{site_title}{path}",
        html=html,
        icons=icons,
        updated_at=content.updated_at,
    )


def error_page(site_title: str) -> Page:
    return Page(
        status=500,
        title=f"{site_title}/500",
        html=ERROR_HTML,
        icons=classify_icon(ERROR_ICON),
    )


def page_context(page: Page, *, render_time_ms: int, now: datetime | None = None) -> dict[str, Any]:
    """Template variables for a page. Absent values are left out entirely."""
    context: dict[str, Any] = {
        "title": page.title,
        "html": page.html,
        "favicon": page.icons.favicon,
        "renderTime": render_time_ms,
        "now": (now or datetime.now(UTC)).isoformat(),
    }
    if page.icons.emoji is not None:
        context["emoji"] = page.icons.emoji
    if page.updated_at is not None:
        context["updatedAt"] = page.updated_at
    return context


def to_response(
    template: PageTemplate,
    page: Page,
    *,
    render_time_ms: int,
    now: datetime | None = None,
) -> PageResponse:
    """Render ``page`` through the template.

    A template failure turns into a plain-text 500 rather than an exception.
    """
    try:
        body = template.render(page_context(page, render_time_ms=render_time_ms, now=now))
    except Exception:
        logger.exception("Template {} failed to render page {!r}", template.name, page.title)
        return PageResponse(status=500, body=ERROR_TEXT, content_type=TEXT_CONTENT_TYPE)
    return PageResponse(status=page.status, body=body)
