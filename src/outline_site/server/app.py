"""FastAPI application serving the wiki."""

from fastapi import FastAPI, Request, Response

from outline_site.api import OutlineApi
from outline_site.config import Settings
from outline_site.protocols import ApiProtocol
from outline_site.render import PageTemplate
from outline_site.server.handler import SiteContext, handle_request


def _request_target(request: Request) -> str:
    # raw_path keeps percent-escapes intact; fall back to the decoded path.
    raw_path: bytes | None = request.scope.get("raw_path")
    if raw_path:
        return raw_path.decode("utf-8", errors="replace")
    return request.url.path


def create_app(
    settings: Settings,
    *,
    api: ApiProtocol | None = None,
    template: PageTemplate | None = None,
) -> FastAPI:
    """Create the application.

    The template is compiled here, once; a missing template file raises
    ConfigError before anything is served.
    """
    ctx = SiteContext(
        settings=settings,
        api=api if api is not None else OutlineApi.from_settings(settings),
        template=template if template is not None else PageTemplate.from_file(settings.template_path),
    )

    app = FastAPI(
        title="Outline site",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.site = ctx

    @app.api_route("/{full_path:path}", methods=["GET", "HEAD"])
    async def page(request: Request) -> Response:
        """Any path: look it up in the collection and render it."""
        result = await handle_request(ctx, _request_target(request))
        return Response(content=result.body, status_code=result.status, headers=result.headers)

    return app
