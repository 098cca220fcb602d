"""CLI for the Outline site (serve, inspect the tree, render a page)."""

import asyncio
import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from outline_site.api import OutlineApi
from outline_site.config import DEFAULT_ENV_FILE, Settings, load_env_file, load_settings
from outline_site.core.tree.loader import fetch_document_tree
from outline_site.core.tree.path_index import build_path_index
from outline_site.errors import ConfigError, OutlineSiteError
from outline_site.logging_config import configure_logging
from outline_site.render import PageTemplate
from outline_site.server.handler import SiteContext, handle_request

app = typer.Typer(help="Outline site: serve an Outline collection as a wiki.")

EnvFileOption = Annotated[
    Path,
    typer.Option("--env-file", "-e", help="File with KEY=value settings"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _load_settings(env_file: Path) -> Settings:
    """Load .env and settings, exiting with status 1 on bad configuration."""
    load_env_file(env_file)
    try:
        return load_settings()
    except ConfigError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None


@app.command()
def serve(
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to listen on (default: $PORT or 3000)"),
    ] = None,
    host: Annotated[
        str | None,
        typer.Option("--host", help="Address to bind (default: $HOST or 0.0.0.0)"),
    ] = None,
    env_file: EnvFileOption = DEFAULT_ENV_FILE,
) -> None:
    """Serve the collection over HTTP."""
    import uvicorn

    from outline_site.server.app import create_app

    settings = _load_settings(env_file)
    try:
        web_app = create_app(settings)
    except ConfigError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None

    actual_port = port or settings.port
    actual_host = host or settings.host
    logger.info("Listening on port {}", actual_port)
    uvicorn.run(web_app, host=actual_host, port=actual_port, log_level="warning")


@app.command()
def tree(
    env_file: EnvFileOption = DEFAULT_ENV_FILE,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    all_siblings: bool = typer.Option(
        False, "--all-siblings", help="Show every document, not only the published ones"
    ),
) -> None:
    """Fetch the collection tree and print the path index."""
    settings = _load_settings(env_file)
    api = OutlineApi.from_settings(settings)

    try:
        roots = fetch_document_tree(api, settings.collection_id)
    except OutlineSiteError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None

    index = build_path_index(roots, visit_all_siblings=all_siblings)

    if output_json:
        data = {
            path: {"id": entry.id, "title": entry.title, "url": entry.url, "icon": entry.icon}
            for path, entry in index.items()
        }
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    if not index:
        typer.echo("No documents.")
        return
    for path, entry in index.items():
        typer.echo(f"{path}  [{entry.id}]")


@app.command()
def render(
    path: str = typer.Argument("/", help="Site path to render, e.g. /index"),
    env_file: EnvFileOption = DEFAULT_ENV_FILE,
) -> None:
    """Render one page through the full pipeline and print the HTML."""
    settings = _load_settings(env_file)
    try:
        template = PageTemplate.from_file(settings.template_path)
    except ConfigError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None

    ctx = SiteContext(settings=settings, api=OutlineApi.from_settings(settings), template=template)
    response = asyncio.run(handle_request(ctx, path))

    typer.echo(f"Status: {response.status}", err=True)
    typer.echo(response.body)
    if response.status >= 500:
        raise typer.Exit(1)
