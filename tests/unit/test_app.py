"""Tests for the FastAPI application."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from outline_site.config import Settings
from outline_site.errors import ConfigError, UpstreamFetchError
from outline_site.render import PageTemplate
from outline_site.server.app import create_app
from tests.unit.fakes import FakeApi
from tests.unit.samples import TEMPLATE_SOURCE, make_settings


@pytest.fixture
def client(settings: Settings, fake_api: FakeApi, template: PageTemplate) -> TestClient:
    return TestClient(create_app(settings, api=fake_api, template=template))


def test_root_serves_index(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"] == "text/html; charset=utf-8"
    assert "<title>leo/index</title>" in response.text


def test_path_with_space_and_query(client: TestClient, fake_api: FakeApi) -> None:
    fake_api.add_response("documents.info", {"data": {"title": "b", "text": "Bike"}}, doc_id="4")

    response = client.get("/projects/my%20bike?ref=home")

    assert response.status_code == 200
    assert "<title>leo/projects/my bike</title>" in response.text


def test_unknown_path_is_404(client: TestClient) -> None:
    response = client.get("/does/not/exist")

    assert response.status_code == 404
    assert "<p>Page not found.</p>" in response.text


def test_upstream_failure_is_500(client: TestClient, fake_api: FakeApi) -> None:
    fake_api.add_error(
        "collections.documents", UpstreamFetchError("down", path="collections.documents")
    )

    response = client.get("/")

    assert response.status_code == 500
    assert response.headers["content-type"] == "text/html; charset=utf-8"
    assert "<title>leo/500</title>" in response.text


def test_server_keeps_serving_after_failure(client: TestClient, fake_api: FakeApi) -> None:
    fake_api.add_error("documents.info", UpstreamFetchError("down", path="documents.info"))
    assert client.get("/").status_code == 500

    del fake_api.errors["documents.info"]
    assert client.get("/").status_code == 200


def test_create_app_compiles_template_from_settings(tmp_path: Path, fake_api: FakeApi) -> None:
    template_path = tmp_path / "page.html"
    template_path.write_text(TEMPLATE_SOURCE, encoding="utf-8")
    settings = make_settings(tmp_path, template_path=template_path, site_title="wiki")

    client = TestClient(create_app(settings, api=fake_api))

    assert "<title>wiki/index</title>" in client.get("/").text


def test_create_app_missing_template_fails_at_startup(tmp_path: Path, fake_api: FakeApi) -> None:
    settings = make_settings(tmp_path)

    with pytest.raises(ConfigError, match="Cannot read template"):
        create_app(settings, api=fake_api)
