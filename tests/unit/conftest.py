"""Shared test fixtures."""

from pathlib import Path

import pytest

from outline_site.config import Settings
from outline_site.render import PageTemplate
from outline_site.server.handler import SiteContext
from tests.unit.fakes import FakeApi
from tests.unit.samples import COLLECTION_TREE, INDEX_CONTENT, TEMPLATE_SOURCE, make_settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
def template() -> PageTemplate:
    return PageTemplate(TEMPLATE_SOURCE)


@pytest.fixture
def fake_api() -> FakeApi:
    """FakeApi serving COLLECTION_TREE and the index document."""
    api = FakeApi()
    api.add_response("collections.documents", {"data": COLLECTION_TREE})
    api.add_response("documents.info", {"data": INDEX_CONTENT}, doc_id="1")
    return api


@pytest.fixture
def site(settings: Settings, fake_api: FakeApi, template: PageTemplate) -> SiteContext:
    return SiteContext(settings=settings, api=fake_api, template=template)
