"""Fixtures for server module unit tests."""

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from infrastructure.configuration.infrastructure.i18n import DEFAULT_LOCALES_DIR
from infrastructure.i18n import I18nConfig, YAMLLocaleLoader, create_i18n
from server.adapter import StarletteAdapter
from server.server import create_app


@pytest.fixture
def i18n_config():
    return I18nConfig(
        default_locale="en",
        fallback_locale="en",
        regions={"en": ["US"], "es": ["AR"]},
    )


@pytest.fixture
def app_i18n(i18n_config):
    """i18n instance over the bundled locale files."""
    registry = YAMLLocaleLoader(DEFAULT_LOCALES_DIR).registry()
    return create_i18n(registry, i18n_config, StarletteAdapter())


@pytest.fixture
def app(app_i18n):
    return create_app(i18n=app_i18n)


@pytest.fixture
def client(app):
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def make_starlette_request():
    """Factory for bare Starlette requests."""

    def _make(path="/en", query="", headers=None, path_params=None):
        scope = {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("testserver", 80),
            "root_path": "",
            "path": path,
            "query_string": query.encode("latin-1"),
            "headers": [
                (name.lower().encode("latin-1"), value.encode("latin-1"))
                for name, value in (headers or {}).items()
            ],
            "path_params": path_params or {},
        }
        return Request(scope)

    return _make
