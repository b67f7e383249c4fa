"""Unit tests for the FastAPI application and locale middleware."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.services import get_settings


def set_cookies(response):
    return response.headers.get_list("set-cookie")


@pytest.mark.unit
class TestExcludedPaths:
    """Test suite for paths served without resolution."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert set_cookies(response) == []

    def test_openapi(self, client):
        assert client.get("/openapi.json").status_code == 200


@pytest.mark.unit
class TestLocaleRedirects:
    """Test suite for redirect directives answered by the middleware."""

    def test_root_negotiates_from_accept_language(self, client):
        response = client.get("/", headers={"accept-language": "es-AR,en;q=0.5"})

        assert response.status_code == 307
        assert response.headers["location"] == "/es"
        assert set_cookies(response) == [
            "locale=es; Path=/; SameSite=Lax; HttpOnly",
            "full_locale=es-AR; Path=/; SameSite=Lax; HttpOnly",
        ]

    def test_first_visit_to_localized_url_sets_cookies(self, client):
        response = client.get("/en/items?count=2")

        assert response.status_code == 307
        assert response.headers["location"] == "/en/items?count=2"
        assert len(set_cookies(response)) == 2

    def test_redirect_then_render(self, app):
        client = TestClient(app)

        response = client.get("/", headers={"accept-language": "es-AR,en;q=0.5"})

        assert response.status_code == 200
        assert response.url.path == "/es"
        body = response.json()
        assert body["locale"] == "es"
        assert body["full_locale"] == "es-AR"
        assert body["greeting"] == "¡Hola, friend!"
        assert body["dir"] == "ltr"
        assert body["links"] == [
            '<a href="/es">Inicio</a>',
            '<a href="/es/items">Artículos</a>',
        ]
        assert body["terms_html"] == 'Al continuar aceptas los <a href="/es/terms">terms</a>.'


@pytest.mark.unit
class TestLocalizedPages:
    """Test suite for pages rendered after resolution."""

    @pytest.fixture
    def browser(self, app):
        return TestClient(app)

    @pytest.mark.parametrize(
        "count,expected",
        [(0, "You have no items"), (1, "You have one item"), (5, "You have 5 items")],
    )
    def test_item_plurals(self, browser, count, expected):
        response = browser.get(f"/en/items?count={count}")

        assert response.status_code == 200
        assert response.json()["message"] == expected

    def test_unsupported_url_locale_renders_fallback(self, client):
        response = client.get("/fr", params={"name": "Ana"})

        assert response.status_code == 200
        assert response.json()["locale"] == "en"
        assert response.json()["greeting"] == "Hello, Ana!"

    def test_switch_locale_keeps_query_and_updates_cookies(self, browser):
        browser.get("/en/items?count=3")

        response = browser.post(
            "/en/items?count=3", json={"locale": "es"}, follow_redirects=False
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/es/items?count=3"
        assert "locale=es; Path=/; SameSite=Lax; HttpOnly" in set_cookies(response)

        followed = browser.get(response.headers["location"])
        assert followed.status_code == 200
        assert followed.json()["message"] == "Tienes 3 artículos"

    def test_switch_to_unsupported_locale_rejected(self, browser):
        browser.get("/en/items")

        response = browser.post("/en/items", json={"locale": "fr"}, follow_redirects=False)

        assert response.status_code == 400
        assert response.json()["detail"] == "Unsupported locale: fr"
        assert set_cookies(response) == []


@pytest.mark.unit
def test_lifespan_reports_complete_locale_files(app, app_i18n, monkeypatch):
    """Startup outside production checks the bundled locale files for missing keys."""
    monkeypatch.setenv("PREFIX", "dev-")
    get_settings.cache_clear()

    with TestClient(app):
        assert app.state.i18n is app_i18n
        assert app_i18n.cache.get_stats()["loaded"] == 2
