"""Fixtures for i18n system tests.

Provides locale dictionaries, counting loaders and request doubles for
resolution and translation scenarios.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import pytest
import yaml

from infrastructure.i18n import I18nConfig, create_i18n

EN_MESSAGES = {
    "greeting": "Hello, {name}! You have {count} {item}.",
    "item#zero": "no items",
    "item#one": "{count} item",
    "item#other": "{count} items",
    "nav.home": "Home",
    "nav.about": "About",
    "terms": "Accept the {link} to continue.",
}

ES_MESSAGES = {
    "greeting": "¡Hola, {name}! Tienes {count} {item}.",
    "item#zero": "ningún artículo",
    "item#one": "{count} artículo",
    "item#other": "{count} artículos",
    "nav.home": "Inicio",
}


class CountingLoader:
    """Async locale loader that counts invocations."""

    def __init__(self, messages: Dict[str, str], delay: float = 0.0):
        self.messages = messages
        self.delay = delay
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        return {"default": dict(self.messages)}


@dataclass
class FakeURL:
    path: str = "/"
    query: str = ""


@dataclass
class FakeRequest:
    """Minimal request satisfying ``RequestLike``."""

    url: FakeURL = field(default_factory=FakeURL)
    headers: Dict[str, str] = field(default_factory=dict)


def make_request(
    path: str = "/",
    query: str = "",
    cookies: Optional[Dict[str, str]] = None,
    accept_language: Optional[str] = None,
) -> FakeRequest:
    headers = {}
    if cookies:
        headers["cookie"] = "; ".join(f"{name}={value}" for name, value in cookies.items())
    if accept_language is not None:
        headers["accept-language"] = accept_language
    return FakeRequest(url=FakeURL(path=path, query=query), headers=headers)


class RecordingAdapter:
    """Host adapter double recording navigation and cookies."""

    def __init__(
        self,
        locale: str = "en",
        path: str = "/en",
        search: Optional[List[Tuple[str, str]]] = None,
    ):
        self.locale = locale
        self.path = path
        self.search = search or []
        self.navigations: List[str] = []
        self.cookies: List[str] = []
        self.redirects: List[Tuple[str, list]] = []

    def current_locale(self) -> str:
        return self.locale

    def navigate(self, target: str) -> None:
        self.navigations.append(target)

    def pathname(self) -> str:
        return self.path

    def search_params(self):
        return list(self.search)

    def redirect(self, target, headers):
        self.redirects.append((target, list(headers)))
        return target

    def render_link(self, props):
        return dict(props)

    def set_cookie(self, header_value: str) -> None:
        self.cookies.append(header_value)


@pytest.fixture
def config():
    """Default configuration: en/es, default-locale prefixing on."""
    return I18nConfig(
        default_locale="en",
        fallback_locale="en",
        regions={"en": ["US", "GB"], "es": ["AR", "ES"]},
    )


@pytest.fixture
def unprefixed_config():
    """Configuration serving the default locale without a URL prefix."""
    return I18nConfig(
        default_locale="en",
        fallback_locale="en",
        regions={"en": ["US"], "es": ["AR"]},
        prefix_default_locale=False,
    )


@pytest.fixture
def en_loader():
    return CountingLoader(EN_MESSAGES)


@pytest.fixture
def es_loader():
    return CountingLoader(ES_MESSAGES)


@pytest.fixture
def registry(en_loader, es_loader):
    return {"en": en_loader, "es": es_loader}


@pytest.fixture
def adapter():
    return RecordingAdapter()


@pytest.fixture
def i18n(registry, config, adapter):
    return create_i18n(registry, config, adapter)


@pytest.fixture
def locales_dir(tmp_path):
    """Directory of YAML locale files.

    - en.yml, es.yml: base messages
    - errors.en.yml: extra domain file merged into en
    """
    (tmp_path / "en.yml").write_text(
        yaml.safe_dump(
            {
                "greeting": "Hello, {name}!",
                "item#one": "{count} item",
                "item#other": "{count} items",
                "nav": {"home": "Home", "about": "About"},
            }
        ),
        encoding="utf-8",
    )
    (tmp_path / "es.yml").write_text(
        yaml.safe_dump(
            {
                "greeting": "¡Hola, {name}!",
                "item#one": "{count} artículo",
                "item#other": "{count} artículos",
                "nav": {"home": "Inicio"},
            },
            allow_unicode=True,
        ),
        encoding="utf-8",
    )
    (tmp_path / "errors.en.yml").write_text(
        yaml.safe_dump({"errors": {"not_found": "Not found"}}),
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def request_factory():
    """Factory for ``RequestLike`` doubles."""
    return make_request


@pytest.fixture
def adapter_factory():
    """Factory for recording host adapters."""
    return RecordingAdapter


@pytest.fixture
def loader_factory():
    """Factory for counting async loaders."""
    return CountingLoader
