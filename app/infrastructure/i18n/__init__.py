"""i18n system - locale resolution and translation rendering.

Main components:
- cache: LocaleDataCache, memoized locale dictionaries with shared in-flight loads
- translator: Translator, plural selection, scoped lookup and interpolation
- regions / paths: region lookup and locale-prefixed path building
- resolvers: LocaleResolver state machine and Accept-Language negotiation
- client / server / service: the public APIs of a configured instance
- factory: create_i18n and create_i18n_from_settings
"""

from infrastructure.i18n.adapter import HostAdapter
from infrastructure.i18n.cache import LocaleDataCache
from infrastructure.i18n.client import I18nClient
from infrastructure.i18n.exceptions import (
    ConfigurationError,
    I18nError,
    MissingResolutionContextError,
    UnsupportedLocaleError,
)
from infrastructure.i18n.factory import create_i18n, create_i18n_from_settings
from infrastructure.i18n.loader import YAMLLocaleLoader
from infrastructure.i18n.models import (
    I18nConfig,
    LocaleCookie,
    Number,
    Opaque,
    RedirectDirective,
    RenderedContent,
    ResolutionResult,
    Text,
)
from infrastructure.i18n.paths import build_path, generate_static_paths, normalize_path
from infrastructure.i18n.regions import resolve_region
from infrastructure.i18n.resolvers import LanguageNegotiator, LocaleResolver
from infrastructure.i18n.server import I18nServer
from infrastructure.i18n.service import I18n
from infrastructure.i18n.translator import Translator

__all__ = [
    "HostAdapter",
    "LocaleDataCache",
    "I18nClient",
    "I18nServer",
    "I18n",
    "I18nError",
    "ConfigurationError",
    "MissingResolutionContextError",
    "UnsupportedLocaleError",
    "create_i18n",
    "create_i18n_from_settings",
    "YAMLLocaleLoader",
    "I18nConfig",
    "LocaleCookie",
    "Text",
    "Number",
    "Opaque",
    "RenderedContent",
    "ResolutionResult",
    "RedirectDirective",
    "build_path",
    "generate_static_paths",
    "normalize_path",
    "resolve_region",
    "LanguageNegotiator",
    "LocaleResolver",
    "Translator",
]
