"""Client-side i18n API bound to a host adapter.

The adapter supplies the current locale and URL; translations come from the
shared locale cache.
"""

from typing import Any, Callable, Optional
from urllib.parse import urlencode

from infrastructure.i18n.adapter import HostAdapter
from infrastructure.i18n.cache import LocaleDataCache
from infrastructure.i18n.cookies import create_locale_cookies
from infrastructure.i18n.exceptions import UnsupportedLocaleError
from infrastructure.i18n.models import I18nConfig, LocaleDictionary, Rendered
from infrastructure.i18n.paths import build_path, normalize_path, strip_locale_segment
from infrastructure.i18n.regions import format_full_locale, resolve_region
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()

TranslateFn = Callable[..., Rendered]


def bind_translate(
    translator: Translator,
    locale: str,
    dictionary: LocaleDictionary,
    scope: Optional[str] = None,
) -> TranslateFn:
    """Bind a translator to one locale dictionary and optional scope.

    The returned callable takes the key and keyword parameters:
    ``t("greeting", name="Chris")``. Calling it without parameters returns
    the raw template.
    """

    def t(key: str, /, **params: Any) -> Rendered:
        return translator.translate(locale, dictionary, scope, key, params or None)

    return t


class I18nClient:
    """Translations and locale switching for the adapter's current render.

    Attributes:
        config: The i18n configuration.
        adapter: Host adapter providing locale, URL and navigation.
    """

    def __init__(
        self,
        config: I18nConfig,
        cache: LocaleDataCache,
        translator: Translator,
        adapter: HostAdapter,
    ):
        self.config = config
        self.adapter = adapter
        self._cache = cache
        self._translator = translator

    async def t(self) -> TranslateFn:
        """Translate function for the current locale."""
        locale = self.adapter.current_locale()
        dictionary = await self._cache.load(locale)
        return bind_translate(self._translator, locale, dictionary)

    async def scoped_t(self, scope: str) -> TranslateFn:
        """Translate function for the current locale, keys relative to ``scope``."""
        locale = self.adapter.current_locale()
        dictionary = await self._cache.load(locale)
        return bind_translate(self._translator, locale, dictionary, scope)

    def current_locale(self) -> str:
        return self.adapter.current_locale()

    def current_region(self) -> str:
        """Full locale (``locale-REGION``) of the current render."""
        locale = self.adapter.current_locale()
        region = resolve_region(self.config.regions, locale, self.config.fallback_locale)
        return format_full_locale(locale, region)

    async def change_locale(self, locale: str) -> Optional[str]:
        """Switch the client to ``locale``.

        Loads the target dictionary, stores both locale cookies, rebuilds the
        current path for the new locale (query string kept) and navigates.

        Returns:
            The navigation target, or None when ``locale`` is already current.

        Raises:
            UnsupportedLocaleError: If ``locale`` has no registered loader.
        """
        current = self.adapter.current_locale()
        if locale == current:
            return None
        if locale not in self._cache.registry:
            raise UnsupportedLocaleError(locale)

        path = strip_locale_segment(self.adapter.pathname(), current)
        search = urlencode(list(self.adapter.search_params()))

        await self._cache.load(locale)

        region = resolve_region(self.config.regions, locale, self.config.fallback_locale)
        for cookie in create_locale_cookies(locale, region, self.config):
            self.adapter.set_cookie(cookie.header_value())

        should_prefix = self.config.prefix_default_locale or locale != self.config.default_locale
        prefix = f"/{locale}" if should_prefix else ""
        target = normalize_path(f"{prefix}{path}")
        if search:
            target = f"{target}?{search}"

        logger.info("locale_changed", previous=current, locale=locale, target=target)
        self.adapter.navigate(target)
        return target

    def locale_link(self, **props: Any) -> Any:
        """Render a link whose ``href`` is localized for the current locale."""
        href = props.get("href", "/")
        props["href"] = build_path(href, self.adapter.current_locale(), self.config)
        return self.adapter.render_link(props)
