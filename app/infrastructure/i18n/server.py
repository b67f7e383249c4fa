"""Server-side i18n API: request resolution and cookie-driven translators."""

from typing import Any, Mapping, Optional, Sequence

from infrastructure.i18n.cache import LocaleDataCache
from infrastructure.i18n.client import TranslateFn, bind_translate
from infrastructure.i18n.cookies import get_cookie
from infrastructure.i18n.exceptions import MissingResolutionContextError
from infrastructure.i18n.models import I18nConfig, Resolution
from infrastructure.i18n.resolvers import LocaleResolver, RequestLike
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class I18nServer:
    """Resolves request locales and hands out translators on the server.

    Example:
        resolution = i18n.server.resolve(request, request.path_params)
        if isinstance(resolution, RedirectDirective):
            return adapter.redirect(resolution.location, resolution.headers)

        t = await i18n.server.t(request)
        t("greeting", name="Chris")
    """

    def __init__(
        self,
        config: I18nConfig,
        cache: LocaleDataCache,
        translator: Translator,
        supported_locales: Sequence[str],
    ):
        self.config = config
        self.resolver = LocaleResolver(config, supported_locales)
        self._cache = cache
        self._translator = translator

    def resolve(
        self,
        request: RequestLike,
        route_params: Optional[Mapping[str, Any]] = None,
    ) -> Resolution:
        """Resolve the locale of a request; see ``LocaleResolver.resolve``."""
        return self.resolver.resolve(request, route_params)

    async def t(self, request: RequestLike) -> TranslateFn:
        """Translate function for the locale stored in the request's cookie.

        Raises:
            MissingResolutionContextError: If the request has no locale cookie.
        """
        locale = self._locale_from_cookie(request, "t")
        return await self.t_for(locale)

    async def scoped_t(self, scope: str, request: RequestLike) -> TranslateFn:
        """Scoped translate function for the locale stored in the request's cookie.

        Raises:
            MissingResolutionContextError: If the request has no locale cookie.
        """
        locale = self._locale_from_cookie(request, "scoped_t")
        return await self.t_for(locale, scope)

    async def t_for(self, locale: str, scope: Optional[str] = None) -> TranslateFn:
        """Translate function for an already known locale."""
        dictionary = await self._cache.load(locale)
        return bind_translate(self._translator, locale, dictionary, scope)

    def _locale_from_cookie(self, request: RequestLike, operation: str) -> str:
        locale = get_cookie(request.headers, self.config.param_name)
        if not locale:
            raise MissingResolutionContextError(operation)
        if locale not in self.resolver.supported_locales:
            logger.warning(
                "unsupported_stored_locale",
                stored_locale=locale,
                fallback=self.config.fallback_locale,
                operation=operation,
            )
            return self.config.fallback_locale
        return locale
