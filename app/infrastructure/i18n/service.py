"""i18n facade.

Bundles the client and server APIs of one configured instance together with
the path helpers. Both APIs share one locale cache and one translation
engine, so a dictionary loaded for the server is reused by the client.
"""

from typing import Dict, List, Optional, Sequence

from infrastructure.i18n.adapter import HostAdapter
from infrastructure.i18n.cache import LocaleDataCache
from infrastructure.i18n.client import I18nClient
from infrastructure.i18n.direction import Direction, get_dir
from infrastructure.i18n.models import I18nConfig, LocaleRegistry
from infrastructure.i18n.paths import build_path, generate_static_paths
from infrastructure.i18n.server import I18nServer
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class I18n:
    """One configured i18n instance.

    Usage:
        i18n = create_i18n({"en": load_en, "es": load_es}, config, adapter)

        t = await i18n.client.t()
        resolution = i18n.server.resolve(request)
        i18n.get_locale_path("/about", "es")  # "/es/about"
    """

    def __init__(
        self,
        locales: LocaleRegistry,
        config: I18nConfig,
        adapter: Optional[HostAdapter] = None,
    ):
        self.config = config
        self.adapter = adapter
        self.cache = LocaleDataCache(locales)
        self.translator = Translator()
        self.server = I18nServer(config, self.cache, self.translator, self.supported_locales)

    @property
    def supported_locales(self) -> List[str]:
        """Registered locale ids, in registry order."""
        return list(self.cache.registry)

    @property
    def client(self) -> I18nClient:
        """Client API bound to the instance's adapter.

        Raises:
            RuntimeError: If the instance was created without an adapter.
        """
        if self.adapter is None:
            raise RuntimeError("The i18n client requires a host adapter")
        return self.client_for(self.adapter)

    def client_for(self, adapter: HostAdapter) -> I18nClient:
        """Client API bound to ``adapter``, sharing this instance's cache."""
        return I18nClient(self.config, self.cache, self.translator, adapter)

    def get_locale_path(self, to: str, locale: str) -> str:
        return build_path(to, locale, self.config)

    def generate_static_locale_paths(self, routes: Sequence[str]) -> List[str]:
        return generate_static_paths(routes, self.supported_locales, self.config)

    def get_dir(self, locale: str) -> Direction:
        return get_dir(locale)

    async def check_locale_keys(self) -> Dict[str, List[str]]:
        """Report keys present in some locale but missing from others.

        Loads every registered locale. Intended for development startup; it
        logs one warning per locale with missing keys.

        Returns:
            Locale id to sorted missing keys, for locales missing any.
        """
        dictionaries = await self.cache.load_many(self.supported_locales)
        all_keys = set().union(*(d.keys() for d in dictionaries.values()))

        report: Dict[str, List[str]] = {}
        for locale, dictionary in dictionaries.items():
            missing = sorted(all_keys - dictionary.keys())
            if missing:
                logger.warning("missing_locale_keys", locale=locale, keys=missing)
                report[locale] = missing
        return report
