"""Locale dictionary cache with shared in-flight loads.

The cache is owned by one i18n instance. Dictionaries are loaded on first
access and kept for the lifetime of the cache; concurrent requests for a
locale that is still loading await the same task instead of starting a
second load.
"""

import asyncio
from typing import Dict, Mapping, Optional

from infrastructure.i18n.exceptions import UnsupportedLocaleError
from infrastructure.i18n.models import LocaleDictionary, LocaleRegistry, unwrap_module
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def _retrieve_exception(task: asyncio.Task) -> None:
    # Marks a failure as observed when every waiter was cancelled; the
    # failure itself is logged by the loader.
    if not task.cancelled():
        task.exception()


class LocaleDataCache:
    """Memoizes locale dictionaries and in-flight loads, keyed by locale id.

    Attributes:
        registry: Locale id to loader callable.
    """

    def __init__(self, registry: LocaleRegistry):
        self.registry = registry
        self._dictionaries: Dict[str, LocaleDictionary] = {}
        self._inflight: Dict[str, asyncio.Task] = {}

    def get(self, locale: str) -> Optional[LocaleDictionary]:
        """Return the cached dictionary for a locale without loading it."""
        return self._dictionaries.get(locale)

    def is_loading(self, locale: str) -> bool:
        """Check whether a load for the locale is currently in flight."""
        return locale in self._inflight

    async def load(self, locale: str) -> LocaleDictionary:
        """Return the dictionary for a locale, loading it on a miss.

        Args:
            locale: Locale id registered in the registry.

        Returns:
            The locale dictionary.

        Raises:
            UnsupportedLocaleError: If the registry has no loader for the locale.
            Exception: Whatever the loader raised; every waiter sees it.
        """
        cached = self._dictionaries.get(locale)
        if cached is not None:
            return cached

        task = self._inflight.get(locale)
        if task is None:
            if locale not in self.registry:
                raise UnsupportedLocaleError(locale)
            # Registered before the first await so later callers find it.
            task = asyncio.ensure_future(self._run_loader(locale))
            task.add_done_callback(_retrieve_exception)
            self._inflight[locale] = task
        else:
            logger.debug("locale_load_joined", locale=locale)

        # Cancelling one waiter must not cancel the shared load.
        return await asyncio.shield(task)

    async def _run_loader(self, locale: str) -> LocaleDictionary:
        logger.info("locale_load_started", locale=locale)
        try:
            loaded = await self.registry[locale]()
            dictionary = unwrap_module(loaded)
            if dictionary is None:
                raise ValueError(
                    f"Loader for locale '{locale}' must return a mapping with a 'default' dictionary"
                )
            self._dictionaries[locale] = dictionary
        except Exception as e:
            logger.error("locale_load_failed", locale=locale, error=str(e))
            raise
        finally:
            self._inflight.pop(locale, None)

        logger.info("locale_loaded", locale=locale, key_count=len(dictionary))
        return dictionary

    async def load_many(self, locales: list[str]) -> Mapping[str, LocaleDictionary]:
        """Load several locales concurrently."""
        dictionaries = await asyncio.gather(*(self.load(locale) for locale in locales))
        return dict(zip(locales, dictionaries))

    def get_stats(self) -> Dict[str, int]:
        """Get cache statistics."""
        return {
            "loaded": len(self._dictionaries),
            "in_flight": len(self._inflight),
            "registered": len(self.registry),
        }
