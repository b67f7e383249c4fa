"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from infrastructure.configuration import Settings

if TYPE_CHECKING:
    from infrastructure.i18n import I18n


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Infrastructure packages should use this directly to ensure singleton consistency:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services.dependencies import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_i18n() -> "I18n":
    """
    Get application-scoped i18n singleton.

    Built from settings and the YAML locale files, with the Starlette host
    adapter bound to the request currently being served.

    Returns:
        I18n: Cached i18n instance owning its own locale cache.

    Usage:
        @router.get("/{locale}")
        async def home(request: Request, i18n: I18nDep):
            t = await i18n.server.t(request)
    """
    from infrastructure.i18n.factory import create_i18n_from_settings
    from server.adapter import StarletteAdapter

    settings = get_settings()
    adapter = StarletteAdapter(settings.i18n.PARAM_NAME, settings.i18n.DEFAULT_LOCALE)
    return create_i18n_from_settings(settings, adapter=adapter)
