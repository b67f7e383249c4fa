"""Factory functions for creating i18n instances.

``create_i18n`` validates a configuration against its registry;
``create_i18n_from_settings`` builds the application instance from
environment settings and the YAML locale files.
"""

from typing import TYPE_CHECKING, Optional

from infrastructure.i18n.adapter import HostAdapter
from infrastructure.i18n.exceptions import ConfigurationError
from infrastructure.i18n.loader import YAMLLocaleLoader
from infrastructure.i18n.models import I18nConfig, LocaleRegistry
from infrastructure.i18n.service import I18n
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


def validate_config(locales: LocaleRegistry, config: I18nConfig) -> None:
    """Check the configuration against the registry.

    Raises:
        ConfigurationError: If the registry is empty, the default or fallback
            locale is not registered, or a registered locale has no regions.
    """
    if not locales:
        raise ConfigurationError("At least one locale must be registered")

    for name in ("default_locale", "fallback_locale"):
        locale = getattr(config, name)
        if locale not in locales:
            raise ConfigurationError(f"{name} '{locale}' is not a registered locale")

    for locale in locales:
        if not config.regions.get(locale):
            raise ConfigurationError(f"No regions configured for locale '{locale}'")


def create_i18n(
    locales: LocaleRegistry,
    config: I18nConfig,
    adapter: Optional[HostAdapter] = None,
) -> I18n:
    """Create and validate an i18n instance.

    Args:
        locales: Locale id to async loader returning ``{"default": dictionary}``.
        config: The i18n configuration.
        adapter: Host adapter for the client API.

    Returns:
        I18n: Configured instance with its own cache.

    Raises:
        ConfigurationError: If the configuration does not match the registry.

    Usage:
        async def load_en():
            return {"default": {"greeting": "Hello, {name}!"}}

        i18n = create_i18n(
            {"en": load_en},
            I18nConfig(default_locale="en", fallback_locale="en", regions={"en": ["US"]}),
        )
    """
    validate_config(locales, config)
    i18n = I18n(locales, config, adapter)
    logger.info(
        "i18n_created",
        locales=i18n.supported_locales,
        default_locale=config.default_locale,
        prefix_default_locale=config.prefix_default_locale,
    )
    return i18n


def config_from_settings(settings: "Settings") -> I18nConfig:
    """Build an ``I18nConfig`` from application settings.

    Locale cookies get the ``Secure`` flag in production.
    """
    return I18nConfig(
        default_locale=settings.i18n.DEFAULT_LOCALE,
        fallback_locale=settings.i18n.FALLBACK_LOCALE,
        regions=settings.i18n.REGIONS,
        prefix_default_locale=settings.i18n.PREFIX_DEFAULT_LOCALE,
        param_name=settings.i18n.PARAM_NAME,
        secure_cookies=settings.is_production,
    )


def create_i18n_from_settings(
    settings: "Settings",
    adapter: Optional[HostAdapter] = None,
) -> I18n:
    """Create the application i18n instance from settings and YAML files.

    Raises:
        ValueError: If the locales directory is missing or empty.
        ConfigurationError: If the configuration does not match the files found.
    """
    loader = YAMLLocaleLoader(settings.i18n.LOCALES_DIR)
    return create_i18n(loader.registry(), config_from_settings(settings), adapter)
