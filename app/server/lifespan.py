from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.i18n import I18n
from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_i18n, get_settings

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


async def _check_locales(
    i18n: I18n,
    settings: "Settings",
    logger: BoundLogger,
) -> None:
    if settings.is_production:
        logger.info("locale_key_check_skipped", reason="production")
        return

    missing = await i18n.check_locale_keys()
    if missing:
        logger.warning("locale_keys_incomplete", locales=sorted(missing))
    else:
        logger.info("locale_keys_complete", locales=i18n.supported_locales)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    i18n = getattr(app.state, "i18n", None) or get_i18n()
    app.state.i18n = i18n
    await _check_locales(i18n, settings, logger)

    yield

    logger.info("application_shutdown", cache=i18n.cache.get_stats())
