"""Locale resolution and translation settings."""

import json
from pathlib import Path
from typing import Any, Dict, List

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

DEFAULT_LOCALES_DIR = Path(__file__).resolve().parents[3] / "locales"


class I18nSettings(InfrastructureSettings):
    """i18n configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when nothing else applies (default: en)
        I18N_FALLBACK_LOCALE: Locale rendered for unsupported URL locales (default: en)
        I18N_REGIONS: JSON object of locale id to region codes,
            e.g. '{"en": ["US", "GB"], "es": ["AR", "ES"]}'
        I18N_PREFIX_DEFAULT_LOCALE: Keep the default locale in URLs (default: true)
        I18N_PARAM_NAME: Route param and cookie name (default: locale)
        I18N_LOCALES_DIR: Directory holding the YAML locale files

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        default_locale = settings.i18n.DEFAULT_LOCALE
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    FALLBACK_LOCALE: str = Field(default="en", alias="I18N_FALLBACK_LOCALE")
    REGIONS: Dict[str, List[str]] = Field(
        default_factory=lambda: {"en": ["US"], "es": ["AR"]},
        alias="I18N_REGIONS",
    )
    PREFIX_DEFAULT_LOCALE: bool = Field(default=True, alias="I18N_PREFIX_DEFAULT_LOCALE")
    PARAM_NAME: str = Field(default="locale", alias="I18N_PARAM_NAME")
    LOCALES_DIR: Path = Field(default=DEFAULT_LOCALES_DIR, alias="I18N_LOCALES_DIR")

    @field_validator("REGIONS", mode="before")
    @classmethod
    def parse_regions(cls, v: Any) -> Any:
        """Accept the regions mapping as a JSON string."""
        if isinstance(v, str):
            return json.loads(v)
        return v
