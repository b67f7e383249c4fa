"""Infrastructure configuration module - public API.

Centralized configuration using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale resolution and translation settings
    ServerSettings: HTTP server settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    regions = settings.i18n.REGIONS
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure import I18nSettings, ServerSettings

__all__ = ["Settings", "I18nSettings", "ServerSettings"]
