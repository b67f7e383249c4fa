"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import I18n
from infrastructure.services.providers import get_i18n, get_settings

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# i18n instance dependency
# Usage: t = await i18n.server.t(request), i18n.get_locale_path("/about", "es")
I18nDep = Annotated[I18n, Depends(get_i18n)]

__all__ = [
    "SettingsDep",
    "I18nDep",
]
