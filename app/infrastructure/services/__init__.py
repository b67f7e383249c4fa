"""
Dependency injection services.

Provides provider functions for FastAPI dependency injection. The annotated
aliases live in ``infrastructure.services.dependencies``.
"""

from infrastructure.services.providers import (
    get_settings,
    get_i18n,
)

__all__ = [
    "get_settings",
    "get_i18n",
]
