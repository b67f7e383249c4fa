"""HTTP server settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server runtime configuration.

    Environment Variables:
        BACKEND_URL: Backend base URL (default: http://127.0.0.1:8000)
        LOCALE_EXCLUDED_PATHS: Path prefixes the locale middleware skips

    Example:
        ```python
        from infrastructure.services import get_settings

        excluded = get_settings().server.LOCALE_EXCLUDED_PATHS
        ```
    """

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    LOCALE_EXCLUDED_PATHS: List[str] = Field(
        default_factory=lambda: ["/health", "/docs", "/openapi.json"],
        alias="LOCALE_EXCLUDED_PATHS",
    )
