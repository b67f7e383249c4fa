"""Locale cookie reading and construction.

Two cookies carry the locale choice: ``{param_name}`` holds the locale id and
``full_{param_name}`` holds ``locale-REGION``.
"""

from typing import Dict, Mapping, Optional

from starlette.requests import cookie_parser

from infrastructure.i18n.models import I18nConfig, LocaleCookie
from infrastructure.i18n.regions import format_full_locale


def parse_cookies(headers: Mapping[str, str]) -> Dict[str, str]:
    """Parse the ``cookie`` request header into a name to value mapping."""
    cookie_header = headers.get("cookie")
    if not cookie_header:
        return {}
    return cookie_parser(cookie_header)


def get_cookie(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Read one cookie value from request headers; empty values count as absent."""
    return parse_cookies(headers).get(name) or None


def create_locale_cookies(
    locale: str, region: str, config: I18nConfig
) -> tuple[LocaleCookie, LocaleCookie]:
    """Build the locale and full-locale cookie instructions.

    Returns:
        ``(locale_cookie, full_locale_cookie)``
    """
    return (
        LocaleCookie(config.param_name, locale, secure=config.secure_cookies),
        LocaleCookie(
            config.full_param_name,
            format_full_locale(locale, region),
            secure=config.secure_cookies,
        ),
    )
