"""Locale-prefixed URL path building."""

import re
from typing import List, Optional, Sequence

from infrastructure.i18n.models import I18nConfig

_REPEATED_SLASHES = re.compile(r"/{2,}")


def normalize_path(path: str) -> str:
    """Collapse repeated slashes and strip trailing ones.

    Example:
        >>> normalize_path("//path///to/page//")
        '/path/to/page'
        >>> normalize_path("")
        '/'
    """
    return _REPEATED_SLASHES.sub("/", path).rstrip("/") or "/"


def build_path(raw_path: str, locale: str, config: I18nConfig) -> str:
    """Build the canonical path of ``raw_path`` for ``locale``.

    The result is idempotent: building an already built path returns it
    unchanged. A query string is carried over as is; only the path part is
    normalized.

    Args:
        raw_path: Path, absolute or relative, optionally with a query string.
        locale: Target locale id.
        config: The i18n configuration.

    Returns:
        The normalized, locale-prefixed (or deliberately unprefixed) path.

    Example:
        >>> build_path("/about", "es", config)
        '/es/about'
        >>> build_path("/", "es", config)
        '/es'
        >>> build_path("about?next=/cart", "es", config)
        '/es/about?next=/cart'
    """
    raw, separator, query = raw_path.partition("?")
    path = normalize_path(raw if raw.startswith("/") else f"/{raw}")
    return f"{_prefix_path(path, locale, config)}{separator}{query}"


def _prefix_path(path: str, locale: str, config: I18nConfig) -> str:
    prefix = f"/{locale}"

    if locale == config.default_locale and not config.prefix_default_locale:
        return path
    if path == prefix or path.startswith(f"{prefix}/"):
        return path
    if path == "/":
        return prefix
    return normalize_path(f"{prefix}{path}")


def generate_static_paths(
    routes: Sequence[str],
    supported_locales: Sequence[str],
    config: I18nConfig,
) -> List[str]:
    """List every localized path of ``routes`` for pre-rendering.

    With ``prefix_default_locale`` every route is emitted under every locale.
    Without it, each route is emitted once unprefixed (the default locale)
    and once prefixed for every other locale.

    Example:
        >>> generate_static_paths(["/", "/about"], ["en", "es"], config)
        ['/en', '/es', '/en/about', '/es/about']
    """
    paths: List[str] = []
    for route in routes:
        suffix = "" if route == "/" else route
        if config.prefix_default_locale:
            paths.extend(f"/{locale}{suffix}" for locale in supported_locales)
        else:
            paths.append(route)
            paths.extend(
                f"/{locale}{suffix}"
                for locale in supported_locales
                if locale != config.default_locale
            )
    return paths


def first_segment(path: str) -> Optional[str]:
    """Return the first non-empty segment of a path."""
    for segment in path.split("/"):
        if segment:
            return segment
    return None


def strip_first_segment(path: str) -> str:
    """Drop the first non-empty segment, returning the rest without a leading slash."""
    segments = [segment for segment in path.split("/") if segment]
    return "/".join(segments[1:])


def strip_locale_segment(path: str, locale: str) -> str:
    """Remove a leading ``/<locale>`` segment from ``path`` if present.

    Example:
        >>> strip_locale_segment("/en/about", "en")
        '/about'
        >>> strip_locale_segment("/about", "en")
        '/about'
    """
    segments = [segment for segment in path.split("/") if segment]
    if segments and segments[0] == locale:
        segments = segments[1:]
    return "/" + "/".join(segments)
