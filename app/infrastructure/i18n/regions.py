"""Region lookup and full-locale (``locale-REGION``) helpers."""

from typing import Mapping, Optional, Sequence, Tuple

from infrastructure.i18n.exceptions import ConfigurationError

RegionConfig = Mapping[str, Sequence[str]]


def resolve_region(regions: RegionConfig, locale: str, fallback_locale: str) -> str:
    """Return the canonical region of a locale.

    Args:
        regions: Locale id to ordered region codes.
        locale: Locale whose region is wanted.
        fallback_locale: Locale whose region is used when ``locale`` has none.

    Returns:
        The first configured region of ``locale``, else of ``fallback_locale``.

    Raises:
        ConfigurationError: If neither locale has regions configured.
    """
    region_list = regions.get(locale) or regions.get(fallback_locale)
    if not region_list:
        raise ConfigurationError(
            f"No regions configured for locale '{locale}' or fallback '{fallback_locale}'"
        )
    return region_list[0]


def format_full_locale(locale: str, region: str) -> str:
    return f"{locale}-{region}"


def split_full_locale(full_locale: Optional[str]) -> Optional[Tuple[str, str]]:
    """Split ``locale-REGION`` into its parts, or None if malformed."""
    if not full_locale:
        return None
    base, _, region = full_locale.partition("-")
    if not base or not region:
        return None
    return base, region


def is_valid_full_locale(
    full_locale: Optional[str],
    regions: RegionConfig,
    expected_locale: Optional[str] = None,
) -> bool:
    """Check a full-locale value against the region configuration.

    A value is valid when it has the ``locale-REGION`` shape, its region is
    configured for its locale and, when ``expected_locale`` is given, its
    locale matches it.
    """
    parts = split_full_locale(full_locale)
    if parts is None:
        return False
    base, region = parts
    if expected_locale is not None and base != expected_locale:
        return False
    return region in regions.get(base, ())


def match_region(regions: RegionConfig, locale: str, region: Optional[str]) -> Optional[str]:
    """Find a configured region of ``locale`` equal to ``region``, ignoring case.

    Returns:
        The region in its configured spelling, or None when not configured.
    """
    if not region:
        return None
    wanted = region.lower()
    for candidate in regions.get(locale, ()):
        if candidate.lower() == wanted:
            return candidate
    return None
