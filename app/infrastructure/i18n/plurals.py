"""Plural category selection backed by Babel's CLDR cardinal rules."""

import math
from functools import lru_cache
from typing import Callable, Union

from babel import Locale, UnknownLocaleError

from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_RULES_LOCALE = "en"


@lru_cache(maxsize=None)
def _cardinal_rule(locale: str) -> Callable[[Union[int, float]], str]:
    try:
        return Locale.parse(locale, sep="-").plural_form
    except (UnknownLocaleError, ValueError):
        logger.warning(
            "plural_rules_unavailable", locale=locale, using=DEFAULT_RULES_LOCALE
        )
        return Locale.parse(DEFAULT_RULES_LOCALE).plural_form


def plural_category(locale: str, count: Union[int, float]) -> str:
    """Select the plural category for ``count`` in ``locale``.

    ``0`` always selects ``zero`` so that an authored ``#zero`` entry wins
    even where the locale's cardinal rule has no zero category. Any other
    count uses the locale's CLDR cardinal rule.

    Args:
        locale: Locale id (``en``, ``pl``, ``pt-BR``).
        count: The number being pluralized.

    Returns:
        One of zero, one, two, few, many, other.

    Example:
        >>> plural_category("en", 2)
        'other'
        >>> plural_category("pl", 2)
        'few'
    """
    if count == 0:
        return "zero"
    if not math.isfinite(count):
        return "other"
    if isinstance(count, float) and count.is_integer():
        # 1.0 is one, not a decimal with visible fraction digits.
        count = int(count)
    return _cardinal_rule(locale)(abs(count))
