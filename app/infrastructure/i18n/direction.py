"""Text direction of a locale."""

from functools import lru_cache
from typing import Literal

from babel import Locale, UnknownLocaleError

Direction = Literal["ltr", "rtl"]

# Checked before CLDR data, which lists some of these in Latin script.
RTL_LANGUAGES = frozenset(
    {
        "ar",  # Arabic
        "arc",  # Aramaic
        "ckb",  # Central Kurdish (Sorani)
        "dv",  # Divehi
        "fa",  # Persian
        "ha",  # Hausa (Arabic script)
        "he",  # Hebrew
        "khw",  # Khowar
        "ks",  # Kashmiri
        "ku",  # Kurdish
        "ps",  # Pashto
        "sd",  # Sindhi
        "ug",  # Uyghur
        "ur",  # Urdu
        "yi",  # Yiddish
    }
)


@lru_cache(maxsize=None)
def get_dir(locale: str) -> Direction:
    """Return ``"rtl"`` for right-to-left locales, ``"ltr"`` otherwise.

    Languages in ``RTL_LANGUAGES`` are right-to-left whatever script Babel
    reports for them. Other ids use Babel's character order.

    Example:
        >>> get_dir("he")
        'rtl'
        >>> get_dir("en")
        'ltr'
    """
    if locale.split("-", 1)[0].lower() in RTL_LANGUAGES:
        return "rtl"
    try:
        order = Locale.parse(locale, sep="-").character_order
    except (UnknownLocaleError, ValueError):
        return "ltr"
    return "rtl" if order == "right-to-left" else "ltr"
