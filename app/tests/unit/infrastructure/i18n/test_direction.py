"""Unit tests for text direction lookup."""

import pytest

from infrastructure.i18n.direction import get_dir


@pytest.mark.unit
@pytest.mark.parametrize(
    "locale,expected",
    [
        ("en", "ltr"),
        ("es-AR", "ltr"),
        ("ar", "rtl"),
        ("he", "rtl"),
        ("fa-IR", "rtl"),
    ],
)
def test_get_dir(locale, expected):
    assert get_dir(locale) == expected


@pytest.mark.unit
@pytest.mark.parametrize("locale", ["ha", "ha-NG", "ku", "ks-IN"])
def test_get_dir_language_list_takes_precedence(locale):
    """Listed languages are rtl even where CLDR lists a Latin default script."""
    assert get_dir(locale) == "rtl"


@pytest.mark.unit
def test_get_dir_unknown_locale_uses_language_list():
    """Ids without CLDR data fall back to the RTL language list."""
    assert get_dir("yi") == "rtl"
    assert get_dir("zz") == "ltr"
