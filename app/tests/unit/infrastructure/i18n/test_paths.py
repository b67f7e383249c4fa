"""Unit tests for locale-prefixed path building."""

import pytest

from infrastructure.i18n.paths import (
    build_path,
    first_segment,
    generate_static_paths,
    normalize_path,
    strip_first_segment,
    strip_locale_segment,
)


@pytest.mark.unit
class TestNormalizePath:
    """Test suite for normalize_path."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("//path///to/page//", "/path/to/page"),
            ("/", "/"),
            ("", "/"),
            ("/about", "/about"),
        ],
    )
    def test_normalize(self, path, expected):
        assert normalize_path(path) == expected


@pytest.mark.unit
class TestBuildPath:
    """Test suite for build_path."""

    @pytest.mark.parametrize(
        "raw,locale,expected",
        [
            ("/about", "es", "/es/about"),
            ("about", "es", "/es/about"),
            ("/", "es", "/es"),
            ("/es", "es", "/es"),
            ("/es/about", "es", "/es/about"),
            ("//about//", "es", "/es/about"),
            ("/en/about", "en", "/en/about"),
            ("/about", "en", "/en/about"),
        ],
    )
    def test_prefixed(self, config, raw, locale, expected):
        assert build_path(raw, locale, config) == expected

    def test_default_locale_unprefixed(self, unprefixed_config):
        """Default locale paths stay bare when prefixing is off."""
        assert build_path("/about", "en", unprefixed_config) == "/about"
        assert build_path("/", "en", unprefixed_config) == "/"
        assert build_path("/about", "es", unprefixed_config) == "/es/about"

    def test_locale_lookalike_segment_is_prefixed(self, config):
        """Only a whole leading segment counts as the locale prefix."""
        assert build_path("/estate", "es", config) == "/es/estate"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("about?x=/", "/es/about?x=/"),
            ("//about//?next=//cart/", "/es/about?next=//cart/"),
            ("/?page=2", "/es?page=2"),
            ("/es?page=2", "/es?page=2"),
        ],
    )
    def test_query_string_is_not_normalized(self, config, raw, expected):
        """Only the path part is normalized; the query is kept verbatim."""
        assert build_path(raw, "es", config) == expected

    @pytest.mark.parametrize(
        "raw", ["/", "about", "/es", "//x//y/", "/es/a", "a?x=/", "/es?q=1"]
    )
    @pytest.mark.parametrize("locale", ["en", "es"])
    def test_idempotent(self, config, unprefixed_config, raw, locale):
        """Building an already built path returns it unchanged."""
        for cfg in (config, unprefixed_config):
            once = build_path(raw, locale, cfg)
            assert build_path(once, locale, cfg) == once


@pytest.mark.unit
class TestGenerateStaticPaths:
    """Test suite for generate_static_paths."""

    def test_prefixed(self, config):
        paths = generate_static_paths(["/", "/about"], ["en", "es"], config)
        assert paths == ["/en", "/es", "/en/about", "/es/about"]

    def test_unprefixed_default(self, unprefixed_config):
        paths = generate_static_paths(["/", "/about"], ["en", "es"], unprefixed_config)
        assert paths == ["/", "/es", "/about", "/es/about"]


@pytest.mark.unit
class TestSegments:
    """Test suite for path segment helpers."""

    def test_first_segment(self):
        assert first_segment("/es/about") == "es"
        assert first_segment("//es") == "es"
        assert first_segment("/") is None

    def test_strip_first_segment(self):
        assert strip_first_segment("/es/about/team") == "about/team"
        assert strip_first_segment("/es") == ""

    def test_strip_locale_segment(self):
        assert strip_locale_segment("/en/about", "en") == "/about"
        assert strip_locale_segment("/about", "en") == "/about"
        assert strip_locale_segment("/en", "en") == "/"
