"""Locale resolution for incoming requests.

Decides from the URL path, the locale cookies and the ``Accept-Language``
header which locale a request renders in, or whether the client must be
redirected to the canonical localized URL first.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Protocol, Sequence, Tuple

from infrastructure.i18n.cookies import create_locale_cookies, parse_cookies
from infrastructure.i18n.models import (
    I18nConfig,
    RedirectDirective,
    Resolution,
    ResolutionResult,
)
from infrastructure.i18n.paths import first_segment, normalize_path, strip_first_segment
from infrastructure.i18n.regions import (
    RegionConfig,
    format_full_locale,
    is_valid_full_locale,
    match_region,
    resolve_region,
    split_full_locale,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class RequestURL(Protocol):
    path: str
    query: str


class RequestLike(Protocol):
    """The parts of an HTTP request the resolver reads.

    ``starlette.requests.Request`` satisfies this protocol.
    """

    @property
    def url(self) -> RequestURL: ...

    @property
    def headers(self) -> Mapping[str, str]: ...


@dataclass(frozen=True)
class LanguagePreference:
    """One ``Accept-Language`` entry."""

    code: str
    weight: float = 1.0

    @property
    def base(self) -> str:
        return self.code.split("-", 1)[0]

    @property
    def region(self) -> Optional[str]:
        parts = self.code.split("-", 1)
        return parts[1] if len(parts) > 1 else None


def parse_accept_language(header: Optional[str]) -> List[LanguagePreference]:
    """Parse an ``Accept-Language`` header, highest weight first.

    Entries without ``q`` weigh 1; unparsable weights count as 1; entries
    with ``q=0`` are not acceptable and are dropped. Equal weights keep
    header order.

    Example:
        >>> parse_accept_language("en-US,en;q=0.9,es;q=0.8")
        [LanguagePreference(code='en-us', weight=1.0), ...]
    """
    if not header:
        return []

    preferences = []
    for entry in header.split(","):
        code, *attributes = entry.strip().split(";")
        code = code.strip().lower()
        if not code:
            continue

        weight = 1.0
        for attribute in attributes:
            name, _, value = attribute.strip().partition("=")
            if name.strip() == "q":
                try:
                    weight = float(value)
                except ValueError:
                    weight = 1.0

        if weight > 0:
            preferences.append(LanguagePreference(code, weight))

    return sorted(preferences, key=lambda p: p.weight, reverse=True)


class LanguageNegotiator:
    """Picks the best supported locale and region for a client.

    Attributes:
        supported_locales: Locale ids with a registered loader.
        regions: Locale id to ordered region codes.
        default_locale: Locale used when nothing in the header matches.
    """

    def __init__(
        self,
        supported_locales: Sequence[str],
        regions: RegionConfig,
        default_locale: str,
    ):
        self.supported_locales = list(supported_locales)
        self.regions = regions
        self.default_locale = default_locale

    def negotiate(self, accept_language: Optional[str]) -> Tuple[str, str]:
        """Resolve ``(locale, region)`` from an ``Accept-Language`` header.

        The first entry (by weight) whose base language is supported wins.
        Its region is kept when configured for that locale, otherwise the
        locale's canonical region is used.
        """
        for preference in parse_accept_language(accept_language):
            base = preference.base
            if base not in self.supported_locales or not self.regions.get(base):
                continue

            region = match_region(self.regions, base, preference.region)
            if region is None:
                region = self.regions[base][0]

            logger.debug("language_negotiated", locale=base, region=region)
            return base, region

        logger.debug("no_matching_language", default=self.default_locale)
        return self.default_locale, resolve_region(
            self.regions, self.default_locale, self.default_locale
        )


@dataclass(frozen=True)
class _RequestState:
    request: Any
    path: str
    query: str
    url_locale: Optional[str]
    locale_cookie: Optional[str]
    full_locale_cookie: Optional[str]
    accept_language: Optional[str]


class LocaleResolver:
    """Locale resolution state machine.

    States, first match wins:

    1. The URL names an unsupported locale: render the fallback locale.
    2. The URL names no locale: use the locale cookie (directly or through a
       redirect), else negotiate from ``Accept-Language`` and redirect.
    3. The URL names a supported locale: refresh stale cookies through a
       redirect, strip an unwanted default-locale prefix, else render it.

    Redirects are returned as ``RedirectDirective`` values; the HTTP layer
    turns them into responses.
    """

    def __init__(self, config: I18nConfig, supported_locales: Sequence[str]):
        self.config = config
        self.supported_locales = list(supported_locales)
        self.negotiator = LanguageNegotiator(
            self.supported_locales, config.regions, config.default_locale
        )

    def resolve(
        self,
        request: RequestLike,
        route_params: Optional[Mapping[str, Any]] = None,
    ) -> Resolution:
        """Resolve the locale of a request.

        Args:
            request: The incoming request.
            route_params: Route parameters; ``route_params[param_name]`` takes
                precedence over the first path segment.

        Returns:
            ``ResolutionResult`` to render, or ``RedirectDirective`` to follow.
        """
        state = self._read_request(request, route_params or {})
        log = logger.bind(path=state.path, url_locale=state.url_locale)

        if state.url_locale and state.url_locale not in self.supported_locales:
            log.info("unsupported_url_locale", fallback=self.config.fallback_locale)
            return self._resolved(state, self.config.fallback_locale)

        if not state.url_locale:
            return self._resolve_without_url_locale(state)

        return self._resolve_url_locale(state)

    def _read_request(
        self, request: RequestLike, route_params: Mapping[str, Any]
    ) -> _RequestState:
        path = request.url.path or "/"
        cookies = parse_cookies(request.headers)
        return _RequestState(
            request=request,
            path=path,
            query=request.url.query,
            url_locale=route_params.get(self.config.param_name) or first_segment(path),
            locale_cookie=cookies.get(self.config.param_name) or None,
            full_locale_cookie=cookies.get(self.config.full_param_name) or None,
            accept_language=request.headers.get("accept-language"),
        )

    def _resolve_without_url_locale(self, state: _RequestState) -> Resolution:
        default = self.config.default_locale
        prefix_default = self.config.prefix_default_locale
        stored = state.locale_cookie

        if stored and stored not in self.supported_locales:
            logger.info("unsupported_stored_locale_ignored", stored_locale=stored)
            stored = None

        if not prefix_default and stored == default:
            return self._resolved(state, default)

        if stored:
            if not prefix_default and stored != default:
                return self._redirect(state, default)
            return self._redirect(state, stored)

        locale, region = self.negotiator.negotiate(state.accept_language)
        return self._redirect(state, locale, region)

    def _resolve_url_locale(self, state: _RequestState) -> Resolution:
        url_locale = state.url_locale
        full_locale_invalid = not is_valid_full_locale(
            state.full_locale_cookie, self.config.regions, expected_locale=url_locale
        )

        if state.locale_cookie != url_locale or full_locale_invalid:
            return self._redirect(state, url_locale)

        if not self.config.prefix_default_locale and url_locale == self.config.default_locale:
            return self._redirect(state, url_locale)

        return self._resolved(state, url_locale)

    def _region_for(self, locale: str, full_locale_cookie: Optional[str]) -> str:
        # A valid full-locale cookie records the client's region choice.
        if is_valid_full_locale(full_locale_cookie, self.config.regions, expected_locale=locale):
            return split_full_locale(full_locale_cookie)[1]
        return resolve_region(self.config.regions, locale, self.config.fallback_locale)

    def _resolved(self, state: _RequestState, locale: str) -> ResolutionResult:
        region = self._region_for(locale, state.full_locale_cookie)
        logger.debug("locale_resolved", locale=locale, region=region)
        return ResolutionResult(
            locale=locale,
            region=region,
            full_locale=format_full_locale(locale, region),
            request=state.request,
        )

    def _redirect(
        self,
        state: _RequestState,
        target_locale: str,
        region: Optional[str] = None,
    ) -> RedirectDirective:
        if region is None:
            region = self._region_for(target_locale, state.full_locale_cookie)

        locale_cookie, full_locale_cookie = create_locale_cookies(
            target_locale, region, self.config
        )
        cookies = tuple(
            cookie
            for cookie, current in (
                (locale_cookie, state.locale_cookie),
                (full_locale_cookie, state.full_locale_cookie),
            )
            if cookie.value != current
        )

        if state.url_locale:
            rest = strip_first_segment(state.path)
        else:
            rest = normalize_path(state.path).lstrip("/")

        should_prefix = (
            self.config.prefix_default_locale
            or target_locale != self.config.default_locale
        )
        prefix = f"/{target_locale}" if should_prefix else ""
        location = f"{prefix}/{rest}" if rest else (prefix or "/")
        if state.query:
            location = f"{location}?{state.query}"

        logger.info(
            "locale_redirect_issued",
            target_locale=target_locale,
            location=location,
            updated=[cookie.name for cookie in cookies],
        )
        return RedirectDirective(location=location, cookies=cookies)
