"""Starlette host adapter for the i18n client API.

The adapter is a process-wide object; the request it works on is bound per
request through a context var by ``LocaleMiddleware``. Navigation and cookies
requested while handling a request are queued on ``request.state`` and
applied to the outgoing response by the middleware.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from html import escape
from typing import Any, Generator, Iterable, List, Mapping, Optional, Sequence, Tuple

from starlette.requests import Request
from starlette.responses import RedirectResponse

_current_request: ContextVar[Optional[Request]] = ContextVar(
    "i18n_current_request", default=None
)


@contextmanager
def bind_request(request: Request) -> Generator[Request, None, None]:
    """Bind ``request`` as the adapter's current request within the block."""
    token = _current_request.set(request)
    try:
        yield request
    finally:
        _current_request.reset(token)


def get_current_request() -> Request:
    request = _current_request.get()
    if request is None:
        raise RuntimeError("No request bound; is LocaleMiddleware installed?")
    return request


def pending_cookies(request: Request) -> List[str]:
    """Set-Cookie values queued while handling ``request``."""
    return getattr(request.state, "i18n_cookies", [])


def pending_navigation(request: Request) -> Optional[str]:
    """Navigation target queued while handling ``request``, if any."""
    return getattr(request.state, "i18n_navigate", None)


def append_set_cookie_headers(response: Any, values: Iterable[str]) -> None:
    for value in values:
        response.raw_headers.append((b"set-cookie", value.encode("latin-1")))


class StarletteAdapter:
    """``HostAdapter`` implementation for FastAPI/Starlette.

    Args:
        param_name: Route parameter carrying the locale.
        default_locale: Locale reported when no locale is known for the request.
    """

    def __init__(self, param_name: str = "locale", default_locale: str = "en"):
        self.param_name = param_name
        self.default_locale = default_locale

    def current_locale(self) -> str:
        request = get_current_request()
        resolution = getattr(request.state, "i18n", None)
        if resolution is not None:
            return resolution.locale
        return request.path_params.get(self.param_name) or self.default_locale

    def navigate(self, target: str) -> None:
        get_current_request().state.i18n_navigate = target

    def pathname(self) -> str:
        return get_current_request().url.path

    def search_params(self) -> Sequence[Tuple[str, str]]:
        return get_current_request().query_params.multi_items()

    def redirect(
        self, target: str, headers: Iterable[Tuple[str, str]]
    ) -> RedirectResponse:
        response = RedirectResponse(target)
        for name, value in headers:
            response.raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
        return response

    def render_link(self, props: Mapping[str, Any]) -> str:
        attrs = dict(props)
        children = attrs.pop("children", "")
        rendered = "".join(
            f' {escape(str(name))}="{escape(str(value))}"'
            for name, value in attrs.items()
            if value is not None
        )
        return f"<a{rendered}>{escape(str(children))}</a>"

    def set_cookie(self, header_value: str) -> None:
        request = get_current_request()
        cookies = pending_cookies(request)
        cookies.append(header_value)
        request.state.i18n_cookies = cookies
