"""Locale resolution middleware."""

from typing import Optional, Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from infrastructure.i18n import I18n, RedirectDirective
from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.services import get_i18n, get_settings
from server.adapter import (
    StarletteAdapter,
    append_set_cookie_headers,
    bind_request,
    pending_cookies,
    pending_navigation,
)

logger = get_module_logger()


class LocaleMiddleware(BaseHTTPMiddleware):
    """Resolve the locale of every non-excluded request.

    Redirect directives are answered directly. Resolved requests continue with
    the result stored on ``request.state.i18n`` and the locale bound into the
    logging context.

    Args:
        app: The ASGI application.
        i18n: The i18n instance. Defaults to the ``get_i18n`` singleton.
        excluded_paths: Paths served without resolution. Defaults to
            ``settings.server.LOCALE_EXCLUDED_PATHS``.
    """

    def __init__(
        self,
        app,
        i18n: Optional[I18n] = None,
        excluded_paths: Optional[Sequence[str]] = None,
    ):
        super().__init__(app)
        self._i18n = i18n
        self._excluded_paths = excluded_paths

    @property
    def i18n(self) -> I18n:
        if self._i18n is None:
            self._i18n = get_i18n()
        return self._i18n

    @property
    def excluded_paths(self) -> Sequence[str]:
        if self._excluded_paths is None:
            self._excluded_paths = get_settings().server.LOCALE_EXCLUDED_PATHS
        return self._excluded_paths

    @property
    def adapter(self) -> StarletteAdapter:
        if isinstance(self.i18n.adapter, StarletteAdapter):
            return self.i18n.adapter
        return StarletteAdapter(
            self.i18n.config.param_name, self.i18n.config.default_locale
        )

    def is_excluded(self, path: str) -> bool:
        for excluded in self.excluded_paths:
            prefix = excluded.rstrip("/")
            if path == excluded or path.startswith(f"{prefix}/"):
                return True
        return False

    async def dispatch(self, request, call_next):
        if self.is_excluded(request.url.path):
            return await call_next(request)

        resolution = self.i18n.server.resolve(request, request.path_params)
        if isinstance(resolution, RedirectDirective):
            return self.adapter.redirect(resolution.location, resolution.headers)

        request.state.i18n = resolution
        with bind_request_context(
            correlation_id=request.headers.get("x-request-id"),
            request_path=request.url.path,
            request_method=request.method,
            locale=resolution.locale,
        ), bind_request(request):
            response = await call_next(request)

            target = pending_navigation(request)
            if target is not None:
                logger.info("client_navigation", target=target)
                response = RedirectResponse(target, status_code=303)
            append_set_cookie_headers(response, pending_cookies(request))
        return response
