"""Host adapter contract.

The i18n core never talks to a web framework directly. Each host supplies
one object implementing this protocol; ``server.adapter.StarletteAdapter``
is the FastAPI/Starlette implementation.
"""

from typing import Any, Iterable, Mapping, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class HostAdapter(Protocol):
    """Capabilities the i18n core consumes from its host framework."""

    def current_locale(self) -> str:
        """Locale id of the current render (route param or default locale)."""
        ...

    def navigate(self, target: str) -> None:
        """Move the client to ``target``."""
        ...

    def pathname(self) -> str:
        """Path of the current URL."""
        ...

    def search_params(self) -> Sequence[Tuple[str, str]]:
        """Ordered query string pairs of the current URL."""
        ...

    def redirect(self, target: str, headers: Iterable[Tuple[str, str]]) -> Any:
        """Build the host's redirect response carrying ``headers``."""
        ...

    def render_link(self, props: Mapping[str, Any]) -> Any:
        """Render a link whose ``href`` is already localized."""
        ...

    def set_cookie(self, header_value: str) -> None:
        """Queue a ``Set-Cookie`` header value for the client."""
        ...
