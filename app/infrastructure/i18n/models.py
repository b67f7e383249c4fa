"""Data models for the i18n system.

Defines the configuration, the tagged interpolation values accepted by the
translation engine and the two terminal outcomes of locale resolution.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

PARAM_NAME = "locale"
PLURAL_DELIMITER = "#"
PLURAL_CATEGORIES = ("zero", "one", "two", "few", "many", "other")

LocaleDictionary = Mapping[str, str]
LocaleLoader = Callable[[], Awaitable[Mapping[str, Any]]]
LocaleRegistry = Mapping[str, LocaleLoader]


class I18nConfig(BaseModel):
    """Configuration for one i18n instance.

    Attributes:
        default_locale: Locale used when nothing else applies.
        fallback_locale: Locale rendered when the URL names an unsupported one.
        regions: Locale id to ordered region codes; first entry is canonical.
        prefix_default_locale: Whether the default locale appears in paths.
        param_name: Route param and cookie name carrying the locale id.
        secure_cookies: Whether locale cookies carry the ``Secure`` flag.
    """

    model_config = ConfigDict(frozen=True)

    default_locale: str
    fallback_locale: str
    regions: Dict[str, List[str]]
    prefix_default_locale: bool = True
    param_name: str = PARAM_NAME
    secure_cookies: bool = False

    @model_validator(mode="after")
    def validate_regions(self) -> "I18nConfig":
        """Ensure default and fallback locales have regions and no list is empty."""
        for locale, regions in self.regions.items():
            if not regions:
                raise ValueError(f"Region list for locale '{locale}' is empty")
        for name in ("default_locale", "fallback_locale"):
            locale = getattr(self, name)
            if locale not in self.regions:
                raise ValueError(f"No regions configured for {name} '{locale}'")
        return self

    @property
    def full_param_name(self) -> str:
        """Cookie name carrying the ``locale-REGION`` value."""
        return f"full_{self.param_name}"


@dataclass(frozen=True)
class Text:
    """Plain text interpolation value."""

    value: str


@dataclass(frozen=True)
class Number:
    """Numeric interpolation value; also drives plural selection as ``count``."""

    value: Union[int, float]

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Opaque:
    """Rich content handle kept as a distinct element in the rendered output."""

    content: Any


InterpolationValue = Union[Text, Number, Opaque]


def to_interpolation_value(value: Any) -> InterpolationValue:
    """Wrap a raw Python value into its interpolation tag.

    Already-tagged values pass through. Integers and floats become
    ``Number`` (booleans excluded), everything else is rendered as ``Text``.
    Rich content must be wrapped in ``Opaque`` explicitly.
    """
    if isinstance(value, (Text, Number, Opaque)):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Number(value)
    return Text(str(value))


@dataclass(frozen=True)
class RenderedContent:
    """Opaque content placed in a rendered sequence.

    Attributes:
        key: Stable identity built from the parameter name and its position.
        content: The handle passed in through ``Opaque``.
    """

    key: str
    content: Any


Rendered = Union[str, List[Union[str, RenderedContent]]]


@dataclass(frozen=True)
class LocaleCookie:
    """A cookie-set instruction for one of the two locale cookies."""

    name: str
    value: str
    secure: bool = False

    def header_value(self) -> str:
        """Render as a ``Set-Cookie`` header value."""
        attrs = ["Path=/", "SameSite=Lax", "HttpOnly"]
        if self.secure:
            attrs.append("Secure")
        return "; ".join([f"{self.name}={self.value}", *attrs])


@dataclass(frozen=True)
class ResolutionResult:
    """Successful outcome of locale resolution.

    Attributes:
        locale: Resolved locale id.
        region: Region code for the locale.
        full_locale: ``locale-REGION`` composite.
        request: The request that was resolved.
    """

    locale: str
    region: str
    full_locale: str
    request: Any = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class RedirectDirective:
    """Outcome of locale resolution asking the client to move to a canonical URL.

    Attributes:
        location: Target path including the original query string.
        cookies: Cookie instructions for values that actually change.
    """

    location: str
    cookies: tuple[LocaleCookie, ...] = ()

    @property
    def headers(self) -> List[tuple[str, str]]:
        """Headers to attach to the redirect response."""
        return [("set-cookie", cookie.header_value()) for cookie in self.cookies]


Resolution = Union[ResolutionResult, RedirectDirective]


def unwrap_module(loaded: Mapping[str, Any]) -> Optional[LocaleDictionary]:
    """Return the dictionary carried under ``default`` by a loader result."""
    dictionary = loaded.get("default")
    if dictionary is None or not isinstance(dictionary, Mapping):
        return None
    return dictionary
