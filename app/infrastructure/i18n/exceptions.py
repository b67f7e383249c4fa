"""Custom exceptions for the i18n system.

Translation misses are not errors and never raise: an unresolved key renders
as the key itself. The exceptions below cover configuration mistakes and
programmer errors only, and propagate to the caller unmodified.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            i18n = create_i18n(locales, config)
        except I18nError as e:
            logger.error("i18n_setup_failed", error=str(e))
    """

    pass


class ConfigurationError(I18nError):
    """Raised when the i18n configuration violates its invariants.

    Example:
        >>> create_i18n({"en": load_en, "es": load_es}, config_without_es_regions)
        Traceback (most recent call last):
        ...
        ConfigurationError: No regions configured for locale 'es'
    """

    pass


class UnsupportedLocaleError(I18nError):
    """Raised when a locale has no loader in the registry.

    Attributes:
        locale: The locale id that was requested.
    """

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Unsupported locale: {locale}")


class MissingResolutionContextError(I18nError):
    """Raised when a server translation is requested before locale resolution.

    The server-side translators read the locale cookie written by the
    resolution step. A request without that cookie means the resolution
    middleware did not run for it.

    Attributes:
        operation: Name of the operation that was called (``t`` or ``scoped_t``).
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"Locale cookie not found. Make sure locale resolution runs "
            f"before calling {operation}."
        )
