"""Infrastructure modules for the intlize application.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings, ServerSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale resolution, locale data caching and translation rendering
- services: Dependency injection providers (get_settings, get_i18n)
"""
