"""YAML-backed locale registry.

Builds a locale registry (locale id to async loader) from a directory of
YAML files named ``<locale>.yml`` or ``<domain>.<locale>.yml``.
"""

import asyncio
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

from infrastructure.i18n.models import PLURAL_DELIMITER, LocaleLoader
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def flatten_messages(data: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested YAML mappings into dot-scoped keys.

    Expected format:
        nav:
          home: Home
          items#one: "{count} item"
          items#other: "{count} items"

    becomes ``{"nav.home": "Home", "nav.items#one": ..., "nav.items#other": ...}``.
    """
    messages: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            messages.update(flatten_messages(value, full_key))
        elif value is None:
            logger.warning("empty_translation_skipped", key=full_key)
        else:
            messages[full_key] = str(value)
    return messages


class YAMLLocaleLoader:
    """Loader for YAML-based locale files.

    Attributes:
        locales_dir: Directory containing the YAML files.
    """

    def __init__(self, locales_dir: Path):
        """Initialize the YAML locale loader.

        Args:
            locales_dir: Directory with YAML locale files.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.locales_dir = Path(locales_dir)

        if not self.locales_dir.exists():
            raise ValueError(f"Locales directory not found: {self.locales_dir}")

        logger.info("initialized_yaml_loader", locales_dir=str(self.locales_dir))

    def discover_locales(self) -> List[str]:
        """List locale ids that have at least one YAML file, sorted."""
        locales = {path.stem.split(".")[-1] for path in self.locales_dir.glob("*.yml")}
        return sorted(locales)

    def files_for(self, locale: str) -> List[Path]:
        """YAML files of a locale in merge order."""
        files = [self.locales_dir / f"{locale}.yml"]
        files.extend(sorted(self.locales_dir.glob(f"*.{locale}.yml")))
        return [path for path in files if path.exists()]

    def read_locale(self, locale: str) -> Dict[str, str]:
        """Read and merge every YAML file of a locale.

        Later files override earlier ones.

        Raises:
            FileNotFoundError: If the locale has no files.
            ValueError: If a file is not valid YAML.
        """
        files = self.files_for(locale)
        if not files:
            raise FileNotFoundError(
                f"No locale files found for {locale} in {self.locales_dir}"
            )

        messages: Dict[str, str] = {}
        for path in files:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(path), error=str(e))
                raise ValueError(f"Failed to parse {path}: {e}") from e

            if not data:
                continue
            if not isinstance(data, Mapping):
                logger.warning("invalid_yaml_format", file=str(path), expected="dict")
                continue
            messages.update(flatten_messages(data))

        plural_keys = sum(1 for key in messages if PLURAL_DELIMITER in key)
        logger.info(
            "read_locale_files",
            locale=locale,
            file_count=len(files),
            key_count=len(messages),
            plural_key_count=plural_keys,
        )
        return messages

    def loader_for(self, locale: str) -> LocaleLoader:
        """Create the async registry loader of one locale."""

        async def load() -> Dict[str, Any]:
            messages = await asyncio.to_thread(self.read_locale, locale)
            return {"default": messages}

        return load

    def registry(self) -> Dict[str, LocaleLoader]:
        """Build the locale registry for every discovered locale.

        Raises:
            ValueError: If the directory holds no YAML files.
        """
        locales = self.discover_locales()
        if not locales:
            raise ValueError(f"No locale files found in {self.locales_dir}")
        return {locale: self.loader_for(locale) for locale in locales}
