"""Translation engine: plural selection, scoped lookup and interpolation.

Templates use single-brace placeholders (``Hello, {name}!``). Plural forms
live under ``<key>#<category>`` entries with a mandatory ``#other`` sibling.
"""

import re
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Union

from infrastructure.i18n.models import (
    PLURAL_DELIMITER,
    LocaleDictionary,
    Number,
    Opaque,
    RenderedContent,
    Rendered,
    Text,
    to_interpolation_value,
)
from infrastructure.i18n.plurals import plural_category
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"(\{[^}]+\})")


class Translator:
    """Renders translation keys for a locale dictionary.

    One instance belongs to one i18n instance. The set of pluralizable base
    keys is derived once per locale and reused for every later lookup.

    Example:
        translator = Translator()
        translator.translate("en", dictionary, None, "item", {"count": 2})
        # "2 items"
    """

    def __init__(self):
        self._plural_keys: Dict[str, FrozenSet[str]] = {}

    def plural_keys(self, locale: str, dictionary: LocaleDictionary) -> FrozenSet[str]:
        """Get the pluralizable base keys of a locale, scope prefix included."""
        keys = self._plural_keys.get(locale)
        if keys is None:
            keys = frozenset(
                key.split(PLURAL_DELIMITER, 1)[0]
                for key in dictionary
                if PLURAL_DELIMITER in key
            )
            self._plural_keys[locale] = keys
        return keys

    def translate(
        self,
        locale: str,
        dictionary: LocaleDictionary,
        scope: Optional[str],
        key: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Rendered:
        """Resolve and render a translation key.

        Args:
            locale: Locale id; drives plural rule selection.
            dictionary: The locale dictionary.
            scope: Optional dot-separated key prefix.
            key: Key relative to the scope.
            params: Interpolation values. Raw scalars are wrapped with
                ``to_interpolation_value``; rich content must be ``Opaque``.

        Returns:
            The rendered string, or a list interleaving text with
            ``RenderedContent`` when any ``Opaque`` value was interpolated.
            A key missing from the dictionary renders as the key itself.
        """
        values = (
            {name: to_interpolation_value(value) for name, value in params.items()}
            if params
            else None
        )

        full_key = f"{scope}.{key}" if scope else key
        lookup_key = full_key
        is_plural = False

        count = values.get("count") if values else None
        if isinstance(count, Number) and full_key in self.plural_keys(locale, dictionary):
            category = plural_category(locale, count.value)
            lookup_key = f"{full_key}{PLURAL_DELIMITER}{category}"
            is_plural = True

        template = dictionary.get(lookup_key)
        if not template and is_plural:
            template = dictionary.get(f"{full_key}{PLURAL_DELIMITER}other")
        if not template:
            logger.debug("translation_not_found", locale=locale, key=lookup_key)
            template = key

        if values is None:
            return template

        return self._interpolate(template, values)

    def _interpolate(self, template: str, values: Mapping[str, Any]) -> Rendered:
        """Substitute placeholders, keeping opaque content as distinct elements."""
        parts: List[Union[str, RenderedContent]] = []
        is_text = True

        for index, part in enumerate(PLACEHOLDER_PATTERN.split(template)):
            if not part:
                continue
            if index % 2 == 0:
                parts.append(part)
                continue

            name = part[1:-1]
            value = values.get(name)
            if value is None:
                # Unknown placeholders stay visible rather than failing.
                parts.append(part)
            elif isinstance(value, Opaque):
                is_text = False
                parts.append(RenderedContent(key=f"{name}-{index}", content=value.content))
            elif isinstance(value, Text):
                parts.append(value.value)
            else:
                parts.append(str(value))

        if is_text:
            return "".join(parts)
        return parts
