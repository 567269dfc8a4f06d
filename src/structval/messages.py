"""Violation message templates and rendering.

Templates use positional ``str.format`` fields. Argument ``{0}`` is always the
violation path text; the remaining arguments depend on the template key.
"""

import logging
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

# Template keys, one per violation kind
NOT_ALLOW_EMPTY = "not_allow_empty"
FORMAT_MISMATCH = "format_mismatch"      # {1}: attempted format names
PATTERN_MISMATCH = "pattern_mismatch"
ENUM_MISMATCH = "enum_mismatch"          # {1}: allowed values, {2}: actual
LESS_THAN_MIN = "less_than_min"          # {1}: bound, {2}: actual
GREATER_THAN_MAX = "greater_than_max"    # {1}: bound, {2}: actual
GROUP_UNVALUED = "group_unvalued"        # {1}: member paths
CALLBACK_REJECTED = "callback_rejected"

CATALOGS: Dict[str, Dict[str, str]] = {
    "en": {
        NOT_ALLOW_EMPTY: "not allow empty",
        FORMAT_MISMATCH: "is not one of the [{1}]",
        PATTERN_MISMATCH: "could be malformed",
        ENUM_MISMATCH: "should be one of [{1}], current value is [{2}]",
        LESS_THAN_MIN: "should be greater than equal [{1}], current value is [{2}]",
        GREATER_THAN_MAX: "should be less than equal [{1}], current value is [{2}]",
        GROUP_UNVALUED: "at least one of [{1}] should be valued",
        CALLBACK_REJECTED: "rejected by callback",
    },
    "zh": {
        NOT_ALLOW_EMPTY: "不允许为空",
        FORMAT_MISMATCH: "不是[{1}]中的一种",
        PATTERN_MISMATCH: "格式可能不正确",
        ENUM_MISMATCH: "应该是[{1}]之一，当前值为[{2}]",
        LESS_THAN_MIN: "应该大于等于[{1}]，当前值为[{2}]",
        GREATER_THAN_MAX: "应该小于等于[{1}]，当前值为[{2}]",
        GROUP_UNVALUED: "[{1}]中至少有一个需要有值",
        CALLBACK_REJECTED: "未通过回调校验",
    },
}


class Printer:
    """Renders violation templates for one locale."""

    def __init__(self, locale: str = DEFAULT_LOCALE,
                 catalogs: Mapping[str, Mapping[str, str]] | None = None):
        self._catalogs: Dict[str, Dict[str, str]] = {
            name: dict(templates) for name, templates in CATALOGS.items()
        }
        for name, templates in (catalogs or {}).items():
            self._catalogs.setdefault(name, {}).update(templates)
        self._locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def locales(self) -> list[str]:
        return sorted(self._catalogs)

    def _template(self, key: str) -> str | None:
        for locale in (self._locale, self._locale.split("-")[0], DEFAULT_LOCALE):
            template = self._catalogs.get(locale, {}).get(key)
            if template is not None:
                return template
        return None

    def render(self, key: str, *args: Any) -> str:
        """Render template ``key`` with positional arguments."""
        template = self._template(key)
        if template is None:
            logger.warning(f"No message template for '{key}' in locale '{self._locale}'")
            return key
        return template.format(*args)
