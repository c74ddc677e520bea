"""Key-naming conversion between the wire form and the internal form.

The BagelPay API speaks ``snake_case`` on the wire while the SDK's internal
form is ``camelCase``. Both directions rewrite mapping keys recursively through
nested mappings and sequences; values are never touched.

Only lowercase word-separated keys (``product_id``) and their camel-cased
counterparts (``productId``) round-trip. Keys with consecutive capitals
(``productURL``) or a leading digit after a separator (``period_3months``) are
converted mechanically and may not come back unchanged.
"""

import re
from collections.abc import Callable, Mapping
from typing import Any

_SNAKE_BOUNDARY = re.compile(r"_([a-z])")
_UPPERCASE = re.compile(r"[A-Z]")


def snake_to_camel(key: str) -> str:
    """Convert a ``snake_case`` key to ``camelCase``."""
    return _SNAKE_BOUNDARY.sub(lambda match: match.group(1).upper(), key)


def camel_to_snake(key: str) -> str:
    """Convert a ``camelCase`` key to ``snake_case``."""
    return _UPPERCASE.sub(lambda match: f"_{match.group(0).lower()}", key)


def _convert_keys(value: Any, convert: Callable[[str], str]) -> Any:
    if isinstance(value, Mapping):
        return {
            (convert(key) if isinstance(key, str) else key): _convert_keys(item, convert)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_convert_keys(item, convert) for item in value]
    return value


def to_internal_form(value: Any) -> Any:
    """
    Rewrite wire-form keys to internal form.

    Args:
        value: Any JSON-compatible value

    Returns:
        A copy of ``value`` whose mapping keys are ``camelCase``. Scalars and
        ``None`` are returned as-is.
    """
    return _convert_keys(value, snake_to_camel)


def to_wire_form(value: Any) -> Any:
    """
    Rewrite internal-form keys to wire form.

    Args:
        value: Any JSON-compatible value

    Returns:
        A copy of ``value`` whose mapping keys are ``snake_case``. Scalars and
        ``None`` are returned as-is.
    """
    return _convert_keys(value, camel_to_snake)
