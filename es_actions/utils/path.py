"""Path and query-parameter helpers shared by all actions."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from typing import Any
from urllib.parse import quote

from ..core.exceptions import UnsupportedParameterError

_LIST_TYPES = (list, tuple, set, frozenset)


def is_blank(value: Any) -> bool:
    """Return True for values that do not count as a supplied argument."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (*_LIST_TYPES, dict)):
        return len(value) == 0
    return False


def escape(value: Any) -> str:
    """URL-escape a single path item, leaving a bare wildcard untouched."""
    text = str(value)
    if text == "*":
        return text
    return quote(text, safe="")


def _flatten(values: Iterable[Any]) -> Iterable[Any]:
    for value in values:
        if isinstance(value, _LIST_TYPES):
            yield from _flatten(value)
        elif isinstance(value, str):
            yield from value.split(",")
        else:
            yield value


def listify(*values: Any, escape_items: bool = True) -> str:
    """Serialize values into a comma-separated list.

    Nested lists are flattened, strings already containing commas are split,
    and ``None`` or blank items are dropped.

    Examples:
        >>> listify(["a", "b"])
        'a,b'
        >>> listify("logs 2024", None)
        'logs%202024'
    """
    items = [item for item in _flatten(values) if not is_blank(item)]
    if escape_items:
        return ",".join(escape(item) for item in items)
    return ",".join(str(item).strip() for item in items)


def pathify(*segments: Any) -> str:
    """Join path segments with single slashes, omitting blank ones.

    Examples:
        >>> pathify("myindex", "", "_warmer", "main")
        'myindex/_warmer/main'
    """
    parts: list[str] = []
    for segment in segments:
        if isinstance(segment, _LIST_TYPES):
            segment = pathify(*segment)
        if is_blank(segment):
            continue
        parts.extend(part for part in str(segment).split("/") if part.strip())
    return "/".join(parts)


def extract_params(
    arguments: Mapping[str, Any],
    valid_params: Collection[str],
    *,
    consumed: Collection[str] = (),
    action: str = "",
    strict: bool = False,
) -> dict[str, Any]:
    """Filter an argument bag down to recognized query parameters.

    Args:
        arguments: Argument bag supplied by the caller
        valid_params: Parameter names the action recognizes
        consumed: Keys already used for the path or body
        action: Action id, used in error messages
        strict: Raise on unrecognized names instead of dropping them

    Returns:
        Query parameters with ``None`` values removed and list values
        serialized as comma-separated strings

    Raises:
        UnsupportedParameterError: If ``strict`` and a name is unrecognized
    """
    params: dict[str, Any] = {}
    for key, value in arguments.items():
        if key in consumed:
            continue
        if key not in valid_params:
            if strict:
                raise UnsupportedParameterError(key, action)
            continue
        if value is None:
            continue
        if isinstance(value, _LIST_TYPES):
            value = listify(value, escape_items=False)
        params[key] = value
    return params
