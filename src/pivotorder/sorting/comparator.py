"""Three-way comparison of dimension values and measure rows.

One comparison covers both shapes the sorter deals with: bare values
(dimension labels) and rows projected through a ``key`` (measure values).
Only projected values get numeric comparison and placeholder handling;
bare values always compare as text so that labels such as ``"10"`` and
``"9"`` keep dictionary order.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any

from pypinyin import lazy_pinyin

from pivotorder.constants import PLACEHOLDER_VALUES
from pivotorder.models.sort import SortMethod

DEFAULT_LOCALE = "zh"


def direction_sign(method: SortMethod | str | None) -> int:
    """``+1`` for ascending, ``-1`` for anything else."""
    try:
        return 1 if SortMethod(method) == SortMethod.ASC else -1
    except ValueError:
        return -1


def to_number(value: Any) -> float | None:
    """Parse ``value`` as a number, or return None when it is not numeric."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(number) else number


def is_placeholder(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value in PLACEHOLDER_VALUES)


def _is_han(char: str) -> bool:
    return "\u4e00" <= char <= "\u9fff" or "\u3400" <= char <= "\u4dbf"


def collation_key(text: str, locale: str = DEFAULT_LOCALE) -> tuple[Any, ...]:
    """Sort key for ``text`` under ``locale``.

    Characters compare case-insensitively first, with lowercase ahead of
    uppercase on ties. Chinese locales put Latin text and digits before Han
    characters and order Han characters by their pinyin reading, one
    character at a time (polyphones take their most common reading).
    """
    if locale.lower().startswith("zh"):
        primary = tuple(
            (1, lazy_pinyin(char)[0]) if _is_han(char) else (0, char.casefold()) for char in text
        )
    else:
        primary = ((0, text.casefold()),)
    return primary, text.swapcase()


def project(item: Any, key: str | None) -> Any:
    """Read ``key`` from a row (mapping or object); the item itself without key."""
    if key is None:
        return item
    if isinstance(item, dict):
        return item.get(key)
    return getattr(item, key, None)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_values(
    pre: Any,
    nxt: Any,
    method: SortMethod | str | None,
    key: str | None = None,
    locale: str = DEFAULT_LOCALE,
) -> int:
    """Compare two items; negative when ``pre`` sorts first under ``method``."""
    sign = direction_sign(method)
    a = project(pre, key)
    b = project(nxt, key)

    if key is not None:
        num_a, num_b = to_number(a), to_number(b)
        if num_a is not None and num_b is not None:
            return _cmp(num_a, num_b) * sign
        # Placeholders rank above every real value
        if is_placeholder(a) != is_placeholder(b):
            return (1 if is_placeholder(a) else -1) * sign
        if is_placeholder(a) and is_placeholder(b):
            return 0

    if a is not None and b is not None:
        return _cmp(collation_key(str(a), locale), collation_key(str(b), locale)) * sign
    if a is not None:
        return -sign
    if b is not None:
        return sign
    return 0


def sort_values(
    items: Iterable[Any],
    method: SortMethod | str | None,
    key: str | None = None,
    locale: str = DEFAULT_LOCALE,
) -> list[Any]:
    """Return a new list of ``items`` ordered by :func:`compare_values`."""
    return sorted(
        items,
        key=cmp_to_key(lambda a, b: compare_values(a, b, method, key=key, locale=locale)),
    )
