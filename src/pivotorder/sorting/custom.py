"""Manual ordering of composite dimension values by a priority list."""

from __future__ import annotations

from collections.abc import Sequence

from pivotorder.constants import ID_SEPARATOR


def split_id(identifier: str) -> tuple[str, str]:
    """Split a composite identifier into ``(parent_path, leaf)``.

    Root-level identifiers have an empty parent path.
    """
    parent, sep, leaf = identifier.rpartition(ID_SEPARATOR)
    return (parent, leaf) if sep else ("", identifier)


def matches_value(identifier: str, value: str) -> bool:
    """True when ``value`` is the identifier itself or its trailing segment(s)."""
    return identifier == value or identifier.endswith(f"{ID_SEPARATOR}{value}")


def reorder_by(values: Sequence[str], ordered: Sequence[str]) -> list[str]:
    """Reorder ``values`` by the relative order in ``ordered``.

    Entries present in ``ordered`` come first in that order; the rest
    follow in their original relative order.
    """
    rank: dict[str, int] = {}
    for i, value in enumerate(ordered):
        rank.setdefault(value, i)
    matched = sorted((v for v in values if v in rank), key=rank.__getitem__)
    return matched + [v for v in values if v not in rank]


def _first_seen(items: Sequence[str]) -> dict[str, int]:
    order: dict[str, int] = {}
    for item in items:
        order.setdefault(item, len(order))
    return order


def sort_by_custom(sort_by_values: Sequence[str], original_values: Sequence[str]) -> list[str]:
    """Order ``original_values`` by the priority list ``sort_by_values``.

    Matched values stay grouped under their parent path (groups keep the
    order in which they first appear); inside a group they follow the
    priority list. Unmatched values trail in their original order.
    """
    priority = list(sort_by_values)
    selected: list[tuple[str, str, int]] = []
    for identifier in original_values:
        index = next((i for i, v in enumerate(priority) if matches_value(identifier, v)), None)
        if index is not None:
            parent, leaf = split_id(identifier)
            selected.append((parent, leaf, index))

    parent_order = _first_seen([parent for parent, _, _ in selected])
    selected.sort(key=lambda item: (parent_order[item[0]], item[2]))
    sorted_ids = [
        f"{parent}{ID_SEPARATOR}{leaf}" if parent else leaf for parent, leaf, _ in selected
    ]
    return reorder_by(original_values, sorted_ids)


def group_by_parent(identifiers: Sequence[str], reference: Sequence[str]) -> list[str]:
    """Stable-group ``identifiers`` by parent path.

    Parent groups follow their first appearance in ``reference``; parents
    unknown to ``reference`` go last, in first-seen order.
    """
    parent_order = _first_seen([split_id(v)[0] for v in reference])
    for identifier in identifiers:
        parent_order.setdefault(split_id(identifier)[0], len(parent_order))
    return sorted(identifiers, key=lambda v: parent_order[split_id(v)[0]])
