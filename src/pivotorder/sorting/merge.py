"""Reconcile a (possibly partial) computed order with the full value list."""

from __future__ import annotations

from collections.abc import Sequence


def merge_sorted_values(
    sorted_values: Sequence[str],
    original_values: Sequence[str],
    asc: bool,
) -> list[str]:
    """Complete ``sorted_values`` with every value of ``original_values``.

    Computed values that do not exist in ``original_values`` are dropped.
    Identifiers in ``original_values`` are unique; repeated entries collapse
    to their first occurrence.
    Ascending puts values without a computed position first, descending
    puts them last; both keep their original relative order.
    """
    known = set(original_values)
    ordered = list(dict.fromkeys(v for v in sorted_values if v in known))
    placed = set(ordered)
    missing = list(dict.fromkeys(v for v in original_values if v not in placed))
    if asc:
        return missing + ordered
    return ordered + missing
