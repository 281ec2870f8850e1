"""Reserved field names and markers shared across the package."""

from __future__ import annotations

# Joins ancestor segments of a composite dimension value, e.g. "浙江[&]杭州"
ID_SEPARATOR = "[&]"

# Virtual field naming the measure a cell belongs to (the "values" axis)
EXTRA_FIELD = "$$extra$$"

# Pseudo-measure: sort by the total/subtotal of the measure named by EXTRA_FIELD
TOTAL_VALUE = "$$total$$"

# Values rendered as "no data"; compared as the largest value under ASC
PLACEHOLDER_VALUES: frozenset[str | None] = frozenset({"-", "", None})
