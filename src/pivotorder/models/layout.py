"""Pivot field layout: row fields, (possibly nested) column fields and measures."""

from __future__ import annotations

from pydantic import BaseModel


class ColumnNode(BaseModel):
    """A column header group; only leaves carry data."""

    key: str
    children: list[ColumnNode] = []


class FieldLayout(BaseModel):
    """Ordered dimension fields of both axes.

    Field order defines hierarchy depth: a field is the parent of every
    field listed after it on the same axis.
    """

    rows: list[str] = []
    columns: list[str | ColumnNode] = []
    values: list[str] = []

    def leaf_columns(self) -> list[str]:
        """Column fields flattened to their leaves, left to right."""
        leaves: list[str] = []

        def _walk(node: str | ColumnNode) -> None:
            if isinstance(node, str):
                leaves.append(node)
            elif node.children:
                for child in node.children:
                    _walk(child)
            else:
                leaves.append(node.key)

        for column in self.columns:
            _walk(column)
        return leaves

    def is_in_rows(self, field: str) -> bool:
        return field in self.rows

    def axis_fields(self, field: str) -> list[str]:
        """All fields on the axis holding ``field`` (columns when not a row field)."""
        return list(self.rows) if self.is_in_rows(field) else self.leaf_columns()

    def opposite_axis_fields(self, field: str) -> list[str]:
        return self.leaf_columns() if self.is_in_rows(field) else list(self.rows)

    def is_nested(self, field: str) -> bool:
        """True when ``field`` sits below the outermost dimension of its axis."""
        if field in self.rows:
            return self.rows.index(field) > 0
        leaves = self.leaf_columns()
        return field in leaves and leaves.index(field) > 0

    def all_fields(self) -> list[str]:
        return [*self.rows, *self.leaf_columns()]
