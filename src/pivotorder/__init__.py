"""pivotorder: dimension value ordering for cross-tabulated (pivot) views."""

__version__ = "0.1.0"
