"""Functional primitives for primkit.

This package provides the stateless helper operations of primkit, grouped by
the primitive type they work on:

    - ``sequences``: chunking, grouping, deduplication and set-like operations
    - ``numeric``: sum, average, median and sample standard deviation
    - ``mappings``: pick/omit/merge/invert and key or value transforms
    - ``text``: casing, validation, truncation and counting
    - ``booleans``: integer coercion and label rendering
    - ``dates``: calendar boundaries, business days and relative descriptions

Functions never keep state between calls and, apart from
``mappings.update_or_add``, never modify their arguments.
"""

from primkit.functional import booleans, dates, mappings, numeric, sequences, text

__all__ = ["booleans", "dates", "mappings", "numeric", "sequences", "text"]
