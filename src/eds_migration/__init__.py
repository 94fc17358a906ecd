"""Markdown migration toolkit for content-authoring uploads.

The grid table normalizer in ``eds_migration.tables`` aligns the columns of
ASCII grid tables before markdown is converted to HTML.
"""

from eds_migration.tables.pipeline import normalize_grid_tables

__all__ = ["normalize_grid_tables"]
