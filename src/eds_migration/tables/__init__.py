"""Grid table detection and column-width normalization for markdown.

Submodules:
  patterns     -- delimiter characters and constant tuples
  classifiers  -- per-line predicates and header/content row classification
  schema       -- TableBlock / ClassifiedLines Pydantic models
  detection    -- table block scanning with blank-line lookahead
  formatting   -- column widths, border/header/content rewriting
  pipeline     -- normalize_grid_tables() entry point and file-level run()
"""
