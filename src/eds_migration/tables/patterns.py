"""Delimiter characters for ASCII grid tables.

A grid table is drawn with ``+`` corners, ``-`` or ``=`` rules, and ``|``
cell walls::

    +-----+-----+
    | a   | b   |
    +=====+=====+
    | 1   | 2   |
    +-----+-----+

Lines are recognised by explicit character checks in classifiers.py rather
than regular expressions, so scanning stays linear in the document length.
"""

# ─── Border Characters ───────────────────────────────────────────────────────

# Corner / column junction on border lines
CORNER = "+"

# Rule characters: "-" for ordinary borders, "=" for the header separator
RULE = "-"
HEADER_RULE = "="

# Every character allowed on a border line
BORDER_CHARS = frozenset((CORNER, RULE, HEADER_RULE))

# Shortest border is "+-+" (a corner, at least one rule char, a corner)
MIN_BORDER_LENGTH = 3


# ─── Row Characters ──────────────────────────────────────────────────────────

# Cell wall on row lines
CELL_WALL = "|"

# Shortest row is "||"
MIN_ROW_LENGTH = 2

# Padding placed either side of a collapsed header caption
CAPTION_PADDING = " "
