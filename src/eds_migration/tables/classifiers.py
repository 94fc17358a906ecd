"""Line classification helpers for grid table detection.

Each ``is_*`` function takes a single line (no trailing newline) and returns
True/False.  ``classify_rows`` splits the row lines of a TableBlock into the
header section and the content section.
"""

from eds_migration.tables.patterns import (
    BORDER_CHARS,
    CELL_WALL,
    CORNER,
    HEADER_RULE,
    MIN_BORDER_LENGTH,
    MIN_ROW_LENGTH,
)
from eds_migration.tables.schema import ClassifiedLines, TableBlock


def is_border_line(line: str) -> bool:
    """Return True for a border line such as '+---+---+' or '+===+'."""
    if len(line) < MIN_BORDER_LENGTH:
        return False
    if line[0] != CORNER or line[-1] != CORNER:
        return False
    return all(char in BORDER_CHARS for char in line)


def is_row_line(line: str) -> bool:
    """Return True for a row line wrapped in cell walls, e.g. '| a | b |'."""
    return len(line) >= MIN_ROW_LENGTH and line[0] == CELL_WALL and line[-1] == CELL_WALL


def is_table_line(line: str) -> bool:
    """Return True if the line is either a border or a row."""
    return is_border_line(line) or is_row_line(line)


def is_blank_line(line: str) -> bool:
    """Return True for an empty or whitespace-only line."""
    return line.strip() == ""


def is_header_separator(line: str) -> bool:
    """Return True for a border drawn with '=' (marks the end of the header section)."""
    return is_border_line(line) and HEADER_RULE in line


def split_cells(line: str) -> list[str]:
    """Split a row line into its raw cell fragments, padding included.

    The empty fragments outside the outermost walls are dropped, so
    '| a |bb|' gives [' a ', 'bb'].
    """
    return line.split(CELL_WALL)[1:-1]


def classify_rows(block: TableBlock) -> ClassifiedLines:
    """Split the row lines of *block* into header rows and content rows.

    Rows before the first '=' border are header rows; rows at or after it
    are content rows.  A block without any '=' border has no header, and
    every row is content.  Classification is positional: two rows with
    identical text can land in different sections.
    """
    header_rows: list[int] = []
    content_rows: list[int] = []
    separator_seen = False

    for idx, line in enumerate(block.lines):
        if is_border_line(line):
            # Only the first '=' border matters; later ones change nothing
            if is_header_separator(line):
                separator_seen = True
        elif is_row_line(line):
            if separator_seen:
                content_rows.append(idx)
            else:
                header_rows.append(idx)

    # Pure data table: nothing is header
    if not separator_seen:
        return ClassifiedLines(header_rows=[], content_rows=header_rows)

    return ClassifiedLines(header_rows=header_rows, content_rows=content_rows)
