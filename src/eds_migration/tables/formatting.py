"""Column-width calculation and line rewriting for grid tables.

Each rewriting rule is a pure function of ``(line, column_widths)``:

  render_border      -- rebuild a border with one segment per column
  render_header_row  -- collapse a header row into one caption cell spanning every column
  pad_content_row    -- right-pad each cell to its column width

format_table_block() composes them over a whole TableBlock.
"""

import logging

from eds_migration.tables.classifiers import classify_rows, is_border_line, is_header_separator, split_cells
from eds_migration.tables.patterns import CAPTION_PADDING, CELL_WALL, CORNER, HEADER_RULE, RULE
from eds_migration.tables.schema import TableBlock

logger = logging.getLogger(__name__)


# ─── Column Widths ───────────────────────────────────────────────────────────


def calculate_column_widths(rows: list[str]) -> list[int]:
    """Return the widest raw cell (padding included) for each column across *rows*.

    Ragged rows are allowed: a row with fewer cells simply does not
    contribute to the trailing columns.
    """
    widths: list[int] = []
    for row in rows:
        for col, cell in enumerate(split_cells(row)):
            if col == len(widths):
                widths.append(0)
            widths[col] = max(widths[col], len(cell))
    return widths


def spanning_width(column_widths: list[int]) -> int:
    """Width of a single cell that spans every column (including the inner walls)."""
    return sum(column_widths) + len(column_widths) - 1


# ─── Line Rewriters ──────────────────────────────────────────────────────────


def render_border(line: str, column_widths: list[int]) -> str:
    """Rebuild a border line with one segment per column.

    The rule character is '=' if the original border contained one, else '-'.
    The original number of segments is ignored.
    """
    rule = HEADER_RULE if is_header_separator(line) else RULE
    return CORNER + "".join(rule * width + CORNER for width in column_widths)


def render_header_row(line: str, column_widths: list[int]) -> str:
    """Collapse a header row into a single caption cell spanning the whole table.

    The caption is the first cell with non-blank text (stripped), falling
    back to the first raw cell when every cell is blank.  It is padded with
    one space either side, then right-padded or truncated to the spanning
    width.  Truncation keeps the start of the text.
    """
    cells = split_cells(line)
    caption = next((cell.strip() for cell in cells if cell.strip()), cells[0] if cells else "")

    total_width = spanning_width(column_widths)
    padded = CAPTION_PADDING + caption + CAPTION_PADDING
    if len(padded) > total_width:
        padded = padded[:total_width]
    else:
        padded = padded.ljust(total_width)
    return CELL_WALL + padded + CELL_WALL


def pad_content_row(line: str, column_widths: list[int]) -> str:
    """Right-pad every cell of a content row to its column width (never truncates)."""
    padded: list[str] = []
    for col, cell in enumerate(split_cells(line)):
        width = column_widths[col] if col < len(column_widths) else len(cell)
        padded.append(cell.ljust(width))
    return CELL_WALL + CELL_WALL.join(padded) + CELL_WALL


# ─── Block Rewriter ──────────────────────────────────────────────────────────


def format_table_block(block: TableBlock) -> list[str]:
    """Return the normalized lines for *block*, in original order.

    Blocks with no content rows, or whose content cells are all empty, come
    back verbatim, since there is nothing to measure column widths against.  Blank filler lines are kept as-is.
    """
    sections = classify_rows(block)
    if not sections.content_rows:
        logger.debug("Table at line %d has no content rows, leaving it unchanged", block.start)
        return list(block.lines)

    column_widths = calculate_column_widths([block.lines[idx] for idx in sections.content_rows])
    if not any(column_widths):
        # All cells empty: zero-width borders would lose their rule characters
        logger.debug("Table at line %d has only empty cells, leaving it unchanged", block.start)
        return list(block.lines)

    header_rows = set(sections.header_rows)
    content_rows = set(sections.content_rows)
    logger.debug(
        "Table at line %d: %d header rows, %d content rows, column widths %s",
        block.start,
        len(sections.header_rows),
        len(sections.content_rows),
        column_widths,
    )

    formatted: list[str] = []
    for idx, line in enumerate(block.lines):
        if is_border_line(line):
            formatted.append(render_border(line, column_widths))
        elif idx in header_rows:
            formatted.append(render_header_row(line, column_widths))
        elif idx in content_rows:
            formatted.append(pad_content_row(line, column_widths))
        else:
            # Blank filler inside a multi-line cell
            formatted.append(line)
    return formatted
