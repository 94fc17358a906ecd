"""Grid table block detection.

Walks the document line by line and groups grid table lines into
TableBlocks.  Everything else passes through as plain strings.  The walk
is an explicit state loop with one line of lookahead (for blank lines
inside multi-line cells), so it runs in linear time.
"""

import logging

from eds_migration.tables.classifiers import is_blank_line, is_border_line, is_table_line
from eds_migration.tables.schema import TableBlock

logger = logging.getLogger(__name__)


def collect_table_block(lines: list[str], start: int) -> TableBlock | None:
    """Collect the table block that begins at *start*, or None if no line qualifies.

    Consumes border and row lines.  A blank line is consumed only when the
    line right after it is also a border or row; otherwise it ends the
    block and is left for the caller.
    """
    collected: list[str] = []
    i = start
    while i < len(lines):
        line = lines[i]
        if is_table_line(line):
            collected.append(line)
        elif is_blank_line(line) and i + 1 < len(lines) and is_table_line(lines[i + 1]):
            # Blank separator inside a multi-line cell
            collected.append(line)
        else:
            break
        i += 1

    if not collected:
        return None
    return TableBlock(start=start, lines=collected)


def scan_segments(lines: list[str]) -> list[str | TableBlock]:
    """Partition *lines* into pass-through lines and TableBlocks, in document order.

    A block can only start on a border line.  Flattening the result (each
    TableBlock contributing its ``lines``) gives back *lines* exactly.
    """
    segments: list[str | TableBlock] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if not is_border_line(line):
            segments.append(line)
            i += 1
            continue

        block = collect_table_block(lines, i)
        if block is None:
            # Nothing collected: emit the line untouched and step past it
            segments.append(line)
            i += 1
            continue

        logger.debug("Grid table at line %d spans %d lines", block.start, len(block.lines))
        segments.append(block)
        i = max(block.end, i + 1)

    return segments
