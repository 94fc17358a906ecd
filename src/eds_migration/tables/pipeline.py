"""Grid table normalization entry point and file-level pipeline step.

normalize_grid_tables() is the pure string transform.  The markdown-to-HTML
conversion calls it on raw markdown before block and section parsing, so
that table-to-HTML conversion sees column-aligned grid tables.

run() applies the transform to markdown files on disk and backs the
``fix-tables`` CLI command.
"""

import logging
import sys
from pathlib import Path

from tqdm import tqdm

from eds_migration import config
from eds_migration.tables.detection import scan_segments
from eds_migration.tables.formatting import format_table_block
from eds_migration.tables.schema import TableBlock

logger = logging.getLogger(__name__)


# ─── String Transform ────────────────────────────────────────────────────────


def normalize_grid_tables(document: str) -> str:
    """Rewrite every grid table in *document* so each column has one uniform width.

    Rows above the first '=' border collapse into a single caption cell
    spanning the table.  Lines outside tables are returned byte-identical.
    Never raises: malformed tables come back as close to the input as
    possible.
    """
    lines = document.split("\n")
    output: list[str] = []
    n_tables = 0

    for segment in scan_segments(lines):
        if isinstance(segment, TableBlock):
            output.extend(format_table_block(segment))
            n_tables += 1
        else:
            output.append(segment)

    if n_tables:
        logger.debug("Normalized %d grid tables", n_tables)
    return "\n".join(output)


# ─── File Pipeline ───────────────────────────────────────────────────────────


def collect_markdown_files(paths: list[Path]) -> list[Path]:
    """Expand *paths* into markdown files: files as given, directories searched recursively."""
    suffixes = config.markdown_suffixes()
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            found = sorted(p for p in path.rglob("*") if p.is_file() and p.suffix.lower() in suffixes)
            logger.debug("Found %d markdown files under %s", len(found), path)
            files.extend(found)
        elif path.is_file():
            files.append(path)
        else:
            raise FileNotFoundError(f"No such file or directory: {path}")
    return files


def _write_text(path: Path, text: str, encoding: str) -> None:
    """Write *text* without newline translation, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding=encoding, newline="") as fopen:
        fopen.write(text)


def run(
    paths: list[Path],
    *,
    output: Path | None = None,
    in_place: bool = False,
    check: bool = False,
) -> int:
    """Normalize grid tables in markdown files.

    At most one mode may be chosen.  With ``check`` nothing is written.
    With ``in_place`` changed files are rewritten.  With ``output`` the single
    input's result goes to that file.  Otherwise the single input's result is
    written to stdout.

    Returns the number of files whose content changed (or would change).
    """
    if sum((output is not None, in_place, check)) > 1:
        raise ValueError("--output, --in-place and --check cannot be combined")

    files = collect_markdown_files(paths)
    if output is not None and len(files) != 1:
        raise ValueError(f"--output needs exactly one input file, got {len(files)}")
    if output is None and not (in_place or check) and len(files) > 1:
        raise ValueError(f"Printing to stdout needs exactly one input file, got {len(files)}; use --in-place or --check")

    encoding = config.file_encoding()
    n_changed = 0
    for path in tqdm(files, desc="Fixing tables", disable=len(files) <= 1):
        with open(path, "r", encoding=encoding, newline="") as fopen:
            original = fopen.read()
        fixed = normalize_grid_tables(original)
        changed = fixed != original
        if changed:
            n_changed += 1

        if check:
            if changed:
                logger.warning("%s: grid tables need reformatting", path)
        elif in_place:
            if changed:
                _write_text(path, fixed, encoding)
                logger.info("Rewrote %s", path)
        elif output is not None:
            _write_text(output, fixed, encoding)
            logger.info("Wrote %s", output)
        else:
            sys.stdout.write(fixed)
            if not fixed.endswith("\n"):
                sys.stdout.write("\n")

    logger.info("Processed %d files, %d with grid table changes", len(files), n_changed)
    return n_changed
