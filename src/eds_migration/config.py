"""Shared configuration for the migration toolkit.

Values come from the environment, with a project-root ``.env`` file loaded
first.  The grid table transform itself takes no configuration; these
settings only affect the file-level pipeline and the CLI.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_ENCODING = "utf-8"
DEFAULT_MARKDOWN_SUFFIXES = (".md",)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def log_level() -> str:
    """Return the CLI's default log level name, e.g. 'INFO'.

    Unknown names fall back to DEFAULT_LOG_LEVEL.
    """
    level = os.getenv("EDS_MIGRATION_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def file_encoding() -> str:
    """Return the encoding used to read and write markdown files."""
    return os.getenv("EDS_MIGRATION_ENCODING", DEFAULT_ENCODING)


def markdown_suffixes() -> tuple[str, ...]:
    """Return the file suffixes collected when a directory is given, e.g. ('.md',)."""
    raw = os.getenv("EDS_MIGRATION_MARKDOWN_SUFFIXES", "")
    suffixes = tuple(s.strip().lower() for s in raw.split(",") if s.strip())
    if not suffixes:
        return DEFAULT_MARKDOWN_SUFFIXES
    # Accept "md" as well as ".md"
    return tuple(s if s.startswith(".") else f".{s}" for s in suffixes)
