"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env from leaking toolkit settings into the tests."""
    for name in ("EDS_MIGRATION_LOG_LEVEL", "EDS_MIGRATION_ENCODING", "EDS_MIGRATION_MARKDOWN_SUFFIXES"):
        monkeypatch.delenv(name, raising=False)
