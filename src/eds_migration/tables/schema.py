"""Pydantic models for grid table blocks found while scanning a document.

Both models are transient: they are built and discarded within a single
normalize_grid_tables() call and never persisted.
"""

from pydantic import BaseModel, Field, model_validator


class TableBlock(BaseModel):
    """A maximal run of grid table lines, including interior blank lines.

    ``start`` is the index of the first line within the source document and
    ``lines`` holds the raw lines in order, exactly as they appeared.
    """

    start: int = Field(ge=0)
    lines: list[str] = Field(min_length=1)

    @property
    def end(self) -> int:
        """Index of the first document line after this block."""
        return self.start + len(self.lines)


class ClassifiedLines(BaseModel):
    """Positions of header rows and content rows within a TableBlock.

    Both lists hold indexes into ``TableBlock.lines``.  Border lines and
    blank filler lines appear in neither.
    """

    header_rows: list[int] = Field(default_factory=list)
    content_rows: list[int] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_disjoint(self) -> "ClassifiedLines":
        """Ensure no line is both a header row and a content row."""
        overlap = set(self.header_rows) & set(self.content_rows)
        if overlap:
            raise ValueError(f"Lines {sorted(overlap)} classified as both header and content")
        return self

    @property
    def has_header(self) -> bool:
        """True if at least one row sits above the header separator."""
        return bool(self.header_rows)
