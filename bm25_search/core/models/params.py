"""Tool request parameters."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator

from .chunk import DEFAULT_CHUNK_SIZE, DEFAULT_OVERLAP


class BM25SearchParams(BaseModel):
    """Raw parameters accepted by the bm25_search tool."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    query: StrictStr = Field(min_length=1, description="The search query.")
    path: Optional[StrictStr] = Field(
        default=None,
        description=(
            "Optional: The path to the directory to search within, relative to "
            "the target directory. If omitted, searches every workspace directory."
        ),
    )
    include: Optional[StrictStr] = Field(
        default=None,
        description=(
            "Optional: A glob pattern to filter which files are searched "
            "(e.g., '*.js', '*.{ts,tsx}', 'src/**'). If omitted, searches all files."
        ),
    )
    chunk_size: StrictInt = Field(
        default=DEFAULT_CHUNK_SIZE,
        ge=1,
        description="Optional: The number of lines per chunk. Defaults to 100.",
    )
    overlap: StrictInt = Field(
        default=DEFAULT_OVERLAP,
        ge=0,
        description=(
            "Optional: The number of lines to overlap between chunks. Defaults to 20."
        ),
    )

    @model_validator(mode="after")
    def _check_overlap(self) -> "BM25SearchParams":
        if self.overlap >= self.chunk_size:
            raise ValueError(
                f"overlap ({self.overlap}) must be less than chunk_size ({self.chunk_size})"
            )
        return self
