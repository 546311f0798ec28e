"""Pydantic models for search results."""

from pathlib import Path

from pydantic import BaseModel, Field


class SearchHit(BaseModel):
    """A single regex match inside a log file.
    
    Produced and printed during a search run; never persisted.
    """

    file_path: Path = Field(..., description="Log file containing the match")
    term: str = Field(..., description="Search term that produced the match")
    number: int = Field(..., ge=1, description="1-based position within the term's pass")
    match_offset: int = Field(..., ge=0, description="Character offset of the match start")
    context_text: str = Field(..., description="Indented context window around the match")

    model_config = {"frozen": True}


class FileHits(BaseModel):
    """All hits found in one log file, in the order they were found."""

    file_path: Path = Field(..., description="Log file that was searched")
    hits: list[SearchHit] = Field(default_factory=list, description="Hits, grouped by term")
