"""Pydantic models for wm."""

from .log import CalendarDate
from .search import FileHits, SearchHit

__all__ = ["CalendarDate", "FileHits", "SearchHit"]
