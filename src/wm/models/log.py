"""Pydantic models for daily log files."""

from datetime import date

from pydantic import BaseModel, Field


class CalendarDate(BaseModel):
    """A resolved calendar day.
    
    Names exactly one log file under a root directory.
    Immutable once created.
    """

    year: int = Field(..., ge=1, description="Four digit year")
    month: int = Field(..., ge=1, le=12, description="Month of year (1-12)")
    day: int = Field(..., ge=1, le=31, description="Day of month (1-31)")

    model_config = {"frozen": True}

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        """Create a CalendarDate from a date or datetime."""
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def header_stamp(self) -> str:
        """Date line written into a new log, e.g. '3/5/2024'."""
        return f"{self.month}/{self.day}/{self.year}"

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
