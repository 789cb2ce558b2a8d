# compsearch/src/compsearch/search/search_schemas.py
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field


class ReportStatus(str, Enum):
    """Outcome of one search invocation."""
    OK = "ok"           # At least one occurrence was reported
    EMPTY = "empty"     # Nothing matched; text is the "no occurrences" sentinel
    ERROR = "error"     # Pattern error; text is the error message only


class Occurrence(BaseModel):
    index: int = Field(..., description="1-based position of the match within its buffer.")
    start: int = Field(..., description="0-based offset of the first matched character.")
    end: int = Field(..., description="0-based offset just past the match.")
    line_number: int = Field(..., description="1-based line containing the match start.")
    column: int = Field(..., description="1-based column of the match start in the untrimmed line.")
    line_text: str = Field(..., description="The containing line, untrimmed.")

    @property
    def display_text(self) -> str:
        return self.line_text.strip()


class SearchReport(BaseModel):
    status: ReportStatus
    pattern: str
    use_patterns: bool = False
    entries: List[str] = Field(default_factory=list)
    counts: Dict[str, int] = Field(default_factory=dict)
    text: str = ""

    @property
    def ok(self) -> bool:
        return self.status != ReportStatus.ERROR

    @property
    def total_occurrences(self) -> int:
        return sum(self.counts.values())
