"""
Search engine: counting, locating and reporting occurrences in text buffers.
"""

from compsearch.search.search import count_occurrences, locate_occurrences
from compsearch.search.search_manager import SearchManager
from compsearch.search.search_schemas import Occurrence, ReportStatus, SearchReport

__all__ = [
    "count_occurrences",
    "locate_occurrences",
    "SearchManager",
    "Occurrence",
    "ReportStatus",
    "SearchReport",
]
