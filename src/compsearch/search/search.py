# compsearch/src/compsearch/search/search.py

import bisect
import logging
from typing import List, Optional

from compsearch.core.settings import CARET, ENTRY_INDENT
from compsearch.search.matcher import iter_match_spans
from compsearch.search.search_schemas import Occurrence

logger = logging.getLogger(__name__)


def count_occurrences(text: str, pattern: str, use_patterns: bool = False) -> int:
    """
    Count the matches of pattern in text, overlapping ones included.
    Raises PatternSyntaxError if a pattern-mode string does not compile.
    """
    count = 0
    for _ in iter_match_spans(text, pattern, use_patterns):
        count += 1
    return count


def split_lines(text: str) -> List[str]:
    """
    Split text on newlines. A missing trailing newline is added first, so
    "a\\nb" and "a\\nb\\n" both give ["a", "b"].
    """
    if not text.endswith("\n"):
        text += "\n"
    return text.split("\n")[:-1]


def format_summary(occurrences: int, label: str) -> str:
    plural = "" if occurrences == 1 else "s"
    return f"{occurrences} occurrence{plural} found in component: {label}"


def format_occurrence(occurrence: Occurrence) -> List[str]:
    """Render the header, trimmed source line and caret marker for one match."""
    return [
        f"  [{occurrence.index}] Line {occurrence.line_number}, Column {occurrence.column}:",
        f"{ENTRY_INDENT}{occurrence.display_text}",
        f"{ENTRY_INDENT}{' ' * (occurrence.column - 1)}{CARET}",
    ]


def locate_occurrences(
    text: str,
    pattern: str,
    use_patterns: bool,
    label: str,
    output: List[str],
    occurrences: Optional[int] = None
) -> List[Occurrence]:
    """
    Locate every match of pattern in text and append report entries to output.

    Appends a summary line followed by three lines per match. Nothing is
    appended when there are no matches. The column is measured against the
    untrimmed line while the printed line is trimmed, so on indented lines
    the caret sits to the right of the match.

    Args:
        text: The buffer to scan
        pattern: Search string
        use_patterns: Treat the pattern as a regular expression instead of a substring
        label: Location label used in the summary line
        output: Report entries for the current search; only appended to
        occurrences: Count from count_occurrences, computed here when not given

    Returns:
        The located occurrences, in scan order

    Raises:
        PatternSyntaxError: If a pattern-mode string does not compile
    """
    if occurrences is None:
        occurrences = count_occurrences(text, pattern, use_patterns)
    if occurrences == 0:
        return []

    output.append(format_summary(occurrences, label))

    lines = split_lines(text)
    # Offset where each line begins, including its newline in the running total
    line_starts = [0]
    for line in lines[:-1]:
        line_starts.append(line_starts[-1] + len(line) + 1)

    located = []
    for index, (start, end) in enumerate(iter_match_spans(text, pattern, use_patterns), start=1):
        line_idx = bisect.bisect_right(line_starts, start) - 1
        occurrence = Occurrence(
            index=index,
            start=start,
            end=end,
            line_number=line_idx + 1,
            column=start - line_starts[line_idx] + 1,
            line_text=lines[line_idx],
        )
        located.append(occurrence)
        output.extend(format_occurrence(occurrence))

    if len(located) != occurrences:
        logger.warning(
            f"Located {len(located)} occurrences in {label} but counted {occurrences}"
        )
    return located
