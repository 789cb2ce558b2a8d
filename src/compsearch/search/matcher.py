"""
Match iteration shared by the counter and the locator.

Both passes walk the same sequence of match spans, so counts and located
occurrences can never disagree. After each match the cursor moves one
character past the match start, which means overlapping matches are found.
"""

import re
import logging
from functools import lru_cache
from typing import Iterator, Tuple

from compsearch.core.exceptions import PatternSyntaxError

logger = logging.getLogger(__name__)

# A parenthesis preceded by an even number of backslashes is unescaped
_UNESCAPED_PAREN = re.compile(r"(?<!\\)((?:\\\\)*)([()])")


def prepare_pattern(pattern: str, use_patterns: bool) -> str:
    """
    Escape parentheses in pattern mode so they match literally and never
    open a capture group. Already escaped parentheses are left alone, so
    preparing twice gives the same result. Literal patterns pass through.
    """
    if not use_patterns:
        return pattern
    return _UNESCAPED_PAREN.sub(r"\1\\\2", pattern)


@lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> re.Pattern:
    # Oversized repeat counts and deep nesting fail outside re.error
    try:
        return re.compile(pattern)
    except (re.error, OverflowError, RecursionError) as e:
        raise PatternSyntaxError(pattern, str(e)) from e


def validate_pattern(pattern: str) -> None:
    """
    Check a prepared pattern by running it once against an empty string.

    Raises:
        PatternSyntaxError: If the pattern does not compile
    """
    compile_pattern(pattern).search("")


def iter_match_spans(text: str, pattern: str, use_patterns: bool) -> Iterator[Tuple[int, int]]:
    """
    Yield (start, end) for every match of pattern in text, left to right.

    Args:
        text: The buffer to scan
        pattern: Search string; prepared with prepare_pattern when use_patterns is set
        use_patterns: Treat the pattern as a regular expression instead of a substring

    Raises:
        PatternSyntaxError: In pattern mode, if the pattern does not compile
    """
    pos = 0
    if use_patterns:
        regex = compile_pattern(prepare_pattern(pattern, True))
        # search() clamps pos to len(text), so stop explicitly past the end
        while pos <= len(text):
            match = regex.search(text, pos)
            if match is None:
                break
            yield match.start(), match.end()
            pos = match.start() + 1
    else:
        while True:
            start = text.find(pattern, pos)
            if start == -1:
                break
            yield start, start + len(pattern)
            pos = start + 1
