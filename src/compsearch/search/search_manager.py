"""
Search orchestration across many buffers.

SearchManager validates the search string once, counts and locates matches
buffer by buffer, and renders the final report. A pattern error anywhere
aborts the whole search and the error message becomes the report.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Union

from compsearch.buffer.buffer_manager import ComponentRegistry
from compsearch.buffer.schemas import Buffer
from compsearch.core.exceptions import PatternSyntaxError
from compsearch.core.settings import (
    COUNT_ERROR_TEMPLATE, DEFAULT_CONTROL_NAME, INVALID_PATTERN_TEMPLATE,
    LOCATE_ERROR_TEMPLATE, NO_OCCURRENCES, PATTERN_MODE_NOTE
)
from compsearch.search.matcher import prepare_pattern, validate_pattern
from compsearch.search.search import count_occurrences, locate_occurrences
from compsearch.search.search_schemas import ReportStatus, SearchReport

logger = logging.getLogger(__name__)

BufferSource = Union[Mapping[str, str], Iterable[Buffer]]


class SearchManager:
    """
    Runs one search over a set of labelled buffers.

    Every invocation owns its own entry list and returns a new SearchReport,
    so nothing carries over between searches.
    """

    @staticmethod
    def search(buffers: BufferSource, pattern: str, use_patterns: bool = False) -> SearchReport:
        """
        Search every buffer for pattern.

        Args:
            buffers: Buffers in report order, or a mapping of label to text
            pattern: The search string as the user entered it
            use_patterns: Treat the search string as a regular expression

        Returns:
            A SearchReport whose text is the rendered entries, the
            "no occurrences" sentinel, or an error message
        """
        prepared = prepare_pattern(pattern, use_patterns)

        if use_patterns:
            try:
                validate_pattern(prepared)
            except PatternSyntaxError as e:
                message = INVALID_PATTERN_TEMPLATE.format(pattern=pattern, error=e.message)
                return SearchManager._error_report(pattern, use_patterns, message)

        output: List[str] = []
        counts: Dict[str, int] = {}

        # An empty search string matches everywhere; report nothing instead
        if pattern:
            for buffer in SearchManager._as_buffers(buffers):
                try:
                    occurrences = count_occurrences(buffer.text, prepared, use_patterns)
                except PatternSyntaxError as e:
                    message = COUNT_ERROR_TEMPLATE.format(error=e.message)
                    return SearchManager._error_report(pattern, use_patterns, message)

                if occurrences == 0:
                    continue

                try:
                    locate_occurrences(
                        buffer.text, prepared, use_patterns, buffer.label, output, occurrences
                    )
                except PatternSyntaxError as e:
                    message = LOCATE_ERROR_TEMPLATE.format(error=e.message)
                    return SearchManager._error_report(pattern, use_patterns, message)
                counts[buffer.label] = counts.get(buffer.label, 0) + occurrences

        if output:
            report = SearchReport(
                status=ReportStatus.OK,
                pattern=pattern,
                use_patterns=use_patterns,
                entries=output,
                counts=counts,
                text="\n".join(output),
            )
        else:
            text = NO_OCCURRENCES
            if use_patterns:
                text += PATTERN_MODE_NOTE
            report = SearchReport(
                status=ReportStatus.EMPTY,
                pattern=pattern,
                use_patterns=use_patterns,
                text=text,
            )

        logger.info(report.text)
        return report

    @staticmethod
    def search_registry(
        registry: ComponentRegistry,
        pattern: str,
        use_patterns: bool = False,
        search_all_controls: bool = False,
        control_name: str = DEFAULT_CONTROL_NAME
    ) -> SearchReport:
        """
        Search the components of a registry.

        Args:
            registry: Source of components and controls
            pattern: The search string as the user entered it
            use_patterns: Treat the search string as a regular expression
            search_all_controls: Search every text control instead of one named control
            control_name: The control to search when search_all_controls is False

        Returns:
            The SearchReport for the resolved buffers
        """
        buffers = registry.iter_buffers(search_all_controls, control_name)
        return SearchManager.search(buffers, pattern, use_patterns)

    @staticmethod
    def _as_buffers(buffers: BufferSource) -> Iterable[Buffer]:
        if isinstance(buffers, Mapping):
            return [Buffer(label=label, text=text) for label, text in buffers.items()]
        return buffers

    @staticmethod
    def _error_report(pattern: str, use_patterns: bool, message: str) -> SearchReport:
        logger.warning(message)
        return SearchReport(
            status=ReportStatus.ERROR,
            pattern=pattern,
            use_patterns=use_patterns,
            text=message,
        )
