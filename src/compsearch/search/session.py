"""
Interactive search state.

SearchSession keeps the values of the tool's controls and re-runs the search
whenever one of them changes, the way the control event handlers do. The
latest report text is kept as the session output.
"""

import logging
from typing import Optional

from compsearch.buffer.buffer_manager import ComponentRegistry
from compsearch.core.config import Settings, settings
from compsearch.core.settings import DEFAULT_CONTROL_NAME, MODE_LEGEND_PATTERNS, MODE_LEGEND_PLAIN
from compsearch.search.search_manager import SearchManager
from compsearch.search.search_schemas import SearchReport

logger = logging.getLogger(__name__)


class SearchSession:

    def __init__(self, registry: ComponentRegistry, config: Optional[Settings] = None):
        config = config or settings
        self.registry = registry
        self.search_string = config.search_string
        self.use_patterns = config.use_patterns
        self.search_all_controls = config.search_all_controls
        self.control_name = "" if config.search_all_controls else config.control_name
        self.control_name_disabled = config.search_all_controls
        # Name restored when "all controls" is switched back off
        self._saved_control_name = config.control_name
        self.report: Optional[SearchReport] = None
        self.output = ""
        self.run()

    @property
    def mode_legend(self) -> str:
        return MODE_LEGEND_PATTERNS if self.use_patterns else MODE_LEGEND_PLAIN

    def run(self) -> SearchReport:
        """Search with the current control values and store the result."""
        self.report = SearchManager.search_registry(
            self.registry,
            self.search_string,
            use_patterns=self.use_patterns,
            search_all_controls=self.search_all_controls,
            control_name=self.control_name,
        )
        self.output = self.report.text
        return self.report

    def set_search_string(self, text: str) -> SearchReport:
        self.search_string = text
        return self.run()

    def set_control_name(self, name: str) -> SearchReport:
        self.control_name = name
        return self.run()

    def toggle_patterns(self, enabled: bool) -> SearchReport:
        self.use_patterns = enabled
        logger.debug(f"Search mode: {self.mode_legend}")
        return self.run()

    def toggle_all_controls(self, enabled: bool) -> SearchReport:
        """
        Switch between searching every control and one named control.

        Turning it on remembers the current control name and clears the
        box; turning it off puts the remembered name back. Setting the
        current value again only re-runs the search.
        """
        if enabled == self.search_all_controls:
            return self.run()
        self.search_all_controls = enabled
        self.control_name_disabled = enabled
        if enabled:
            self._saved_control_name = self.control_name
            self.control_name = ""
        else:
            self.control_name = self._saved_control_name
        return self.run()

    def restore_defaults(self) -> SearchReport:
        self.search_all_controls = False
        self.control_name = DEFAULT_CONTROL_NAME
        self.control_name_disabled = False
        return self.run()
