"""
Exceptions raised by the search engine and the component registry.
"""


class CompSearchError(Exception):
    """Base class for all compsearch errors."""


class PatternSyntaxError(CompSearchError):
    """A pattern-mode search string could not be compiled."""

    def __init__(self, pattern: str, message: str):
        super().__init__(message)
        self.pattern = pattern
        self.message = message


class RegistryError(CompSearchError):
    """A component registry source could not be loaded."""
