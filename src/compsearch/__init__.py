"""
compsearch: find strings and patterns in the text controls of named components.
"""

__version__ = "2.0.0"
