"""
Project-wide constants or "settings" that are unlikely to change at runtime.
"""

DEFAULT_CONTROL_NAME = "code"

# Report layout
ENTRY_INDENT = "      "
CARET = "^"

NO_OCCURRENCES = "No occurrences found in any component"
PATTERN_MODE_NOTE = (
    "\n\nNote: Pattern mode is enabled. Parentheses are treated as literal. "
    "Other special characters like . * + - ? must be escaped with \\"
)
INVALID_PATTERN_TEMPLATE = (
    "Invalid pattern: {pattern}\n\n"
    "Error: {error}\n\n"
    "Reminder: In pattern mode, these characters must be escaped with \\:\n"
    ". [ ] * + - ? ^ $ \\"
)
COUNT_ERROR_TEMPLATE = "Pattern error: {error}"
LOCATE_ERROR_TEMPLATE = "Pattern error during search: {error}"

MODE_LEGEND_PATTERNS = "Patterns"
MODE_LEGEND_PLAIN = "Plain Text"
