"""
Constants for schema guardrails.

Centralizing these makes them easier to maintain and update.
"""

import re

# Valid field id pattern (letters, digits, underscore; no leading digit)
VALID_FIELD_NAME = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

MAX_FIELD_NAME_LENGTH = 100

# Renderers that need a list of options, and the prop that holds it
CHOICE_RENDERER_PROPS = {
    "radio": "options",
    "select": "data",
    "multiselect": "data",
}

# Issue codes reported by check_schema()
INVALID_STRUCTURE = "invalid_structure"
FIELD_KEY_MISMATCH = "field_key_mismatch"
UNKNOWN_RENDERER = "unknown_renderer"
UNKNOWN_CONTROLLING_FIELD = "unknown_controlling_field"
SELF_REFERENCE = "self_reference"
UNKNOWN_LAYOUT_FIELD = "unknown_layout_field"
DUPLICATE_LAYOUT_FIELD = "duplicate_layout_field"
UNPLACED_FIELD = "unplaced_field"
MISSING_OPTIONS = "missing_options"
DUPLICATE_OPTION_VALUE = "duplicate_option_value"
COL_SPAN_TOO_WIDE = "col_span_too_wide"
SUSPICIOUS_FIELD_NAME = "suspicious_field_name"
