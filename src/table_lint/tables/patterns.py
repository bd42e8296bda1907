"""Compiled regex patterns for markdown table lines and Liquid directive cells.

Used by classifiers.py to decide whether a line is a table row, a header
separator, or a cell holding nothing but a templating conditional.
"""

import re

# ─── Table Patterns ───────────────────────────────────────────────────────────

CELL_DELIMITER = "|"

# Table row: starts with "|", ends with "|", surrounding whitespace allowed.
# ".*" between the two pipes means "|", on its own, is not a row.
TABLE_ROW_RE = re.compile(r"^\s*\|.*\|\s*$")

# Header separator such as "|---|:---:|" (only pipes, dashes, colons, spaces)
TABLE_SEPARATOR_RE = re.compile(r"^\s*\|[\s\-:|]*\|\s*$")


# ─── Templating Patterns ─────────────────────────────────────────────────────

# Liquid conditional tags whose output depends on the build's version config
TEMPLATE_KEYWORDS = ("ifversion", "else", "endif", "elsif")

# A cell that is only one of those tags, e.g. " {% ifversion ghes %} "
TEMPLATE_ONLY_CELL_RE = re.compile(r"^\s*\{%\s*(" + "|".join(TEMPLATE_KEYWORDS) + r").*%\}\s*$")
