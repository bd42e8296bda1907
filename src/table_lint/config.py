"""Shared configuration for the table lint rules and command line."""

import logging
import os

# ─── Rule Metadata ────────────────────────────────────────────────────────────

RULE_ID = "GHD047"
RULE_NAME = "table-column-integrity"
RULE_DESCRIPTION = "Tables must have consistent column counts across all rows"
RULE_TAGS = ("tables", "accessibility", "formatting")
RULE_SEVERITY = "error"

# Front-matter key that marks a generated document as exempt from linting
AUTOGENERATED_KEY = "autogenerated"


# ─── File Discovery ───────────────────────────────────────────────────────────

MARKDOWN_SUFFIXES = (".md", ".markdown")


# ─── Environment ──────────────────────────────────────────────────────────────

LOG_LEVEL_ENV = "TABLE_LINT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def log_level() -> str:
    """Return the configured log level name (upper-cased), falling back to WARNING if unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(name), int):
        return DEFAULT_LOG_LEVEL
    return name
