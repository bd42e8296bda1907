"""Table boundary detection and the table-column-integrity rule.

Walks a document's body lines once.  A table region opens on a table row
immediately followed by a separator row, and closes on the first line that is
not a table row.  Inside a region every ordinary data row must have as many
cells as the header; separator rows and rows made only of Liquid conditional
tags are exempt.

All scan state lives in a local ``TableRegion`` (None while outside a
table), so concurrent calls on different documents never share state.
"""

import logging

from table_lint.config import (
    AUTOGENERATED_KEY,
    RULE_DESCRIPTION,
    RULE_ID,
    RULE_NAME,
    RULE_SEVERITY,
    RULE_TAGS,
)
from table_lint.frontmatter import decode_front_matter
from table_lint.helpers import add_error, get_range
from table_lint.schema import LintParams, OnError, Rule, TableRegion
from table_lint.tables.classifiers import (
    count_columns,
    is_separator_row,
    is_table_row,
    is_template_only_row,
)

logger = logging.getLogger(__name__)

RULE_NAMES = (RULE_ID, RULE_NAME)


# ─── Messages ────────────────────────────────────────────────────────────────


def mismatch_message(actual: int, expected: int) -> str:
    """Describe a column-count mismatch and which side needs more columns."""
    message = f"Table row has {actual} columns but header has {expected}."
    if actual > expected:
        return f"{message} Add {actual - expected} more column(s) to the header row to match this row."
    return f"{message} Add {expected - actual} missing column(s) to this row."


# ─── Scanner ─────────────────────────────────────────────────────────────────


def scan_table_rows(lines: list[str], on_error: OnError) -> None:
    """Report one Diagnostic per data row whose column count differs from its header.

    Line numbers are 1-based positions in *lines*.  Malformed rows never
    raise: a row with no usable cells simply counts as zero columns.
    """
    region: TableRegion | None = None
    n = len(lines)
    i = 0
    while i < n:
        line = lines[i]
        row = is_table_row(line)

        # Header row + separator opens a table; the separator is consumed here
        if region is None:
            if row and i + 1 < n and is_separator_row(lines[i + 1]):
                region = TableRegion(start_line=i + 1, header_row=line, expected_column_count=count_columns(line))
                logger.debug("Table opened at line %d with %d columns", region.start_line, region.expected_column_count)
                i += 2
                continue
            i += 1
            continue

        # First non-row line ends the table
        if not row:
            logger.debug("Table from line %d (header %r) closed at line %d", region.start_line, region.header_row.strip(), i + 1)
            region = None
            i += 1
            continue

        if is_separator_row(line) or is_template_only_row(line):
            i += 1
            continue

        actual = count_columns(line)
        if actual != region.expected_column_count:
            add_error(
                on_error,
                i + 1,
                mismatch_message(actual, region.expected_column_count),
                line,
                get_range(line, line.strip()),
                None,  # no fix info
                rule_names=RULE_NAMES,
            )
        i += 1


# ─── Rule ────────────────────────────────────────────────────────────────────


def is_autogenerated(front_matter_lines: list[str]) -> bool:
    """Return True if the front matter flags the document as autogenerated."""
    return bool(decode_front_matter(front_matter_lines).get(AUTOGENERATED_KEY))


def table_column_integrity(params: LintParams, on_error: OnError) -> None:
    """Report every table row whose column count does not match its header row."""
    if is_autogenerated(params.front_matter_lines):
        logger.debug("Skipping autogenerated document")
        return
    scan_table_rows(params.lines, on_error)


TABLE_COLUMN_INTEGRITY = Rule(
    names=RULE_NAMES,
    description=RULE_DESCRIPTION,
    tags=RULE_TAGS,
    severity=RULE_SEVERITY,
    function=table_column_integrity,
)
