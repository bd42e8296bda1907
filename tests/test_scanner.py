"""Unit tests for the table scanner and the table-column-integrity rule.

Covers table boundary detection, column-count validation, separator and
template-row exemptions, the autogenerated front-matter gate, and the rule's
exposed metadata.
"""

# pylint: disable=missing-class-docstring,missing-function-docstring

import logging

from table_lint.schema import LintParams
from table_lint.tables.scanner import (
    TABLE_COLUMN_INTEGRITY,
    is_autogenerated,
    mismatch_message,
    scan_table_rows,
    table_column_integrity,
)

HEADER = "| Name | Value |"
SEPARATOR = "|------|-------|"


def find_mismatches(lines: list[str]) -> list:
    """Run the scanner on *lines* and collect everything it reports."""
    found: list = []
    scan_table_rows(lines, found.append)
    return found


def run_rule(lines: list[str], front_matter_lines: list[str] | None = None) -> list:
    """Run the rule on *lines* and collect everything it reports."""
    params = LintParams(lines=lines, front_matter_lines=front_matter_lines or [])
    found: list = []
    table_column_integrity(params, found.append)
    return found


# ===========================================================================
# mismatch_message tests
# ===========================================================================


class TestMismatchMessage:

    def test_row_wider_than_header(self):
        assert mismatch_message(3, 2) == (
            "Table row has 3 columns but header has 2. Add 1 more column(s) to the header row to match this row."
        )

    def test_row_narrower_than_header(self):
        assert mismatch_message(1, 2) == "Table row has 1 columns but header has 2. Add 1 missing column(s) to this row."

    def test_difference_is_reported(self):
        assert "Add 3 missing column(s)" in mismatch_message(1, 4)


# ===========================================================================
# scan_table_rows tests
# ===========================================================================


class TestWellFormedTables:

    def test_matching_rows(self):
        lines = [HEADER, SEPARATOR, "| a | b |", "| c | d |"]
        assert not find_mismatches(lines)

    def test_empty_cells_match(self):
        lines = [HEADER, SEPARATOR, "| | |", "| a | |"]
        assert not find_mismatches(lines)

    def test_empty_document(self):
        assert not find_mismatches([])

    def test_header_on_last_line(self):
        assert not find_mismatches(["text", HEADER])


class TestColumnMismatch:

    def test_extra_column(self):
        diagnostics = find_mismatches([HEADER, SEPARATOR, "| a | b | c |"])
        assert len(diagnostics) == 1
        assert diagnostics[0].line_number == 3
        assert diagnostics[0].detail == (
            "Table row has 3 columns but header has 2. Add 1 more column(s) to the header row to match this row."
        )

    def test_missing_column(self):
        diagnostics = find_mismatches([HEADER, SEPARATOR, "| a |"])
        assert len(diagnostics) == 1
        assert diagnostics[0].detail == "Table row has 1 columns but header has 2. Add 1 missing column(s) to this row."

    def test_one_diagnostic_per_bad_row(self):
        lines = [HEADER, SEPARATOR, "| a |", "| b | c |", "| d | e | f | g |"]
        assert [d.line_number for d in find_mismatches(lines)] == [3, 5]

    def test_diagnostic_fields(self):
        line = "  | a |"
        diagnostic = find_mismatches([HEADER, SEPARATOR, line])[0]
        assert diagnostic.context == line
        assert diagnostic.range == (3, 5)
        assert diagnostic.fix_info is None
        assert diagnostic.rule_names == ("GHD047", "table-column-integrity")

    def test_line_numbers_after_leading_text(self):
        lines = ["# Title", "", "Intro text.", HEADER, SEPARATOR, "| a |"]
        assert find_mismatches(lines)[0].line_number == 6


class TestSeparatorRows:

    def test_separator_never_reported(self):
        lines = ["| a | b | c |", "|:---|:---:|---:|", "| 1 | 2 | 3 |"]
        assert not find_mismatches(lines)

    def test_header_separator_width_not_checked(self):
        lines = [HEADER, "|---|", "| a | b |"]
        assert not find_mismatches(lines)

    def test_later_separator_skipped(self):
        lines = [HEADER, SEPARATOR, "| a | b |", "|---|---|---|", "| c | d |"]
        assert not find_mismatches(lines)


class TestTemplateRows:

    def test_template_only_row_exempt(self):
        lines = [HEADER, SEPARATOR, "| {% ifversion fpt %} |", "| a | b |", "| {% endif %} |"]
        assert not find_mismatches(lines)

    def test_template_row_wider_than_header(self):
        lines = [HEADER, SEPARATOR, "| {% ifversion ghes %} | {% else %} | {% endif %} |"]
        assert not find_mismatches(lines)

    def test_template_row_without_outer_pipes_closes_table(self):
        """Not a table row, so it ends the region instead of being counted."""
        lines = [HEADER, SEPARATOR, "{% ifversion fpt %}|{% endif %}", "| x |"]
        assert not find_mismatches(lines)

    def test_template_mixed_with_data_checked(self):
        lines = [HEADER, SEPARATOR, "| Yes {% ifversion fpt %} |"]
        assert len(find_mismatches(lines)) == 1


class TestTableBoundaries:

    def test_no_separator_no_table(self):
        lines = ["| a | b |", "| c |", "| d | e | f |"]
        assert not find_mismatches(lines)

    def test_table_closes_on_blank_line(self):
        lines = [HEADER, SEPARATOR, "| a | b |", "", "| x |", "| y | z | w |"]
        assert not find_mismatches(lines)

    def test_table_closes_on_text(self):
        lines = [HEADER, SEPARATOR, "Some paragraph", "| x |"]
        assert not find_mismatches(lines)

    def test_second_table_uses_its_own_header(self):
        lines = [
            HEADER,
            SEPARATOR,
            "| a | b |",
            "",
            "| A | B | C |",
            "|---|---|---|",
            "| 1 | 2 | 3 |",
            "| 1 | 2 |",
        ]
        diagnostics = find_mismatches(lines)
        assert len(diagnostics) == 1
        assert diagnostics[0].line_number == 8
        assert diagnostics[0].detail.startswith("Table row has 2 columns but header has 3.")

    def test_adjacent_table_after_close(self):
        lines = [HEADER, SEPARATOR, "text", "| a |", "|---|", "| b | c |"]
        diagnostics = find_mismatches(lines)
        assert [d.line_number for d in diagnostics] == [6]


# ===========================================================================
# Rule / front-matter gate tests
# ===========================================================================


class TestIsAutogenerated:

    def test_true(self):
        assert is_autogenerated(["---", "autogenerated: true", "---"]) is True

    def test_false(self):
        assert is_autogenerated(["---", "autogenerated: false", "---"]) is False

    def test_missing_key(self):
        assert is_autogenerated(["---", "title: Tables", "---"]) is False

    def test_no_front_matter(self):
        assert is_autogenerated([]) is False


class TestTableColumnIntegrity:

    def test_reports_mismatch(self):
        found = run_rule([HEADER, SEPARATOR, "| a | b | c |"])
        assert len(found) == 1
        assert found[0].line_number == 3

    def test_autogenerated_document_skipped(self):
        found = run_rule([HEADER, SEPARATOR, "| a | b | c |"], ["---", "autogenerated: true", "---"])
        assert not found

    def test_not_autogenerated_document_checked(self):
        found = run_rule([HEADER, SEPARATOR, "| a |"], ["---", "autogenerated: false", "---"])
        assert len(found) == 1

    def test_front_matter_alias(self):
        params = LintParams.model_validate(
            {"lines": [HEADER, SEPARATOR, "| a |"], "frontMatterLines": ["---", "autogenerated: true", "---"]}
        )
        found: list = []
        table_column_integrity(params, found.append)
        assert not found


class TestRuleMetadata:

    def test_names(self):
        assert TABLE_COLUMN_INTEGRITY.names == ("GHD047", "table-column-integrity")
        assert TABLE_COLUMN_INTEGRITY.name == "table-column-integrity"

    def test_severity(self):
        assert TABLE_COLUMN_INTEGRITY.severity == "error"

    def test_tags(self):
        assert set(TABLE_COLUMN_INTEGRITY.tags) == {"tables", "accessibility", "formatting"}

    def test_function(self):
        assert TABLE_COLUMN_INTEGRITY.function is table_column_integrity


class TestScanLogging:

    def test_close_logs_header(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="table_lint.tables.scanner"):
            find_mismatches([HEADER, SEPARATOR, "| a | b |", ""])
        assert "Table from line 1 (header '| Name | Value |') closed at line 4" in caplog.text
