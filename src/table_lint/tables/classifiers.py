"""Row classification helpers for markdown table linting.

Each function takes one raw document line and either classifies it (table
row, header separator, template-only row) or measures it (cell list, column
count).  Separator detection is only meaningful for lines that already pass
``is_table_row``.
"""

from table_lint.tables.patterns import (
    CELL_DELIMITER,
    TABLE_ROW_RE,
    TABLE_SEPARATOR_RE,
    TEMPLATE_ONLY_CELL_RE,
)


def is_table_row(line: str) -> bool:
    """Return True if the line starts and ends with a pipe (at least two pipes total)."""
    return bool(TABLE_ROW_RE.match(line))


def is_separator_row(line: str) -> bool:
    """Return True for a header separator row like '|---|:---:|'."""
    return is_table_row(line) and bool(TABLE_SEPARATOR_RE.match(line))


def split_cells(row: str) -> list[str]:
    """Split a row on pipes, dropping the blank pieces left by a leading/trailing pipe.

    Only the first and last pieces are candidates for dropping, and only when
    blank; empty cells in between are kept.  A row without any pipe has no
    cells.
    """
    trimmed = row.strip()
    if not trimmed or CELL_DELIMITER not in trimmed:
        return []

    cells = trimmed.split(CELL_DELIMITER)
    if cells and cells[0].strip() == "":
        cells.pop(0)
    if cells and cells[-1].strip() == "":
        cells.pop()
    return cells


def count_columns(row: str) -> int:
    """Return the number of logical cells in a table row ('| a | b |' -> 2)."""
    return len(split_cells(row))


def is_template_only_row(row: str) -> bool:
    """Return True if every cell of the row is a lone Liquid conditional tag.

    Such rows expand to a build-dependent number of columns, so their raw
    count is not comparable with the header.
    """
    cells = split_cells(row)
    return bool(cells) and all(TEMPLATE_ONLY_CELL_RE.match(cell) for cell in cells)
