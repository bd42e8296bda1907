"""Exception types raised by table_lint collaborators."""


class TableLintError(Exception):
    """Base class for table_lint errors."""


class FrontMatterError(TableLintError, ValueError):
    """Front matter could not be decoded as a YAML mapping."""
