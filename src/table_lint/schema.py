"""Pydantic models shared by the lint rules, the driver, and the CLI.

``LintParams`` is what a rule receives for one document, ``Diagnostic`` is
what it reports back through the host's ``on_error`` callback, and ``Rule``
bundles a rule's identity with its checking function.
"""

from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LintParams(BaseModel):
    """Inputs for a single rule invocation on one document.

    ``lines`` holds the document body (front matter excluded); the first
    entry is line 1 for the purpose of reported line numbers.
    """

    model_config = ConfigDict(populate_by_name=True)

    lines: list[str]
    front_matter_lines: list[str] = Field(default_factory=list, alias="frontMatterLines")


class Diagnostic(BaseModel):
    """A single positioned lint finding.

    ``range`` is ``(start_column, length)`` with a 1-based start column, or
    None when the offending text could not be located on the line.
    ``fix_info`` is always None for the column-integrity rule.
    """

    line_number: int
    rule_names: tuple[str, ...] = ()
    detail: str
    context: str | None = None
    range: tuple[int, int] | None = None
    fix_info: dict | None = None

    @model_validator(mode="after")
    def validate_position(self) -> "Diagnostic":
        """Ensure the line number and highlight range point inside a document."""
        if self.line_number < 1:
            raise ValueError(f"line_number must be >= 1, got {self.line_number}")
        if self.range is not None:
            start, length = self.range
            if start < 1 or length < 1:
                raise ValueError(f"range must have a positive start and length, got {self.range}")
        return self

    @property
    def rule_label(self) -> str:
        """Slash-joined rule names, e.g. 'GHD047/table-column-integrity'."""
        return "/".join(self.rule_names)


class TableRegion(BaseModel):
    """The table currently being scanned: opened by a header + separator pair."""

    start_line: int
    header_row: str
    expected_column_count: int


OnError = Callable[[Diagnostic], None]


class Rule(BaseModel):
    """A lint rule's identity and the function that applies it to one document."""

    model_config = ConfigDict(frozen=True)

    names: tuple[str, ...]
    description: str
    tags: tuple[str, ...]
    severity: Literal["error", "warning"]
    function: Callable[[LintParams, OnError], None]

    @property
    def name(self) -> str:
        """The rule's long (human-readable) name."""
        return self.names[-1]
