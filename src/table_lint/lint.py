"""Run the registered rules over whole documents.

Splits off the front matter, hands body lines to each rule, and converts the
rules' body-relative line numbers into file line numbers.

Usage:
  from table_lint import lint_file
  diagnostics = lint_file(Path("content/article.md"))
"""

import logging
import re
from pathlib import Path

from table_lint.frontmatter import decode_front_matter, split_front_matter
from table_lint.schema import Diagnostic, LintParams, Rule
from table_lint.tables.scanner import TABLE_COLUMN_INTEGRITY

logger = logging.getLogger(__name__)

RULES: dict[str, Rule] = {rule.name: rule for rule in (TABLE_COLUMN_INTEGRITY,)}

# Only CR, LF and CRLF end a markdown line; str.splitlines also breaks on form feeds and U+2028
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

BOM = "\ufeff"


def split_lines(text: str) -> list[str]:
    """Split *text* into markdown lines, ignoring a leading BOM and a final newline."""
    text = text.removeprefix(BOM)
    if not text:
        return []
    lines = LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def lint_lines(lines: list[str], rules: list[Rule] | None = None, strict_front_matter: bool = False) -> list[Diagnostic]:
    """Lint a document given as raw lines; return diagnostics sorted by file line number.

    With *strict_front_matter*, unparseable front matter raises FrontMatterError
    instead of being ignored.
    """
    front_matter_lines, body_lines = split_front_matter(lines)
    if strict_front_matter:
        decode_front_matter(front_matter_lines, strict=True)
    params = LintParams(lines=body_lines, front_matter_lines=front_matter_lines)
    offset = len(front_matter_lines)

    diagnostics: list[Diagnostic] = []
    for rule in rules if rules is not None else RULES.values():
        found: list[Diagnostic] = []
        rule.function(params, found.append)
        logger.debug("Rule %s reported %d diagnostic(s)", rule.name, len(found))
        diagnostics.extend(d.model_copy(update={"line_number": d.line_number + offset}) for d in found)

    return sorted(diagnostics, key=lambda d: d.line_number)


def lint_text(text: str, rules: list[Rule] | None = None, strict_front_matter: bool = False) -> list[Diagnostic]:
    """Lint a document given as a single string."""
    return lint_lines(split_lines(text), rules, strict_front_matter)


def lint_file(path: Path, rules: list[Rule] | None = None, strict_front_matter: bool = False) -> list[Diagnostic]:
    """Read a UTF-8 markdown file (BOM allowed) and lint it.  I/O errors propagate to the caller."""
    logger.debug("Linting %s", path)
    with open(path, "r", encoding="utf-8-sig") as fopen:
        text = fopen.read()
    return lint_text(text, rules, strict_front_matter)
