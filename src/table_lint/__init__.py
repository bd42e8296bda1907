"""Column-integrity linting for markdown tables in Liquid-templated documents.

Submodules:
  config       -- rule metadata constants and environment settings
  schema       -- LintParams, Diagnostic, TableRegion and Rule Pydantic models
  frontmatter  -- front-matter splitting and YAML decoding
  helpers      -- highlight-range and error-reporting helpers
  tables       -- row classification, column counting, table scanning
  lint         -- document / file level driver
  cli          -- ``table-lint`` command line entry point
"""

from table_lint.lint import RULES, lint_file, lint_lines, lint_text
from table_lint.schema import Diagnostic, LintParams, Rule

__all__ = ["RULES", "Diagnostic", "LintParams", "Rule", "lint_file", "lint_lines", "lint_text"]
