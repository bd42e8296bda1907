"""Command line entry point: lint markdown files for table column integrity.

Prints one line per diagnostic as ``path:line: RULE-ID/rule-name message``.
Exit status is 0 when clean, 1 when any diagnostic was reported, and 2 when
a path could not be read (or, with ``--strict-front-matter``, has unparseable
front matter).

Usage:
  table-lint content/ README.md
  python -m table_lint.cli --verbose docs/
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from table_lint.config import MARKDOWN_SUFFIXES, log_level
from table_lint.errors import FrontMatterError
from table_lint.lint import lint_file

logger = logging.getLogger(__name__)


def iter_markdown_files(paths: list[Path]):
    """Yield markdown files from *paths*, walking directories recursively in sorted order."""
    for path in paths:
        if path.is_dir():
            yield from sorted(p for p in path.rglob("*") if p.is_file() and p.suffix in MARKDOWN_SUFFIXES)
        else:
            yield path


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check markdown tables for consistent column counts")
    parser.add_argument("paths", nargs="+", type=Path, help="Markdown files or directories to lint")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--strict-front-matter", action="store_true", help="Treat unparseable front matter as an error instead of ignoring it"
    )
    args = parser.parse_args(argv)

    load_dotenv()
    level = logging.DEBUG if args.verbose else log_level()
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")

    n_files = 0
    n_errors = 0
    failed = False
    for path in iter_markdown_files(args.paths):
        try:
            diagnostics = lint_file(path, strict_front_matter=args.strict_front_matter)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Could not read %s: %s", path, exc)
            failed = True
            continue
        except FrontMatterError as exc:
            logger.error("Bad front matter in %s: %s", path, exc)
            failed = True
            continue
        n_files += 1
        for diagnostic in diagnostics:
            print(f"{path}:{diagnostic.line_number}: {diagnostic.rule_label} {diagnostic.detail}")
        n_errors += len(diagnostics)

    logger.info("Linted %d file(s), found %d error(s)", n_files, n_errors)
    if failed:
        return 2
    return 1 if n_errors else 0


if __name__ == "__main__":
    sys.exit(main())
