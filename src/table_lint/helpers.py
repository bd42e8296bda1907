"""Host-side helpers: locate highlight ranges and report diagnostics."""

from table_lint.schema import Diagnostic, OnError


def get_range(line: str, content: str) -> tuple[int, int] | None:
    """Return (1-based start column, length) of *content* within *line*, or None."""
    if not content:
        return None
    start = line.find(content)
    if start == -1:
        return None
    return start + 1, len(content)


def add_error(
    on_error: OnError,
    line_number: int,
    detail: str,
    context: str | None = None,
    range_: tuple[int, int] | None = None,
    fix_info: dict | None = None,
    rule_names: tuple[str, ...] = (),
) -> None:
    """Build a Diagnostic and hand it to the host's *on_error* callback."""
    on_error(
        Diagnostic(
            line_number=line_number,
            rule_names=rule_names,
            detail=detail,
            context=context,
            range=range_,
            fix_info=fix_info,
        )
    )
