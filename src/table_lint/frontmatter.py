"""Front-matter splitting and decoding.

A document may open with a YAML block fenced by ``---`` lines.  The driver
splits that block off before linting so rules see body lines only, and rules
that need document-level settings (currently just ``autogenerated``) decode
it with ``decode_front_matter``.
"""

import logging

import yaml

from table_lint.errors import FrontMatterError

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---"


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == FRONT_MATTER_DELIMITER


def split_front_matter(lines: list[str]) -> tuple[list[str], list[str]]:
    """Return (front_matter_lines, body_lines).

    The front matter runs from an opening ``---`` on the first line through
    the next ``---`` line, both delimiters included.  Without a closing
    delimiter the whole document is body.
    """
    if not lines or not _is_delimiter(lines[0]):
        return [], list(lines)
    for idx in range(1, len(lines)):
        if _is_delimiter(lines[idx]):
            return list(lines[: idx + 1]), list(lines[idx + 1 :])
    logger.debug("Opening front-matter delimiter has no closing delimiter; treating as body")
    return [], list(lines)


def _strip_delimiters(lines: list[str]) -> list[str]:
    """Drop the ``---`` fences if present, leaving the YAML payload."""
    payload = list(lines)
    if payload and _is_delimiter(payload[0]):
        payload = payload[1:]
        if payload and _is_delimiter(payload[-1]):
            payload = payload[:-1]
    return payload


def decode_front_matter(lines: list[str], strict: bool = False) -> dict:
    """Decode front-matter lines into a mapping.

    Empty front matter, or YAML that is not a mapping, decodes to ``{}``.
    Malformed YAML is logged and decodes to ``{}`` unless *strict* is set, in
    which case FrontMatterError is raised.
    """
    text = "\n".join(_strip_delimiters(lines))
    if not text.strip():
        return {}

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        if strict:
            raise FrontMatterError(f"Invalid front matter: {exc}") from exc
        logger.warning("Ignoring unparseable front matter: %s", exc)
        return {}

    if not isinstance(data, dict):
        if strict:
            raise FrontMatterError(f"Front matter must be a mapping, got {type(data).__name__}")
        logger.warning("Ignoring front matter that is not a mapping (%s)", type(data).__name__)
        return {}
    return data
