"""Markdown frontmatter parsing.

The pipeline for one file is::

    split_frontmatter  ->  decode_frontmatter  ->  convert_date_strings

:func:`parse_markdown_text` runs all three and folds every failure into
a :class:`~mdfolio_core.ParseFailure`, so it never raises.  The
individual stages are public for callers that need finer control.

A file is expected to look like::

    ---
    title: Notes on parsing
    date: 2025-11-15
    ---
    Body text...

Files without a closed frontmatter block are reported as failures with
the message ``"Failed to parse frontmatter"``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from mdfolio_core.console import Console
from mdfolio_core.dates import convert_date_strings
from mdfolio_core.document import Document, ParseFailure, ParseOutcome, ParseSuccess, SplitResult
from mdfolio_core.exceptions import FrontmatterFormatError, FrontmatterSyntaxError

DELIMITER = "---"
FORMAT_ERROR_MESSAGE = "Failed to parse frontmatter"

_LINE_BREAK_RE = re.compile(r"\r?\n")
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _FrontmatterLoader(yaml.SafeLoader):
    """Safe loader that leaves timestamp-looking scalars as strings.

    Date handling is done by :func:`~mdfolio_core.convert_date_strings`,
    which tolerates impossible dates instead of failing the whole block.
    """


_FrontmatterLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def split_frontmatter(raw: str) -> SplitResult:
    """Split file text into the frontmatter block and the body.

    Lines are separated on ``\\n`` or ``\\r\\n``.  A line whose stripped
    text is exactly ``---`` is a delimiter: the first one opens the
    block, the second closes it, and both are dropped.  Any later
    ``---`` lines belong to the body.  Lines before the first delimiter
    are body text.

    When the block is never closed, the frontmatter text is empty and
    the whole input is returned as the body.

    Args:
        raw: Full text of a markdown file.

    Returns:
        A :class:`~mdfolio_core.SplitResult`.

    Example::

        split = split_frontmatter("---\\ntitle: x\\n---\\nbody")
        split.front_matter_text  # 'title: x'
        split.body               # 'body'
    """
    front_matter_lines: list[str] = []
    body_lines: list[str] = []
    delimiter_count = 0
    in_front_matter = False

    for line in _LINE_BREAK_RE.split(raw):
        if delimiter_count < 2 and line.strip() == DELIMITER:
            delimiter_count += 1
            in_front_matter = delimiter_count == 1
            continue

        if in_front_matter:
            front_matter_lines.append(line)
        else:
            body_lines.append(line)

    if delimiter_count < 2:
        return SplitResult(front_matter_text="", body=raw, delimiter_count=delimiter_count)

    return SplitResult(
        front_matter_text="\n".join(front_matter_lines).strip(),
        body="\n".join(body_lines),
        delimiter_count=delimiter_count,
    )


def decode_frontmatter(text: str) -> dict[str, Any]:
    """Decode a frontmatter block with PyYAML.

    Args:
        text: YAML text found between the delimiters.

    Returns:
        The decoded mapping.  ``null``, scalars and sequences decode to
        ``{}``.

    Raises:
        FrontmatterFormatError: If *text* is empty or whitespace only.
        FrontmatterSyntaxError: If *text* is not valid YAML, or an
            explicitly tagged value cannot be constructed.
    """
    if not text or not text.strip():
        raise FrontmatterFormatError(FORMAT_ERROR_MESSAGE)

    try:
        data = yaml.load(text, Loader=_FrontmatterLoader)
    except (yaml.YAMLError, ValueError, TypeError) as exc:
        # Explicit tags such as ``!!int abc`` fail in the constructor with
        # plain ValueError/TypeError rather than a YAMLError.
        raise FrontmatterSyntaxError(str(exc)) from exc

    if not isinstance(data, dict):
        return {}
    return {str(key): value for key, value in data.items()}


def parse_markdown_text(
    raw: str,
    path: Path | None = None,
    *,
    console: Console | None = None,
) -> ParseOutcome:
    """Parse markdown text into a document or a failure.

    Runs :func:`split_frontmatter`, :func:`decode_frontmatter` and
    :func:`~mdfolio_core.convert_date_strings` in turn.  No exception
    escapes; format and YAML errors become a
    :class:`~mdfolio_core.ParseFailure`.

    Args:
        raw: Full text of a markdown file.
        path: Where the text came from, recorded on the result.
        console: Receives date coercion warnings.

    Returns:
        :class:`~mdfolio_core.ParseSuccess` or
        :class:`~mdfolio_core.ParseFailure`.
    """
    split = split_frontmatter(raw)
    try:
        decoded = decode_frontmatter(split.front_matter_text)
    except (FrontmatterFormatError, FrontmatterSyntaxError) as exc:
        return ParseFailure(path=path, error=str(exc))

    document = Document(
        path=path,
        front_matter=convert_date_strings(decoded, console=console),
        content=split.body,
    )
    return ParseSuccess(document=document)
