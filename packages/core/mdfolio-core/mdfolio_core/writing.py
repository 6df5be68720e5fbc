"""Render documents back to markdown with YAML frontmatter."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import yaml

from mdfolio_core.document import Document
from mdfolio_core.parsing import DELIMITER


class _FrontmatterDumper(yaml.SafeDumper):
    """Safe dumper that never emits anchors or aliases."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


def _represent_datetime(dumper: yaml.SafeDumper, value: datetime) -> yaml.ScalarNode:
    # Whole-minute values use the same shape the parser coerces back.
    if value.tzinfo is None and value.second == 0 and value.microsecond == 0:
        text = value.strftime("%Y-%m-%d %H:%M")
    else:
        text = value.isoformat()
    return dumper.represent_scalar("tag:yaml.org,2002:str", text)


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.ScalarNode:
    # Multi-line values are double-quoted so every line break is escaped
    # and no physical line of the block can read as a delimiter.
    style = '"' if "\n" in value or "\r" in value else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", value, style=style)


_FrontmatterDumper.add_representer(datetime, _represent_datetime)
_FrontmatterDumper.add_representer(str, _represent_str)


def dump_frontmatter(front_matter: dict[str, Any]) -> str:
    """Serialize a frontmatter mapping to YAML.

    Key order is preserved, lines are never wrapped, nested blocks are
    indented by two spaces and no anchors or aliases are emitted.
    Dates are written as ``YYYY-MM-DD`` and whole-minute naive
    datetimes as ``YYYY-MM-DD HH:MM``.  Other datetimes (with seconds,
    microseconds or a timezone) are written as ISO 8601 strings, which
    the parser does not coerce: they read back as ``str``.  Multi-line
    strings are double-quoted with escaped line breaks.
    """
    return yaml.dump(
        dict(front_matter),
        Dumper=_FrontmatterDumper,
        indent=2,
        width=float("inf"),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def render_markdown(document: Document) -> str:
    """Render *document* as markdown text.

    A non-empty frontmatter mapping is written between ``---`` lines,
    followed by a newline and the body.  With empty frontmatter only the
    body is returned, without delimiters.

    Example::

        >>> render_markdown(Document(front_matter={"title": "x"}, content="body"))
        '---\\ntitle: x\\n---\\nbody'
    """
    text = ""
    if document.front_matter:
        text = f"{DELIMITER}\n{dump_frontmatter(document.front_matter)}{DELIMITER}"

    if document.content:
        if text:
            text += "\n"
        text += document.content

    return text
