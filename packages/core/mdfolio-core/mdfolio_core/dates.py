"""Date parsing and formatting helpers for frontmatter values.

:func:`convert_date_strings` is the date coercion step of the parse
pipeline.  It turns top-level frontmatter strings shaped like
``YYYY-MM-DD`` into :class:`datetime.date` and strings shaped like
``YYYY-MM-DD HH:MM`` into naive :class:`datetime.datetime` values.
Date-only values become plain calendar dates, so their meaning does not
depend on the caller's timezone.

Nested mappings and lists are left untouched; only top-level values are
considered.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

from mdfolio_core.console import Console, default_console
from mdfolio_core.exceptions import InvalidDateError

DATE_ONLY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATE_TIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$")

_DATE_FORMAT = "%Y-%m-%d"
_DATE_TIME_FORMAT = "%Y-%m-%d %H:%M"


def convert_date_strings(
    front_matter: Mapping[str, Any],
    *,
    console: Console | None = None,
) -> dict[str, Any]:
    """Return a copy of *front_matter* with date-shaped strings converted.

    Only top-level string values are inspected.  A value that matches a
    date pattern but names a day that does not exist (``"2025-02-30"``,
    ``"2025-99-99"``) is kept as the original string and a warning is
    reported; the remaining keys are still processed.

    Args:
        front_matter: Decoded frontmatter mapping.  It is not modified.
        console: Receives the warning for unparseable dates.  Defaults
            to this module's logger.

    Returns:
        A new ``dict`` in the same key order.

    Example::

        >>> convert_date_strings({"date": "2025-11-15", "tags": ["a"]})
        {'date': datetime.date(2025, 11, 15), 'tags': ['a']}
    """
    console = console or default_console(__name__)
    result: dict[str, Any] = {}
    for key, value in front_matter.items():
        result[key] = _coerce(key, value, console)
    return result


def _coerce(key: str, value: Any, console: Console) -> Any:
    if not isinstance(value, str):
        return value
    try:
        if DATE_ONLY_RE.match(value):
            return datetime.strptime(value, _DATE_FORMAT).date()
        if DATE_TIME_RE.match(value):
            return datetime.strptime(value, _DATE_TIME_FORMAT)
    except ValueError as exc:
        console.warn(f'Failed to parse date for key "{key}" with value "{value}": {exc}')
    return value


def format_date_yyyy_mm_dd(value: date) -> str:
    """Format a date or datetime as ``YYYY-MM-DD``.

    Aware datetimes are converted to UTC first, so the calendar day is
    the UTC day.
    """
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(_DATE_FORMAT)


def parse_yyyy_mm_dd(text: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string into a :class:`datetime.date`.

    Surrounding whitespace is ignored.

    Raises:
        InvalidDateError: If *text* is not a string, is not in
            ``YYYY-MM-DD`` format, has a month outside 1-12 or a day
            outside 1-31, or names a day missing from the calendar
            (e.g. ``2025-02-30``).
    """
    if not isinstance(text, str):
        raise InvalidDateError("Input must be a string")

    trimmed = text.strip()
    if not DATE_ONLY_RE.match(trimmed):
        raise InvalidDateError(f'Invalid date format: "{text}". Expected format: YYYY-MM-DD')

    year, month, day = (int(part) for part in trimmed.split("-"))
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Invalid month: {month}. Month must be between 1 and 12")
    if not 1 <= day <= 31:
        raise InvalidDateError(f"Invalid day: {day}. Day must be between 1 and 31")

    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDateError(
            f'Invalid date: "{text}". Date does not exist in the calendar'
        ) from None
