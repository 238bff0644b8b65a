from __future__ import annotations

import re
from datetime import date, datetime

# Tried in order; the first match wins. The regexes pin the field widths
# that strptime alone would accept as one digit.
_ISO_DATE = (re.compile(r"^\d{4}-\d{2}-\d{2}$"), "%Y-%m-%d")
_FULL_DATE_FORMATS = (
    _ISO_DATE,
    (re.compile(r"^\d{8}$"), "%Y%m%d"),
)
_YEAR_UNKNOWN_RE = (
    re.compile(r"^--(\d{2})-(\d{2})$"),
    re.compile(r"^--(\d{2})(\d{2})$"),
)
_DATETIME_FORMATS = (
    (re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$"), "%Y-%m-%dT%H:%M:%SZ"),
    (re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$"), "%Y-%m-%dT%H:%M:%S"),
)


def _strptime_date(value: str, layout: tuple[re.Pattern, str]) -> date | None:
    pattern, fmt = layout
    if not pattern.match(value):
        return None
    try:
        return datetime.strptime(value, fmt).date()
    except ValueError:
        return None


def _anchor(year: int, month: int, day: int) -> date | None:
    if not 1 <= month <= 12:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        # --02-29 in a non-leap year rolls over to March 1
        if month == 2 and day == 29:
            return date(year, 3, 1)
        return None


def parse_birthday(raw: str | None, today: date | None = None) -> date | None:
    """Parse a BDAY value into a date, or None when absent or unparseable.

    Year-unknown values (``--MM-DD`` and ``--MMDD``) are anchored onto the
    current calendar year.
    """
    value = (raw or "").strip()
    if not value:
        return None

    for layout in _FULL_DATE_FORMATS:
        parsed = _strptime_date(value, layout)
        if parsed is not None:
            return parsed

    for pattern in _YEAR_UNKNOWN_RE:
        m = pattern.match(value)
        if m:
            year = (today or date.today()).year
            return _anchor(year, int(m.group(1)), int(m.group(2)))

    for layout in _DATETIME_FORMATS:
        parsed = _strptime_date(value, layout)
        if parsed is not None:
            return parsed

    if len(value) >= 10:
        return _strptime_date(value[:10], _ISO_DATE)
    return None


def format_birthday_for_display(birthday: date | None, today: date | None = None) -> str:
    """Render ``MM/DD/YYYY``, or ``MM/DD`` when the year is the current one."""
    if birthday is None:
        return ""
    if birthday.year == (today or date.today()).year:
        return f"{birthday.month:02d}/{birthday.day:02d}"
    return f"{birthday.month:02d}/{birthday.day:02d}/{birthday.year:04d}"


__all__ = ["parse_birthday", "format_birthday_for_display"]
