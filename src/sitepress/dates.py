"""Date formatting shared by every page that shows a date."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from functools import partial

DEFAULT_DATE_FORMAT = "%B %d, %Y"

DateFormatter = Callable[[date], str]


def fmt_date(value: date, pattern: str = DEFAULT_DATE_FORMAT) -> str:
    """Format a date (or datetime) for display."""

    return value.strftime(pattern)


def make_date_formatter(pattern: str = DEFAULT_DATE_FORMAT) -> DateFormatter:
    """Return a single-argument formatter bound to ``pattern``."""

    if not pattern.strip():
        raise ValueError("Date format must not be empty.")
    return partial(fmt_date, pattern=pattern)
