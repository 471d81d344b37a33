"""
Week Helpers

A week is identified by the ISO date string (YYYY-MM-DD) of its Monday.
"""

import calendar
import re
from datetime import date, timedelta

from constants.validation import DAYS_OF_WEEK

_ISO_DATE = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def parse_week_start(value):
    """
    Parse and check a week identifier.

    Raises:
        ValueError: if value is not a YYYY-MM-DD date or is not a Monday
    """
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise ValueError('must be an ISO date (YYYY-MM-DD)')
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        raise ValueError('must be an ISO date (YYYY-MM-DD)') from None
    if parsed.weekday() != 0:
        raise ValueError('must be the date of a Monday')
    return parsed


def week_start_for(day=None):
    """Monday of the week containing day (today by default)."""
    if day is None:
        day = date.today()
    return day - timedelta(days=day.weekday())


def current_week_id():
    return week_start_for().isoformat()


def shift_week(week_id, weeks):
    """
    Week identifier `weeks` weeks before (negative) or after week_id.

    Returns None when the shifted week falls outside the supported calendar
    (before 0001-01-01 or after 9999-12-31).
    """
    try:
        return (parse_week_start(week_id) + timedelta(weeks=weeks)).isoformat()
    except OverflowError:
        return None


def week_days(week_id):
    """List of (day name, date) pairs for the week, Monday first."""
    start = parse_week_start(week_id)
    return [(name, start + timedelta(days=offset)) for offset, name in enumerate(DAYS_OF_WEEK)]


def weeks_in_month(year, month):
    """Mondays of every week that has at least one day in the given month."""
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    monday = week_start_for(first)
    weeks = [monday]
    # Only step to a Monday that is still inside the month; 9999-12-27 has no successor
    while (last - monday).days >= 7:
        monday += timedelta(weeks=1)
        weeks.append(monday)
    return weeks
