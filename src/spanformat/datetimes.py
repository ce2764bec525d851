"""
Date/time conversions (`%tY`, `%TB`, ...). Names of months, days and am/pm come from
the locale, or from the C locale when formatting without one.
"""

from datetime import date, datetime, time
from typing import Callable, Dict, Optional

from PyQt6.QtCore import QLocale

from spanformat.errors import UnsupportedConversion

LONG = QLocale.FormatType.LongFormat
SHORT = QLocale.FormatType.ShortFormat


def as_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, time):
        return datetime.combine(date(1970, 1, 1), value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value)
    raise TypeError(f'{type(value).__name__} is not a date or time')


def _aware(dt: datetime) -> datetime:
    # naive values are taken as local time
    return dt if dt.tzinfo is not None else dt.astimezone()


def _am_pm(dt: datetime, locale: QLocale) -> str:
    return (locale.amText() if dt.hour < 12 else locale.pmText()).lower()


FIELDS: Dict[str, Callable[[datetime, QLocale], str]] = {
    'H': lambda dt, loc: f'{dt.hour:02d}',
    'I': lambda dt, loc: f'{dt.hour % 12 or 12:02d}',
    'k': lambda dt, loc: str(dt.hour),
    'l': lambda dt, loc: str(dt.hour % 12 or 12),
    'M': lambda dt, loc: f'{dt.minute:02d}',
    'S': lambda dt, loc: f'{dt.second:02d}',
    'L': lambda dt, loc: f'{dt.microsecond // 1000:03d}',
    'N': lambda dt, loc: f'{dt.microsecond * 1000:09d}',
    'p': _am_pm,
    'z': lambda dt, loc: _aware(dt).strftime('%z'),
    'Z': lambda dt, loc: _aware(dt).tzname() or '',
    's': lambda dt, loc: str(int(_aware(dt).timestamp())),
    'Q': lambda dt, loc: str(int(_aware(dt).timestamp() * 1000)),
    'B': lambda dt, loc: loc.monthName(dt.month, LONG),
    'b': lambda dt, loc: loc.monthName(dt.month, SHORT),
    'h': lambda dt, loc: loc.monthName(dt.month, SHORT),
    'A': lambda dt, loc: loc.dayName(dt.isoweekday(), LONG),
    'a': lambda dt, loc: loc.dayName(dt.isoweekday(), SHORT),
    'C': lambda dt, loc: f'{dt.year // 100:02d}',
    'Y': lambda dt, loc: f'{dt.year:04d}',
    'y': lambda dt, loc: f'{dt.year % 100:02d}',
    'j': lambda dt, loc: f'{dt.timetuple().tm_yday:03d}',
    'm': lambda dt, loc: f'{dt.month:02d}',
    'd': lambda dt, loc: f'{dt.day:02d}',
    'e': lambda dt, loc: str(dt.day),
}

# composite conversions, upper-case letters are upper-cased fields
COMPOSITES = {
    'R': 'H:M',
    'T': 'H:M:S',
    'r': 'I:M:S P',
    'D': 'm/d/y',
    'F': 'Y-m-d',
    'c': 'a b d H:M:S Z Y',
}


def _composite(pattern: str, dt: datetime, locale: QLocale) -> str:
    parts = []
    for char in pattern:
        if char == 'P':
            parts.append(_am_pm(dt, locale).upper())
        elif char in FIELDS:
            parts.append(FIELDS[char](dt, locale))
        else:
            parts.append(char)
    return ''.join(parts)


def format_datetime(locale: Optional[QLocale], field: str, value) -> str:
    """Formats a single date/time field of `value`, e.g. field 'Y' for the year."""
    names = locale if locale is not None else QLocale.c()
    dt = as_datetime(value)
    if field in COMPOSITES:
        return _composite(COMPOSITES[field], dt, names)
    if field in FIELDS:
        return FIELDS[field](dt, names)
    raise UnsupportedConversion(f'Unknown date/time conversion t{field}')
