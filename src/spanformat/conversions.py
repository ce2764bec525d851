"""
Plain-text conversion of a single value, the `%<modifiers><conversion>` of a specifier.

Numbers are rendered by Python's `format()` mini-language and localized afterwards:
with a locale, the decimal point and grouping separator of decimal results are
replaced by the locale's. Without a locale (`None`) nothing is localized.
"""

import operator
import re
from typing import Optional

from PyQt6.QtCore import QLocale

from spanformat.datetimes import format_datetime
from spanformat.errors import UnsupportedConversion

MODIFIERS = re.compile(r'(?P<flags>[-#+ 0,(]*)(?P<width>[1-9][0-9]*)?(?:\.(?P<precision>[0-9]+))?')

# Legal flags per conversion, keyed by the lower-case conversion letter.
FLAGS = {
    'b': '-',
    'h': '-',
    's': '-',
    'c': '-',
    'd': '-+ 0,(',
    'o': '-#+ 0(',
    'x': '-#+ 0(',
    'e': '-#+ 0(',
    'f': '-#+ 0,(',
    'g': '-+ 0,(',
    'a': '-+ 0',
    't': '-',
}
NO_PRECISION = 'cdoxat'
LOCALIZED = 'defg'

# sign or parenthesis, then a radix prefix; zero padding goes after these
PAD_PREFIX = re.compile(r'[-+ (]?(?:0[xX])?')


def convert(locale: Optional[QLocale], modifiers: str, conversion: str, value) -> str:
    match = MODIFIERS.fullmatch(modifiers)
    if match is None:
        raise UnsupportedConversion(f'Illegal flags, width or precision in %{modifiers}{conversion}')
    flags = match['flags']
    width = int(match['width']) if match['width'] else 0
    precision = int(match['precision']) if match['precision'] is not None else None
    kind = conversion[0].lower()

    if kind not in FLAGS:
        raise UnsupportedConversion(f'Unknown conversion %{conversion}')
    _check_flags(flags, width, precision, kind, f'%{modifiers}{conversion}')

    try:
        if kind == 't':
            body = format_datetime(locale, conversion[1], value)
        elif kind in 'bhs':
            body = _general(kind, precision, value)
        elif kind == 'c':
            body = _character(value)
        else:
            body = _number(locale, kind, flags, precision, value)
    except UnsupportedConversion:
        raise
    except (TypeError, ValueError, OverflowError) as e:
        raise UnsupportedConversion(f'%{modifiers}{conversion} can\'t format {type(value).__name__}: {e}') from e

    if conversion[0].isupper():
        body = body.upper()
    return _justify(body, flags, width)


def _check_flags(flags, width, precision, kind, source):
    illegal = set(flags) - set(FLAGS[kind])
    if illegal:
        raise UnsupportedConversion(f'Flags {"".join(sorted(illegal))!r} not allowed in {source}')
    if len(set(flags)) != len(flags):
        raise UnsupportedConversion(f'Duplicate flags in {source}')
    if ('-' in flags or '0' in flags) and not width:
        raise UnsupportedConversion(f'Missing width in {source}')
    if '-' in flags and '0' in flags:
        raise UnsupportedConversion(f'Flags \'-\' and \'0\' exclude each other in {source}')
    if '+' in flags and ' ' in flags:
        raise UnsupportedConversion(f'Flags \'+\' and \' \' exclude each other in {source}')
    if precision is not None and kind in NO_PRECISION:
        raise UnsupportedConversion(f'Precision not allowed in {source}')


def _general(kind, precision, value) -> str:
    if kind == 'b':
        text = 'false' if value is None or value is False else 'true'
    elif kind == 'h':
        text = format(hash(value) & 0xFFFFFFFF, 'x')
    else:
        text = str(value)
    return text if precision is None else text[:precision]


def _character(value) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f'expected a single character, got {len(value)}')
        return value
    return chr(operator.index(value))


def _number(locale, kind, flags, precision, value) -> str:
    if kind in 'dox':
        value = operator.index(value)
    elif not isinstance(value, (int, float)) and kind == 'a':
        raise TypeError('hex float needs an int or float')

    negative = value < 0
    parenthesize = negative and '(' in flags
    if parenthesize:
        value = -value
    sign = '' if parenthesize else '+' if '+' in flags else ' ' if ' ' in flags else ''

    if kind == 'a':
        body = float(value).hex()
        if sign and not body.startswith('-'):
            body = sign + body
    else:
        alternate = '#' if '#' in flags and kind != 'o' else ''
        grouping = ',' if ',' in flags else ''
        digits = f'.{precision}' if precision is not None else ''
        body = format(value, f'{sign}{alternate}{grouping}{digits}{kind}')
        if kind == 'o' and '#' in flags:
            body = re.sub(r'^([-+ ]?)', r'\g<1>0', body, count=1)

    if locale is not None and kind in LOCALIZED:
        body = localize(locale, body)
    if parenthesize:
        body = f'({body})'
    return body


def localize(locale: QLocale, body: str) -> str:
    """Swaps the grouping separator and decimal point of a formatted number for the locale's."""
    return body.translate({ord(','): locale.groupSeparator(), ord('.'): locale.decimalPoint()})


def _justify(body: str, flags: str, width: int) -> str:
    if len(body) >= width:
        return body
    if '-' in flags:
        return body.ljust(width)
    if '0' in flags:
        prefix = PAD_PREFIX.match(body).group()
        return prefix + body[len(prefix):].rjust(width - len(prefix), '0')
    return body.rjust(width)
