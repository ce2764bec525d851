"""
`%`-style formatting that keeps the styles of the template and of `%s` arguments.
"""

from typing import Union

from spanformat.conversions import convert
from spanformat.errors import IndexOutOfRange
from spanformat.i18n import LocaleLike, get_locale, resolve_locale
from spanformat.scanner import ConversionSpecifier, find_specifier
from spanformat.styledtext import Styled, StyledText, StyledTextBuilder


def format(template: Union[str, Styled], *args) -> StyledText:
    """
    Version of `format_localized` using the ambient locale, see `spanformat.i18n.get_locale`.
    """
    return format_localized(get_locale(), template, *args)


def format_localized(locale: LocaleLike, template: Union[str, Styled], *args) -> StyledText:
    """
    Formats `template` like printf and returns the result with styles.

    Both the template and any `%s` argument can be styled and keep their styles.
    A style object can only be attached once, so if the same styled argument is
    substituted more than once only its first occurrence keeps its styles, the
    others appear as text only.

    Parameters
    ----------
    locale
        QLocale or locale name for numbers and dates. None means no localization.
    template
        Format string, plain or styled. Syntax: %[index$|<][flags][width][.precision]conversion
    args
        Arguments referenced by the template. Extra arguments are ignored.

    Returns
    -------
    StyledText
        The formatted text with styles.
    """
    locale = resolve_locale(locale)
    out = StyledTextBuilder(template)

    i = 0
    arg_at = -1

    while i < len(out):
        specifier = find_specifier(out.text, i)
        if specifier is None:
            break

        if specifier.conversion == '%':
            cooked = '%'
        elif specifier.conversion == 'n':
            cooked = '\n'
        else:
            if specifier.is_implicit:
                arg_at += 1
                arg_idx = arg_at
            elif specifier.is_relative:
                arg_idx = arg_at
            else:
                arg_idx = specifier.explicit_index
                arg_at = arg_idx

            arg_item = _argument(specifier, arg_idx, args)
            if specifier.conversion == 's' and isinstance(arg_item, Styled):
                cooked = arg_item
            else:
                cooked = convert(locale, specifier.modifiers, specifier.conversion, arg_item)

        out.replace(specifier.start, specifier.end, cooked)
        # continue after the inserted text, arguments are never scanned for specifiers
        i = specifier.start + len(cooked)

    return out.freeze()


def _argument(specifier: ConversionSpecifier, index: int, args: tuple):
    if not 0 <= index < len(args):
        if index < 0:
            reason = 'no argument was used before it'
        else:
            reason = f'only {len(args)} given'
        raise IndexOutOfRange(f'{specifier.source!r} refers to argument {index + 1}, but {reason}')
    return args[index]
