from spanformat._version import __version__
from spanformat.errors import FormatError, IndexOutOfRange, MalformedSpecifier, UnsupportedConversion
from spanformat.formatter import format, format_localized
from spanformat.styledtext import Attachment, Boundary, Styled, StyledText, StyledTextBuilder
from spanformat.styles import make_clickable

__all__ = [
    '__version__',
    'Attachment',
    'Boundary',
    'FormatError',
    'IndexOutOfRange',
    'MalformedSpecifier',
    'Styled',
    'StyledText',
    'StyledTextBuilder',
    'UnsupportedConversion',
    'format',
    'format_localized',
    'make_clickable',
]
