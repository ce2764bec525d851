import re
from dataclasses import dataclass
from typing import Iterator, Optional

from spanformat.errors import MalformedSpecifier

# argument term, modifier term, conversion term
FORMAT_SEQUENCE = re.compile(r'%([0-9]+\$|<?)([^a-zA-Z%]*)([a-su-zA-SU-Z%]|[tT][a-zA-Z])')


@dataclass(frozen=True)
class ConversionSpecifier:
    argument: str
    modifiers: str
    conversion: str
    start: int
    end: int

    @property
    def source(self) -> str:
        return f'%{self.argument}{self.modifiers}{self.conversion}'

    @property
    def is_implicit(self) -> bool:
        return self.argument == ''

    @property
    def is_relative(self) -> bool:
        return self.argument == '<'

    @property
    def explicit_index(self) -> int:
        """0-based index of a `%N$` specifier."""
        try:
            position = int(self.argument[:-1])
        except ValueError:
            raise MalformedSpecifier(f'Invalid argument index in {self.source!r}') from None
        if position < 1:
            raise MalformedSpecifier(f'Argument indexes start at 1, got {self.source!r}')
        return position - 1


def find_specifier(text: str, pos: int = 0) -> Optional[ConversionSpecifier]:
    """Leftmost conversion specifier at or after `pos`, None if there is none."""
    match = FORMAT_SEQUENCE.search(text, pos)
    if match is None:
        return None
    return ConversionSpecifier(match.group(1), match.group(2), match.group(3), match.start(), match.end())


def iter_specifiers(text: str) -> Iterator[ConversionSpecifier]:
    pos = 0
    while True:
        specifier = find_specifier(text, pos)
        if specifier is None:
            return
        yield specifier
        pos = specifier.end
