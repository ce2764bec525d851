"""
Style objects and helpers that attach them to a whole text.

Styles compare by identity: the same style object attached twice is the same attachment.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from PyQt6.QtGui import QColor

from spanformat import config
from spanformat.styledtext import Styled, StyledText, StyledTextBuilder


class Style:
    pass


@dataclass(eq=False)
class Bold(Style):
    pass


@dataclass(eq=False)
class Italic(Style):
    pass


@dataclass(eq=False)
class Code(Style):
    pass


@dataclass(eq=False)
class Link(Style):
    url: str


@dataclass(eq=False)
class Clickable(Style):
    action: Optional[Callable[[], None]] = None

    def on_click(self):
        if self.action is not None:
            self.action()


@dataclass(eq=False)
class ColorOverride(Style):
    """Draws the text in `color`, with or without an underline."""

    color: str
    underline: bool = False

    def __post_init__(self):
        qcolor = QColor(self.color)
        if not qcolor.isValid():
            raise ValueError(f'Invalid color: {self.color!r}')
        self.color = qcolor.name()


def _styled(text: Union[str, Styled], *styles) -> StyledText:
    builder = StyledTextBuilder(text)
    if len(builder):
        for style in styles:
            builder.set_style(style, 0, len(builder))
    return builder.freeze()


def make_clickable(text: Union[str, Styled], color: str, action: Optional[Callable[[], None]] = None) -> StyledText:
    """
    Makes the whole text clickable and draws it in `color` without underline.

    Usage:
        text = make_clickable('https://example.com', '#ff0000', open_browser)
        label_text = spanformat.format('Please visit %1$s', text)
    """
    return _styled(text, Clickable(action), ColorOverride(color, underline=False))


def bold(text: Union[str, Styled]) -> StyledText:
    return _styled(text, Bold())


def italic(text: Union[str, Styled]) -> StyledText:
    return _styled(text, Italic())


def code(text: Union[str, Styled]) -> StyledText:
    return _styled(text, Code())


def link(url: str, text: Union[str, Styled], color: Optional[str] = None) -> StyledText:
    return _styled(text, Link(url), ColorOverride(color or config.DEFAULT_LINK_COLOR, underline=True))
