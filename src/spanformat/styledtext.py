"""
Text with styles attached to character ranges.

`StyledText` is an immutable value, `StyledTextBuilder` is the mutable buffer the
formatter splices into. Both share the read API of `Styled`.
"""

import abc
import enum
import logging
from typing import Any, List, NamedTuple, Optional, Tuple, Type, Union

logger = logging.getLogger(__name__)


class Boundary(enum.Enum):
    """
    Whether text inserted exactly at an attachment's start or end becomes part of it.
    """

    EXCLUSIVE_EXCLUSIVE = (False, False)
    EXCLUSIVE_INCLUSIVE = (False, True)
    INCLUSIVE_EXCLUSIVE = (True, False)
    INCLUSIVE_INCLUSIVE = (True, True)

    @property
    def start_inclusive(self) -> bool:
        return self.value[0]

    @property
    def end_inclusive(self) -> bool:
        return self.value[1]


class Attachment(NamedTuple):
    style: Any
    start: int
    end: int
    mode: Boundary = Boundary.EXCLUSIVE_EXCLUSIVE


def _check_range(start: int, end: int, length: int):
    if not 0 <= start <= end <= length:
        raise IndexError(f'Range {start}-{end} is outside of 0-{length}')


def _check_attachment(attachment: Attachment, length: int):
    _check_range(attachment.start, attachment.end, length)
    if attachment.start == attachment.end and attachment.mode is Boundary.EXCLUSIVE_EXCLUSIVE:
        raise ValueError('EXCLUSIVE_EXCLUSIVE attachments cannot have a zero length')


def _moved(offset: int, is_point: bool, start: int, end: int, length: int) -> int:
    """
    Where `offset` lands after [start, end) was replaced by `length` characters.

    A point (exclusive start, inclusive end) sticks to the text after it, a mark
    (inclusive start, exclusive end) to the text before it.
    """
    if offset < start:
        return offset
    if offset > end:
        return offset + length - (end - start)
    if start == end:
        return start + length if is_point else start
    if is_point:
        return start if offset == start and length else start + length
    return start + length if offset == end else start


class Styled(abc.ABC):
    """Read access shared by immutable and mutable styled text."""

    @property
    @abc.abstractmethod
    def text(self) -> str:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def attachments(self) -> Tuple[Attachment, ...]:
        raise NotImplementedError

    def __len__(self):
        return len(self.text)

    def __str__(self):
        return self.text

    def __repr__(self):
        return f'{self.__class__.__name__}({self.text!r}, {list(self.attachments)!r})'

    def __eq__(self, other):
        if not isinstance(other, Styled):
            return NotImplemented
        return self.text == other.text and self.attachments == other.attachments

    __hash__ = None

    def get_attachments(
        self, start: int = 0, end: Optional[int] = None, kind: Optional[Type] = None
    ) -> List[Attachment]:
        """
        Attachments overlapping [start, end), optionally only those whose style is a `kind`.
        An empty range returns the attachments touching that offset.
        """
        end = len(self) if end is None else end
        found = []
        for attachment in self.attachments:
            if kind is not None and not isinstance(attachment.style, kind):
                continue
            if start == end:
                if attachment.start <= start <= attachment.end:
                    found.append(attachment)
            elif attachment.start < end and attachment.end > start or attachment.start == attachment.end == start:
                found.append(attachment)
        return found

    def get_styles(self, start: int = 0, end: Optional[int] = None, kind: Optional[Type] = None) -> list:
        return [a.style for a in self.get_attachments(start, end, kind)]

    def __getitem__(self, key):
        if not isinstance(key, slice):
            return self.text[key]
        start, stop, step = key.indices(len(self))
        if step != 1:
            raise ValueError('Styled text can only be sliced with a step of 1')
        stop = max(start, stop)
        attachments = []
        for attachment in self.attachments:
            if attachment.end < start or attachment.start > stop:
                continue
            clipped = Attachment(
                attachment.style,
                max(attachment.start, start) - start,
                min(attachment.end, stop) - start,
                attachment.mode,
            )
            if clipped.start == clipped.end and clipped.mode is Boundary.EXCLUSIVE_EXCLUSIVE:
                continue
            attachments.append(clipped)
        return StyledText(self.text[start:stop], attachments)


class StyledText(Styled):
    """
    Immutable styled text. `source` may be a plain string or another styled text,
    whose attachments are copied before `attachments`.
    """

    def __init__(self, source: Union[str, Styled] = '', attachments=()):
        if isinstance(source, Styled):
            self._text = source.text
            attachments = tuple(source.attachments) + tuple(attachments)
        else:
            self._text = str(source)
        self._attachments = tuple(Attachment(*a) for a in attachments)
        for attachment in self._attachments:
            _check_attachment(attachment, len(self._text))

    @property
    def text(self) -> str:
        return self._text

    @property
    def attachments(self) -> Tuple[Attachment, ...]:
        return self._attachments

    def __hash__(self):
        return hash((self._text, self._attachments))


class StyledTextBuilder(Styled):
    """
    Mutable styled text. Splicing keeps attachments consistent with the new text,
    see `replace`.
    """

    def __init__(self, source: Union[str, Styled] = ''):
        if isinstance(source, Styled):
            self._text = source.text
            self._attachments = list(source.attachments)
        else:
            self._text = str(source)
            self._attachments = []

    @property
    def text(self) -> str:
        return self._text

    @property
    def attachments(self) -> Tuple[Attachment, ...]:
        return tuple(self._attachments)

    def freeze(self) -> StyledText:
        return StyledText(self._text, self._attachments)

    def _index_of(self, style) -> Optional[int]:
        for index, attachment in enumerate(self._attachments):
            if attachment.style is style:
                return index
        return None

    def set_style(self, style, start: int, end: int, mode: Boundary = Boundary.EXCLUSIVE_EXCLUSIVE):
        """
        Attach `style` to [start, end). A style lives at one range only, setting an
        already attached style moves it.
        """
        attachment = Attachment(style, start, end, mode)
        _check_attachment(attachment, len(self._text))
        index = self._index_of(style)
        if index is None:
            self._attachments.append(attachment)
        else:
            self._attachments[index] = attachment
        return self

    def remove_style(self, style):
        index = self._index_of(style)
        if index is not None:
            del self._attachments[index]
        return self

    def replace(self, start: int, end: int, replacement: Union[str, Styled]):
        """
        Replace [start, end) with `replacement`.

        Attachments before the range stay, those after it shift by the change in length.
        Attachments overlapping the range are clipped to it, one covering exactly the
        range covers the new text, and exclusive ones strictly inside it are dropped.
        Text inserted at an attachment boundary only becomes part of the attachment if
        that side is inclusive. A styled replacement brings its attachments along,
        except for styles this buffer already holds: those are inserted as plain text.
        """
        _check_range(start, end, len(self._text))
        inserted = replacement.text if isinstance(replacement, Styled) else str(replacement)
        length = len(inserted)

        kept = []
        for attachment in self._attachments:
            new_start = _moved(attachment.start, not attachment.mode.start_inclusive, start, end, length)
            new_end = _moved(attachment.end, attachment.mode.end_inclusive, start, end, length)
            if new_start > new_end:
                continue
            if new_start == new_end and attachment.mode is Boundary.EXCLUSIVE_EXCLUSIVE:
                continue
            kept.append(Attachment(attachment.style, new_start, new_end, attachment.mode))

        self._text = self._text[:start] + inserted + self._text[end:]
        self._attachments = kept

        if isinstance(replacement, Styled):
            for attachment in replacement.attachments:
                if self._index_of(attachment.style) is not None:
                    logger.debug(
                        'Style %r is already attached, inserting text at %d without it.', attachment.style, start
                    )
                    continue
                self._attachments.append(
                    Attachment(attachment.style, attachment.start + start, attachment.end + start, attachment.mode)
                )
        return self

    def insert(self, offset: int, text: Union[str, Styled]):
        return self.replace(offset, offset, text)

    def append(self, text: Union[str, Styled]):
        return self.replace(len(self._text), len(self._text), text)

    def delete(self, start: int, end: int):
        return self.replace(start, end, '')
