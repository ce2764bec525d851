import logging
from html import escape as html_escape

from spanformat.styledtext import Styled
from spanformat.styles import Bold, Clickable, Code, ColorOverride, Italic, Link

logger = logging.getLogger(__name__)


def escape(text: str) -> str:
    return html_escape(text, quote=False).replace('\n', '<br/>')


def _open_tag(style) -> str:
    if isinstance(style, Bold):
        return '<b>'
    if isinstance(style, Italic):
        return '<span style=" font-style:italic;">'
    if isinstance(style, Code):
        return "<span style=\" font-family:'Courier';\">"
    if isinstance(style, Link):
        return f'<a href="{html_escape(style.url, quote=True)}">'
    if isinstance(style, ColorOverride):
        decoration = 'underline' if style.underline else 'none'
        return f'<span style=" text-decoration: {decoration}; color:{style.color};">'
    return ''


def _close_tag(style) -> str:
    if isinstance(style, Bold):
        return '</b>'
    if isinstance(style, Link):
        return '</a>'
    if isinstance(style, (Italic, Code, ColorOverride)):
        return '</span>'
    return ''


def to_html(styled: Styled) -> str:
    """
    Qt rich text for a label. The text is cut at every attachment boundary and each
    piece is wrapped in the tags of the styles covering it.
    """
    for attachment in styled.attachments:
        if not _open_tag(attachment.style) and not isinstance(attachment.style, Clickable):
            logger.debug('No markup for style %r, skipping it.', attachment.style)

    text = styled.text
    cuts = {0, len(text)}
    for attachment in styled.attachments:
        cuts.update((attachment.start, attachment.end))
    cuts = sorted(cuts)

    result = []
    for start, end in zip(cuts, cuts[1:]):
        styles = [a.style for a in styled.attachments if a.start <= start and a.end >= end]
        opening = ''.join(_open_tag(style) for style in styles)
        closing = ''.join(_close_tag(style) for style in reversed(styles))
        result.append(f'{opening}{escape(text[start:end])}{closing}')
    return ''.join(result)
