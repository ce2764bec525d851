from spanformat import format_localized
from spanformat.i18n.richtext import escape, to_html
from spanformat.styledtext import StyledText
from spanformat.styles import Clickable, bold, code, italic, link, make_clickable


def test_escape():
    assert escape('a < b & "c"\nd') == 'a &lt; b &amp; "c"<br/>d'


def test_plain_text():
    assert to_html(StyledText('1 < 2')) == '1 &lt; 2'


def test_styles():
    assert to_html(bold('Bold')) == '<b>Bold</b>'
    assert to_html(italic('it')) == '<span style=" font-style:italic;">it</span>'
    assert to_html(code('ls')) == "<span style=\" font-family:'Courier';\">ls</span>"


def test_link():
    html = to_html(link('https://example.com/?a=1&b=2', 'here', color='#0984e3'))
    assert html == (
        '<a href="https://example.com/?a=1&amp;b=2">'
        '<span style=" text-decoration: underline; color:#0984e3;">here</span></a>'
    )


def test_clickable_has_no_markup():
    html = to_html(make_clickable('here', '#ff0000'))
    assert html == '<span style=" text-decoration: none; color:#ff0000;">here</span>'


def test_formatted_text():
    result = format_localized(None, bold('%s!'), italic('Hi'))
    assert to_html(result) == '<b><span style=" font-style:italic;">Hi</span></b><b>!</b>'


def test_unknown_style_is_skipped():
    assert to_html(StyledText('x', [(object(), 0, 1), (Clickable(), 0, 1)])) == 'x'
