import pytest
import spanformat.config
from spanformat.styledtext import Attachment, Boundary, StyledText
from spanformat.styles import (
    Bold,
    Clickable,
    Code,
    ColorOverride,
    Italic,
    Link,
    bold,
    code,
    italic,
    link,
    make_clickable,
)


def test_make_clickable(mocker):
    action = mocker.Mock()
    text = make_clickable('http://google.com', '#ff0000', action)

    assert text.text == 'http://google.com'
    clickable, color = text.get_styles()
    assert isinstance(clickable, Clickable)
    assert isinstance(color, ColorOverride)
    assert color.color == '#ff0000'
    assert color.underline is False
    for attachment in text.attachments:
        assert attachment[1:] == (0, 17, Boundary.EXCLUSIVE_EXCLUSIVE)

    action.assert_not_called()
    clickable.on_click()
    action.assert_called_once_with()


def test_clickable_without_action():
    text = make_clickable('here', 'blue')
    text.get_styles(kind=Clickable)[0].on_click()
    assert text.get_styles(kind=ColorOverride)[0].color == '#0000ff'


def test_make_clickable_keeps_styles():
    existing = Bold()
    text = make_clickable(StyledText('here', [(existing, 1, 3)]), '#00ff00')

    assert text.attachments[0] == Attachment(existing, 1, 3, Boundary.EXCLUSIVE_EXCLUSIVE)
    assert len(text.attachments) == 3


def test_make_clickable_empty_text():
    assert make_clickable('', '#00ff00').attachments == ()


def test_invalid_color():
    with pytest.raises(ValueError):
        make_clickable('here', 'not-a-color')


@pytest.mark.parametrize("helper, kind", [(bold, Bold), (italic, Italic), (code, Code)])
def test_style_helpers(helper, kind):
    text = helper('abc')
    assert [type(style) for style in text.get_styles()] == [kind]
    assert text.attachments[0][1:3] == (0, 3)


def test_link(monkeypatch):
    monkeypatch.setattr(spanformat.config, 'DEFAULT_LINK_COLOR', '#123456')
    text = link('https://example.com', 'example')

    url, color = text.get_styles()
    assert isinstance(url, Link)
    assert url.url == 'https://example.com'
    assert color.color == '#123456'
    assert color.underline is True

    assert link('https://example.com', 'example', color='red').get_styles(kind=ColorOverride)[0].color == '#ff0000'
