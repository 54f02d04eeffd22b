from gutenblocks.attributes import get_attribute, preserve_attributes
from gutenblocks.converter import parse_html


def _first(html):
    return parse_html(html).find()


def test_style_kept_and_class_renamed():
    tag = _first('<p id="intro" class="highlight big" style="color: red;" data-x="1">Hi</p>')
    preserved = preserve_attributes(tag)
    assert preserved.attrs == {
        "style": "color: red;",
        "className": "highlight big",
        "id": "intro",
        "data-x": "1",
    }
    assert preserved.style_classes == ['class="highlight big"']


def test_no_attributes_gives_empty_bags():
    attrs, style_classes = preserve_attributes(_first("<p>Hi</p>"))
    assert attrs == {}
    assert style_classes == []


def test_empty_style_is_not_dropped():
    attrs, _ = preserve_attributes(_first('<p style="">Hi</p>'))
    assert attrs == {"style": ""}


def test_returns_a_fresh_mapping():
    tag = _first('<p title="t">Hi</p>')
    attrs, _ = preserve_attributes(tag)
    attrs["title"] = "changed"
    assert tag["title"] == "t"


def test_get_attribute():
    tag = _first('<img src="a.png">')
    assert get_attribute(tag, "src") == "a.png"
    assert get_attribute(tag, "alt") is None
