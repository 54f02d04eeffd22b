from gutenblocks.converter import parse_html
from gutenblocks.serializer import inner_html, opening_tag, outer_html, serialize_node


def _first(html):
    return parse_html(html).find()


def test_outer_html_keeps_tag_and_attribute_order():
    tag = _first('<a href="https://example.com" class="btn" data-id="7">Go</a>')
    assert outer_html(tag) == '<a href="https://example.com" class="btn" data-id="7">Go</a>'


def test_inner_html_drops_own_tag_but_keeps_inline_markup():
    tag = _first('<p class="lead">Hello <strong>bold</strong> and <em>it</em></p>')
    assert serialize_node(tag, include_own_tag=False) == "Hello <strong>bold</strong> and <em>it</em>"


def test_void_elements_get_a_closing_tag():
    tag = _first('<p>a<br>b<img src="x.png"></p>')
    assert inner_html(tag) == 'a<br></br>b<img src="x.png"></img>'


def test_text_payload_is_emitted_verbatim():
    tag = _first("<p>Fish &amp; chips &lt;3</p>")
    # the parser decodes entities; serialization does not re-escape them
    assert inner_html(tag) == "Fish & chips <3"
    assert serialize_node(tag.contents[0]) == "Fish & chips <3"


def test_comments_are_left_out():
    tag = _first("<p>a<!-- note -->b</p>")
    assert inner_html(tag) == "ab"


def test_opening_tag_without_attributes():
    assert opening_tag(_first("<section>x</section>")) == "<section>"


def test_class_list_from_default_soup_is_joined():
    from bs4 import BeautifulSoup

    tag = BeautifulSoup('<p class="a b">x</p>', "html.parser").p
    assert outer_html(tag) == '<p class="a b">x</p>'


def test_deep_nesting_does_not_hit_recursion_limit():
    depth = 2000
    html = "<span>" * depth + "x" + "</span>" * depth
    tag = _first(html)
    out = outer_html(tag)
    assert out == html


def test_script_body_is_text():
    tag = _first('<script type="text/javascript">if (a < b) {}</script>')
    assert outer_html(tag) == '<script type="text/javascript">if (a < b) {}</script>'
