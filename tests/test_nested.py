import io

import pytest

from htmlhelper.errors import StructureError, TypeMismatch
from htmlhelper.nested import (
    Children,
    Element,
    RawFragment,
    RawHtml,
    Text,
    TextFragment,
    from_struct,
    render_nested,
    write_nested,
)

TABLE_STRUCT = [
    {
        "tag": "table",
        "attr": {"class": "test"},
        "children": [
            {
                "tag": "tr",
                "attr": {"id": "first-row"},
                "children": [
                    {"tag": "td", "text": "hello"},
                    {"tag": "td", "attr": {"class": "bold"}, "html": "<b>world</b>"},
                ],
            },
            {
                "tag": "tr",
                "children": [
                    {"tag": "td", "text": "foo"},
                    {"tag": "td", "text": "bar"},
                ],
            },
            {
                "tag": "tr",
                "attr": {"id": "last-row"},
                "children": [
                    {"tag": "td", "text": "foo"},
                    {"tag": "td", "text": "bar"},
                ],
            },
        ],
    },
    {"text": "The End"},
    {"html": "!"},
]

TABLE_HTML = (
    '<table class="test"><tr id="first-row"><td>hello</td><td class="bold"><b>world</b></td></tr>'
    '<tr><td>foo</td><td>bar</td></tr><tr id="last-row"><td>foo</td><td>bar</td></tr></table>The End!'
)


def test_void_element() -> None:
    assert render_nested({"tag": "br"}) == "<br/>"
    assert render_nested({"tag": "img", "attr": {"src": "/images/logo.png", "alt": "logo"}}) == (
        '<img src="/images/logo.png" alt="logo"/>'
    )


def test_element_with_text() -> None:
    html = render_nested({"tag": "a", "attr": {"href": "https://example.org"}, "text": "helper & html"})
    assert html == '<a href="https://example.org">helper &amp; html</a>'


def test_element_with_integer_text() -> None:
    assert render_nested({"tag": "a", "attr": {"href": "/"}, "text": 123}) == '<a href="/">123</a>'


def test_element_with_html() -> None:
    html = render_nested({"tag": "a", "attr": {"href": "/"}, "html": "<b>helper-html</b>"})
    assert html == '<a href="/"><b>helper-html</b></a>'


def test_element_with_single_child() -> None:
    html = render_nested({"tag": "a", "attr": {"href": "/"}, "children": {"tag": "b", "text": "helper-html"}})
    assert html == '<a href="/"><b>helper-html</b></a>'


def test_inner_is_an_alias_of_children() -> None:
    html = render_nested([{"tag": "a", "inner": {"tag": "b", "text": "x"}}, {"tag": "br"}])
    assert html == "<a><b>x</b></a><br/>"


def test_null_children_render_empty_element() -> None:
    assert render_nested({"tag": "span", "attr": {"class": "x"}, "children": None}) == '<span class="x"></span>'


@pytest.mark.parametrize("struct", [None, [], [None], [None, []]])
def test_nothing_to_render(struct) -> None:
    assert render_nested(struct) == ""


@pytest.mark.parametrize("key", ["text", "html"])
@pytest.mark.parametrize("value", ["", None])
def test_empty_content(key: str, value) -> None:
    assert render_nested({"tag": "span", "attr": {"class": "null"}, key: value}) == '<span class="null"></span>'


def test_table() -> None:
    assert render_nested(TABLE_STRUCT) == TABLE_HTML


def test_table_from_nodes() -> None:
    def row(row_id, cells):
        attrs = {"id": row_id} if row_id else {}
        return Element("tr", attrs, Children(cells))

    tree = [
        Element(
            "table",
            {"class": "test"},
            Children(
                [
                    row("first-row", [Element("td", content=Text("hello")),
                                      Element("td", {"class": "bold"}, RawHtml("<b>world</b>"))]),
                    row(None, [Element("td", content=Text("foo")), Element("td", content=Text("bar"))]),
                    row("last-row", [Element("td", content=Text("foo")), Element("td", content=Text("bar"))]),
                ]
            ),
        ),
        TextFragment("The End"),
        RawFragment("!"),
    ]
    assert render_nested(tree) == TABLE_HTML


def test_from_struct_builds_nodes() -> None:
    tree = from_struct({"tag": "p", "attr": {"id": "intro"}, "children": [{"text": "a < b"}, {"tag": "br"}]})
    assert tree == Element("p", {"id": "intro"}, Children([TextFragment("a < b"), Element("br")]))
    assert render_nested(tree) == '<p id="intro">a &lt; b<br/></p>'


def test_children_take_precedence_over_text_and_html() -> None:
    struct = {"tag": "div", "children": None, "text": "ignored", "html": "<i>ignored</i>"}
    assert render_nested(struct) == "<div></div>"
    assert render_nested({"tag": "div", "text": "<t>", "html": "<h>"}) == "<div>&lt;t&gt;</div>"


def test_null_tag_counts_as_missing() -> None:
    assert render_nested({"tag": None, "text": "plain"}) == "plain"


def test_nested_fake_attributes_are_rendered() -> None:
    # Bookkeeping keys are kept out of trees by not putting them in "attr".
    assert render_nested({"tag": "div", "attr": {"_x": "1"}}) == '<div _x="1"/>'


@pytest.mark.parametrize("struct", [{"xhtml": "xml-html"}, {}, {"attr": {"id": "x"}}])
def test_record_without_required_keys(struct) -> None:
    with pytest.raises(StructureError):
        render_nested(struct)


@pytest.mark.parametrize("struct", ["bare text", 42, [{"tag": "p", "children": ["bare"]}]])
def test_unsupported_nodes(struct) -> None:
    with pytest.raises(StructureError):
        render_nested(struct)


def test_empty_tag_is_rejected() -> None:
    with pytest.raises(StructureError):
        Element("")


def test_unsupported_text_value() -> None:
    with pytest.raises(TypeMismatch):
        render_nested({"tag": "p", "text": ["not", "a", "scalar"]})


def test_write_nested_streams_same_output() -> None:
    stream = io.StringIO()
    write_nested(TABLE_STRUCT, stream)
    assert stream.getvalue() == render_nested(TABLE_STRUCT)
