"""Unit tests for module rendering, including createElement lowering."""

import pytest

from html_component.core.transform import (
    ComponentCompiler,
    InMemoryLookup,
    TransformConfig,
    parse_source,
)
from html_component.core.transform.render import (
    CreateElementRenderer,
    MarkupRenderer,
    clean_jsx_text,
    make_renderer,
    render_import,
)


class TestCleanJsxText:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Hello ", "Hello "),
            ("\n  Hello\n  world\n", "Hello world"),
            ("a\n\n b", "a b"),
            ("\n   \n", ""),
            ("  ", "  "),
            ("a &amp; b", "a & b"),
            ("\tx", " x"),
        ],
    )
    def test_cleaning(self, text, expected):
        assert clean_jsx_text(text) == expected


def test_render_import():
    assert render_import("Foo", "/app/foo.html") == 'import Foo from "/app/foo.html";'


def test_make_renderer_selects_mode():
    tree = parse_source("<p/>")
    assert isinstance(make_renderer(tree, TransformConfig()), MarkupRenderer)
    assert isinstance(
        make_renderer(tree, TransformConfig(jsx="classic")), CreateElementRenderer
    )


def test_markup_renderer_without_root_keeps_source():
    source = "// header\nconst a = <b class='x'>hi</b>;\n"
    tree = parse_source(source)
    assert MarkupRenderer(tree, TransformConfig()).render() == (
        "// header\nconst a = <b className='x'>hi</b>;\n"
    )


class TestCreateElement:
    """Tests for classic lowering."""

    @pytest.fixture
    def lookup(self, tmp_path):
        return InMemoryLookup([tmp_path / "foo.html"])

    def _returned(self, source, tmp_path, lookup=None, **config):
        compiler = ComponentCompiler(
            TransformConfig(jsx="classic", **config), lookup or InMemoryLookup()
        )
        code = compiler.transform(source, tmp_path).code
        start = code.index("  return ") + len("  return ")
        return code[start:code.index(";\n}", start)]

    def test_element_with_text_and_child(self, tmp_path):
        returned = self._returned('<div class="a" id="x">Hello <b>world</b></div>', tmp_path)
        assert returned == (
            'React.createElement("div", { className: "a", id: "x" }, "Hello ", '
            'React.createElement("b", null, "world"))'
        )

    def test_whitespace_between_lines_dropped(self, tmp_path):
        returned = self._returned("<ul>\n  <li>One</li>\n  <li>Two</li>\n</ul>\n", tmp_path)
        assert returned == (
            'React.createElement("ul", null, React.createElement("li", null, "One"), '
            'React.createElement("li", null, "Two"))'
        )

    def test_component_spread_and_bare_attributes(self, tmp_path, lookup):
        returned = self._returned(
            '<Foo {...props} disabled label="a &amp; b" />', tmp_path, lookup
        )
        assert returned == (
            'React.createElement(Foo, { ...props, disabled: true, label: "a & b" })'
        )

    def test_attribute_entities_decoded_once(self, tmp_path):
        returned = self._returned('<p title="&amp;amp;"/>', tmp_path)
        assert returned == 'React.createElement("p", { title: "&amp;" })'

    def test_normalized_attributes(self, tmp_path):
        returned = self._returned(
            '<p class="$x" style="color: red" data-id="1">x</p>', tmp_path
        )
        assert returned == (
            'React.createElement("p", { className: [style.x].join(" "), '
            'style: { color: "red" }, dataId: "1" }, "x")'
        )

    def test_exempt_hyphenated_keys_quoted(self, tmp_path):
        returned = self._returned(
            '<p data-id="1"/>', tmp_path, exempt_data_aria_attributes=True
        )
        assert returned == 'React.createElement("p", { "data-id": "1" })'

    def test_expression_children(self, tmp_path):
        returned = self._returned(
            "<ul>{items.map(i => <li key={i}>{i}</li>)}{/* note */}</ul>", tmp_path
        )
        assert returned == (
            'React.createElement("ul", null, '
            'items.map(i => React.createElement("li", { key: i }, i)))'
        )

    def test_fragment(self, tmp_path):
        returned = self._returned("<><p/></>", tmp_path)
        assert returned == (
            'React.createElement(React.Fragment, null, React.createElement("p", null))'
        )

    def test_custom_framework_name(self, tmp_path):
        returned = self._returned("<p/>", tmp_path, framework_name="h")
        assert returned == 'h.createElement("p", null)'
