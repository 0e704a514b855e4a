"""Unit tests for component resolution."""

import pytest

from html_component.core.transform import (
    ComponentResolutionError,
    TransformConfig,
    find_component,
    parse_source,
    resolve_components,
)


class TestFindComponent:
    def test_context_directory_first(self, tmp_path, memory_lookup):
        path = find_component("Foo", tmp_path / "pages", memory_lookup)
        assert path == tmp_path / "pages" / "foo.html"

    def test_shared_directory_fallback(self, tmp_path, memory_lookup):
        path = find_component("Baz", tmp_path / "pages", memory_lookup)
        assert path is not None
        assert path.parts[-3:] == ("src", "components", "baz.html")

    def test_context_wins_over_shared(self, tmp_path):
        from html_component.core.transform import InMemoryLookup

        lookup = InMemoryLookup(
            [tmp_path / "pages" / "nav.html", "src/components/nav.html"]
        )
        assert find_component("Nav", tmp_path / "pages", lookup) == (
            tmp_path / "pages" / "nav.html"
        )

    def test_custom_extension(self, tmp_path):
        from html_component.core.transform import InMemoryLookup

        lookup = InMemoryLookup([tmp_path / "card.jsx"])
        config = TransformConfig(component_extension=".jsx")
        assert find_component("Card", tmp_path, lookup, config) == tmp_path / "card.jsx"

    def test_unresolved(self, tmp_path, memory_lookup):
        assert find_component("Missing", tmp_path / "pages", memory_lookup) is None


class TestResolveComponents:
    def test_document_order_and_dependencies(self, tmp_path, memory_lookup):
        tree = parse_source("<div>\n  <Foo />\n  <Bar></Bar>\n</div>\n")
        recorded = []
        references = resolve_components(
            tree, tmp_path / "pages", memory_lookup, add_dependency=recorded.append
        )
        assert [r.name for r in references] == ["Foo", "Bar"]
        assert recorded == [tmp_path / "pages" / "foo.html", tmp_path / "pages" / "bar.html"]

    def test_lowercase_and_member_tags_ignored(self, tmp_path, memory_lookup):
        tree = parse_source("<div><span/><Foo.Item/></div>")
        assert resolve_components(tree, tmp_path / "pages", memory_lookup) == []

    def test_nested_inside_expression(self, tmp_path, memory_lookup):
        tree = parse_source("<ul>{items.map(item => <Foo />)}</ul>")
        references = resolve_components(tree, tmp_path / "pages", memory_lookup)
        assert [r.name for r in references] == ["Foo"]

    def test_duplicates_resolved_once_by_default(self, tmp_path, memory_lookup):
        tree = parse_source("<div><Foo/><Bar/><Foo/></div>")
        recorded = []
        references = resolve_components(
            tree, tmp_path / "pages", memory_lookup, add_dependency=recorded.append
        )
        assert [r.name for r in references] == ["Foo", "Bar"]
        assert len(recorded) == 2

    def test_every_occurrence_without_deduplication(self, tmp_path, memory_lookup):
        tree = parse_source("<div><Foo/><Bar/><Foo/></div>")
        config = TransformConfig(deduplicate_components=False)
        recorded = []
        references = resolve_components(
            tree, tmp_path / "pages", memory_lookup, config, recorded.append
        )
        assert [r.name for r in references] == ["Foo", "Bar", "Foo"]
        assert len(recorded) == 3

    def test_unresolved_name_raises(self, tmp_path, memory_lookup):
        tree = parse_source("<div><Foo/><Missing/></div>")
        with pytest.raises(ComponentResolutionError) as excinfo:
            resolve_components(tree, tmp_path / "pages", memory_lookup)
        assert excinfo.value.name == "Missing"
        assert len(excinfo.value.candidates) == 2
        assert excinfo.value.candidates[0].endswith("missing.html")
