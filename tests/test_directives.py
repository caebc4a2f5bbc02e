"""
Vocabulary tests - the directive registry and colour names
"""

import pytest

from termslides.lib.compiler import DocumentCompiler
from termslides.lib.directives import DirectiveRegistry
from termslides.lib.errors import UnknownDirective
from termslides.models.directives import COLOR_NAMES, DirectiveCategory, DirectiveSpec, color_isValid
from termslides.models.document import StyleSet


@pytest.fixture
def registry():
    return DirectiveRegistry()


class TestRegistry:
    def test_categories(self, registry):
        names = lambda category: {spec.name for spec in registry.directives_listByCategory(category)}

        assert names(DirectiveCategory.METADATA) == {"title", "author", "date"}
        assert names(DirectiveCategory.STRUCTURAL) == {"newpage", "heading", "huge", "center", "right", "horline", "sleep"}
        assert names(DirectiveCategory.DECORATION) == {"header", "footer"}
        assert names(DirectiveCategory.SETTING) == {"sethugefont"}
        assert names(DirectiveCategory.VERBATIM) == {"beginoutput", "endoutput"}
        assert names(DirectiveCategory.INLINE) == {"b", "u", "rev", "c"}

    def test_lines_and_tags_are_disjoint(self, registry):
        for name in registry.specs:
            assert registry.directive_is(name) != registry.inlineTag_is(name)

    def test_unknown_spelling(self, registry):
        assert registry.get("center") is None
        assert not registry.directive_is("center")
        assert not registry.inlineTag_is("center")

    def test_only_colour_tag_takes_argument(self, registry):
        inline = registry.directives_listByCategory(DirectiveCategory.INLINE)
        assert [spec.name for spec in inline if spec.takes_argument] == ["c"]

    def test_every_spec_has_examples(self, registry):
        assert all(spec.examples for spec in registry.specs.values())

    def test_custom_registry(self):
        """A registry without a directive makes it unknown to the compiler"""
        registry = DirectiveRegistry()
        del registry.specs["huge"]

        with pytest.raises(UnknownDirective):
            DocumentCompiler(registry=registry).compile(["--huge Hi"])

    def test_registered_line_directive(self):
        registry = DirectiveRegistry()
        registry.register(DirectiveSpec(
            name="note",
            category=DirectiveCategory.STRUCTURAL,
            description="Ignored by the compiler",
        ))

        document = DocumentCompiler(registry=registry).compile(["one", "--note", "two"])
        assert len(document.pages[0].blocks) == 2


class TestColours:
    @pytest.mark.parametrize("name", ["white", "yellow", "red", "green", "blue", "cyan", "magenta", "black", "default"])
    def test_known_colours(self, name):
        assert name in COLOR_NAMES
        assert color_isValid(name)

    @pytest.mark.parametrize("name", ["purple", "Red", "", "bright_red"])
    def test_unknown_colours(self, name):
        assert not color_isValid(name)

    def test_default_style(self):
        assert StyleSet().is_default()
        assert not StyleSet(color="red").is_default()
