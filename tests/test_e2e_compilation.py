"""
End-to-end compilation tests

Tests the full pipeline: markup file → Lexer → DocumentCompiler → Document
→ Player

Validates that a complete presentation with real directives compiles into
the expected pages and blocks, and plays back without errors.
"""

from pathlib import Path

import pytest

from termslides.lib.compiler import compile
from termslides.lib.player import play
from termslides.lib.theme import Theme
from termslides.models.document import Heading, Paragraph, StyledRun, StyleSet, Verbatim
from termslides.models.playback import PlayerState, Signal


DATA_DIR = Path(__file__).parent / "data"

BOLD = StyleSet(bold=True)
UNDERLINE = StyleSet(underline=True)
REVERSE = StyleSet(reverse=True)
PLAIN = StyleSet()


@pytest.fixture
def document():
    return compile((DATA_DIR / "inline_formatting.tpp").read_text(encoding="utf-8"))


class TestSampleDeck:
    """Compile the inline formatting sample"""

    def test_metadata(self, document):
        assert document.title == "Inline Formatting"
        assert document.author == "Example"
        assert document.date == "today"

    def test_page_structure(self, document):
        assert len(document.pages) == 3
        assert document.pages[0].blocks == ()
        assert [type(block) for block in document.pages[1].blocks] == [
            Heading,
            Paragraph,
            Paragraph,
            Verbatim,
        ]
        assert [type(block) for block in document.pages[2].blocks] == [Heading, Paragraph]

    def test_inline_styles_paragraph(self, document):
        paragraph = document.pages[1].blocks[1]

        assert paragraph.runs == (
            StyledRun("Text can be ", PLAIN),
            StyledRun("bold", BOLD),
            StyledRun(", ", PLAIN),
            StyledRun("underlined", UNDERLINE),
            StyledRun(" or ", PLAIN),
            StyledRun("reversed", REVERSE),
            StyledRun(".\nStyles nest: ", PLAIN),
            StyledRun("bold and ", BOLD),
            StyledRun("underlined", StyleSet(bold=True, underline=True)),
            StyledRun(" at once.", PLAIN),
        )

    def test_colour_paragraph(self, document):
        paragraph = document.pages[1].blocks[2]

        assert paragraph.runs == (
            StyledRun("Colours: ", PLAIN),
            StyledRun("red", StyleSet(color="red")),
            StyledRun(", ", PLAIN),
            StyledRun("bold green", StyleSet(bold=True, color="green")),
            StyledRun(" and ", PLAIN),
            StyledRun("reversed cyan", StyleSet(reverse=True, color="cyan")),
            StyledRun(".", PLAIN),
        )

    def test_verbatim_untouched(self, document):
        assert document.pages[1].blocks[3] == Verbatim(
            lines=('$ echo "--b is not a tag in here"', "--b is not a tag in here")
        )

    def test_escaping_page(self, document):
        heading, paragraph = document.pages[2].blocks

        assert heading == Heading(text="Escaping")
        assert paragraph.runs == (
            StyledRun("Write --b and --/b to show the tags themselves: ", PLAIN),
            StyledRun("both", StyleSet(bold=True, underline=True)),
            StyledRun(" back to normal", PLAIN),
        )

    def test_compiles_identically_twice(self, document):
        source = (DATA_DIR / "inline_formatting.tpp").read_text(encoding="utf-8")
        assert compile(source) == document


class TestSampleDeckPlayback:
    """Play the compiled sample to the end"""

    class NullTerminal:
        def clear(self): pass
        def move_to(self, column, row): pass
        def attributes_set(self, style): pass
        def attributes_reset(self): pass
        def write(self, text): pass
        def size_get(self): return 60, 20
        def refresh(self): pass

    class AlwaysAdvance:
        def signal_wait(self):
            return Signal.ADVANCE

    def test_plays_every_page(self, document):
        report = play(document, self.NullTerminal(), self.AlwaysAdvance(), Theme("default"))

        assert report.final_state == PlayerState.FINISHED
        assert report.pages_rendered == (0, 1, 2)
        assert not report.quit
