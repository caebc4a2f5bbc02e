r"""
Escaping tests - \--word literals

An escape marker directly before the directive prefix turns the following
spelling into literal text, before any directive or tag recognition.
"""

import pytest

from termslides.lib.compiler import compile
from termslides.lib.lexer import Lexer
from termslides.models.document import Paragraph, StyleSet
from termslides.models.tokens import TokenKind


def lex(line):
    return list(Lexer().tokens_generate([line]))


class TestEscapedLiterals:
    """Test the lexer's escape resolution"""

    @pytest.mark.parametrize("spelling", ["--b", "--/b", "--rev", "--c", "--newpage", "--heading", "--bogus"])
    def test_escaped_spelling_is_literal(self, spelling):
        """Escaping any spelling yields exactly that spelling as text"""
        tokens = lex("\\" + spelling)

        assert tokens[0].kind == TokenKind.ESCAPED_LITERAL
        assert tokens[0].text == spelling
        assert tokens[-1].kind == TokenKind.LINE_END

    def test_escaped_directive_line_is_text(self):
        r"""\--newpage at line start does not start a page"""
        document = compile("\\--newpage")

        assert len(document.pages) == 1
        assert document.pages[0].blocks[0].text_get() == "--newpage"

    def test_escape_inside_text(self):
        tokens = lex("use \\--u for underline")

        texts = [t.text for t in tokens if t.is_text()]
        assert "".join(texts) == "use --u for underline"
        assert not any(t.kind == TokenKind.INLINE_OPEN for t in tokens)

    def test_bare_escaped_prefix(self):
        tokens = lex("\\-- x")
        assert tokens[0].text == "--"

    def test_backslash_elsewhere_is_literal(self):
        """Only backslash + prefix is an escape"""
        tokens = lex("C:\\temp \\n -\\-")
        assert tokens[0].text == "C:\\temp \\n -\\-"


class TestEscapesInParagraphs:
    """Escaped tags never touch the style stack"""

    def test_escaped_close_does_not_mismatch(self):
        r"""\--/b without an open --b is fine when escaped"""
        document = compile("plain \\--/b text")

        paragraph = document.pages[0].blocks[0]
        assert isinstance(paragraph, Paragraph)
        assert len(paragraph.runs) == 1
        assert paragraph.runs[0].text == "plain --/b text"
        assert paragraph.runs[0].style == StyleSet()

    def test_escaped_open_does_not_need_close(self):
        document = compile("\\--b is bold")
        assert document.pages[0].blocks[0].runs[0].text == "--b is bold"

    def test_escape_inside_styled_span(self):
        """Literal keeps the surrounding style"""
        document = compile("--b show \\--u here--/b")

        runs = document.pages[0].blocks[0].runs
        assert len(runs) == 1
        assert runs[0].text == "show --u here"
        assert runs[0].style == StyleSet(bold=True)

    def test_escaped_heading_argument(self):
        document = compile("--heading The \\--c tag")
        assert document.pages[0].blocks[0].text == "The --c tag"
