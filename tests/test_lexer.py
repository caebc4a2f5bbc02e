"""
Lexer tests - token kinds, directive lines and inline tags

Tests how source lines are split into directive, inline tag, text and
verbatim tokens.
"""

import pytest

from termslides.lib.lexer import Lexer
from termslides.lib.errors import UnknownDirective, InvalidColor
from termslides.models.tokens import TokenKind


def lex(source):
    return list(Lexer().tokens_generate(source.splitlines()))


def kinds(tokens):
    return [token.kind for token in tokens]


class TestDirectiveLines:
    """Test whole-line directives"""

    def test_directive_with_argument(self):
        """Argument is the rest of the line after one space"""
        tokens = lex("--heading Inline styles")

        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.DIRECTIVE
        assert tokens[0].name == "heading"
        assert tokens[0].argument == "Inline styles"
        assert tokens[0].line_number == 1

    def test_directive_without_argument(self):
        """--newpage alone has no argument"""
        tokens = lex("--newpage")

        assert tokens[0].name == "newpage"
        assert tokens[0].argument is None

    def test_extra_spaces_kept_after_separator(self):
        """Only one separating space is removed"""
        tokens = lex("--heading   Wide")
        assert tokens[0].argument == "  Wide"

    def test_trailing_whitespace_stripped(self):
        tokens = lex("--title Demo   ")
        assert tokens[0].argument == "Demo"

    def test_line_numbers(self):
        """Tokens carry their 1-based source line"""
        tokens = lex("--title A\n\n--author B")

        directives = [t for t in tokens if t.kind == TokenKind.DIRECTIVE]
        assert [t.line_number for t in directives] == [1, 3]

    def test_unknown_directive_line(self):
        """An unregistered --word at line start is an error"""
        with pytest.raises(UnknownDirective, match="--centre") as excinfo:
            lex("ok\n--centre Hello")
        assert excinfo.value.line_number == 2

    def test_comment_lines_skipped(self):
        """--## lines produce no tokens at all"""
        tokens = lex("--## speaker notes\n--heading Hi")

        assert kinds(tokens) == [TokenKind.DIRECTIVE]
        assert tokens[0].line_number == 2


class TestTextLines:
    """Test running text and inline tags"""

    def test_plain_line(self):
        tokens = lex("Just text")

        assert kinds(tokens) == [TokenKind.TEXT, TokenKind.LINE_END]
        assert tokens[0].text == "Just text"

    def test_blank_line_is_only_line_end(self):
        assert kinds(Lexer().tokens_generate([""])) == [TokenKind.LINE_END]

    def test_inline_tags_mid_line(self):
        """Tags are found anywhere in a line"""
        tokens = lex("a --b bold--/b z")

        assert kinds(tokens) == [
            TokenKind.TEXT,
            TokenKind.INLINE_OPEN,
            TokenKind.TEXT,
            TokenKind.INLINE_CLOSE,
            TokenKind.TEXT,
            TokenKind.LINE_END,
        ]
        assert tokens[1].name == "b"
        assert tokens[3].name == "b"

    def test_open_tag_absorbs_one_space(self):
        """The space after an opening tag is its separator"""
        tokens = lex("--u  two")
        assert tokens[1].text == " two"

    def test_line_starting_with_inline_tag_is_text(self):
        """A line beginning with --b is running text, not a directive"""
        tokens = lex("--b Loud--/b")

        assert tokens[0].kind == TokenKind.INLINE_OPEN
        assert tokens[1].text == "Loud"

    def test_rev_tag(self):
        tokens = lex("--rev x--/rev")
        assert tokens[0].name == "rev"
        assert tokens[2].name == "rev"

    def test_color_argument_consumed(self):
        """The colour name belongs to the tag, not the text"""
        tokens = lex("--c red warning--/c")

        assert tokens[0].kind == TokenKind.INLINE_OPEN
        assert tokens[0].name == "c"
        assert tokens[0].argument == "red"
        assert tokens[1].text == "warning"

    def test_color_without_name(self):
        with pytest.raises(InvalidColor):
            lex("--c --/c")

    def test_unknown_color(self):
        with pytest.raises(InvalidColor, match="purple"):
            lex("--c purple x--/c")

    def test_unknown_inline_word(self):
        """Unregistered --word in running text is an error"""
        with pytest.raises(UnknownDirective, match="--bold"):
            lex("this is --bold")

    def test_line_directive_mid_line(self):
        """Line directives cannot appear inside text"""
        with pytest.raises(UnknownDirective, match="must start a line"):
            lex("text --newpage")

    def test_dashes_without_word_are_text(self):
        """--, --- and '-- x' are plain text"""
        tokens = lex("a -- b --- c ---- d --1")

        assert kinds(tokens) == [TokenKind.TEXT, TokenKind.LINE_END]
        assert tokens[0].text == "a -- b --- c ---- d --1"


class TestPauseLines:
    """A line holding only --- is a pause"""

    def test_pause_token(self):
        tokens = lex("one\n---\ntwo")

        assert kinds(tokens) == [
            TokenKind.TEXT,
            TokenKind.LINE_END,
            TokenKind.PAUSE,
            TokenKind.TEXT,
            TokenKind.LINE_END,
        ]
        assert tokens[2].line_number == 2

    def test_trailing_whitespace_allowed(self):
        assert kinds(lex("---  ")) == [TokenKind.PAUSE]

    @pytest.mark.parametrize("line", [" ---", "----", "--- more", "text ---"])
    def test_other_dash_lines_are_text(self, line):
        tokens = lex(line)

        assert kinds(tokens) == [TokenKind.TEXT, TokenKind.LINE_END]
        assert tokens[0].text == line

    def test_pause_inside_verbatim_is_content(self):
        tokens = lex("--beginoutput\n---\n--endoutput")

        assert tokens[1].kind == TokenKind.VERBATIM_LINE
        assert tokens[1].text == "---"


class TestVerbatimRegions:
    """Test lines between --beginoutput and --endoutput"""

    def test_lines_passed_through(self):
        tokens = lex("--beginoutput\n--b not a tag\n  x --newpage\n--endoutput")

        assert kinds(tokens) == [
            TokenKind.DIRECTIVE,
            TokenKind.VERBATIM_LINE,
            TokenKind.VERBATIM_LINE,
            TokenKind.DIRECTIVE,
        ]
        assert tokens[1].text == "--b not a tag"
        assert tokens[2].text == "  x --newpage"

    def test_unknown_directives_allowed_inside(self):
        """No UnknownDirective inside a verbatim region"""
        tokens = lex("--beginoutput\n--whatever\n--endoutput")
        assert tokens[1].kind == TokenKind.VERBATIM_LINE

    def test_nested_begin_reported_as_directive(self):
        """--beginoutput inside a region is surfaced for the compiler"""
        tokens = lex("--beginoutput\n--beginoutput")
        assert [t.name for t in tokens] == ["beginoutput", "beginoutput"]

    def test_normal_tokenizing_resumes(self):
        tokens = lex("--beginoutput\nraw\n--endoutput\n--b x--/b")
        assert tokens[3].kind == TokenKind.INLINE_OPEN

    def test_stream_is_lazy(self):
        """Tokens are produced before a later error is reached"""
        stream = Lexer().tokens_generate(["--heading ok", "--bogus"])

        assert next(stream).name == "heading"
        with pytest.raises(UnknownDirective):
            next(stream)
