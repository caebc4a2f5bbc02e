"""
Lexer for --directive markup

Turns source lines into a lazy stream of typed tokens.

Tokenization rules:
- A line whose first word is a registered line directive
  ("--heading Intro") becomes one DIRECTIVE token carrying the rest of
  the line as its argument.
- Every other line is scanned for inline tags ("--b", "--/b", "--c red")
  and escapes ("\\--b"); the pieces in between become TEXT tokens and the
  line is closed with LINE_END.
- Lines starting with "--##" are comments and produce nothing.
- A line holding only "---" is a PAUSE token.
- Between --beginoutput and --endoutput lines are emitted untouched as
  VERBATIM_LINE tokens; only the two region delimiters are recognised.

The prefix "--" only starts a token when a letter (or "/" and a letter)
follows it, so "--", "---" and "-- x" inside text stay plain text. Any other unknown
word after the prefix is an error.

Example:
    >>> tokens = list(Lexer().tokens_generate(["Hi --b there--/b"]))
    >>> [t.kind.value for t in tokens]
    ['text', 'inline-open', 'text', 'inline-close', 'line-end']
"""

import re
from typing import Iterable, Iterator, List, Optional

from .directives import DirectiveRegistry
from .errors import UnknownDirective, InvalidColor
from ..models.tokens import Token, TokenKind
from ..models.directives import (
    DIRECTIVE_PREFIX,
    ESCAPE_MARKER,
    COMMENT_PREFIX,
    PAUSE_MARKER,
    color_isValid,
)


LINE_DIRECTIVE = re.compile(r'^--([A-Za-z]+)(?![A-Za-z])(.*)$')
INLINE_TAG = re.compile(r'--(/?)([A-Za-z]+)')
TAG_SPELLING = re.compile(r'/?[A-Za-z]+')
COLOR_ARGUMENT = re.compile(r'[ \t]+([A-Za-z]+)')

ESCAPED_PREFIX = ESCAPE_MARKER + DIRECTIVE_PREFIX


class Lexer:
    r"""
    Line-oriented tokenizer for termslides markup

    Handles:
    - Whole-line directives with arguments
    - Inline tags anywhere in running text
    - Backslash escapes (\--b is the literal text "--b")
    - Verbatim regions, passed through line by line
    - Comment lines (--##)
    - Pause lines (---)

    The token stream is lazy; tokenizing again means calling
    tokens_generate() again on the source lines.
    """

    def __init__(self, registry: Optional[DirectiveRegistry] = None) -> None:
        """
        Initialize lexer

        Args:
            registry: Optional DirectiveRegistry describing known spellings
        """
        if registry is None:
            registry = DirectiveRegistry()
        self.registry = registry

    def tokens_generate(self, lines: Iterable[str]) -> Iterator[Token]:
        """
        Tokenize source lines

        Args:
            lines: Source lines, with or without trailing newlines

        Yields:
            Token objects in source order

        Raises:
            UnknownDirective: Unregistered "--word", or a line directive
                              used inside running text
            InvalidColor: "--c" without a recognised colour name
        """
        in_verbatim = False

        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip('\r\n')

            match = LINE_DIRECTIVE.match(line)

            if in_verbatim:
                if match and match.group(1) in ('beginoutput', 'endoutput'):
                    yield self.lineDirective_token(match, line_number)
                    in_verbatim = match.group(1) != 'endoutput'
                else:
                    yield Token(kind=TokenKind.VERBATIM_LINE, line_number=line_number, text=line)
                continue

            if line.startswith(COMMENT_PREFIX):
                continue

            if line.rstrip() == PAUSE_MARKER:
                yield Token(kind=TokenKind.PAUSE, line_number=line_number)
                continue

            if match and self.registry.directive_is(match.group(1)):
                token = self.lineDirective_token(match, line_number)
                if token.name == 'beginoutput':
                    in_verbatim = True
                yield token
                continue

            yield from self.line_tokenize(line, line_number)
            yield Token(kind=TokenKind.LINE_END, line_number=line_number)

    def lineDirective_token(self, match: re.Match[str], line_number: int) -> Token:
        """
        Build a DIRECTIVE token from a matched directive line

        The argument is the rest of the line after one separating space,
        with trailing whitespace removed; an empty argument becomes None.

        Example:
            "--heading  Two spaces" -> name="heading", argument=" Two spaces"
        """
        name, rest = match.group(1), match.group(2)

        argument = rest[1:] if rest.startswith(' ') else rest.lstrip()
        argument = argument.rstrip()

        return Token(
            kind=TokenKind.DIRECTIVE,
            line_number=line_number,
            name=name,
            argument=argument or None,
        )

    def line_tokenize(self, line: str, line_number: int) -> List[Token]:
        """
        Split one line of running text into text, escape and tag tokens

        Adjacent plain characters are buffered into a single TEXT token.

        Args:
            line: Line without trailing newline
            line_number: 1-based line number for tokens and errors

        Returns:
            Tokens for this line (LINE_END is added by the caller)
        """
        tokens: List[Token] = []
        buffer: List[str] = []
        pos = 0

        def buffer_flush() -> None:
            if buffer:
                tokens.append(Token(kind=TokenKind.TEXT, line_number=line_number, text=''.join(buffer)))
                buffer.clear()

        while pos < len(line):
            # Escapes are resolved before any tag recognition
            if line.startswith(ESCAPED_PREFIX, pos):
                buffer_flush()
                token, pos = self.escape_read(line, pos, line_number)
                tokens.append(token)
                continue

            if line.startswith(DIRECTIVE_PREFIX, pos):
                match = INLINE_TAG.match(line, pos)
                if match:
                    buffer_flush()
                    token, pos = self.inlineTag_read(line, match, line_number)
                    tokens.append(token)
                    continue

            buffer.append(line[pos])
            pos += 1

        buffer_flush()
        return tokens

    def escape_read(self, line: str, pos: int, line_number: int) -> tuple[Token, int]:
        r"""
        Read an escaped spelling starting at the backslash

        "\--b" becomes the literal "--b"; a bare "\--" becomes "--".

        Returns:
            (ESCAPED_LITERAL token, position after the escape)
        """
        start = pos + len(ESCAPED_PREFIX)
        match = TAG_SPELLING.match(line, start)
        spelling = match.group(0) if match else ''
        end = match.end() if match else start

        token = Token(
            kind=TokenKind.ESCAPED_LITERAL,
            line_number=line_number,
            text=DIRECTIVE_PREFIX + spelling,
        )
        return token, end

    def inlineTag_read(self, line: str, match: re.Match[str], line_number: int) -> tuple[Token, int]:
        """
        Read an inline tag at a matched "--word" position

        An opening tag absorbs one following space. "--c" additionally
        consumes the whitespace and colour name that follow it.

        Returns:
            (INLINE_OPEN or INLINE_CLOSE token, position after the tag)

        Raises:
            UnknownDirective: Unregistered word or a line directive mid-text
            InvalidColor: "--c" not followed by a known colour
        """
        closing, word = match.group(1), match.group(2)
        spelling = f"{DIRECTIVE_PREFIX}{closing}{word}"
        pos = match.end()

        if not self.registry.inlineTag_is(word):
            if self.registry.directive_is(word) and not closing:
                raise UnknownDirective(f"'{spelling}' must start a line", line_number)
            raise UnknownDirective(f"unknown directive '{spelling}'", line_number)

        if closing:
            return Token(kind=TokenKind.INLINE_CLOSE, line_number=line_number, name=word), pos

        argument = None
        spec = self.registry.get(word)
        if spec is not None and spec.takes_argument:
            color_match = COLOR_ARGUMENT.match(line, pos)
            if not color_match or not color_isValid(color_match.group(1)):
                found = color_match.group(1) if color_match else ''
                raise InvalidColor(f"'{spelling}' expects a colour name, got '{found}'", line_number)
            argument = color_match.group(1)
            pos = color_match.end()

        if line.startswith(' ', pos):
            pos += 1

        token = Token(kind=TokenKind.INLINE_OPEN, line_number=line_number, name=word, argument=argument)
        return token, pos
