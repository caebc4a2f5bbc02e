"""
Compiler for --directive markup

Interprets the lexer's token stream and builds an immutable Document.

The compiler is a two-state machine:
    NORMAL       directives, headings and paragraph text
    IN_VERBATIM  raw lines collected into the open Verbatim block

All per-compilation state (current page, pending paragraph, open verbatim
block) lives on a DocumentCompiler instance created per compile() call.
"""

import math
from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .directives import DirectiveRegistry
from .errors import InvalidArgument, NestedVerbatim, UnmatchedEndOutput, UnterminatedVerbatim
from .lexer import Lexer
from .log import LOG
from .styles import InlineStyleResolver
from ..models.document import (
    Block,
    Center,
    Document,
    Heading,
    HorLine,
    Huge,
    Page,
    Paragraph,
    Pause,
    Right,
    Sleep,
    Verbatim,
)
from ..models.tokens import Token, TokenKind


class CompilerState(Enum):
    NORMAL = "normal"
    IN_VERBATIM = "in-verbatim"


@dataclass
class PageBuilder:
    """Mutable page under construction; frozen into a Page when sealed"""
    title: Optional[str] = None
    header: Optional[str] = None
    footer: Optional[str] = None
    blocks: List[Block] = field(default_factory=list)

    def page_build(self) -> Page:
        return Page(
            blocks=tuple(self.blocks),
            title=self.title,
            header=self.header,
            footer=self.footer,
        )


class DocumentCompiler:
    """
    Compiles termslides markup into a Document

    Responsibilities:
    - Dispatch directives according to the NORMAL / IN_VERBATIM state
    - Split the document into pages (implicit page 0 plus one per --newpage)
    - Collect paragraph tokens and hand them to the InlineStyleResolver
    - Collect verbatim lines byte for byte
    - Record title/author/date metadata (last value wins)
    """

    def __init__(
        self,
        registry: Optional[DirectiveRegistry] = None,
        huge_font: Optional[str] = None,
    ) -> None:
        """
        Initialize compiler

        Args:
            registry: Optional DirectiveRegistry shared with the lexer
            huge_font: Initial figlet font for --huge (defaults to settings)
        """
        from ..config import appsettings

        self.registry = registry or DirectiveRegistry()
        self.lexer = Lexer(self.registry)
        self.resolver = InlineStyleResolver()

        self.state = CompilerState.NORMAL
        self.metadata: Dict[str, Optional[str]] = {'title': None, 'author': None, 'date': None}
        self.pages: List[Page] = []
        self.current = PageBuilder()
        self.paragraph_tokens: List[Token] = []
        self.verbatim_lines: List[str] = []
        self.verbatim_start = 0
        self.huge_font = huge_font or appsettings.huge_font

    def compile(self, lines: Iterable[str]) -> Document:
        """
        Compile source lines into a Document

        Args:
            lines: Source lines

        Returns:
            The compiled Document

        Raises:
            ParseError: Any compilation error; no partial Document is kept
        """
        LOG("Compiling markup...", level=2)

        for token in self.lexer.tokens_generate(lines):
            self.token_dispatch(token)

        if self.state == CompilerState.IN_VERBATIM:
            raise UnterminatedVerbatim("--beginoutput is never closed", self.verbatim_start)

        self.paragraph_seal()
        self.pages.append(self.current.page_build())

        document = Document(
            title=self.metadata['title'],
            author=self.metadata['author'],
            date=self.metadata['date'],
            pages=tuple(self.pages),
        )
        LOG(f"Compiled {len(document.pages)} pages", level=2)
        return document

    def token_dispatch(self, token: Token) -> None:
        """Single dispatch point for every token, by compiler state"""
        if self.state == CompilerState.IN_VERBATIM:
            self.verbatimToken_handle(token)
        else:
            self.normalToken_handle(token)

    def verbatimToken_handle(self, token: Token) -> None:
        if token.kind == TokenKind.VERBATIM_LINE:
            self.verbatim_lines.append(token.text)
        elif token.name == 'beginoutput':
            raise NestedVerbatim(
                f"--beginoutput inside the region opened at line {self.verbatim_start}",
                token.line_number,
            )
        elif token.name == 'endoutput':
            self.current.blocks.append(Verbatim(lines=tuple(self.verbatim_lines)))
            self.verbatim_lines = []
            self.state = CompilerState.NORMAL
            LOG(f"Closed verbatim block at line {token.line_number}", level=3)

    def normalToken_handle(self, token: Token) -> None:
        if token.kind == TokenKind.PAUSE:
            self.paragraph_seal()
            self.current.blocks.append(Pause())
            return
        if token.kind != TokenKind.DIRECTIVE:
            self.paragraphToken_add(token)
            return

        self.paragraph_seal()
        name = token.name

        if name == 'beginoutput':
            self.state = CompilerState.IN_VERBATIM
            self.verbatim_start = token.line_number
        elif name == 'endoutput':
            raise UnmatchedEndOutput("--endoutput without --beginoutput", token.line_number)
        elif name == 'newpage':
            self.pages.append(self.current.page_build())
            self.current = PageBuilder(
                title=self.argumentText_get(token),
                header=self.current.header,
                footer=self.current.footer,
            )
            LOG(f"Page {len(self.pages)} opened at line {token.line_number}", level=3)
        elif name == 'heading':
            self.current.blocks.append(Heading(text=self.argumentText_get(token) or ''))
        elif name == 'huge':
            self.current.blocks.append(Huge(text=self.argumentText_get(token) or '', font=self.huge_font))
        elif name == 'center':
            self.current.blocks.append(Center(text=self.argumentText_get(token) or ''))
        elif name == 'right':
            self.current.blocks.append(Right(text=self.argumentText_get(token) or ''))
        elif name == 'horline':
            self.current.blocks.append(HorLine())
        elif name == 'sleep':
            self.current.blocks.append(Sleep(seconds=self.seconds_parse(token)))
        elif name == 'header':
            self.current.header = self.argumentText_get(token)
        elif name == 'footer':
            self.current.footer = self.argumentText_get(token)
        elif name == 'sethugefont':
            self.huge_font = token.argument or self.huge_font
        elif name in self.metadata:
            self.metadata[name] = self.argumentText_get(token)

    def paragraphToken_add(self, token: Token) -> None:
        """
        Accumulate running text into the pending paragraph

        A blank or whitespace-only line seals the paragraph instead.
        """
        if token.kind == TokenKind.LINE_END:
            line_tokens = [t for t in self.paragraph_tokens if t.line_number == token.line_number]
            if all(t.kind == TokenKind.TEXT and not t.text.strip() for t in line_tokens):
                # a line's tokens are always the tail of the pending list
                del self.paragraph_tokens[len(self.paragraph_tokens) - len(line_tokens):]
                self.paragraph_seal()
                return
        self.paragraph_tokens.append(token)

    def paragraph_seal(self) -> None:
        """Resolve and append the pending paragraph, if any"""
        tokens = self.paragraph_tokens
        self.paragraph_tokens = []

        while tokens and tokens[-1].kind == TokenKind.LINE_END:
            tokens.pop()
        if not tokens:
            return

        runs = self.resolver.runs_resolve(tokens)
        if runs:
            self.current.blocks.append(Paragraph(runs=runs))

    def seconds_parse(self, token: Token) -> float:
        """Read the --sleep duration; a non-negative number of seconds"""
        try:
            seconds = float(token.argument or '')
        except ValueError:
            raise InvalidArgument(
                f"--sleep expects a number of seconds, got '{token.argument or ''}'",
                token.line_number,
            ) from None
        if seconds < 0 or not math.isfinite(seconds):
            raise InvalidArgument(f"--sleep cannot wait {token.argument} seconds", token.line_number)
        return seconds

    def argumentText_get(self, token: Token) -> Optional[str]:
        """
        Lex a directive argument as running text and keep only its text

        Escapes are resolved; inline tags are dropped.
        """
        if token.argument is None:
            return None
        pieces = self.lexer.line_tokenize(token.argument, token.line_number)
        return ''.join(piece.text for piece in pieces if piece.is_text())


def compile(source: str) -> Document:
    """
    Compile termslides markup text into a Document

    Args:
        source: Full markup source

    Returns:
        The compiled, immutable Document

    Raises:
        ParseError: On the first compilation error

    Example:
        >>> document = compile("--title Demo\\n--newpage\\n--heading Hi")
        >>> len(document.pages)
        2
    """
    # Only \n ends a line; \x0c, \x85 and friends are line content
    lines = source.split('\n')
    if lines[-1] == '':
        lines.pop()
    return DocumentCompiler().compile(lines)
