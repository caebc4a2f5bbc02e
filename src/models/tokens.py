"""
Token models

Typed tokens produced by the lexer and consumed by the compiler and the
inline style resolver.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class TokenKind(Enum):
    """
    Kinds of lexer tokens

    DIRECTIVE, PAUSE and VERBATIM_LINE always occupy a whole source line. The other
    kinds are produced from running text, and every text line is closed by a
    LINE_END token.
    """
    DIRECTIVE = "directive"              # --heading Intro
    INLINE_OPEN = "inline-open"          # --b, --c red
    INLINE_CLOSE = "inline-close"        # --/b
    ESCAPED_LITERAL = "escaped-literal"  # \--b
    TEXT = "text"
    VERBATIM_LINE = "verbatim-line"
    PAUSE = "pause"                      # ---
    LINE_END = "line-end"


@dataclass(frozen=True)
class Token:
    """
    A single lexer token

    Attributes:
        kind: Token kind
        line_number: 1-based source line the token came from
        text: Literal text (TEXT, ESCAPED_LITERAL, VERBATIM_LINE)
        name: Directive name or inline tag name ("heading", "b", "c")
        argument: Directive argument or colour name for "--c"

    Example:
        For the line "--heading Intro" at line 4:
        Token(kind=TokenKind.DIRECTIVE, line_number=4, name="heading", argument="Intro")
    """
    kind: TokenKind
    line_number: int
    text: str = ""
    name: str = ""
    argument: Optional[str] = None

    def is_text(self) -> bool:
        """True for tokens that render as literal text"""
        return self.kind in (TokenKind.TEXT, TokenKind.ESCAPED_LITERAL)
