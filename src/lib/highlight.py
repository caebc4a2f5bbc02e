"""
Custom Pygments lexer for termslides syntax highlighting

Provides syntax highlighting for --directive markup, e.g. when showing a
presentation's source with `termslides FILE --highlight`.

Token types:
- Comment: --## comment lines
- Keyword.Declaration: Structural and decoration directives (--newpage,
  --heading, --huge, --center, --header, --sleep, ...)
- Keyword: Pause lines (---)
- Name.Decorator: Metadata directives (--title, --author, --date)
- Name.Function: Inline style tags (--b, --/b, --u, --rev, --c)
- Literal: Colour argument of --c
- String.Escape: Escaped spellings (\\--b)
- String: Verbatim region contents
"""

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Name,
    String,
    Keyword,
    Literal,
    Comment,
    Generic,
)


class TppLexer(RegexLexer):
    """
    Lexer for termslides markup

    Example:
        --heading Intro
        Some --b bold--/b text

    Tokens:
        --heading → Keyword.Declaration
        Intro → Generic.Heading
        --b → Name.Function
    """

    name = 'Termslides'
    aliases = ['termslides', 'tpp']
    filenames = ['*.tpp']

    tokens = {
        'root': [
            # Comment lines
            (r'^--##.*\n?', Comment),

            # Verbatim region - everything is literal until --endoutput
            (r'^(--beginoutput)([^\n]*\n?)', bygroups(Keyword.Reserved, Comment), 'verbatim'),

            # Pause line
            (r'^---[ \t]*$', Keyword),

            # Structural and decoration directives
            (r'^(--(?:heading|huge))([^\n]*)', bygroups(Keyword.Declaration, Generic.Heading)),
            (r'^(--(?:newpage|sethugefont))([^\n]*)', bygroups(Keyword.Declaration, Text)),
            (r'^(--(?:center|right|header|footer))([^\n]*)', bygroups(Keyword.Declaration, Generic.Heading)),
            (r'^(--(?:horline|sleep))([^\n]*)', bygroups(Keyword.Declaration, Text)),

            # Metadata directives
            (r'^(--(?:title|author|date))([^\n]*)', bygroups(Name.Decorator, String)),

            # Stray --endoutput
            (r'^--endoutput[^\n]*', Keyword.Reserved),

            # Escaped spelling (before tag recognition)
            (r'\\--/?[A-Za-z]*', String.Escape),

            # Colour tag with its argument
            (r'(--c)(\s+)([A-Za-z]+)', bygroups(Name.Function, Text, Literal)),

            # Inline style tags
            (r'--/?(?:rev|b|u|c)(?![A-Za-z])', Name.Function),

            # Everything else is text
            (r'[^-\\\n]+', Text),
            (r'\n', Text),
            (r'.', Text),
        ],

        'verbatim': [
            (r'^--endoutput[^\n]*\n?', Keyword.Reserved, '#pop'),
            (r'[^\n]+\n?', String),
            (r'\n', String),
        ],
    }


def get_lexer() -> TppLexer:
    """
    Get the TppLexer instance

    Returns:
        TppLexer instance ready for use with Pygments
    """
    return TppLexer()


def source_highlight(source: str) -> str:
    """
    Highlight termslides source for a terminal

    Args:
        source: Markup source text

    Returns:
        Source with ANSI colour codes
    """
    return highlight(source, TppLexer(), TerminalFormatter())
