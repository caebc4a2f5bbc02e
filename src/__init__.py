"""
termslides - Terminal presentation compiler and player

A line-oriented --directive markup for text presentations, compiled into
pages of styled text and played back on a terminal.
"""

__version__ = "1.0.0"

from .lib import (
    Lexer,
    DocumentCompiler,
    compile,
    Player,
    play,
    DirectiveRegistry,
    ParseError,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "Lexer",
    "DocumentCompiler",
    "compile",
    "Player",
    "play",
    "DirectiveRegistry",
    "ParseError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
