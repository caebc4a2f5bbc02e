"""
termslides - Terminal presentation compiler and player

Compiles --directive markup into a page model and plays it on a terminal.
"""

__version__ = "1.0.0"

from .lexer import Lexer
from .compiler import DocumentCompiler, compile
from .player import Player, play
from .directives import DirectiveRegistry
from .errors import (
    ParseError,
    UnknownDirective,
    NestedVerbatim,
    UnmatchedEndOutput,
    UnterminatedVerbatim,
    MismatchedTag,
    UnclosedTag,
    InvalidColor,
    InvalidArgument,
)
from .log import LOG, state_connectToLogger

__all__ = [
    "Lexer",
    "DocumentCompiler",
    "compile",
    "Player",
    "play",
    "DirectiveRegistry",
    "ParseError",
    "UnknownDirective",
    "NestedVerbatim",
    "UnmatchedEndOutput",
    "UnterminatedVerbatim",
    "MismatchedTag",
    "UnclosedTag",
    "InvalidColor",
    "InvalidArgument",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
