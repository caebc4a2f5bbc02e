"""
Models package for termslides

Contains data structures and type definitions for compilation and playback.
"""

from .state import ProgramState, pipeline
from .directives import DirectiveSpec, DirectiveCategory, COLOR_NAMES
from .document import (
    Document,
    Page,
    Heading,
    Paragraph,
    Verbatim,
    Huge,
    Center,
    Right,
    HorLine,
    Pause,
    Sleep,
    StyledRun,
    StyleSet,
    DEFAULT_STYLE,
)
from .tokens import Token, TokenKind
from .playback import PlayerState, Signal, PlaybackReport

__all__ = [
    "ProgramState",
    "pipeline",
    "DirectiveSpec",
    "DirectiveCategory",
    "COLOR_NAMES",
    "Document",
    "Page",
    "Heading",
    "Paragraph",
    "Verbatim",
    "Huge",
    "Center",
    "Right",
    "HorLine",
    "Pause",
    "Sleep",
    "StyledRun",
    "StyleSet",
    "DEFAULT_STYLE",
    "Token",
    "TokenKind",
    "PlayerState",
    "Signal",
    "PlaybackReport",
]
