"""
Terminal and input collaborators for the page player

Output goes through a Terminal: an attribute-setting text sink with cursor
and clear operations. RichTerminal implements it on top of a rich Console,
which takes care of the escape sequences for the actual terminal.

Input comes from a SignalSource. KeyboardSignals maps key presses to
signals; TimedSignals produces ADVANCE after a fixed delay (autoplay).
"""

import time
from typing import Callable, ContextManager, Dict, Optional, Protocol, Tuple

import click
from rich.console import Console
from rich.control import Control
from rich.style import Style

from .log import LOG
from ..models.document import StyleSet
from ..models.playback import Signal


class Terminal(Protocol):
    """Output collaborator used by the player"""

    def clear(self) -> None: ...

    def move_to(self, column: int, row: int) -> None: ...

    def attributes_set(self, style: StyleSet) -> None: ...

    def attributes_reset(self) -> None: ...

    def write(self, text: str) -> None: ...

    def size_get(self) -> Tuple[int, int]: ...

    def refresh(self) -> None: ...


class SignalSource(Protocol):
    """Interaction collaborator used by the player"""

    def signal_wait(self) -> Signal: ...


def style_toRich(style: StyleSet) -> Style:
    """
    Convert a StyleSet to a rich Style

    Every attribute is given explicitly, so nothing carries over from a
    previous run.
    """
    return Style(
        bold=style.bold,
        underline=style.underline,
        reverse=style.reverse,
        color=style.color or "default",
    )


class RichTerminal:
    """
    Terminal backed by a rich Console

    Text is written without markup, emoji or highlighting so that page
    content reaches the screen exactly as compiled.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)
        self.style = style_toRich(StyleSet())

    def session(self) -> ContextManager:
        """Alternate screen with hidden cursor for the duration of playback"""
        return self.console.screen(hide_cursor=True)

    def clear(self) -> None:
        self.console.clear()

    def move_to(self, column: int, row: int) -> None:
        self.console.control(Control.move_to(column, row))

    def attributes_set(self, style: StyleSet) -> None:
        self.style = style_toRich(style)

    def attributes_reset(self) -> None:
        self.style = style_toRich(StyleSet())

    def write(self, text: str) -> None:
        self.console.print(
            text,
            style=self.style,
            end="",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def size_get(self) -> Tuple[int, int]:
        size = self.console.size
        return size.width, size.height

    def refresh(self) -> None:
        self.console.file.flush()


# Arrow keys arrive as escape sequences from click.getchar()
KEY_SIGNALS: Dict[str, Signal] = {
    ' ': Signal.ADVANCE,
    '\r': Signal.ADVANCE,
    '\n': Signal.ADVANCE,
    'j': Signal.ADVANCE,
    'l': Signal.ADVANCE,
    'd': Signal.ADVANCE,
    '\x1b[B': Signal.ADVANCE,
    '\x1b[C': Signal.ADVANCE,
    'b': Signal.BACK,
    'h': Signal.BACK,
    'k': Signal.BACK,
    'a': Signal.BACK,
    '\x1b[A': Signal.BACK,
    '\x1b[D': Signal.BACK,
    'q': Signal.QUIT,
    's': Signal.FIRST,
    'e': Signal.LAST,
    'r': Signal.REDRAW,
    'z': Signal.REDRAW,
}


class KeyboardSignals:
    """
    Reads single key presses and maps them to signals

    Unmapped keys advance, like the space bar. Ctrl-C and Ctrl-D quit.
    """

    def __init__(self, getchar: Optional[Callable[[], str]] = None) -> None:
        self.getchar = getchar or click.getchar

    def signal_wait(self) -> Signal:
        try:
            key = self.getchar()
        except (KeyboardInterrupt, EOFError):
            return Signal.QUIT
        signal = KEY_SIGNALS.get(key) or KEY_SIGNALS.get(key.lower(), Signal.ADVANCE)
        LOG(f"Key {key!r} -> {signal.value}", level=3)
        return signal


class TimedSignals:
    """Advances automatically every `seconds` seconds (autoplay)"""

    def __init__(self, seconds: float, sleep: Callable[[float], None] = time.sleep) -> None:
        self.seconds = seconds
        self.sleep = sleep

    def signal_wait(self) -> Signal:
        try:
            self.sleep(self.seconds)
        except KeyboardInterrupt:
            return Signal.QUIT
        return Signal.ADVANCE
