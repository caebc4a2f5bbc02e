"""
Playback models

States, input signals and the result record of the page player.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Tuple


class PlayerState(Enum):
    """
    Page player states

    RENDERING -> AWAITING_ADVANCE after a page is drawn; any state -> FINISHED
    on quit or when advancing past the last page.
    """
    RENDERING = "rendering"
    AWAITING_ADVANCE = "awaiting-advance"
    FINISHED = "finished"


class Signal(Enum):
    """Input signals understood by the player"""
    ADVANCE = "advance"
    QUIT = "quit"
    BACK = "back"
    FIRST = "first"
    LAST = "last"
    REDRAW = "redraw"


@dataclass(frozen=True)
class PlaybackReport:
    """
    Outcome of a playback session

    Attributes:
        final_state: Always PlayerState.FINISHED once play() returns
        pages_rendered: Page indices in the order they were drawn
        quit: True if playback ended on a quit signal rather than by
              advancing past the last page
    """
    final_state: PlayerState
    pages_rendered: Tuple[int, ...]
    quit: bool = False
