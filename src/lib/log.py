"""
Centralized logging using Loguru with context-aware verbosity.

LOG() respects the current ProgramState's verbosity level without requiring
explicit state passing.

Usage:
    from lib.log import LOG, state_connectToLogger

    # At start of pipeline:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("This message appears if verbosity >= 1", level=1)
    LOG("Compiler details appear if verbosity >= 2", level=2)
    LOG("Token and signal trace appears if verbosity >= 3", level=3)

Library code used without a connected state (e.g. from tests or as an
imported package) logs nothing.

While a deck is on the alternate screen, stderr output would be drawn over
the page. Wrap playback in `logging_held()` and messages are queued and
emitted once the screen is restored. Setting TERMSLIDES_LOG_FILE sends all
messages to a file instead, where they are written immediately.
"""

from loguru import logger
from typing import Any, Iterator, List, Optional, Tuple
from contextlib import contextmanager
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

# Messages queued by logging_held(), or None when not holding
_held: ContextVar[Optional[List[Tuple[str, str]]]] = ContextVar('held_messages', default=None)

# Verbosity level -> loguru level name
LEVEL_NAMES = {1: "INFO", 2: "DEBUG", 3: "TRACE"}

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)


def logger_configure(sink: Any = None) -> None:
    """
    (Re)configure the single termslides log handler.

    Args:
        sink: Any loguru sink; defaults to TERMSLIDES_LOG_FILE when set,
              else stderr
    """
    if sink is None:
        from ..config import appsettings
        sink = appsettings.log_file or sys.stderr

    logger.remove()
    logger.add(sink, format=logger_format, level="TRACE")


logger_configure()


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


@contextmanager
def logging_held() -> Iterator[None]:
    """Queue LOG() messages for the duration of the block, then emit them"""
    token = _held.set([])
    try:
        yield
    finally:
        messages = _held.get() or []
        _held.reset(token)
        for level_name, message in messages:
            logger.log(level_name, message)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        1 = Normal output (default), logged as INFO
        2 = Verbose (-v), logged as DEBUG
        3 = Trace (-vv or higher), logged as TRACE
    """
    state = _program_state.get()
    if not (state and hasattr(state, 'verbosity') and state.verbosity >= level):
        return

    level_name = LEVEL_NAMES.get(level, "TRACE")
    held = _held.get()
    if held is not None:
        held.append((level_name, message))
        return

    # depth=1 reports the caller's function and line, not LOG's
    logger.opt(depth=1).log(level_name, message, **kwargs)
