#!/usr/bin/env python3
"""
termslides - Terminal presentation compiler and player

Compiles a line-oriented --directive markup file into pages of styled text
and plays them on the terminal, one page at a time.

Philosophy:
    - Text-first: Source files remain readable as plain text
    - Strict: A malformed file is rejected before anything is shown
    - Terminal-native: Bold, underline, reverse video and named colours

Keys during playback:
    space, enter, j, l, down, right .... next page
    b, h, k, up, left .................. previous page
    s .................................. first page
    e .................................. last page
    r, z ............................... redraw
    q .................................. quit

Usage:
    termslides slides.tpp

Examples:
    # Interactive playback
    termslides talk.tpp

    # Unattended playback, five seconds per page
    termslides talk.tpp --autoplay 5

    # Validate only
    termslides talk.tpp --check -v

    # Show the source with syntax highlighting
    termslides talk.tpp --highlight
"""

import math
import sys
from contextlib import nullcontext
from pathlib import Path
from argparse import ArgumentParser, ArgumentTypeError, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from .config import appsettings
from .lib import compile, play, ParseError, __version__, LOG, state_connectToLogger
from .lib.log import logging_held
from .lib.highlight import source_highlight
from .lib.terminal import RichTerminal, KeyboardSignals, TimedSignals
from .lib.theme import Theme, ThemeError
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
  _                           _ _     _
 | |_ ___ _ __ _ __ ___  ___| (_) __| | ___  ___
 | __/ _ \ '__| '_ ` _ \/ __| | |/ _` |/ _ \/ __|
 | ||  __/ |  | | | | | \__ \ | | (_| |  __/\__ \
  \__\___|_|  |_| |_| |_|___/_|_|\__,_|\___||___/

  Terminal presentation player
"""


def seconds_parse(value: str) -> float:
    """argparse type for --autoplay: a finite, non-negative number of seconds"""
    try:
        seconds = float(value)
    except ValueError:
        raise ArgumentTypeError(f"invalid number of seconds: '{value}'") from None
    if seconds < 0 or not math.isfinite(seconds):
        raise ArgumentTypeError(f"SECONDS must be zero or more, got '{value}'")
    return seconds


# Define CLI arguments
parser = ArgumentParser(
    description="termslides - Terminal presentation compiler and player",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument("inputFile", type=str, help="Input markup file")

parser.add_argument(
    "--autoplay",
    nargs="?",
    default=None,
    const=appsettings.autoplay_seconds,
    type=seconds_parse,
    metavar="SECONDS",
    help="Advance automatically every SECONDS seconds instead of waiting for keys "
    "(TERMSLIDES_AUTOPLAY_SECONDS when SECONDS is omitted)",
)

parser.add_argument(
    "--check",
    action="store_true",
    help="Compile and report only, do not play",
)

parser.add_argument(
    "--highlight",
    action="store_true",
    help="Print the source with syntax highlighting instead of playing",
)

parser.add_argument(
    "--theme",
    default=None,
    type=str,
    help="Playback theme name (defaults to TERMSLIDES_THEME_NAME)",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve the input path.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the markup file
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """
    state = inputstate.copy()

    if state.verbosity >= 3:
        LOG(DISPLAY_TITLE, level=3)

    LOG("Checking environment...", level=2)

    input_file = Path(state.inputFile)
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.envOK = True
    return state


def source_compile(inputstate: ProgramState) -> ProgramState:
    """
    Read and compile the markup file into a Document.

    Args:
        inputstate: Program state with inputSourceFile set

    Returns:
        ProgramState with added fields:
            - source: Markup text
            - document: Compiled Document

    Exits:
        1 if the file cannot be read or does not compile
    """
    state = inputstate.copy()

    LOG("Reading source file...", level=2)
    try:
        state.source = state.inputSourceFile.read_text(encoding="utf-8")
        LOG(f"Read {len(state.source)} characters from {state.inputSourceFile.name}", level=2)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    if state.highlight:
        return state

    LOG("Compiling source...", level=2)
    try:
        state.document = compile(state.source)
    except ParseError as e:
        print(f"Parse error in {state.inputSourceFile}: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Compiled {len(state.document.pages)} pages", level=2)
    return state


def source_highlight_stage(inputstate: ProgramState) -> ProgramState:
    """
    Print the markup source with syntax highlighting.

    Args:
        inputstate: Program state with source read

    Returns:
        ProgramState unchanged
    """
    state = inputstate.copy()
    if state.highlight:
        sys.stdout.write(source_highlight(state.source))
    return state


def deck_play(inputstate: ProgramState) -> ProgramState:
    """
    Play the compiled Document on the terminal.

    Skipped with --check or --highlight.

    Args:
        inputstate: Program state with document compiled

    Returns:
        ProgramState with added field:
            - playbackReport: Outcome of playback

    Exits:
        1 if the theme cannot be loaded
    """
    state = inputstate.copy()
    if state.check or state.highlight or state.document is None:
        return state

    try:
        theme = Theme(state.theme or appsettings.theme_name)
    except ThemeError as e:
        print(f"Theme error: {e}", file=sys.stderr)
        sys.exit(1)

    if state.autoplay is not None:
        signals = TimedSignals(state.autoplay)
    else:
        signals = KeyboardSignals()

    terminal = RichTerminal()
    held = logging_held() if appsettings.log_file is None else nullcontext()
    with held, terminal.session():
        state.playbackReport = play(state.document, terminal, signals, theme)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Summarize the run.

    Args:
        inputstate: Program state after compilation/playback

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state: ProgramState = inputstate.copy()
    if state.document is None:
        return state

    if state.check:
        print(f"{state.inputSourceFile}: OK, {len(state.document.pages)} pages")

    report = state.playbackReport
    if report is not None:
        how = "quit" if report.quit else "end of presentation"
        LOG(f"Shown {len(report.pages_rendered)} pages ({how})", level=1)
    return state


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - compile and play a termslides presentation.

    Orchestrates the pipeline:
        1. env_check: Validate the input path
        2. source_compile: Read and compile the markup
        3. source_highlight_stage: Print highlighted source (--highlight)
        4. deck_play: Play on the terminal (unless --check/--highlight)
        5. results_report: Summarize

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    options: Namespace = parser.parse_args(argv)
    state: ProgramState = ProgramState.state_createFromNamespace(options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, source_compile, source_highlight_stage, deck_play, results_report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
