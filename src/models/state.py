"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from pathlib import Path
from argparse import Namespace
from functools import reduce
from typing import Optional, Type, TypeVar, Callable
from dataclasses import dataclass, field

from .document import Document
from .playback import PlaybackReport


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the CLI pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the run progresses.

    Pipeline stages and their state additions:
        - Initial: inputFile, verbosity, autoplay, check, highlight, theme
        - env_check: inputSourceFile, envOK
        - source_compile: source, document
        - deck_play: playbackReport
        - source_highlight: (no additions, prints the source)
        - results_report: (no additions, terminal stage)

    Attributes:
        inputFile: Path of the markup file as given on the command line
        verbosity: Logging verbosity level (0-3)
        autoplay: Seconds between pages, or None for interactive playback
        check: Only compile and report, do not play
        highlight: Print the highlighted source instead of playing
        theme: Theme name overriding the configured one
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the markup file
        source: Markup text read from inputSourceFile
        document: Compiled Document
        playbackReport: Outcome of playback
    """

    # CLI arguments
    inputFile: str = field(default="")
    verbosity: int = field(default=1)
    autoplay: Optional[float] = field(default=None)
    check: bool = field(default=False)
    highlight: bool = field(default=False)
    theme: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    source: str = field(default="")
    document: Optional[Document] = field(default=None)
    playbackReport: Optional[PlaybackReport] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace
    ) -> "ProgramState":
        """
        Create ProgramState from an argparse Namespace.

        Options that have no matching ProgramState field are ignored.

        Args:
            options: Parsed CLI arguments

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(initial_state, env_check, source_compile, deck_play)

    This is equivalent to:
        deck_play(source_compile(env_check(initial_state)))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
