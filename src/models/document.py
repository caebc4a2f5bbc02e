"""
Document model

Immutable structures produced by the compiler and consumed read-only by the
player. A Document holds metadata and an ordered tuple of Pages; each Page
holds an ordered tuple of Blocks.

Block variants:
    - Heading: a single line of centred heading text
    - Paragraph: styled runs resolved from inline tags
    - Verbatim: raw lines from a --beginoutput/--endoutput region
    - Huge: banner text rendered with a figlet font
    - Center, Right: a single line of centred or right-aligned text
    - HorLine: a horizontal rule across the screen
    - Pause: drawing stops until the next signal (the "---" line)
    - Sleep: drawing stops for a number of seconds
"""

from datetime import datetime
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


DATE_SENTINEL = "today"


@dataclass(frozen=True)
class StyleSet:
    """
    Resolved combination of character attributes at a point in text

    Attributes:
        bold: Bold attribute
        underline: Underline attribute
        reverse: Reverse video attribute
        color: Named colour (e.g. "red"), or None for the terminal default

    Example:
        >>> StyleSet(bold=True).is_default()
        False
    """
    bold: bool = False
    underline: bool = False
    reverse: bool = False
    color: Optional[str] = None

    def is_default(self) -> bool:
        """True when no attribute is active"""
        return self == DEFAULT_STYLE


DEFAULT_STYLE = StyleSet()


@dataclass(frozen=True)
class StyledRun:
    """
    A span of text rendered under a single StyleSet

    A run's style is the snapshot of the style stack at the moment its
    text was emitted.
    """
    text: str
    style: StyleSet = DEFAULT_STYLE


@dataclass(frozen=True)
class Heading:
    text: str


@dataclass(frozen=True)
class Paragraph:
    runs: Tuple[StyledRun, ...]

    def text_get(self) -> str:
        """Plain text of the paragraph with all styling removed"""
        return "".join(run.text for run in self.runs)


@dataclass(frozen=True)
class Verbatim:
    lines: Tuple[str, ...]


@dataclass(frozen=True)
class Huge:
    text: str
    font: str


@dataclass(frozen=True)
class Center:
    text: str


@dataclass(frozen=True)
class Right:
    text: str


@dataclass(frozen=True)
class HorLine:
    """Full-width horizontal rule"""


@dataclass(frozen=True)
class Pause:
    """Point inside a page where drawing waits for the next signal"""


@dataclass(frozen=True)
class Sleep:
    seconds: float


Block = Union[Heading, Paragraph, Verbatim, Huge, Center, Right, HorLine, Pause, Sleep]


@dataclass(frozen=True)
class Page:
    """
    One presentation page (a slide)

    Attributes:
        blocks: Ordered blocks on this page
        title: Optional page title from "--newpage <title>"
        header: Text centred on the top row (from the last --header)
        footer: Text centred above the status line (from the last --footer)
    """
    blocks: Tuple[Block, ...] = field(default_factory=tuple)
    title: Optional[str] = None
    header: Optional[str] = None
    footer: Optional[str] = None

    def label_get(self, index: int) -> str:
        """
        Label shown in the status line

        Args:
            index: Zero-based page index

        Returns:
            The page title, or "slide N" (1-based) when the page is untitled
        """
        return self.title if self.title else f"slide {index + 1}"


@dataclass(frozen=True)
class Document:
    """
    A compiled presentation

    Created once by the compiler. Metadata values are stored exactly as
    written; the date sentinel "today" is only resolved at display time
    via dateText_resolve().

    Attributes:
        title: Presentation title (--title)
        author: Presentation author (--author)
        date: Presentation date (--date), possibly the sentinel "today"
        pages: Ordered pages, page 0 always present
    """
    title: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None
    pages: Tuple[Page, ...] = field(default_factory=lambda: (Page(),))

    def metadata_has(self) -> bool:
        """True when any of title/author/date is set"""
        return any(value is not None for value in (self.title, self.author, self.date))

    def dateText_resolve(
        self, now: Optional[datetime] = None, fmt: str = "%b %d %Y"
    ) -> Optional[str]:
        """
        Resolve the date for display.

        "today" becomes the current date in `fmt`; "today <format>" uses the
        given strftime format instead. Any other value is returned unchanged.

        Args:
            now: Reference time (defaults to datetime.now())
            fmt: strftime format used for the bare sentinel

        Returns:
            Display string, or None when no date was set

        Example:
            >>> Document(date="today %Y").dateText_resolve(datetime(2024, 5, 1))
            '2024'
        """
        if self.date is None:
            return None
        now = now or datetime.now()
        if self.date == DATE_SENTINEL:
            return now.strftime(fmt)
        if self.date.startswith(DATE_SENTINEL + " "):
            return now.strftime(self.date[len(DATE_SENTINEL) + 1:])
        return self.date
