"""
Page player for compiled Documents

Drives a Terminal through a Document page by page:

    RENDERING --page drawn--> AWAITING_ADVANCE --advance--> RENDERING (next page)
                                   |                  \\--> FINISHED (no next page)
                                   \\--quit--> FINISHED

While a page is drawn every styled run sets the terminal attributes to
exactly its StyleSet, and attributes are reset after the page. Verbatim and
huge blocks are always written with default attributes.

A "---" pause inside a page waits for a signal: advance draws the rest of
the page, any other signal is applied as if the page had been complete.
"""

import time
from typing import Callable, List, Optional, Tuple

from pyfiglet import Figlet, FontNotFound

from .log import LOG
from .terminal import Terminal, SignalSource
from .theme import Theme
from ..models.document import (
    Block,
    Center,
    DEFAULT_STYLE,
    Document,
    Heading,
    HorLine,
    Huge,
    Page,
    Paragraph,
    Pause,
    Right,
    Sleep,
    StyledRun,
    StyleSet,
    Verbatim,
)
from ..models.playback import PlaybackReport, PlayerState, Signal


# Character, style, index of the run it came from
Unit = Tuple[str, StyleSet, int]

# Always shipped with pyfiglet
FALLBACK_FONT = 'standard'


def units_wrap(runs: Tuple[StyledRun, ...], width: int) -> List[List[StyledRun]]:
    """
    Word-wrap styled runs into screen lines

    Explicit newlines always break. Lines are broken at the last space that
    fits; a word longer than `width` is cut. The space at a break is dropped.
    Run boundaries are kept: pieces of two runs are never joined.

    Args:
        runs: Paragraph runs
        width: Maximum line width in characters

    Returns:
        One list of runs per screen line (an empty list for an empty line)
    """
    width = max(width, 1)
    logical: List[List[Unit]] = [[]]
    for position, run in enumerate(runs):
        for ch in run.text:
            if ch == '\n':
                logical.append([])
            else:
                logical[-1].append((ch, run.style, position))

    lines: List[List[StyledRun]] = []
    for units in logical:
        idx = 0
        if not units:
            lines.append([])
            continue
        while idx < len(units):
            if len(units) - idx <= width:
                lines.append(units_group(units[idx:]))
                break
            space = next(
                (i for i in range(idx + width, idx, -1) if units[i][0] == ' '),
                None,
            )
            if space is None:
                lines.append(units_group(units[idx:idx + width]))
                idx += width
            else:
                lines.append(units_group(units[idx:space]))
                idx = space + 1
    return lines


def units_group(units: List[Unit]) -> List[StyledRun]:
    """Join consecutive characters of the same run back into runs"""
    runs: List[StyledRun] = []
    previous = -1
    for ch, style, position in units:
        if position == previous:
            runs[-1] = StyledRun(text=runs[-1].text + ch, style=style)
        else:
            runs.append(StyledRun(text=ch, style=style))
        previous = position
    return runs


class Player:
    """
    Plays a Document on a Terminal

    Responsibilities:
    - Run the RENDERING / AWAITING_ADVANCE / FINISHED state machine
    - Draw metadata, headings, paragraphs, verbatim, huge and aligned blocks
    - Draw the header, footer and status line
    - Wait at pauses and sleeps inside a page
    - React to advance, back, first, last, redraw and quit signals
    """

    def __init__(
        self,
        document: Document,
        terminal: Terminal,
        signals: SignalSource,
        theme: Optional[Theme] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize player

        Args:
            document: Compiled document (read only)
            terminal: Output collaborator
            signals: Interaction collaborator
            theme: Playback theme (defaults to the configured theme)
            sleep: Called with the duration of each --sleep block
        """
        from ..config import appsettings

        self.document = document
        self.terminal = terminal
        self.signals = signals
        self.theme = theme or Theme(appsettings.theme_name)
        self.sleep = sleep

        self.indent = int(self.theme.config_get('layout.indent', appsettings.indent))
        self.voffset = int(self.theme.config_get('layout.voffset', appsettings.voffset))
        self.status_line = appsettings.status_line
        self.date_format = appsettings.date_format
        self.default_font = appsettings.huge_font
        self.heading_style = self.theme.headingStyle_get()

        self.state = PlayerState.RENDERING
        self.page_index = 0
        self.row = 0
        self.width = 80
        self.height = 25
        self.rendered: List[int] = []
        self.quit = False

    def play(self) -> PlaybackReport:
        """
        Play the document until the last page is passed or quit is signalled

        Returns:
            PlaybackReport with the rendered page sequence
        """
        LOG(f"Playing {len(self.document.pages)} pages", level=2)

        if self.document.pages:
            self.signal_handle(self.page_render(0))
        else:
            self.state = PlayerState.FINISHED

        while self.state != PlayerState.FINISHED:
            self.signal_handle(self.signals.signal_wait())

        self.terminal.attributes_reset()
        self.terminal.refresh()
        LOG(f"Playback finished after {len(self.rendered)} page renders", level=2)

        return PlaybackReport(
            final_state=self.state,
            pages_rendered=tuple(self.rendered),
            quit=self.quit,
        )

    def signal_handle(self, signal: Optional[Signal]) -> None:
        """Apply a signal, then any signal received at a pause on the page it drew"""
        while signal is not None:
            signal = self.signal_apply(signal)

    def signal_apply(self, signal: Signal) -> Optional[Signal]:
        LOG(f"Signal {signal.value} on page {self.page_index}", level=3)
        last = len(self.document.pages) - 1

        if signal == Signal.QUIT:
            self.quit = True
            self.state = PlayerState.FINISHED
        elif signal == Signal.ADVANCE:
            if self.page_index < last:
                return self.page_render(self.page_index + 1)
            self.state = PlayerState.FINISHED
        elif signal == Signal.BACK:
            if self.page_index > 0:
                return self.page_render(self.page_index - 1)
        elif signal == Signal.FIRST:
            return self.page_render(0)
        elif signal == Signal.LAST:
            return self.page_render(last)
        elif signal == Signal.REDRAW:
            return self.page_render(self.page_index)
        return None

    def page_render(self, index: int) -> Optional[Signal]:
        """
        Draw one page

        Returns:
            None once the page is complete, or the signal that interrupted
            drawing at a pause
        """
        self.state = PlayerState.RENDERING
        self.page_index = index
        page = self.document.pages[index]

        self.width, self.height = self.terminal.size_get()
        self.terminal.attributes_reset()
        self.terminal.clear()
        self.decorations_render(index, page)
        self.row = self.voffset

        if index == 0 and self.document.metadata_has():
            self.metadata_render()

        pending: Optional[Signal] = None
        drawn = 0
        for block in page.blocks:
            if isinstance(block, Pause):
                pending = self.pause_wait()
                if pending is not None:
                    break
            elif isinstance(block, Sleep):
                self.terminal.refresh()
                try:
                    self.sleep(block.seconds)
                except KeyboardInterrupt:
                    pending = Signal.QUIT
                    break
            else:
                if drawn:
                    self.row += 1
                self.block_render(block)
                drawn += 1

        self.terminal.attributes_reset()
        self.terminal.refresh()

        self.rendered.append(index)
        self.state = PlayerState.AWAITING_ADVANCE
        return pending

    def pause_wait(self) -> Optional[Signal]:
        """Show what is drawn so far; None means carry on drawing"""
        self.terminal.attributes_reset()
        self.terminal.refresh()
        signal = self.signals.signal_wait()
        LOG(f"Signal {signal.value} at pause on page {self.page_index}", level=3)
        return None if signal == Signal.ADVANCE else signal

    def block_render(self, block: Block) -> None:
        if isinstance(block, Heading):
            self.textCentered_write(block.text, self.heading_style)
        elif isinstance(block, Paragraph):
            self.paragraph_render(block)
        elif isinstance(block, Verbatim):
            self.verbatim_render(block)
        elif isinstance(block, Huge):
            self.huge_render(block)
        elif isinstance(block, Center):
            self.textCentered_write(block.text, DEFAULT_STYLE)
        elif isinstance(block, Right):
            self.terminal.move_to(max(self.width - self.indent - len(block.text), 0), self.row)
            self.terminal.write(block.text)
            self.row += 1
        elif isinstance(block, HorLine):
            self.terminal.move_to(0, self.row)
            self.terminal.attributes_set(StyleSet(bold=True))
            self.terminal.write('-' * self.width)
            self.terminal.attributes_reset()
            self.row += 1

    def decorations_render(self, index: int, page: Page) -> None:
        """Header on the top row, footer and status line at the bottom"""
        if page.header:
            self.rowCentered_write(page.header, 1)
        if page.footer:
            self.rowCentered_write(page.footer, max(self.height - 3, 0))
        if self.status_line:
            self.statusLine_render(index, page.label_get(index))

    def metadata_render(self) -> None:
        """Title (bold), author and date, centred, each followed by a blank row"""
        if self.document.title is not None:
            self.textCentered_write(self.document.title, StyleSet(bold=True))
            self.row += 1
        if self.document.author is not None:
            self.textCentered_write(self.document.author, DEFAULT_STYLE)
            self.row += 1
        date = self.document.dateText_resolve(fmt=self.date_format)
        if date is not None:
            self.textCentered_write(date, DEFAULT_STYLE)
            self.row += 1

    def textCentered_write(self, text: str, style: StyleSet) -> None:
        self.terminal.attributes_set(style)
        self.rowCentered_write(text, self.row)
        self.terminal.attributes_reset()
        self.row += 1

    def rowCentered_write(self, text: str, row: int) -> None:
        self.terminal.move_to(max((self.width - len(text)) // 2, 0), row)
        self.terminal.write(text)

    def paragraph_render(self, paragraph: Paragraph) -> None:
        for line in units_wrap(paragraph.runs, self.width - 2 * self.indent):
            self.terminal.move_to(self.indent, self.row)
            for run in line:
                self.terminal.attributes_set(run.style)
                self.terminal.write(run.text)
            self.row += 1

    def verbatim_render(self, verbatim: Verbatim) -> None:
        """Raw lines with default attributes, framed unless the theme says otherwise"""
        self.terminal.attributes_reset()
        framed = self.theme.verbatimFrame_has()
        rule = '-' * max(self.width - 2 * self.indent - 2, 0)

        if framed:
            self.lineAt_write('.' + rule + '.')
        for line in verbatim.lines:
            self.lineAt_write('| ' + line if framed else line)
        if framed:
            self.lineAt_write('`' + rule + "'")

    def huge_render(self, huge: Huge) -> None:
        """Banner text through pyfiglet, with default attributes"""
        self.terminal.attributes_reset()
        figlet = self.figlet_get(huge.font, max(self.width - self.indent, 1))

        banner = figlet.renderText(huge.text).rstrip('\n')
        for line in banner.split('\n'):
            self.lineAt_write(line.rstrip())

    def figlet_get(self, font: str, width: int) -> Figlet:
        """Figlet for `font`, else the configured default, else pyfiglet's standard font"""
        for candidate in (font, self.default_font):
            try:
                return Figlet(font=candidate, width=width)
            except FontNotFound:
                LOG(f"Figlet font '{candidate}' not found", level=1)
        return Figlet(font=FALLBACK_FONT, width=width)

    def lineAt_write(self, text: str) -> None:
        self.terminal.move_to(self.indent, self.row)
        self.terminal.write(text)
        self.row += 1

    def statusLine_render(self, index: int, label: str) -> None:
        status = f"[slide {index + 1}/{len(self.document.pages)}] {label}"
        status = status[:max(self.width - self.indent, 0)]
        self.terminal.move_to(self.indent, max(self.height - 2, 0))
        self.terminal.write(status)


def play(
    document: Document,
    terminal: Terminal,
    signals: SignalSource,
    theme: Optional[Theme] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> PlaybackReport:
    """
    Play a compiled Document

    Args:
        document: Result of compile()
        terminal: Where pages are drawn
        signals: Source of advance/quit signals
        theme: Optional playback theme
        sleep: Called for --sleep blocks (defaults to time.sleep)

    Returns:
        PlaybackReport describing the session
    """
    return Player(document, terminal, signals, theme, sleep).play()
