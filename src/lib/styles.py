"""
Inline style resolution

Turns the raw token sequence of one paragraph into StyledRuns.

The resolver keeps an explicit stack of open tags. Every push or pop
ends the current run; the next run starts with the snapshot of the
updated stack, even when that snapshot equals the previous one. Closing
tags must match the innermost open tag, and a tag still open at paragraph
end is an error (no implicit auto-close).

Example:
    "plain --b bold --u both--/u--/b" resolves to
        StyledRun("plain ", StyleSet())
        StyledRun("bold ", StyleSet(bold=True))
        StyledRun("both", StyleSet(bold=True, underline=True))
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .errors import MismatchedTag, UnclosedTag
from .log import LOG
from ..models.document import StyleSet, StyledRun, DEFAULT_STYLE
from ..models.tokens import Token, TokenKind


@dataclass(frozen=True)
class StyleFrame:
    """
    One open inline tag

    Attributes:
        tag: Tag name ("b", "u", "rev", "c")
        argument: Colour name for "c", else None
        line_number: Line where the tag was opened
    """
    tag: str
    argument: Optional[str]
    line_number: int


class StyleStack:
    """Explicit LIFO stack of open inline tags"""

    def __init__(self) -> None:
        self.frames: List[StyleFrame] = []

    def push(self, frame: StyleFrame) -> None:
        self.frames.append(frame)

    def pop(self) -> StyleFrame:
        return self.frames.pop()

    def top(self) -> Optional[StyleFrame]:
        return self.frames[-1] if self.frames else None

    def __len__(self) -> int:
        return len(self.frames)

    def style_get(self) -> StyleSet:
        """
        Snapshot the active StyleSet

        Attributes are on while any frame of their kind is open. The colour
        is that of the innermost open "--c"; "default" means no colour.
        """
        tags = {frame.tag for frame in self.frames}
        color = None
        for frame in reversed(self.frames):
            if frame.tag == 'c':
                color = frame.argument
                break
        if color == 'default':
            color = None
        return StyleSet(
            bold='b' in tags,
            underline='u' in tags,
            reverse='rev' in tags,
            color=color,
        )


class InlineStyleResolver:
    """
    Resolves paragraph tokens into styled runs

    One resolver may be reused; all per-paragraph state lives in
    runs_resolve().
    """

    def runs_resolve(self, tokens: Sequence[Token]) -> Tuple[StyledRun, ...]:
        """
        Resolve a paragraph's tokens

        Args:
            tokens: TEXT, ESCAPED_LITERAL, INLINE_OPEN, INLINE_CLOSE and
                    LINE_END tokens (LINE_END separates paragraph lines)

        Returns:
            Tuple of StyledRuns, one per stretch of text between two stack
            changes; empty runs are dropped

        Raises:
            MismatchedTag: Closing tag that is not the innermost open tag
            UnclosedTag: Tag left open at the end of the paragraph
        """
        stack = StyleStack()
        runs: List[StyledRun] = []
        buffer: List[str] = []
        style = DEFAULT_STYLE

        def run_flush() -> None:
            if buffer:
                runs.append(StyledRun(text=''.join(buffer), style=style))
                buffer.clear()

        for token in tokens:
            if token.is_text():
                buffer.append(token.text)
            elif token.kind == TokenKind.LINE_END:
                buffer.append('\n')
            elif token.kind == TokenKind.INLINE_OPEN:
                run_flush()
                stack.push(StyleFrame(tag=token.name, argument=token.argument, line_number=token.line_number))
                style = stack.style_get()
            elif token.kind == TokenKind.INLINE_CLOSE:
                top = stack.top()
                if top is None or top.tag != token.name:
                    expected = f"'--/{top.tag}'" if top else 'no open tag'
                    raise MismatchedTag(
                        f"'--/{token.name}' does not match {expected}",
                        token.line_number,
                    )
                run_flush()
                stack.pop()
                style = stack.style_get()
            else:
                LOG(f"Ignoring {token.kind.value} token in paragraph", level=3)

        if len(stack):
            top = stack.frames[-1]
            raise UnclosedTag(f"'--{top.tag}' is never closed", top.line_number)

        run_flush()
        return tuple(runs)
