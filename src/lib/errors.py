"""
Compilation errors

Every error carries the 1-based source line it refers to. All of them derive
from ParseError, itself a SyntaxError, so callers can catch the whole family
in one place.

Compilation is strict: the first error aborts compile() and no partial
Document is returned.
"""


class ParseError(SyntaxError):
    """
    Base class for markup compilation errors

    Attributes:
        line_number: 1-based line of the offending token
        detail: Message without the line prefix
    """

    def __init__(self, detail: str, line_number: int) -> None:
        self.detail = detail
        self.line_number = line_number
        super().__init__(f"line {line_number}: {detail}")
        self.lineno = line_number

    def __str__(self) -> str:
        # SyntaxError would append "(line N)" a second time
        return self.msg


class UnknownDirective(ParseError):
    """A '--word' token that is not part of the markup vocabulary"""


class NestedVerbatim(ParseError):
    """--beginoutput inside an open verbatim region"""


class UnmatchedEndOutput(ParseError):
    """--endoutput without a preceding --beginoutput"""


class UnterminatedVerbatim(ParseError):
    """End of input reached inside a verbatim region"""


class MismatchedTag(ParseError):
    """Closing tag that does not match the innermost open tag"""


class UnclosedTag(ParseError):
    """Inline tag still open at the end of its paragraph"""


class InvalidColor(ParseError):
    """--c without a recognised colour name"""


class InvalidArgument(ParseError):
    """Directive argument that cannot be used, e.g. a non-numeric --sleep"""
