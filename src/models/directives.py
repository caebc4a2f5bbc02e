"""
Directive specification and metadata models

Defines the structure and categories of termslides markup tokens for
validation, documentation generation, and registry management.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Set


DIRECTIVE_PREFIX = "--"
ESCAPE_MARKER = "\\"
COMMENT_PREFIX = "--##"
PAUSE_MARKER = "---"


class DirectiveCategory(Enum):
    """
    Categories of termslides markup tokens

    Used for organization, documentation generation, and validation.
    """
    METADATA = "metadata"      # --title, --author, --date
    STRUCTURAL = "structural"  # --newpage, --heading, --huge, --center, --right, --horline, --sleep
    DECORATION = "decoration"  # --header, --footer
    VERBATIM = "verbatim"      # --beginoutput, --endoutput
    SETTING = "setting"        # --sethugefont
    INLINE = "inline"          # --b, --u, --rev, --c


@dataclass
class DirectiveSpec:
    """
    Specification for a markup token

    Attributes:
        name: Spelling without the "--" prefix (e.g. "heading", "rev")
        category: Category for organization
        description: Human-readable description
        takes_argument: Whether the rest of the line (directives) or the next
                        word (inline tags) is consumed as an argument
        examples: Example usage strings
    """
    name: str
    category: DirectiveCategory
    description: str
    takes_argument: bool = False
    examples: List[str] = field(default_factory=list)

    def inline_is(self) -> bool:
        """True for paired inline style tags"""
        return self.category == DirectiveCategory.INLINE


# Colour names accepted by "--c <colorname>"
COLOR_NAMES: Set[str] = {
    'white',
    'yellow',
    'red',
    'green',
    'blue',
    'cyan',
    'magenta',
    'black',
    'default',
}


def color_isValid(name: str) -> bool:
    """Check if a colour name is accepted by the --c tag"""
    return name in COLOR_NAMES
