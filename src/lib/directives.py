"""
Markup vocabulary for termslides

Registry of every directive and inline tag spelling the lexer recognises.
Uses DirectiveSpec for metadata; anything not registered here is reported
as UnknownDirective.
"""

from typing import Dict, List, Optional

from ..models.directives import DirectiveSpec, DirectiveCategory


class DirectiveRegistry:
    """
    Registry of directive and inline tag specifications

    Maps spellings (without the "--" prefix) to DirectiveSpec objects.
    Directive lines and inline tags share one namespace, so a spelling is
    always either a line directive or an inline tag, never both.
    """

    def __init__(self) -> None:
        """Initialize the registry and register all built-in spellings"""
        self.specs: Dict[str, DirectiveSpec] = {}
        self.metadataDirectives_register()
        self.structuralDirectives_register()
        self.decorationDirectives_register()
        self.verbatimDirectives_register()
        self.inlineTags_register()

    def register(self, spec: DirectiveSpec) -> None:
        """Register a directive specification"""
        self.specs[spec.name] = spec

    def get(self, name: str) -> Optional[DirectiveSpec]:
        """
        Get a spec by spelling

        Args:
            name: Spelling without prefix, e.g. "heading" or "rev"

        Returns:
            DirectiveSpec or None if the spelling is unknown
        """
        return self.specs.get(name)

    def directive_is(self, name: str) -> bool:
        """True if `name` is a whole-line directive"""
        spec = self.specs.get(name)
        return spec is not None and not spec.inline_is()

    def inlineTag_is(self, name: str) -> bool:
        """True if `name` is an inline style tag"""
        spec = self.specs.get(name)
        return spec is not None and spec.inline_is()

    def directives_listByCategory(self, category: DirectiveCategory) -> List[DirectiveSpec]:
        """Get all specs in a category"""
        return [spec for spec in self.specs.values() if spec.category == category]

    def metadataDirectives_register(self) -> None:
        """Register document metadata directives"""
        metadata_specs = [
            ('title', 'Presentation title', ['--title Inline Formatting']),
            ('author', 'Presentation author', ['--author Example']),
            ('date', 'Presentation date ("today" is resolved at display time)',
             ['--date today', '--date today %Y-%m-%d']),
        ]
        for name, desc, examples in metadata_specs:
            self.register(DirectiveSpec(
                name=name,
                category=DirectiveCategory.METADATA,
                description=desc,
                takes_argument=True,
                examples=examples,
            ))

    def structuralDirectives_register(self) -> None:
        """Register page structure directives"""
        self.register(DirectiveSpec(
            name='newpage',
            category=DirectiveCategory.STRUCTURAL,
            description='Starts a new page, optionally titled',
            takes_argument=True,
            examples=['--newpage', '--newpage Agenda'],
        ))

        self.register(DirectiveSpec(
            name='heading',
            category=DirectiveCategory.STRUCTURAL,
            description='Centred heading line',
            takes_argument=True,
            examples=['--heading Inline styles'],
        ))

        self.register(DirectiveSpec(
            name='huge',
            category=DirectiveCategory.STRUCTURAL,
            description='Banner text rendered with a figlet font',
            takes_argument=True,
            examples=['--huge Thanks!'],
        ))

        for name, desc, example in [
            ('center', 'Centred line of text', '--center Questions?'),
            ('right', 'Right-aligned line of text', '--right page 3 of 7'),
        ]:
            self.register(DirectiveSpec(
                name=name,
                category=DirectiveCategory.STRUCTURAL,
                description=desc,
                takes_argument=True,
                examples=[example],
            ))

        self.register(DirectiveSpec(
            name='horline',
            category=DirectiveCategory.STRUCTURAL,
            description='Horizontal rule across the screen',
            examples=['--horline'],
        ))

        self.register(DirectiveSpec(
            name='sleep',
            category=DirectiveCategory.STRUCTURAL,
            description='Pauses drawing for a number of seconds',
            takes_argument=True,
            examples=['--sleep 2'],
        ))

        self.register(DirectiveSpec(
            name='sethugefont',
            category=DirectiveCategory.SETTING,
            description='Selects the figlet font for following --huge lines',
            takes_argument=True,
            examples=['--sethugefont small'],
        ))

    def decorationDirectives_register(self) -> None:
        """Register page decorations that carry over to following pages"""
        for name, row in [('header', 'top row'), ('footer', 'bottom of the page')]:
            self.register(DirectiveSpec(
                name=name,
                category=DirectiveCategory.DECORATION,
                description=f'Text centred on the {row} of this and following pages',
                takes_argument=True,
                examples=[f'--{name} My talk'],
            ))

    def verbatimDirectives_register(self) -> None:
        """Register verbatim region delimiters"""
        self.register(DirectiveSpec(
            name='beginoutput',
            category=DirectiveCategory.VERBATIM,
            description='Starts a verbatim region',
            examples=['--beginoutput'],
        ))

        self.register(DirectiveSpec(
            name='endoutput',
            category=DirectiveCategory.VERBATIM,
            description='Ends a verbatim region',
            examples=['--endoutput'],
        ))

    def inlineTags_register(self) -> None:
        """Register paired inline style tags"""
        inline_specs = [
            ('b', False, 'Bold on (--/b off)', ['--b bold--/b']),
            ('u', False, 'Underline on (--/u off)', ['--u underlined--/u']),
            ('rev', False, 'Reverse video on (--/rev off)', ['--rev reversed--/rev']),
            ('c', True, 'Named colour on (--/c off)', ['--c red warning--/c']),
        ]
        for name, takes_argument, desc, examples in inline_specs:
            self.register(DirectiveSpec(
                name=name,
                category=DirectiveCategory.INLINE,
                description=desc,
                takes_argument=takes_argument,
                examples=examples,
            ))
