from dataclasses import dataclass
from enum import Enum

class CaseStyle(Enum):
    """
    Enumeration of the case styles produced by `casekit.cases`.
    """
    CAMEL = "camel"
    KEBAB = "kebab"
    DOT = "dot"

    @property
    def separator(self) -> str:
        """Character placed between words."""
        return {'camel': '', 'kebab': '-', 'dot': '.'}[self.value]

    @property
    def label(self) -> str:
        """Name of the style written in the style itself, e.g. 'kebab-case'."""
        return {'camel': 'camelCase', 'kebab': 'kebab-case', 'dot': 'dot.case'}[self.value]

    @classmethod
    def parse(cls, name: "str | CaseStyle") -> "CaseStyle":
        """
        Look up a style by member name, value or label.

        Args:
            name: A `CaseStyle`, or a string such as 'KEBAB', 'kebab' or 'kebab-case'

        Returns:
            The matching `CaseStyle`

        Raises:
            ValueError: if no style matches

        Example:
            >>> CaseStyle.parse('dot.case')
            <CaseStyle.DOT: 'dot'>
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for style in cls:
            if key in (style.name.lower(), style.value, style.label.lower()):
                return style
        choices = ', '.join(style.value for style in cls)
        raise ValueError(f'Unknown case style {name!r} (expected one of: {choices})')

@dataclass(frozen=True)
class WordOptions:
    """
    Options controlling how a string is split into words.

    Args:
        unicode: Treat any Unicode letter or digit as part of a word. If False,
            only ASCII letters and digits are, and everything else separates words.
        split_camel: Also split at camelCase and acronym boundaries
            ('helloWorld' becomes 'hello', 'World').
        strip_accents: Remove diacritics before splitting ('Éxample' becomes 'Example').
    """
    unicode: bool = True
    split_camel: bool = False
    strip_accents: bool = False

DEFAULT_OPTIONS = WordOptions()
