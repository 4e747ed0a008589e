"""Case conversion.

Every converter splits its input with `casekit.words.split_words` and joins
the words back together according to a `casekit.entities.CaseStyle`. All
converters accept the same tokenizer options, either as a
`casekit.entities.WordOptions` object or as keyword arguments.

Input that contains no words (None, '', whitespace, punctuation only)
converts to ''.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'join_words',
    'convert',
    'to_camel_case',
    'to_kebab_case',
    'to_dot_case',
    'to_kebab_cas'
]

from typing import Any, Iterable, Optional
from casekit.entities import CaseStyle, WordOptions
from casekit.words import split_words

def _capitalize(word: str) -> str:
    lower = word.lower()
    return lower[:1].upper() + lower[1:]

def join_words(words: Iterable[str], style: "CaseStyle | str") -> str:
    """
    Join words using the casing and separator of a case style.

    Args:
        words: Words as returned by `casekit.words.split_words`
        style: Target `CaseStyle` or a name accepted by `CaseStyle.parse`

    Returns:
        Joined string

    Example:
        >>> join_words(['Foo', 'BAR', 'baz'], CaseStyle.CAMEL)
        'fooBarBaz'
        >>> join_words(['Foo', 'BAR', 'baz'], 'dot')
        'foo.bar.baz'
    """
    style = CaseStyle.parse(style)
    words = list(words)
    if style is CaseStyle.CAMEL:
        return ''.join(words[:1]).lower() + ''.join(map(_capitalize, words[1:]))
    return style.separator.join(word.lower() for word in words)

def convert(value: Any, style: "CaseStyle | str", options: Optional[WordOptions] = None, **overrides) -> str:
    """
    Convert a value to the given case style.

    Args:
        value: Value to convert; None converts to ''
        style: Target `CaseStyle` or a name accepted by `CaseStyle.parse`
        options: Tokenizer options
        **overrides: Individual `WordOptions` fields

    Returns:
        Converted string

    Raises:
        ValueError: if `style` is not a known case style

    Example:
        >>> convert('Hello World', 'kebab-case')
        'hello-world'
    """
    style = CaseStyle.parse(style)
    return join_words(split_words(value, options, **overrides), style)

def to_camel_case(value: Any, options: Optional[WordOptions] = None, **overrides) -> str:
    """
    Convert a value to lower camelCase.

    The first word is lowercased. Every following word is lowercased and then
    has its first character uppercased. Numeric words stay in place, so the
    result may start with a digit.

    Example:
        >>> to_camel_case('hello world')
        'helloWorld'
        >>> to_camel_case('  Foo_BAR-baz ')
        'fooBarBaz'
        >>> to_camel_case('123 user id')
        '123UserId'
        >>> to_camel_case(None)
        ''
    """
    return convert(value, CaseStyle.CAMEL, options, **overrides)

def to_kebab_case(value: Any, options: Optional[WordOptions] = None, **overrides) -> str:
    """
    Convert a value to kebab-case (lowercase words separated by hyphens).

    Example:
        >>> to_kebab_case('  Foo_BAR-baz ')
        'foo-bar-baz'
        >>> to_kebab_case('helloWorld', split_camel=True)
        'hello-world'
        >>> to_kebab_case('Áccent Éxample', strip_accents=True)
        'accent-example'
    """
    return convert(value, CaseStyle.KEBAB, options, **overrides)

def to_dot_case(value: Any, options: Optional[WordOptions] = None, **overrides) -> str:
    """
    Convert a value to dot.case (lowercase words separated by dots).

    Example:
        >>> to_dot_case('Hello World')
        'hello.world'
        >>> to_dot_case('123 user id')
        '123.user.id'
    """
    return convert(value, CaseStyle.DOT, options, **overrides)

to_kebab_cas = to_kebab_case
"""Older name of `to_kebab_case`, kept for existing callers."""
