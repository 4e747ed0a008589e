"""Word tokenization.

This module turns an arbitrary value into the ordered list of words that the
converters in `casekit.cases` join back together. A word is a maximal run of
letters or digits; every other character is a separator and is dropped.
"""

__docformat__ = 'google'

__all__ = [
    'coerce_text',
    'normalize_text',
    'split_camel_boundaries',
    'resolve_options',
    'split_words'
]

import dataclasses
import unicodedata
from typing import Any, List, Optional
from casekit.entities import WordOptions, DEFAULT_OPTIONS
from casekit.functions import chain_operations
from casekit.patterns import (
    COMBINING_MARK_PATTERN,
    camel_patterns,
    word_pattern
)

def coerce_text(value: Any) -> str:
    """
    Convert any value to a string with surrounding whitespace removed.

    Args:
        value: Value to convert. `bytes` and `bytearray` are decoded as UTF-8.

    Returns:
        Stripped string, or '' for None

    Raises:
        UnicodeDecodeError: if a bytes value is not valid UTF-8

    Example:
        >>> coerce_text('  user_ID 42 ')
        'user_ID 42'
        >>> coerce_text(None)
        ''
        >>> coerce_text(b'caf\\xc3\\xa9')
        'café'
    """
    if value is None:
        return ''
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode('utf-8').strip()
    return str(value).strip()

def normalize_text(text: str, strip_accents: bool = False) -> str:
    """
    Normalize Unicode so that accented letters are single characters.

    Args:
        text: Input string
        strip_accents: Drop combining marks after decomposing, then recompose

    Returns:
        NFC-normalized string, or the string without diacritics

    Example:
        >>> normalize_text('Cafe\\u0301') == 'Café'
        True
        >>> normalize_text('Áccent Éxample', strip_accents=True)
        'Accent Example'
    """
    if strip_accents:
        stripped = COMBINING_MARK_PATTERN.sub('', unicodedata.normalize('NFKD', text))
        return unicodedata.normalize('NFC', stripped)
    return unicodedata.normalize('NFC', text)

def split_camel_boundaries(text: str, unicode: bool = True) -> str:
    """
    Insert a space wherever a new word starts inside a camelCase or PascalCase run.

    Example:
        >>> split_camel_boundaries('helloWorld')
        'hello World'
        >>> split_camel_boundaries('XMLHttpRequest')
        'XML Http Request'
        >>> split_camel_boundaries('ÜberÄrger')
        'Über Ärger'
        >>> split_camel_boundaries('ÜberÄrger', unicode=False)
        'ÜberÄrger'
    """
    camel, acronym = camel_patterns(unicode)
    spaced = camel.sub(r'\1 \2', text)
    return acronym.sub(r'\1 \2', spaced)

def resolve_options(options: Optional[WordOptions] = None, **overrides) -> WordOptions:
    """Combine an options object with keyword overrides."""
    options = options or DEFAULT_OPTIONS
    if overrides:
        options = dataclasses.replace(options, **overrides)
    return options

def split_words(value: Any, options: Optional[WordOptions] = None, **overrides) -> List[str]:
    """
    Split a value into words.

    Operations performed:
        1. Coerce to string and strip whitespace
        2. Normalize Unicode (optionally removing diacritics)
        3. Optionally separate camelCase boundaries
        4. Collect every maximal run of letters or digits

    Args:
        value: Value to split; coerced with `coerce_text`
        options: Tokenizer options; defaults to `WordOptions()`
        **overrides: Individual `WordOptions` fields, e.g. `split_camel=True`

    Returns:
        Non-empty words in their original order and casing

    Example:
        >>> split_words('  Foo_BAR-baz ')
        ['Foo', 'BAR', 'baz']
        >>> split_words('helloWorld', split_camel=True)
        ['hello', 'World']
        >>> split_words('Café au lait', unicode=False)
        ['Caf', 'au', 'lait']
        >>> split_words('--')
        []
    """
    options = resolve_options(options, **overrides)
    steps = [
        coerce_text,
        lambda text: normalize_text(text, strip_accents=options.strip_accents)
    ]
    if options.split_camel:
        steps.append(lambda text: split_camel_boundaries(text, unicode=options.unicode))
    text = chain_operations(value, steps)
    return word_pattern(options.unicode).findall(text)
