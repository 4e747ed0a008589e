"""Regex patterns used to split strings into words.
"""

__docformat__ = 'google'

import re
import regex

# Base character sets for patterns
ASCII_ALNUM = "A-Za-z0-9"
"""@private"""

UPPER = "A-Z"
"""@private"""

LOWER_OR_DIGIT = "a-z0-9"
"""@private"""

LOWER = "a-z"
"""@private"""

## Words
# Building blocks
UNICODE_WORD: str = "[^\\W_]+"
""" Uncompiled regex building block representing a run of Unicode letters or digits.

`\\w` without the underscore: every character for which `str.isalnum` is true.
Underscores and all other characters are separators."""

ASCII_WORD: str = f"[{ASCII_ALNUM}]+"
""" Uncompiled regex building block representing a run of ASCII letters or digits."""

# Patterns
UNICODE_WORD_PATTERN: re.Pattern = re.compile(UNICODE_WORD)
"""Compiled regex matching a single Unicode-aware word.

Used in `casekit.words.split_words` by default."""

ASCII_WORD_PATTERN: re.Pattern = re.compile(ASCII_WORD)
"""Compiled regex matching a single ASCII word.

Non-ASCII letters such as 'é' act as separators under this pattern.

Used in `casekit.words.split_words` when `unicode=False`."""

## Camel case boundaries
CAMEL_BOUNDARY: str = f"([{LOWER_OR_DIGIT}])([{UPPER}])"
ACRONYM_BOUNDARY: str = f"([{UPPER}]+)([{UPPER}][{LOWER}])"
UNICODE_CAMEL_BOUNDARY: str = "(\\p{Ll}|\\p{N})(\\p{Lu})"
UNICODE_ACRONYM_BOUNDARY: str = "(\\p{Lu}+)(\\p{Lu}\\p{Ll})"

CAMEL_BOUNDARY_PATTERN: re.Pattern = re.compile(CAMEL_BOUNDARY)
"""Compiled regex matching a lowercase letter or digit followed by a capital.

Examples:
    * fooBar: 'oB'
    * user2Id: '2I'

Used in `casekit.words.split_camel_boundaries`."""

ACRONYM_BOUNDARY_PATTERN: re.Pattern = re.compile(ACRONYM_BOUNDARY)
"""Compiled regex matching the end of an acronym that runs into a capitalized word.

Examples:
    * XMLHttp: 'XMLHt', split as 'XML Http'
    * HTMLParser: 'HTMLPa', split as 'HTML Parser'
    * UTF8Encoder: no match, a digit does not start a capitalized word

Used in `casekit.words.split_camel_boundaries`."""

UNICODE_CAMEL_BOUNDARY_PATTERN: regex.Pattern = regex.compile(UNICODE_CAMEL_BOUNDARY)
"""Compiled regex matching any lowercase letter or digit followed by any uppercase letter.

Examples:
    * caféCrème: 'éC'
    * ÜberÄrger: 'rÄ'

Used in `casekit.words.split_camel_boundaries` when `unicode=True`."""

UNICODE_ACRONYM_BOUNDARY_PATTERN: regex.Pattern = regex.compile(UNICODE_ACRONYM_BOUNDARY)
"""Unicode counterpart of `ACRONYM_BOUNDARY_PATTERN`.

Used in `casekit.words.split_camel_boundaries` when `unicode=True`."""

## Diacritics
COMBINING_MARK_PATTERN: re.Pattern = re.compile("[\\u0300-\\u036f]")
"""Compiled regex matching combining diacritical marks (U+0300 to U+036F).

Only meaningful after NFKD decomposition, when accents are separate code points.

Used in `casekit.words.normalize_text`."""


def word_pattern(unicode: bool = True) -> re.Pattern:
    """
    Select the pattern used to recognize words.

    Args:
        unicode: Use Unicode letters and digits if True, ASCII alphanumerics otherwise

    Returns:
        Compiled word pattern
    """
    return UNICODE_WORD_PATTERN if unicode else ASCII_WORD_PATTERN

def camel_patterns(unicode: bool = True) -> tuple:
    """
    Select the camel and acronym boundary patterns.

    Args:
        unicode: Use Unicode case classes if True, ASCII letters otherwise

    Returns:
        (camel boundary pattern, acronym boundary pattern)
    """
    if unicode:
        return UNICODE_CAMEL_BOUNDARY_PATTERN, UNICODE_ACRONYM_BOUNDARY_PATTERN
    return CAMEL_BOUNDARY_PATTERN, ACRONYM_BOUNDARY_PATTERN
