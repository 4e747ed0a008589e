__docformat__ = 'google'

__all__ = [
    'chain_operations',
    'normalize_whitespace'
]

import re
from functools import reduce
from typing import Any, Callable, Iterable

WHITESPACE = re.compile(r'\s+')

def chain_operations(value: Any, operations: Iterable[Callable[[Any], Any]]) -> Any:
    """
    Apply each operation to the result of the previous one.

    Args:
        value: Starting value
        operations: Callables taking a single argument, applied left to right

    Returns:
        The output of the last operation, or `value` if there are none

    Example:
        >>> chain_operations(' a  b ', [str.strip, str.upper])
        'A  B'
    """
    return reduce(lambda result, operation: operation(result), operations, value)

def normalize_whitespace(text: str) -> str:
    """
    Strip leading and trailing whitespace and collapse internal runs to a single space.

    Example:
        >>> normalize_whitespace('  Convert a string\\n   to camelCase. ')
        'Convert a string to camelCase.'
    """
    return WHITESPACE.sub(' ', text).strip()
