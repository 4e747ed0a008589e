"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
from . import patterns
from . import words
from . import cases
from . import prompts
from . import entities
from .cases import convert, to_camel_case, to_kebab_case, to_dot_case
from .entities import CaseStyle, WordOptions

__all__ = [
    'patterns',
    'words',
    'cases',
    'prompts',
    'entities',
    'convert',
    'to_camel_case',
    'to_kebab_case',
    'to_dot_case',
    'CaseStyle',
    'WordOptions'
]
